"""
KeyboardInput — the game's input source.

``read_action()`` blocks for at most one tick waiting for a key and returns
the mapped action, or TICK when nothing arrived. Keys that arrive together
are queued and handed out one per call.
"""
from __future__ import annotations

import logging
from collections import deque

from snake_tui.stdin_buffer import StdinBuffer
from snake_tui.terminal import Terminal

from .actions import Action, action_for_key

logger = logging.getLogger(__name__)


class KeyboardInput:
    def __init__(self, terminal: Terminal, timeout_ms: int = 300, escape_timeout_ms: int = 10) -> None:
        self._terminal = terminal
        self._timeout_ms = timeout_ms
        self._escape_timeout_ms = escape_timeout_ms
        self._pending: deque[str] = deque()
        self._buffer = StdinBuffer(on_data=self._pending.append)

    @property
    def pending(self) -> int:
        """Number of complete key sequences waiting to be read."""
        return len(self._pending)

    def read_key(self) -> str | None:
        """Next raw key sequence, or None if the tick passed without one."""
        if not self._pending:
            self._fill(self._timeout_ms)
        if not self._pending:
            return None
        return self._pending.popleft()

    def read_action(self) -> Action:
        key = self.read_key()
        if key is None:
            return Action.TICK
        action = action_for_key(key)
        logger.debug("Key %r -> %s", key, action.value)
        return action

    def _fill(self, timeout_ms: int) -> None:
        data = self._terminal.read(timeout_ms)
        if not data:
            return
        self._buffer.process(data)
        # A partial escape sequence gets one short wait for its remainder;
        # after that it is taken as typed (a bare ESC, usually).
        if self._buffer.has_pending:
            more = self._terminal.read(self._escape_timeout_ms)
            if more:
                self._buffer.process(more)
            self._buffer.flush()
