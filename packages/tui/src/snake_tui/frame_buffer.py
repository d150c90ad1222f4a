"""
FrameBuffer — batched output sink.

Draw commands for a frame are queued and only reach the terminal on
``flush()``, as a single write wrapped in synchronized-output markers
(DEC mode 2026) so the terminal paints the frame in one go instead of
tearing mid-update.
"""
from __future__ import annotations

import logging

from .commands import DrawCommand, encode
from .terminal import Terminal

logger = logging.getLogger(__name__)

SYNC_BEGIN = "\x1b[?2026h"
SYNC_END = "\x1b[?2026l"


class FrameBuffer:
    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal
        self._pending: list[DrawCommand] = []
        self._frames = 0

    @property
    def pending(self) -> list[DrawCommand]:
        """Commands queued since the last flush."""
        return list(self._pending)

    @property
    def frames(self) -> int:
        """Number of non-empty flushes so far."""
        return self._frames

    def queue(self, *commands: DrawCommand) -> None:
        self._pending.extend(commands)

    def flush(self) -> None:
        """Commit queued commands to the terminal in one write."""
        if not self._pending:
            return
        buf = SYNC_BEGIN + encode(self._pending) + SYNC_END
        self._pending.clear()
        self._terminal.write(buf)
        self._frames += 1
        logger.debug("Flushed frame %d (%d bytes)", self._frames, len(buf))
