"""
Terminal abstraction.

Provides:
- Terminal: abstract base class (interface)
- ProcessTerminal: real terminal on a TTY file descriptor, raw mode +
  alternate screen
- terminal_session: context manager that guarantees ``stop()``
"""
from __future__ import annotations

import logging
import os
import select
import signal
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)

ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class TerminalError(OSError):
    """The terminal cannot be driven (not a TTY, input closed, ...)."""


# ─────────────────────────────────────────────────────────────────────────────
# Terminal ABC
# ─────────────────────────────────────────────────────────────────────────────

class Terminal(ABC):
    """Minimal terminal interface used by the game loop."""

    @abstractmethod
    def start(self) -> None:
        """Prepare the terminal for full-screen raw rendering."""

    @abstractmethod
    def stop(self) -> None:
        """Restore the terminal. Safe to call more than once."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Write output to the terminal and flush it."""

    @abstractmethod
    def read(self, timeout_ms: int) -> bytes:
        """Read pending input, waiting at most *timeout_ms*. b"" on timeout."""

    @property
    @abstractmethod
    def columns(self) -> int:
        """Terminal width in columns."""

    @property
    @abstractmethod
    def rows(self) -> int:
        """Terminal height in rows."""


@contextmanager
def terminal_session(terminal: Terminal) -> Iterator[Terminal]:
    """
    Run a block with *terminal* started, restoring it on every exit path.

    ``start()`` rolls itself back if it fails halfway, so ``stop()`` is
    only owed once ``start()`` has returned.
    """
    terminal.start()
    try:
        yield terminal
    finally:
        terminal.stop()


# ─────────────────────────────────────────────────────────────────────────────
# ProcessTerminal
# ─────────────────────────────────────────────────────────────────────────────

class ProcessTerminal(Terminal):
    """
    Real terminal: reads from a TTY file descriptor (stdin by default) and
    writes to a text stream (stdout by default).

    While started, SIGTERM is turned into ``SystemExit`` so cleanup still
    runs when the process is asked to terminate.
    """

    def __init__(self, input_fd: int | None = None, output: TextIO | None = None) -> None:
        self._input_fd = input_fd
        self._output = output
        self._old_termios: list | None = None
        self._prev_sigterm: object | None = None
        self._started = False

    @property
    def input_fd(self) -> int:
        return self._input_fd if self._input_fd is not None else sys.stdin.fileno()

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            return
        fd = self.input_fd
        if not os.isatty(fd):
            raise TerminalError("input is not a terminal")

        self._enable_raw_mode()
        try:
            self.write(ENTER_ALT_SCREEN + HIDE_CURSOR + CLEAR_SCREEN + CURSOR_HOME)
            self._install_sigterm_handler()
        except BaseException:
            self._disable_raw_mode()
            raise
        self._started = True
        logger.debug("Terminal started on fd %d", fd)

    def stop(self) -> None:
        """Disable raw mode, clear the screen, show and home the cursor."""
        if not self._started:
            return
        self._started = False
        try:
            self._restore_sigterm_handler()
            self._disable_raw_mode()
        finally:
            self.write(CLEAR_SCREEN + SHOW_CURSOR + CURSOR_HOME + LEAVE_ALT_SCREEN)
            logger.debug("Terminal restored")

    def _enable_raw_mode(self) -> None:
        """Put the input fd in raw mode (no echo, no line buffering)."""
        import termios
        import tty

        fd = self.input_fd
        try:
            self._old_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            self._old_termios = None
            raise TerminalError(f"cannot enable raw mode: {e}") from e

    def _disable_raw_mode(self) -> None:
        import termios

        if self._old_termios is not None:
            old, self._old_termios = self._old_termios, None
            termios.tcsetattr(self.input_fd, termios.TCSADRAIN, old)

    def _install_sigterm_handler(self) -> None:
        def _on_sigterm(signum, frame):
            raise SystemExit(128 + signum)

        try:
            self._prev_sigterm = signal.signal(signal.SIGTERM, _on_sigterm)
        except ValueError:
            # signal handlers can only be installed from the main thread
            self._prev_sigterm = None

    def _restore_sigterm_handler(self) -> None:
        if self._prev_sigterm is not None:
            signal.signal(signal.SIGTERM, self._prev_sigterm)
            self._prev_sigterm = None

    def write(self, data: str) -> None:
        self.output.write(data)
        self.output.flush()

    def read(self, timeout_ms: int) -> bytes:
        fd = self.input_fd
        ready, _, _ = select.select([fd], [], [], max(timeout_ms, 0) / 1000.0)
        if not ready:
            return b""
        data = os.read(fd, 1024)
        if not data:
            raise TerminalError("terminal input closed")
        return data

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self.output.fileno()).columns
        except (OSError, ValueError, AttributeError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(self.output.fileno()).lines
        except (OSError, ValueError, AttributeError):
            return 24
