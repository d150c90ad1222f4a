"""
snake_tui — terminal plumbing for the snake game.

Raw-mode terminal driver, key parsing, stdin sequence splitting, draw
commands and the batched frame buffer.
"""
from .commands import (
    ClearScreen,
    DrawCommand,
    HideCursor,
    MoveTo,
    Print,
    SetStyle,
    ShowCursor,
    Style,
    encode,
    encode_command,
)
from .frame_buffer import FrameBuffer
from .keys import KeyId, is_key_release, parse_key
from .stdin_buffer import StdinBuffer
from .terminal import ProcessTerminal, Terminal, TerminalError, terminal_session

__all__ = [
    # Commands
    "ClearScreen",
    "DrawCommand",
    "HideCursor",
    "MoveTo",
    "Print",
    "SetStyle",
    "ShowCursor",
    "Style",
    "encode",
    "encode_command",
    # Output
    "FrameBuffer",
    # Keys
    "KeyId",
    "is_key_release",
    "parse_key",
    # Input
    "StdinBuffer",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    "TerminalError",
    "terminal_session",
]
