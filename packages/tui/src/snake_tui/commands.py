"""
Draw commands — the vocabulary between frame composition and the terminal.

Each command is a small pydantic model tagged with a ``type`` literal, so a
composed frame is plain data that tests can compare with ``==``.
``encode()`` turns a command sequence into the ANSI escape stream a VT100
compatible terminal understands.
"""
from __future__ import annotations

from typing import Literal, Sequence, Union

from pydantic import BaseModel, Field

Style = Literal["plain", "reverse"]

_STYLE_SGR: dict[str, str] = {
    "plain": "\x1b[0m",
    "reverse": "\x1b[7m",
}


# ─── Commands ─────────────────────────────────────────────────────────────────

class ClearScreen(BaseModel):
    type: Literal["clearScreen"] = "clearScreen"

    model_config = {"frozen": True}


class MoveTo(BaseModel):
    """Move the cursor to a zero-based (col, row) cell."""
    type: Literal["moveTo"] = "moveTo"
    col: int = Field(ge=0)
    row: int = Field(ge=0)

    model_config = {"frozen": True}


class HideCursor(BaseModel):
    type: Literal["hideCursor"] = "hideCursor"

    model_config = {"frozen": True}


class ShowCursor(BaseModel):
    type: Literal["showCursor"] = "showCursor"

    model_config = {"frozen": True}


class SetStyle(BaseModel):
    """Switch the attribute used by subsequent prints."""
    type: Literal["setStyle"] = "setStyle"
    style: Style = "plain"

    model_config = {"frozen": True}


class Print(BaseModel):
    """
    Print text at the cursor. A ``reverse`` print resets the attribute
    afterwards; ``plain`` text is written in whatever style is current.
    """
    type: Literal["print"] = "print"
    text: str
    style: Style = "plain"

    model_config = {"frozen": True}


DrawCommand = Union[ClearScreen, MoveTo, HideCursor, ShowCursor, SetStyle, Print]


# ─── Encoding ─────────────────────────────────────────────────────────────────

def encode_command(command: DrawCommand) -> str:
    """Return the ANSI sequence for one command."""
    if isinstance(command, ClearScreen):
        return "\x1b[2J"
    if isinstance(command, MoveTo):
        # ANSI cursor positions are one-based, row first.
        return f"\x1b[{command.row + 1};{command.col + 1}H"
    if isinstance(command, HideCursor):
        return "\x1b[?25l"
    if isinstance(command, ShowCursor):
        return "\x1b[?25h"
    if isinstance(command, SetStyle):
        return _STYLE_SGR[command.style]
    if isinstance(command, Print):
        if command.style == "plain":
            return command.text
        return f"{_STYLE_SGR[command.style]}{command.text}{_STYLE_SGR['plain']}"
    raise TypeError(f"not a draw command: {command!r}")


def encode(commands: Sequence[DrawCommand]) -> str:
    """Return the ANSI stream for a sequence of commands."""
    return "".join(encode_command(c) for c in commands)
