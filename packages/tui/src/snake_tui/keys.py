"""
Keyboard input decoding.

Turns raw terminal input (one complete sequence, as split by StdinBuffer)
into key identifier strings such as ``"left"``, ``"q"`` or ``"ctrl+c"``.
Both legacy xterm sequences and the Kitty keyboard protocol (CSI u) are
understood.

API:
- parse_key(data): key identifier for a sequence, or None
- is_key_release(data): Kitty key-release events (flag 2)
"""
from __future__ import annotations

import re

KeyId = str

# ─────────────────────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────────────────────

_MOD_SHIFT = 1
_MOD_ALT = 2
_MOD_CTRL = 4
_LOCK_MASK = 64 + 128

_CP_ESCAPE = 27
_CP_TAB = 9
_CP_ENTER = 13
_CP_SPACE = 32
_CP_BACKSPACE = 127
_CP_KP_ENTER = 57414

_CP_UP = -1
_CP_DOWN = -2
_CP_RIGHT = -3
_CP_LEFT = -4

_NAMED_CODEPOINTS: dict[int, str] = {
    _CP_ESCAPE: "escape",
    _CP_TAB: "tab",
    _CP_ENTER: "enter",
    _CP_KP_ENTER: "enter",
    _CP_SPACE: "space",
    _CP_BACKSPACE: "backspace",
    _CP_UP: "up",
    _CP_DOWN: "down",
    _CP_RIGHT: "right",
    _CP_LEFT: "left",
}

# Unmodified arrows: CSI (normal cursor mode) and SS3 (application mode).
_LEGACY_ARROWS: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}

# rxvt-style modified arrows.
_LEGACY_MODIFIED_ARROWS: dict[str, str] = {
    "\x1b[a": "shift+up",
    "\x1b[b": "shift+down",
    "\x1b[c": "shift+right",
    "\x1b[d": "shift+left",
    "\x1bOa": "ctrl+up",
    "\x1bOb": "ctrl+down",
    "\x1bOc": "ctrl+right",
    "\x1bOd": "ctrl+left",
}

_SIMPLE_SEQS: dict[str, str] = {
    "\x1b": "escape",
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x1bOM": "enter",
    " ": "space",
    "\x00": "ctrl+space",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x1b[Z": "shift+tab",
}

# ─────────────────────────────────────────────────────────────────────────────
# Kitty sequence parsing
# ─────────────────────────────────────────────────────────────────────────────

_CSI_U_RE = re.compile(r"^\x1b\[(\d+)(?::(\d*))?(?::(\d+))?(?:;(\d+))?(?::(\d+))?u$")
_ARROW_MOD_RE = re.compile(r"^\x1b\[1;(\d+)(?::(\d+))?([ABCD])$")
_ARROW_CODEPOINTS: dict[str, int] = {"A": _CP_UP, "B": _CP_DOWN, "C": _CP_RIGHT, "D": _CP_LEFT}

_RELEASE_SUFFIXES = (":3u", ":3A", ":3B", ":3C", ":3D")


class _ParsedKitty:
    __slots__ = ("codepoint", "base_layout_key", "modifier", "event_type")

    def __init__(
        self,
        codepoint: int,
        modifier: int,
        event_type: str,
        base_layout_key: int | None = None,
    ) -> None:
        self.codepoint = codepoint
        self.base_layout_key = base_layout_key
        self.modifier = modifier
        self.event_type = event_type


def _parse_event_type(s: str | None) -> str:
    if not s:
        return "press"
    v = int(s)
    if v == 2:
        return "repeat"
    if v == 3:
        return "release"
    return "press"


def _parse_kitty(data: str) -> _ParsedKitty | None:
    m = _CSI_U_RE.match(data)
    if m:
        base = int(m.group(3)) if m.group(3) else None
        mod_val = int(m.group(4)) if m.group(4) else 1
        return _ParsedKitty(int(m.group(1)), mod_val - 1, _parse_event_type(m.group(5)), base)

    m = _ARROW_MOD_RE.match(data)
    if m:
        mod_val = int(m.group(1))
        return _ParsedKitty(_ARROW_CODEPOINTS[m.group(3)], mod_val - 1, _parse_event_type(m.group(2)))

    return None


def is_key_release(data: str) -> bool:
    """Check if data is a Kitty key-release event."""
    return any(data.endswith(s) for s in _RELEASE_SUFFIXES)


def _modifier_prefix(mod: int) -> list[str]:
    mods: list[str] = []
    if mod & _MOD_SHIFT:
        mods.append("shift")
    if mod & _MOD_CTRL:
        mods.append("ctrl")
    if mod & _MOD_ALT:
        mods.append("alt")
    return mods


def _kitty_key_name(parsed: _ParsedKitty) -> str | None:
    cp = parsed.codepoint
    # Non-latin layouts report the physical key as base_layout_key.
    if not (97 <= cp <= 122) and parsed.base_layout_key is not None:
        cp = parsed.base_layout_key
    if cp in _NAMED_CODEPOINTS:
        return _NAMED_CODEPOINTS[cp]
    if 33 <= cp <= 126:
        return chr(cp)
    return None


# ─────────────────────────────────────────────────────────────────────────────
# parse_key
# ─────────────────────────────────────────────────────────────────────────────

def parse_key(data: str) -> str | None:
    """
    Parse one raw input sequence and return its key identifier, or None.

    Modifiers are prefixed in the order shift, ctrl, alt (``"ctrl+left"``).
    Printable characters are returned as-is, so an upper-case letter comes
    back as ``"Q"`` rather than ``"shift+q"``.
    """
    if not data:
        return None

    kitty = _parse_kitty(data)
    if kitty:
        name = _kitty_key_name(kitty)
        if name is None:
            return None
        mods = _modifier_prefix(kitty.modifier & ~_LOCK_MASK)
        return "+".join(mods + [name]) if mods else name

    if data in _LEGACY_ARROWS:
        return _LEGACY_ARROWS[data]
    if data in _LEGACY_MODIFIED_ARROWS:
        return _LEGACY_MODIFIED_ARROWS[data]

    if data in _SIMPLE_SEQS:
        return _SIMPLE_SEQS[data]

    # ESC-prefixed single characters are alt chords.
    if len(data) == 2 and data[0] == "\x1b":
        code = ord(data[1])
        if 1 <= code <= 26:
            return f"ctrl+alt+{chr(code + 96)}"
        if 32 < code <= 126:
            return f"alt+{data[1]}"

    if len(data) == 1:
        code = ord(data)
        if 1 <= code <= 26:
            return f"ctrl+{chr(code + 96)}"
        if 32 < code <= 126:
            return data

    return None
