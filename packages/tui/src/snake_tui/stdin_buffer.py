"""
StdinBuffer — splits raw terminal input into complete key sequences.

A single read from a raw-mode terminal can carry several keys at once
("\\x1b[A\\x1b[Aq") or stop halfway through an escape sequence. The buffer
passes each complete sequence to its ``on_data`` callback and keeps any
partial escape sequence until more input arrives or the caller flushes it.

There is no timer thread: the owner decides how long to wait for the rest of
an escape sequence (see ``has_pending``) and calls ``flush()`` afterwards.
"""
from __future__ import annotations

import re
from typing import Callable

ESC = "\x1b"

_SGR_MOUSE_RE = re.compile(r"^\x1b\[<\d+;\d+;\d+[Mm]$")

# ─────────────────────────────────────────────────────────────────────────────
# Escape sequence boundaries
# ─────────────────────────────────────────────────────────────────────────────

def _csi_done(seq: str) -> bool:
    """CSI ends on its first final byte (0x40-0x7e) after the introducer."""
    if len(seq) < 3 or not 0x40 <= ord(seq[-1]) <= 0x7e:
        return False
    if seq[2] == "<":
        return bool(_SGR_MOUSE_RE.match(seq))
    return True


def _escape_done(seq: str) -> bool:
    """Whether *seq*, which starts with ESC, is a whole sequence."""
    if len(seq) == 1:
        return False
    kind = seq[1]
    if kind == "[":
        if seq.startswith(ESC + "[M"):
            # X10 mouse report: CSI M plus three raw bytes
            return len(seq) >= 6
        return _csi_done(seq)
    if kind == "]":
        return seq.endswith((ESC + "\\", "\x07"))
    if kind in "P_":
        return seq.endswith(ESC + "\\")
    if kind == "O":
        return len(seq) >= 3
    # ESC followed by one character: an alt chord
    return True


def _split_sequences(text: str) -> tuple[list[str], str]:
    """
    Cut *text* into whole key sequences.

    Returns the sequences and whatever unfinished escape sequence trails them.
    """
    found: list[str] = []
    start = 0
    while start < len(text):
        if text[start] != ESC:
            found.append(text[start])
            start += 1
            continue
        end = start + 1
        while not _escape_done(text[start:end]):
            if end >= len(text):
                return found, text[start:]
            end += 1
        found.append(text[start:end])
        start = end
    return found, ""


# ─────────────────────────────────────────────────────────────────────────────
# StdinBuffer
# ─────────────────────────────────────────────────────────────────────────────

class StdinBuffer:
    """Buffers stdin input and hands each complete sequence to *on_data*."""

    def __init__(self, on_data: Callable[[str], None]) -> None:
        self._buffer = ""
        self._on_data = on_data

    @property
    def has_pending(self) -> bool:
        """True while a partial escape sequence is held back."""
        return bool(self._buffer)

    def process(self, data: str | bytes) -> None:
        """Feed input data into the buffer."""
        if isinstance(data, bytes):
            # Some terminals send meta as a high-bit byte instead of ESC+char.
            if len(data) == 1 and data[0] > 127:
                s = ESC + chr(data[0] - 128)
            else:
                s = data.decode("utf-8", errors="replace")
        else:
            s = data

        if not s:
            return

        seqs, self._buffer = _split_sequences(self._buffer + s)
        for seq in seqs:
            self._on_data(seq)

    def flush(self) -> None:
        """Emit whatever partial sequence is held as a sequence of its own."""
        if self._buffer:
            seq, self._buffer = self._buffer, ""
            self._on_data(seq)
