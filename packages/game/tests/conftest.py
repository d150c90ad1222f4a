"""Shared fixtures for snake_game tests."""
from __future__ import annotations

import pytest

from snake_tui.terminal import Terminal

from snake_game.config import GameConfig
from snake_game.geometry import Arena, Point
from snake_game.snake import Direction


class ScriptedTerminal(Terminal):
    """
    Terminal double fed from a script of input chunks.

    Each ``read()`` consumes one entry; ``None`` entries simulate a poll
    timeout. Running past the end of the script is an error so a broken
    loop cannot spin forever.
    """

    def __init__(self, *script: bytes | str | None, columns: int = 120, rows: int = 70) -> None:
        self._script = [s.encode() if isinstance(s, str) else s for s in script]
        self._columns = columns
        self._rows = rows
        self.writes: list[str] = []
        self.reads: list[int] = []
        self.starts = 0
        self.stops = 0
        self.started = False

    def start(self) -> None:
        self.starts += 1
        self.started = True

    def stop(self) -> None:
        if self.started:
            self.stops += 1
            self.started = False

    def write(self, data: str) -> None:
        self.writes.append(data)

    def read(self, timeout_ms: int) -> bytes:
        self.reads.append(timeout_ms)
        if not self._script:
            raise RuntimeError("input script exhausted")
        chunk = self._script.pop(0)
        return chunk or b""

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def remaining(self) -> int:
        return len(self._script)


@pytest.fixture
def make_terminal():
    return ScriptedTerminal


@pytest.fixture
def small_config() -> GameConfig:
    """A 10x10 arena with a three-cell snake heading left."""
    return GameConfig(
        arena=Arena(Point(0, 1), Point(10, 11)),
        initial_snake=(Point(5, 5), Point(6, 5), Point(7, 5)),
        initial_direction=Direction.LEFT,
        initial_food=Point(2, 5),
    )
