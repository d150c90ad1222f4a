"""
Game configuration.

Everything tunable lives on one frozen pydantic model. The game itself is
not configurable from outside (no flags, no environment, no files):
``DEFAULT_CONFIG`` is what ``snake`` plays, and tests build variants.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from .geometry import Arena, Point
from .snake import Direction

ScorePolicy = Literal["reset_on_start", "keep"]

APP_NAME: str = "snake"
VERSION: str = "0.1.0"


def _default_snake() -> tuple[Point, ...]:
    # 13 cells, head at (60, 50), body trailing to the right
    return tuple(Point(x, 50) for x in range(60, 73))


class GameConfig(BaseModel):
    arena: Arena = Arena(Point(30, 30), Point(100, 60))
    initial_snake: tuple[Point, ...] = Field(default_factory=_default_snake)
    initial_direction: Direction = Direction.LEFT
    initial_food: Point = Point(40, 45)

    # Input poll timeout; this is also the tick length.
    tick_ms: int = Field(default=300, gt=0)
    # How long a lone ESC may wait for the rest of an escape sequence.
    escape_timeout_ms: int = Field(default=10, gt=0)

    score_policy: ScorePolicy = "reset_on_start"

    snake_glyph: str = Field(default="#", min_length=1, max_length=1)
    food_glyph: str = Field(default="@", min_length=1, max_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_layout(self) -> GameConfig:
        arena = self.arena
        if arena.width < 3 or arena.height < 3:
            raise ValueError("arena must have at least one interior cell")
        if arena.top < 1:
            raise ValueError("arena needs a row above it for the score line")

        body = self.initial_snake
        if not body:
            raise ValueError("initial snake must have at least one cell")
        for cell in body:
            if not arena.contains(cell):
                raise ValueError(f"initial snake cell {cell} is not inside the arena")
        for a, b in zip(body, body[1:]):
            if abs(a.x - b.x) + abs(a.y - b.y) != 1:
                raise ValueError(f"initial snake is not contiguous between {a} and {b}")
        d = self.initial_direction
        if len(body) > 1 and body[0].offset(d.dx, d.dy) == body[1]:
            raise ValueError("initial direction points back into the snake")
        if len(set(body)) != len(body):
            raise ValueError("initial snake overlaps itself")

        if not arena.contains(self.initial_food):
            raise ValueError(f"initial food {self.initial_food} is not inside the arena")
        if self.initial_food in body:
            raise ValueError("initial food lies on the initial snake")
        return self

    @property
    def min_columns(self) -> int:
        """Terminal width needed to show the whole arena."""
        return self.arena.right + 1

    @property
    def min_rows(self) -> int:
        """Terminal height needed to show the whole arena."""
        return self.arena.bottom + 1


DEFAULT_CONFIG = GameConfig()
