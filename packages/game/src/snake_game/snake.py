"""
Snake model — body, heading and growth.

The body is head-first. Each ``advance()`` moves one cell along the current
direction; a pending growth keeps the tail for exactly one move.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable

from .geometry import Point


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_horizontal(self) -> bool:
        return self.dy == 0


def turn(current: Direction, requested: Direction) -> Direction:
    """
    Resolve a steering request.

    Only a turn onto the other axis is taken; asking for the current heading
    or its opposite leaves the heading unchanged, so the head can never fold
    back into the neck.
    """
    if requested.is_horizontal != current.is_horizontal:
        return requested
    return current


class Snake:
    def __init__(self, body: Iterable[Point], direction: Direction = Direction.LEFT) -> None:
        self.body: list[Point] = list(body)
        if not self.body:
            raise ValueError("a snake needs at least one cell")
        self.direction = direction
        self.pending_growth = False

    def __len__(self) -> int:
        return len(self.body)

    def __repr__(self) -> str:
        return f"Snake(head={self.head}, length={len(self.body)}, direction={self.direction.name})"

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def tail(self) -> Point:
        return self.body[-1]

    def next_head(self) -> Point:
        return self.head.offset(self.direction.dx, self.direction.dy)

    def grow(self) -> None:
        """Lengthen the snake by one cell on the next move."""
        self.pending_growth = True

    def steer(self, requested: Direction) -> Direction:
        self.direction = turn(self.direction, requested)
        return self.direction

    def advance(self) -> Point:
        """Move one cell forward and return the new head. No bounds checks."""
        head = self.next_head()
        self.body.insert(0, head)
        if self.pending_growth:
            self.pending_growth = False
        else:
            self.body.pop()
        return head

    def occupies(self, point: Point) -> bool:
        return point in self.body
