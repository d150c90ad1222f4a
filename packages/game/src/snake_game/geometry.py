"""Grid geometry: cells and the arena rectangle."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell in terminal coordinates: x is the column, y the row."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Arena:
    """
    Axis-aligned playing field.

    The corners are the border cells themselves: a head sitting on any edge
    has collided, so the playable interior is strictly inside.
    """

    top_left: Point
    bottom_right: Point

    @property
    def left(self) -> int:
        return self.top_left.x

    @property
    def top(self) -> int:
        return self.top_left.y

    @property
    def right(self) -> int:
        return self.bottom_right.x

    @property
    def bottom(self) -> int:
        return self.bottom_right.y

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def on_or_outside(self, point: Point) -> bool:
        """True when *point* touches or crosses the border."""
        return (
            point.x <= self.left
            or point.x >= self.right
            or point.y <= self.top
            or point.y >= self.bottom
        )

    def contains(self, point: Point) -> bool:
        """True when *point* is a playable interior cell."""
        return not self.on_or_outside(point)

    def food_ranges(self) -> tuple[range, range]:
        """Column and row ranges food may be dropped in."""
        return range(self.left + 1, self.right - 1), range(self.top + 1, self.bottom - 1)
