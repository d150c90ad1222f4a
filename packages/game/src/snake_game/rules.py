"""Collision and feeding rules. Pure functions over the snake, arena and food."""
from __future__ import annotations

from enum import Enum

from .geometry import Arena, Point
from .snake import Snake


class Collision(Enum):
    WALL = "wall"
    SELF = "self"


def hits_wall(snake: Snake, arena: Arena) -> bool:
    return arena.on_or_outside(snake.head)


def hits_self(snake: Snake) -> bool:
    # The last cell is left out: it is the one being vacated.
    head = snake.head
    return any(cell == head for cell in snake.body[1:-1])


def check_collision(snake: Snake, arena: Arena) -> Collision | None:
    """Return what the head ran into, or None while the snake is alive."""
    if hits_wall(snake, arena):
        return Collision.WALL
    if hits_self(snake):
        return Collision.SELF
    return None


def is_feeding(snake: Snake, food: Point) -> bool:
    return snake.head == food
