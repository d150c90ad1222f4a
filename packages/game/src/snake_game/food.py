"""Food placement."""
from __future__ import annotations

import logging
import random
from typing import Collection

from .geometry import Arena, Point

logger = logging.getLogger(__name__)


def place_food(arena: Arena, occupied: Collection[Point], rng: random.Random) -> Point:
    """
    Pick a random free cell inside *arena*, avoiding *occupied* cells.

    Candidates are drawn until one is free. There is no retry cap: the arena
    is always far larger than the snake.
    """
    xs, ys = arena.food_ranges()
    taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
    attempts = 0
    while True:
        attempts += 1
        candidate = Point(rng.choice(xs), rng.choice(ys))
        if candidate not in taken:
            logger.debug("Placed food at %s after %d attempt(s)", candidate, attempts)
            return candidate
        logger.debug("Food candidate %s is on the snake, retrying", candidate)
