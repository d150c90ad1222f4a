"""
Game state container.

``GameSession`` owns everything that changes during play. The engine
functions take it by reference and are its only writers; rendering reads it.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from .config import GameConfig
from .geometry import Arena, Point
from .snake import Snake


class GameState(Enum):
    MENU = "menu"
    PLAY = "play"
    GAME_OVER = "gameOver"


def initial_snake(config: GameConfig) -> Snake:
    """A fresh snake in the configured starting position."""
    return Snake(config.initial_snake, config.initial_direction)


@dataclass
class GameSession:
    config: GameConfig
    snake: Snake
    food: Point
    rng: random.Random = field(default_factory=random.Random)
    score: int = 0
    state: GameState = GameState.MENU
    ticks: int = 0
    rounds: int = 0

    @property
    def arena(self) -> Arena:
        return self.config.arena

    @property
    def playing(self) -> bool:
        return self.state is GameState.PLAY
