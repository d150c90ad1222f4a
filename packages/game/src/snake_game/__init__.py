"""
snake_game — single-player snake for the terminal.

The engine is a plain state machine over a ``GameSession``; terminal I/O
comes from ``snake_tui``.
"""
from .actions import DEFAULT_KEYBINDINGS, Action, action_for_key, direction_for
from .app import run, run_iteration, run_session
from .config import DEFAULT_CONFIG, GameConfig, ScorePolicy
from .engine import apply_action, feed, new_session, tick
from .food import place_food
from .geometry import Arena, Point
from .input_source import KeyboardInput
from .render import compose_frame, render_border
from .rules import Collision, check_collision, hits_self, hits_wall, is_feeding
from .snake import Direction, Snake, turn
from .state import GameSession, GameState, initial_snake

__all__ = [
    # actions
    "Action",
    "DEFAULT_KEYBINDINGS",
    "action_for_key",
    "direction_for",
    # app
    "run",
    "run_iteration",
    "run_session",
    # config
    "DEFAULT_CONFIG",
    "GameConfig",
    "ScorePolicy",
    # engine
    "apply_action",
    "feed",
    "new_session",
    "tick",
    # model
    "Arena",
    "Collision",
    "Direction",
    "GameSession",
    "GameState",
    "Point",
    "Snake",
    "check_collision",
    "hits_self",
    "hits_wall",
    "initial_snake",
    "is_feeding",
    "place_food",
    "turn",
    # io
    "KeyboardInput",
    "compose_frame",
    "render_border",
]
