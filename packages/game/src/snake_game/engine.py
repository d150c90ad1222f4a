"""
Game engine — the Menu / Play / Game Over state machine.

All mutation of a ``GameSession`` happens through the functions here:

- new_session() builds the starting state (Menu, canonical snake)
- tick() runs one simulation step: move, collide, feed
- apply_action() applies one input action and says whether to keep going

The simulation only runs in PLAY. While the menu or the game-over screen is
up the snake stays where it is.
"""
from __future__ import annotations

import logging
import random

from .actions import Action, direction_for
from .config import DEFAULT_CONFIG, GameConfig
from .food import place_food
from .rules import Collision, check_collision, is_feeding
from .state import GameSession, GameState, initial_snake

logger = logging.getLogger(__name__)


def new_session(config: GameConfig | None = None, rng: random.Random | None = None) -> GameSession:
    config = config or DEFAULT_CONFIG
    return GameSession(
        config=config,
        snake=initial_snake(config),
        food=config.initial_food,
        rng=rng or random.Random(),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Simulation
# ─────────────────────────────────────────────────────────────────────────────

def tick(session: GameSession) -> Collision | None:
    """
    Advance the simulation by one step.

    Returns the collision that ended the round on this step, if any.
    Outside PLAY this does nothing and returns None.
    """
    if not session.playing:
        return None

    session.ticks += 1
    session.snake.advance()

    collision = check_collision(session.snake, session.arena)
    if collision is not None:
        _set_state(session, GameState.GAME_OVER)
        logger.debug("Collision (%s) at %s, score %d", collision.value, session.snake.head, session.score)

    feed(session)
    return collision


def feed(session: GameSession) -> bool:
    """Eat the food if the head is on it: relocate food, grow, score."""
    if not is_feeding(session.snake, session.food):
        return False
    session.food = place_food(session.arena, session.snake.body, session.rng)
    session.snake.grow()
    session.score += 1
    logger.debug("Ate food, score %d, next food at %s", session.score, session.food)
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Input
# ─────────────────────────────────────────────────────────────────────────────

def apply_action(session: GameSession, action: Action) -> bool:
    """
    Apply one input action. Returns False when the session should end.

    - QUIT ends the session from any state.
    - START_GAME leaves the menu; RESTART leaves the game-over screen.
    - Movement only steers the snake in play.
    """
    if action is Action.QUIT:
        logger.debug("Quit requested in %s", session.state.value)
        return False

    state = session.state

    if action is Action.START_GAME:
        if state is GameState.MENU:
            _begin_round(session)
        return True

    if action is Action.RESTART:
        if state is GameState.GAME_OVER:
            session.snake = initial_snake(session.config)
            if session.snake.occupies(session.food):
                session.food = place_food(session.arena, session.snake.body, session.rng)
            _begin_round(session)
        return True

    requested = direction_for(action)
    if requested is not None and state is GameState.PLAY:
        session.snake.steer(requested)

    return True


def _begin_round(session: GameSession) -> None:
    if session.config.score_policy == "reset_on_start":
        session.score = 0
    session.rounds += 1
    _set_state(session, GameState.PLAY)


def _set_state(session: GameSession, state: GameState) -> None:
    if session.state is not state:
        logger.debug("State %s -> %s", session.state.value, state.value)
        session.state = state
