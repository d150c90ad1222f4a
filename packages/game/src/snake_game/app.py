"""
Game loop.

One iteration is one tick: simulate, render, flush, then wait (up to the
tick length) for one input action. The terminal is restored on every way
out of the loop, including errors.
"""
from __future__ import annotations

import logging
import random

from snake_tui.frame_buffer import FrameBuffer
from snake_tui.terminal import Terminal, terminal_session

from .config import DEFAULT_CONFIG, GameConfig
from .engine import apply_action, new_session, tick
from .input_source import KeyboardInput
from .render import compose_frame
from .state import GameSession

logger = logging.getLogger(__name__)


def run_iteration(session: GameSession, frame: FrameBuffer, keyboard: KeyboardInput) -> bool:
    """Run one loop iteration. Returns False once the player quits."""
    tick(session)
    frame.queue(*compose_frame(session))
    frame.flush()
    action = keyboard.read_action()
    return apply_action(session, action)


def run_session(terminal: Terminal, session: GameSession) -> GameSession:
    """Drive *session* on an already started terminal until the player quits."""
    config = session.config
    frame = FrameBuffer(terminal)
    keyboard = KeyboardInput(terminal, config.tick_ms, config.escape_timeout_ms)
    while run_iteration(session, frame, keyboard):
        pass
    return session


def run(
    terminal: Terminal,
    config: GameConfig | None = None,
    rng: random.Random | None = None,
) -> GameSession:
    """
    Play on *terminal* until the player quits and return the final session.

    The terminal is started here and always stopped again, whichever way the
    loop ends.
    """
    session = new_session(config or DEFAULT_CONFIG, rng)
    with terminal_session(terminal):
        logger.debug("Game loop starting")
        run_session(terminal, session)
    logger.debug(
        "Game loop finished: state=%s score=%d rounds=%d ticks=%d",
        session.state.value, session.score, session.rounds, session.ticks,
    )
    return session

