"""
Input actions and their key bindings.

Raw key sequences are mapped to abstract actions here; nothing past this
module looks at key codes.
"""
from __future__ import annotations

import logging
from enum import Enum

from snake_tui.keys import KeyId, is_key_release, parse_key

from .snake import Direction

logger = logging.getLogger(__name__)


class Action(Enum):
    TICK = "tick"
    QUIT = "quit"
    START_GAME = "startGame"
    RESTART = "restart"
    MOVE_UP = "moveUp"
    MOVE_DOWN = "moveDown"
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"


# ─────────────────────────────────────────────────────────────────────────────
# Default key bindings
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_KEYBINDINGS: dict[Action, list[KeyId]] = {
    Action.START_GAME: ["space"],
    Action.QUIT:       ["q"],
    Action.RESTART:    ["y"],
    Action.MOVE_LEFT:  ["h", "left"],
    Action.MOVE_DOWN:  ["j", "down"],
    Action.MOVE_UP:    ["k", "up"],
    Action.MOVE_RIGHT: ["l", "right"],
}

_KEY_TO_ACTION: dict[KeyId, Action] = {
    key: action
    for action, keys in DEFAULT_KEYBINDINGS.items()
    for key in keys
}

MOVE_DIRECTIONS: dict[Action, Direction] = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}


def action_for_key(data: str) -> Action:
    """
    Map one raw key sequence to an action.

    Unbound keys, any modifier chord (``ctrl+q``, ``shift+left``, ``Q``),
    key releases and input that does not parse all become ``TICK``.
    """
    if is_key_release(data):
        return Action.TICK
    key = parse_key(data)
    if key is None:
        logger.debug("Unparseable input %r", data)
        return Action.TICK
    action = _KEY_TO_ACTION.get(key)
    if action is None:
        logger.debug("Unbound key %s", key)
        return Action.TICK
    return action


def direction_for(action: Action) -> Direction | None:
    """The heading a movement action asks for, or None for other actions."""
    return MOVE_DIRECTIONS.get(action)
