"""Action enumerations.

Defines the human readable :class:`Action` (string enum) used internally and a
stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``ACTION_VECTORS`` is the canonical direction table; ``MOVE_VECTORS`` is the
set of the only (dx, dy) pairs the engine accepts.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, FrozenSet, Tuple


class Action(StrEnum):
    """String enum of player actions (the four push/walk directions)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_VECTORS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

MOVE_VECTORS: FrozenSet[Tuple[int, int]] = frozenset(ACTION_VECTORS.values())


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


def gym_action_to_action(action: int) -> Action:
    """Translate a ``Discrete`` index into an :class:`Action`."""
    return Action[GymAction(action).name]
