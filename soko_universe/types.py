"""Common type aliases and enumerations.

``BackgroundElementType`` and ``ForegroundElementType`` are closed sets: every
table in the package that dispatches on them (level codec, renderers) is keyed
by the full enum, so adding a member surfaces as a ``KeyError`` at the first
lookup rather than as a silently ignored case.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration for ObjectiveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from soko_universe.state import State

ElementIndex = int

ObjectiveFn = Callable[["State"], bool]


class BackgroundElementType(StrEnum):
    """Static cell kind, fixed when the level is loaded."""

    FLOOR = auto()
    WALL = auto()
    GOAL = auto()


class ForegroundElementType(StrEnum):
    """Movable entity kind layered over the background."""

    PLAYER = auto()
    CRATE = auto()
