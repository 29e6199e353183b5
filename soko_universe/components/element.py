"""Foreground element component.

A ``ForegroundElement`` pairs a movable entity kind with its current cell. It
is a value object: moving an element means replacing it inside the
:class:`soko_universe.foreground.ForegroundState` with a new instance.
"""

from dataclasses import dataclass, replace

from soko_universe.types import ForegroundElementType
from .position import Position


@dataclass(frozen=True)
class ForegroundElement:
    """Player or crate at a grid position.

    Attributes:
        element_type: Kind of the entity.
        position: Current cell.
    """

    element_type: ForegroundElementType
    position: Position

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def is_player(self) -> bool:
        return self.element_type == ForegroundElementType.PLAYER

    @property
    def is_crate(self) -> bool:
        return self.element_type == ForegroundElementType.CRATE

    def moved_to(self, position: Position) -> "ForegroundElement":
        return replace(self, position=position)
