"""Position component.

Immutable integer grid coordinates. ``x`` grows to the right and ``y`` grows
downward, so row 0 of a level is its top row.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)
