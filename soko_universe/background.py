"""Static background layer.

``BackgroundGrid`` stores one :class:`BackgroundElementType` per cell in a flat
row-major persistent vector (index ``y * width + x``). It is built once by the
level loader and never changes afterwards; every query outside the grid
rectangle raises :class:`OutOfBoundsError` because it can only come from a
caller bug.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from soko_universe.components import Position
from soko_universe.exceptions import OutOfBoundsError
from soko_universe.types import BackgroundElementType


@dataclass(frozen=True)
class BackgroundGrid:
    """Immutable ``width`` x ``height`` map of cell kinds.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        cells (PVector[BackgroundElementType]): Row-major cell kinds.
    """

    width: int
    height: int
    cells: PVector[BackgroundElementType]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be non-empty, got {self.width}x{self.height}")
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Grid {self.width}x{self.height} needs {self.width * self.height} "
                f"cells, got {len(self.cells)}"
            )

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[BackgroundElementType]]
    ) -> "BackgroundGrid":
        """Build a grid from rows ordered top to bottom."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        cells: List[BackgroundElementType] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
            cells.extend(row)
        return cls(width=width, height=height, cells=pvector(cells))

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies within the grid rectangle."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> BackgroundElementType:
        """Return the cell kind at ``(x, y)``.

        Raises:
            OutOfBoundsError: If the coordinate is outside the grid.
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
        return self.cells[y * self.width + x]

    def at(self, pos: Position) -> BackgroundElementType:
        return self.get(pos.x, pos.y)

    def is_wall(self, pos: Position) -> bool:
        return self.at(pos) == BackgroundElementType.WALL

    def is_goal(self, pos: Position) -> bool:
        return self.at(pos) == BackgroundElementType.GOAL

    def items(self) -> Iterator[Tuple[Position, BackgroundElementType]]:
        """Yield ``(position, kind)`` pairs in row-major order."""
        for i, kind in enumerate(self.cells):
            yield Position(i % self.width, i // self.width), kind

    def goals(self) -> List[Position]:
        """Positions of all goal cells, row-major."""
        return [pos for pos, kind in self.items() if kind == BackgroundElementType.GOAL]
