"""Movable entity layer.

``ForegroundState`` keeps the player and the crates in load order inside a
persistent vector, alongside a persistent ``Position -> index`` map so that
``at`` is an O(1) lookup. Both containers are updated together by
:meth:`ForegroundState.moved`, the single relocation primitive the movement
systems use; nothing else produces a modified foreground.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from soko_universe.background import BackgroundGrid
from soko_universe.components import ForegroundElement, Position
from soko_universe.exceptions import OutOfBoundsError
from soko_universe.types import BackgroundElementType, ElementIndex


@dataclass(frozen=True)
class ForegroundState:
    """Ordered set of movable entities.

    Attributes:
        elements (PVector[ForegroundElement]): Elements in load order.
        index (PMap[Position, ElementIndex]): Reverse lookup from occupied cell
            to element index.
        player_index (ElementIndex): Index of the single player element.
    """

    elements: PVector[ForegroundElement]
    index: PMap[Position, ElementIndex]
    player_index: ElementIndex

    @classmethod
    def from_elements(cls, elements: Iterable[ForegroundElement]) -> "ForegroundState":
        """Build a foreground, checking player uniqueness and free cells.

        Raises:
            ValueError: If there is not exactly one player or two elements
                share a position.
        """
        items = pvector(elements)
        index: Dict[Position, ElementIndex] = {}
        players: List[Position] = []
        player_index = -1
        for i, element in enumerate(items):
            if element.position in index:
                raise ValueError(
                    f"Elements {index[element.position]} and {i} share {element.position}"
                )
            index[element.position] = i
            if element.is_player:
                players.append(element.position)
                player_index = i
        if len(players) != 1:
            at = ", ".join(f"row {p.y}, column {p.x}" for p in players)
            raise ValueError(
                f"Expected exactly one player, found {len(players)}"
                + (f" (at {at})" if at else "")
            )
        return cls(elements=items, index=pmap(index), player_index=player_index)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, i: ElementIndex) -> ForegroundElement:
        if not 0 <= i < len(self.elements):
            raise OutOfBoundsError(
                f"Foreground index {i} out of range for {len(self.elements)} elements"
            )
        return self.elements[i]

    def all(self) -> Tuple[ForegroundElement, ...]:
        """All elements, in load order."""
        return tuple(self.elements)

    def at(self, pos: Position) -> Optional[ForegroundElement]:
        """Element occupying ``pos`` or ``None``."""
        i = self.index.get(pos)
        return None if i is None else self.elements[i]

    def index_at(self, pos: Position) -> Optional[ElementIndex]:
        return self.index.get(pos)

    @property
    def player(self) -> ForegroundElement:
        return self.elements[self.player_index]

    @property
    def crates(self) -> Tuple[ForegroundElement, ...]:
        return tuple(element for element in self.elements if element.is_crate)

    @property
    def crate_count(self) -> int:
        return sum(1 for element in self.elements if element.is_crate)

    def count_on_goal(self, background: BackgroundGrid) -> int:
        """Number of crates standing on goal cells."""
        return sum(
            1
            for element in self.elements
            if element.is_crate
            and background.at(element.position) == BackgroundElementType.GOAL
        )

    def moved(self, i: ElementIndex, to: Position) -> "ForegroundState":
        """Return a copy with element ``i`` relocated to the free cell ``to``."""
        element = self[i]
        if to in self.index:
            raise ValueError(f"Cannot move element {i} onto occupied cell {to}")
        return ForegroundState(
            elements=self.elements.set(i, element.moved_to(to)),
            index=self.index.remove(element.position).set(to, i),
            player_index=self.player_index,
        )
