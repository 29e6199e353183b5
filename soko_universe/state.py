"""Core immutable ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a whole
puzzle snapshot between two moves. The movement systems are pure functions
that take a previous ``State`` plus a direction and return a *new* ``State``;
no mutation happens in-place. A push therefore never exists half-applied: the
crate and the player move inside one returned snapshot.

Design notes:

* ``background`` is shared, unchanged, by every snapshot of a level.
* ``foreground`` is a persistent structure; successive snapshots share most of
    their storage.
* ``turn`` counts accepted moves and ``pushes`` counts accepted moves that
    displaced a crate. Rejected moves leave both untouched.
"""

from dataclasses import dataclass
from typing import Any, Dict

from soko_universe.background import BackgroundGrid
from soko_universe.foreground import ForegroundState


@dataclass(frozen=True)
class State:
    """Immutable puzzle state.

    Attributes:
        background (BackgroundGrid): Static cell kinds.
        foreground (ForegroundState): Player and crate positions.
        turn (int): Number of accepted moves.
        pushes (int): Number of accepted moves that pushed a crate.
    """

    background: BackgroundGrid
    foreground: ForegroundState
    turn: int = 0
    pushes: int = 0

    @property
    def width(self) -> int:
        return self.background.width

    @property
    def height(self) -> int:
        return self.background.height

    @property
    def description(self) -> Dict[str, Any]:
        """Compact summary for logging and debugging."""
        player = self.foreground.player
        return {
            "size": (self.width, self.height),
            "player": (player.x, player.y),
            "crates": [(c.x, c.y) for c in self.foreground.crates],
            "crates_on_goal": self.foreground.count_on_goal(self.background),
            "turn": self.turn,
            "pushes": self.pushes,
        }
