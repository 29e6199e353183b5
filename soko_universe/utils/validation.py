"""State consistency checks.

``find_violations`` lists every broken structural invariant of a ``State``;
the level loader refuses to build a state with any, and tests use it after
each move.
"""

from typing import List

from soko_universe.state import State
from soko_universe.types import BackgroundElementType


def find_violations(state: State) -> List[str]:
    """Return human-readable descriptions of broken invariants (empty if none)."""
    violations: List[str] = []
    foreground = state.foreground

    players = [e for e in foreground.elements if e.is_player]
    if len(players) != 1:
        violations.append(f"expected exactly one player, found {len(players)}")

    seen = set()
    for i, element in enumerate(foreground.elements):
        pos = element.position
        if pos in seen:
            violations.append(f"element {i} shares cell {(pos.x, pos.y)}")
        seen.add(pos)
        if not state.background.in_bounds(pos.x, pos.y):
            violations.append(f"element {i} outside grid at {(pos.x, pos.y)}")
        elif state.background.at(pos) == BackgroundElementType.WALL:
            violations.append(f"element {i} inside wall at {(pos.x, pos.y)}")
        if foreground.index.get(pos) != i:
            violations.append(f"position index out of sync for element {i}")

    if len(foreground.index) != len(foreground.elements):
        violations.append("position index size differs from element count")

    return violations
