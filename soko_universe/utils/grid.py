"""Grid math / collision helpers.

Utility predicates used by the movement and push systems. Functions here are
pure. Cells outside the grid rectangle count as blocked, the same as walls,
so a level without a wall border never makes the engine query out of bounds.
"""

from typing import Optional

from soko_universe.components import Position
from soko_universe.state import State


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the level rectangle."""
    return state.background.in_bounds(pos.x, pos.y)


def is_wall_at(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is a wall or lies outside the grid."""
    return not is_in_bounds(state, pos) or state.background.is_wall(pos)


def is_free_at(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is inside the grid, not a wall, and unoccupied."""
    return not is_wall_at(state, pos) and state.foreground.at(pos) is None


def compute_destination(current_pos: Position, next_pos: Position) -> Optional[Position]:
    """Square beyond ``next_pos`` along the ``current_pos -> next_pos`` vector.

    Returns ``None`` if the two positions are not orthogonal neighbours.
    """
    dx = next_pos.x - current_pos.x
    dy = next_pos.y - current_pos.y
    if abs(dx) + abs(dy) != 1:
        return None
    return next_pos.offset(dx, dy)
