"""Push interaction system.

Lets the player push the crate on the adjacent ``next_pos`` one tile further
along the same vector, provided the destination is inside the grid, not a
wall, and unoccupied. A crate never pushes another crate.
"""

from dataclasses import replace

from soko_universe.components import Position
from soko_universe.state import State
from soko_universe.utils.grid import compute_destination, is_free_at


def push_system(state: State, next_pos: Position) -> State:
    """Attempt to push the crate at ``next_pos``.

    Args:
        state (State): Current immutable state.
        next_pos (Position): Adjacent position the player is trying to move into.

    Returns:
        State: Updated state with both moved positions if the push succeeds;
            the original state otherwise.
    """
    foreground = state.foreground
    crate_index = foreground.index_at(next_pos)
    if crate_index is None or not foreground[crate_index].is_crate:
        return state  # Nothing to push

    push_to = compute_destination(foreground.player.position, next_pos)
    if push_to is None or not is_free_at(state, push_to):
        return state  # Push not possible

    # Crate first so the player's target is free when it moves.
    foreground = foreground.moved(crate_index, push_to)
    foreground = foreground.moved(foreground.player_index, next_pos)
    return replace(
        state, foreground=foreground, turn=state.turn + 1, pushes=state.pushes + 1
    )
