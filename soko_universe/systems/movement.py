"""Player walking system.

Moves the player one tile onto ``next_pos`` when that cell is inside the grid,
not a wall, and not occupied. Crates are handled first by
:mod:`soko_universe.systems.push`; by the time this system runs an occupied
target means the move is blocked.

Returns the original ``State`` if movement is not possible; otherwise a new
``State`` with the updated player position and turn counter.
"""

from dataclasses import replace

from soko_universe.components import Position
from soko_universe.state import State
from soko_universe.utils.grid import is_free_at


def movement_system(state: State, next_pos: Position) -> State:
    """Move the player one tile if allowed.

    Args:
        state (State): Current state.
        next_pos (Position): Desired destination, adjacent to the player.

    Returns:
        State: Same state if blocked or updated with new position.
    """
    if not is_free_at(state, next_pos):
        return state

    foreground = state.foreground.moved(state.foreground.player_index, next_pos)
    return replace(state, foreground=foreground, turn=state.turn + 1)
