"""Move reducer.

The exported :func:`move_player` is the only gameplay transition. It is pure:
given a ``State`` and a direction it returns the next ``State``. A blocked move
returns the *same* object, so callers can detect it with an identity check.

Resolution order for a valid direction:

1. Wall (or grid edge) directly ahead: blocked.
2. ``push_system``: if a crate is ahead, push it or stay blocked.
3. ``movement_system``: otherwise walk onto the free cell.
"""

import logging
import numbers

from soko_universe.actions import ACTION_VECTORS, MOVE_VECTORS, Action
from soko_universe.exceptions import InvalidMoveError
from soko_universe.state import State
from soko_universe.systems.movement import movement_system
from soko_universe.systems.push import push_system
from soko_universe.utils.grid import is_wall_at

logger = logging.getLogger(__name__)


def _is_step(d: object) -> bool:
    return isinstance(d, numbers.Integral) and not isinstance(d, bool)


def move_player(state: State, dx: int, dy: int) -> State:
    """Apply one directional command.

    Args:
        state (State): Previous immutable state.
        dx (int): Horizontal step, one of -1, 0, 1.
        dy (int): Vertical step, one of -1, 0, 1; exactly one of ``dx``/``dy``
            must be non-zero.

    Returns:
        State: Next state, or ``state`` itself if the move was blocked.

    Raises:
        InvalidMoveError: If ``(dx, dy)`` is not an orthogonal unit vector.
    """
    if not all(_is_step(d) for d in (dx, dy)) or (dx, dy) not in MOVE_VECTORS:
        raise InvalidMoveError(f"Not an orthogonal unit vector: {(dx, dy)}")

    player = state.foreground.player
    next_pos = player.position.offset(dx, dy)

    if is_wall_at(state, next_pos):
        logger.debug("Move %s from (%d,%d) blocked by wall", (dx, dy), player.x, player.y)
        return state

    pushed_state = push_system(state, next_pos)
    if pushed_state is not state:
        logger.debug(
            "Player pushed crate from (%d,%d) to (%d,%d)",
            next_pos.x,
            next_pos.y,
            next_pos.x + dx,
            next_pos.y + dy,
        )
        return pushed_state

    moved_state = movement_system(state, next_pos)
    if moved_state is state:
        logger.debug("Move %s from (%d,%d) blocked by crate", (dx, dy), player.x, player.y)
    else:
        logger.debug("Player moves to (%d,%d)", next_pos.x, next_pos.y)
    return moved_state


def move(state: State, action: Action) -> State:
    """Apply a directional ``Action``; see :func:`move_player`."""
    dx, dy = ACTION_VECTORS[action]
    return move_player(state, dx, dy)
