from typing import Iterable, List, Sequence, Tuple

from soko_universe.background import BackgroundGrid
from soko_universe.components import ForegroundElement, Position
from soko_universe.foreground import ForegroundState
from soko_universe.state import State
from soko_universe.types import BackgroundElementType, ForegroundElementType
from soko_universe.utils.validation import find_violations

Coord = Tuple[int, int]


def make_state(
    agent_pos: Coord,
    crate_positions: Sequence[Coord] = (),
    wall_positions: Iterable[Coord] = (),
    goal_positions: Iterable[Coord] = (),
    width: int = 5,
    height: int = 5,
) -> State:
    """Open ``width`` x ``height`` floor with the given walls, goals and entities.

    The player is element 0, crates follow in the given order.
    """
    cells: List[List[BackgroundElementType]] = [
        [BackgroundElementType.FLOOR] * width for _ in range(height)
    ]
    for x, y in wall_positions:
        cells[y][x] = BackgroundElementType.WALL
    for x, y in goal_positions:
        cells[y][x] = BackgroundElementType.GOAL

    elements = [ForegroundElement(ForegroundElementType.PLAYER, Position(*agent_pos))]
    elements += [
        ForegroundElement(ForegroundElementType.CRATE, Position(*pos))
        for pos in crate_positions
    ]
    return State(
        background=BackgroundGrid.from_rows(cells),
        foreground=ForegroundState.from_elements(elements),
    )


def player_pos(state: State) -> Coord:
    player = state.foreground.player
    return (player.x, player.y)


def crate_positions(state: State) -> List[Coord]:
    return [(c.x, c.y) for c in state.foreground.crates]


def assert_invariants(state: State) -> None:
    assert find_violations(state) == []
