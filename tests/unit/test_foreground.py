import pytest

from soko_universe.components import ForegroundElement, Position
from soko_universe.exceptions import OutOfBoundsError
from soko_universe.foreground import ForegroundState
from soko_universe.types import ForegroundElementType
from tests.test_utils import make_state

PLAYER = ForegroundElementType.PLAYER
CRATE = ForegroundElementType.CRATE


def test_from_elements_keeps_load_order() -> None:
    elements = [
        ForegroundElement(CRATE, Position(1, 0)),
        ForegroundElement(PLAYER, Position(0, 0)),
        ForegroundElement(CRATE, Position(2, 0)),
    ]
    fg = ForegroundState.from_elements(elements)
    assert fg.all() == tuple(elements)
    assert fg.player_index == 1
    assert fg.player == elements[1]
    assert len(fg) == 3
    assert fg.crate_count == 2


@pytest.mark.parametrize("players", [0, 2])
def test_requires_exactly_one_player(players: int) -> None:
    elements = [ForegroundElement(PLAYER, Position(i, 0)) for i in range(players)]
    elements.append(ForegroundElement(CRATE, Position(5, 5)))
    with pytest.raises(ValueError):
        ForegroundState.from_elements(elements)


def test_rejects_shared_positions() -> None:
    with pytest.raises(ValueError):
        ForegroundState.from_elements(
            [
                ForegroundElement(PLAYER, Position(0, 0)),
                ForegroundElement(CRATE, Position(0, 0)),
            ]
        )


def test_at_lookup() -> None:
    state = make_state((0, 0), crate_positions=[(2, 2)])
    fg = state.foreground
    assert fg.at(Position(0, 0)) == fg.player
    crate = fg.at(Position(2, 2))
    assert crate is not None and crate.is_crate
    assert fg.at(Position(1, 1)) is None


def test_getitem_out_of_range() -> None:
    fg = make_state((0, 0), crate_positions=[(2, 2)]).foreground
    assert fg[1].is_crate
    with pytest.raises(OutOfBoundsError):
        fg[2]
    with pytest.raises(OutOfBoundsError):
        fg[-1]


def test_count_on_goal() -> None:
    state = make_state(
        (0, 0),
        crate_positions=[(1, 1), (2, 2), (3, 3)],
        goal_positions=[(1, 1), (3, 3), (0, 0)],
    )
    # Player standing on a goal does not count.
    assert state.foreground.count_on_goal(state.background) == 2


def test_moved_updates_element_and_index() -> None:
    fg = make_state((0, 0), crate_positions=[(2, 2)]).foreground
    moved = fg.moved(1, Position(3, 2))
    assert moved[1].position == Position(3, 2)
    assert moved.at(Position(3, 2)) == moved[1]
    assert moved.at(Position(2, 2)) is None
    # Original snapshot untouched.
    assert fg[1].position == Position(2, 2)


def test_moved_onto_occupied_cell_raises() -> None:
    fg = make_state((0, 0), crate_positions=[(1, 0)]).foreground
    with pytest.raises(ValueError):
        fg.moved(0, Position(1, 0))
