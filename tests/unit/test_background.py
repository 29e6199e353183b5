import pytest
from pyrsistent import pvector

from soko_universe.background import BackgroundGrid
from soko_universe.components import Position
from soko_universe.exceptions import OutOfBoundsError
from soko_universe.types import BackgroundElementType

F = BackgroundElementType.FLOOR
W = BackgroundElementType.WALL
G = BackgroundElementType.GOAL


def make_grid() -> BackgroundGrid:
    return BackgroundGrid.from_rows([[W, W, W], [W, F, G], [W, W, W]])


def test_get_row_major() -> None:
    grid = make_grid()
    assert (grid.width, grid.height) == (3, 3)
    assert grid.get(0, 0) == W
    assert grid.get(1, 1) == F
    assert grid.get(2, 1) == G
    assert grid.at(Position(2, 1)) == G


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
def test_get_out_of_bounds_raises(x: int, y: int) -> None:
    grid = make_grid()
    with pytest.raises(OutOfBoundsError):
        grid.get(x, y)


def test_out_of_bounds_is_index_error() -> None:
    with pytest.raises(IndexError):
        make_grid().get(3, 3)


def test_goals_and_predicates() -> None:
    grid = make_grid()
    assert grid.goals() == [Position(2, 1)]
    assert grid.is_goal(Position(2, 1))
    assert grid.is_wall(Position(0, 1))
    assert not grid.is_wall(Position(1, 1))


def test_in_bounds() -> None:
    grid = make_grid()
    assert grid.in_bounds(0, 0)
    assert grid.in_bounds(2, 2)
    assert not grid.in_bounds(-1, 2)
    assert not grid.in_bounds(2, 3)


def test_from_rows_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError):
        BackgroundGrid.from_rows([[F, F], [F]])


def test_cell_count_must_match_dimensions() -> None:
    with pytest.raises(ValueError):
        BackgroundGrid(width=2, height=2, cells=pvector([F, F, F]))


def test_grid_is_immutable() -> None:
    grid = make_grid()
    with pytest.raises(Exception):
        grid.width = 4  # type: ignore[misc]
