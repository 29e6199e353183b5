import pytest

from soko_universe.actions import Action
from soko_universe.universe import Universe

LETTERS = {"U": Action.UP, "D": Action.DOWN, "L": Action.LEFT, "R": Action.RIGHT}

SOLUTIONS = {
    "first_push": "RRR",
    "two_crates": "LRR",
    "corner": "ULDLU",
    "classic": "LUUR" "URD" "RDDR" "LUULLLDDRR" "URULL" "RRRURRDLLL",
}


@pytest.mark.parametrize("name", sorted(SOLUTIONS))
def test_solution_wins_on_last_move(name: str) -> None:
    universe = Universe.from_named_level(name)
    moves = SOLUTIONS[name]
    for i, letter in enumerate(moves):
        assert not universe.has_won()
        assert universe.move(LETTERS[letter]), f"move {i} ({letter}) was blocked"
    assert universe.has_won()
    assert universe.count_crates_on_goal() == universe.crate_count()
    assert universe.turn() == len(moves)


def test_classic_push_count() -> None:
    universe = Universe.from_level_const()
    for letter in SOLUTIONS["classic"]:
        universe.move(LETTERS[letter])
    assert universe.pushes() == 10


def test_won_state_survives_further_moves() -> None:
    universe = Universe.from_named_level("two_crates")
    for letter in SOLUTIONS["two_crates"]:
        universe.move(LETTERS[letter])
    assert universe.has_won()
    # Walking away from the placed crates keeps the puzzle solved.
    assert universe.move(Action.LEFT)
    assert universe.has_won()
