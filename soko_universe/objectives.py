"""Objective predicate functions and registry.

Each objective function answers: *"Is the puzzle solved?"* They are pure
predicates over a :class:`State`, recomputed on every call so that they are
consistent immediately after any move.
"""

from typing import Dict

from soko_universe.state import State
from soko_universe.types import ObjectiveFn


def crates_on_goal(state: State) -> int:
    """Number of crates currently standing on goal cells."""
    return state.foreground.count_on_goal(state.background)


def all_crates_on_goal_objective_fn(state: State) -> bool:
    """Every crate is on a goal. A level without crates is never solved."""
    total = state.foreground.crate_count
    return total > 0 and crates_on_goal(state) == total


def default_objective_fn(state: State) -> bool:
    return all_crates_on_goal_objective_fn(state)


OBJECTIVE_FN_REGISTRY: Dict[str, ObjectiveFn] = {
    "default": default_objective_fn,
    "all_crates_on_goal": all_crates_on_goal_objective_fn,
}
"""Name → objective predicate mapping."""
