"""Puzzle facade.

:class:`Universe` is the only object the presentation layer talks to. It owns
the current immutable :class:`State` and replaces it wholesale on each
accepted move, so every read query sees either the state before a move or the
state after it, never a mix. Queries return value objects only; there is no
way to reach a mutable container through it.

Typical loop::

    universe = Universe.from_level_const()
    while not universe.has_won():
        dx, dy = read_direction()
        universe.move_player(dx, dy)
        draw(universe)
"""

import logging

from soko_universe.actions import ACTION_VECTORS, Action
from soko_universe.components import ForegroundElement
from soko_universe.levels.builtin import DEFAULT_LEVEL_NAME, get_level
from soko_universe.levels.codec import LevelData, decode_level
from soko_universe.objectives import (
    OBJECTIVE_FN_REGISTRY,
    crates_on_goal,
    default_objective_fn,
)
from soko_universe.state import State
from soko_universe.step import move_player
from soko_universe.types import BackgroundElementType, ElementIndex, ObjectiveFn
from soko_universe.utils.validation import find_violations

logger = logging.getLogger(__name__)


class Universe:
    """Single-level puzzle instance.

    Args:
        state: Initial state, usually produced by
            :func:`soko_universe.levels.codec.decode_level`. Raises
            ``ValueError`` if it breaks an entity invariant.
        objective_fn: Win predicate; defaults to all crates on goals.
    """

    def __init__(self, state: State, objective_fn: ObjectiveFn = default_objective_fn):
        violations = find_violations(state)
        if violations:
            raise ValueError("Invalid initial state: " + "; ".join(violations))
        self._state = state
        self._objective_fn = objective_fn

    @classmethod
    def from_level(cls, data: LevelData, objective_fn_name: str = "default") -> "Universe":
        """Build from level data in the fixed character encoding.

        ``objective_fn_name`` selects the win predicate from
        :data:`~soko_universe.objectives.OBJECTIVE_FN_REGISTRY`.
        """
        if objective_fn_name not in OBJECTIVE_FN_REGISTRY:
            raise ValueError(f"Unknown objective: {objective_fn_name!r}")
        return cls(decode_level(data), OBJECTIVE_FN_REGISTRY[objective_fn_name])

    @classmethod
    def from_named_level(cls, name: str, objective_fn_name: str = "default") -> "Universe":
        return cls.from_level(get_level(name), objective_fn_name)

    @classmethod
    def from_level_const(cls) -> "Universe":
        """Build the compiled-in default level."""
        return cls.from_named_level(DEFAULT_LEVEL_NAME)

    @property
    def state(self) -> State:
        """Current immutable snapshot."""
        return self._state

    def width(self) -> int:
        return self._state.width

    def height(self) -> int:
        return self._state.height

    def get_background(self, x: int, y: int) -> BackgroundElementType:
        """Cell kind at ``(x, y)``; raises ``OutOfBoundsError`` outside the grid."""
        return self._state.background.get(x, y)

    def foreground_size(self) -> int:
        return len(self._state.foreground)

    def get_foreground_element(self, i: ElementIndex) -> ForegroundElement:
        """Element ``i`` in load order; raises ``OutOfBoundsError`` if invalid."""
        return self._state.foreground[i]

    def crate_count(self) -> int:
        return self._state.foreground.crate_count

    def count_crates_on_goal(self) -> int:
        return crates_on_goal(self._state)

    def has_won(self) -> bool:
        return self._objective_fn(self._state)

    def turn(self) -> int:
        return self._state.turn

    def pushes(self) -> int:
        return self._state.pushes

    def move_player(self, dx: int, dy: int) -> bool:
        """Apply one directional command.

        Returns:
            bool: True if the move was accepted, False if it was blocked.

        Raises:
            InvalidMoveError: If ``(dx, dy)`` is not an orthogonal unit vector;
                state is left unchanged.
        """
        was_won = self.has_won()
        next_state = move_player(self._state, dx, dy)
        if next_state is self._state:
            return False
        self._state = next_state
        if not was_won and self.has_won():
            logger.info(
                "Level solved in %d moves (%d pushes)", next_state.turn, next_state.pushes
            )
        return True

    def move(self, action: Action) -> bool:
        """Apply a directional ``Action``; see :meth:`move_player`."""
        dx, dy = ACTION_VECTORS[action]
        return self.move_player(dx, dy)

    def __repr__(self) -> str:
        return f"Universe({self._state.description})"
