"""Compiled-in levels.

``LEVEL_REGISTRY`` maps level names to their rows. ``classic`` is the level
the game boots with; the others are small puzzles handy for demos and tests.
"""

from typing import Dict, Tuple

from soko_universe.exceptions import LevelDecodeError

LevelRows = Tuple[str, ...]

CLASSIC: LevelRows = (
    "#########",
    "##..#...#",
    "#GCG..C.#",
    "#.#..##.#",
    "#.PCGCG.#",
    "#########",
)

FIRST_PUSH: LevelRows = (
    "#######",
    "#P.C.G#",
    "#######",
)

TWO_CRATES: LevelRows = (
    "#######",
    "#GCPCG#",
    "#######",
)

CORNER: LevelRows = (
    "######",
    "#G...#",
    "#.C..#",
    "#..P.#",
    "######",
)

DEFAULT_LEVEL_NAME = "classic"

LEVEL_REGISTRY: Dict[str, LevelRows] = {
    "classic": CLASSIC,
    "first_push": FIRST_PUSH,
    "two_crates": TWO_CRATES,
    "corner": CORNER,
}
"""Registry of built-in level names to rows."""


def get_level(name: str = DEFAULT_LEVEL_NAME) -> LevelRows:
    """Return the rows of a built-in level.

    Raises:
        LevelDecodeError: If no level is registered under ``name``.
    """
    if name not in LEVEL_REGISTRY:
        raise LevelDecodeError(
            f"Unknown level {name!r}; available: {sorted(LEVEL_REGISTRY)}"
        )
    return LEVEL_REGISTRY[name]
