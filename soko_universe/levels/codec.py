"""Level text codec.

Encoding (one character per cell, rows top to bottom, all rows equal length):

=====  ===========================
Code   Meaning
=====  ===========================
``#``  Wall
``.``  Floor
``G``  Goal
``P``  Player start (on floor)
``C``  Crate start (on floor)
``B``  Crate start on a goal
=====  ===========================

The encoding has no code for a player standing on a goal, so
:func:`encode_level` writes ``P`` there and the goal underneath is lost on a
round trip. Level data is either a single string with rows separated by
newlines or a sequence of row strings.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple, Union

from soko_universe.background import BackgroundGrid
from soko_universe.components import ForegroundElement, Position
from soko_universe.exceptions import LevelDecodeError
from soko_universe.foreground import ForegroundState
from soko_universe.state import State
from soko_universe.types import BackgroundElementType, ForegroundElementType
from soko_universe.utils.validation import find_violations

logger = logging.getLogger(__name__)

LevelData = Union[str, Sequence[str]]

CellCode = Tuple[BackgroundElementType, Optional[ForegroundElementType]]

CHAR_TO_CELL: Dict[str, CellCode] = {
    "#": (BackgroundElementType.WALL, None),
    ".": (BackgroundElementType.FLOOR, None),
    "G": (BackgroundElementType.GOAL, None),
    "P": (BackgroundElementType.FLOOR, ForegroundElementType.PLAYER),
    "C": (BackgroundElementType.FLOOR, ForegroundElementType.CRATE),
    "B": (BackgroundElementType.GOAL, ForegroundElementType.CRATE),
}

BACKGROUND_TO_CHAR: Dict[BackgroundElementType, str] = {
    BackgroundElementType.WALL: "#",
    BackgroundElementType.FLOOR: ".",
    BackgroundElementType.GOAL: "G",
}

FOREGROUND_TO_CHAR: Dict[Tuple[ForegroundElementType, BackgroundElementType], str] = {
    (ForegroundElementType.PLAYER, BackgroundElementType.FLOOR): "P",
    (ForegroundElementType.PLAYER, BackgroundElementType.GOAL): "P",
    (ForegroundElementType.CRATE, BackgroundElementType.FLOOR): "C",
    (ForegroundElementType.CRATE, BackgroundElementType.GOAL): "B",
}


def split_rows(data: LevelData) -> List[str]:
    """Normalize level data into a list of rows, dropping trailing blank lines."""
    rows = data.split("\n") if isinstance(data, str) else list(data)
    rows = [row.rstrip("\r") for row in rows]
    while rows and not rows[-1]:
        rows.pop()
    return rows


def decode_level(data: LevelData) -> State:
    """Parse level data into the initial :class:`State`.

    Foreground elements are ordered by a row-major scan, so the player is not
    necessarily element 0.

    Raises:
        LevelDecodeError: On empty input, ragged rows, unknown characters or a
            player count other than one.
    """
    rows = split_rows(data)
    if not rows or not rows[0]:
        raise LevelDecodeError("Level is empty")

    width = len(rows[0])
    background: List[List[BackgroundElementType]] = []
    elements: List[ForegroundElement] = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise LevelDecodeError(f"Row {y} has length {len(row)}, expected {width}")
        background_row: List[BackgroundElementType] = []
        for x, char in enumerate(row):
            if char not in CHAR_TO_CELL:
                raise LevelDecodeError(f"Unknown cell code {char!r} at row {y}, column {x}")
            cell, entity = CHAR_TO_CELL[char]
            background_row.append(cell)
            if entity is not None:
                elements.append(ForegroundElement(entity, Position(x, y)))
        background.append(background_row)

    try:
        foreground = ForegroundState.from_elements(elements)
    except ValueError as e:
        raise LevelDecodeError(str(e)) from e

    state = State(background=BackgroundGrid.from_rows(background), foreground=foreground)
    violations = find_violations(state)
    if violations:
        raise LevelDecodeError("; ".join(violations))

    logger.info(
        "Loaded %dx%d level with %d crates (%d on goal)",
        state.width,
        state.height,
        foreground.crate_count,
        foreground.count_on_goal(state.background),
    )
    return state


def encode_level(state: State) -> List[str]:
    """Write ``state`` back out as rows of cell codes."""
    chars = [
        [BACKGROUND_TO_CHAR[state.background.get(x, y)] for x in range(state.width)]
        for y in range(state.height)
    ]
    for element in state.foreground.elements:
        cell = state.background.at(element.position)
        chars[element.y][element.x] = FOREGROUND_TO_CHAR[(element.element_type, cell)]
    return ["".join(row) for row in chars]
