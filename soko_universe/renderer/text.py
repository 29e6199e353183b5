"""Plain-text renderer.

Draws the current frame in the level encoding (``#``, ``.``, ``G``, ``P``,
``C``, ``B``), which makes it handy for logs, doctests and terminal play.
"""

from typing import List

from soko_universe.levels.codec import BACKGROUND_TO_CHAR, FOREGROUND_TO_CHAR
from soko_universe.universe import Universe


def render_rows(universe: Universe) -> List[str]:
    width, height = universe.width(), universe.height()
    chars = [
        [BACKGROUND_TO_CHAR[universe.get_background(x, y)] for x in range(width)]
        for y in range(height)
    ]
    for i in range(universe.foreground_size()):
        element = universe.get_foreground_element(i)
        cell = universe.get_background(element.x, element.y)
        chars[element.y][element.x] = FOREGROUND_TO_CHAR[(element.element_type, cell)]
    return ["".join(row) for row in chars]


def render_text(universe: Universe, status: bool = False) -> str:
    """Render the frame as newline-separated rows.

    Args:
        universe: Puzzle to draw.
        status: If True append a ``crates on goal / total`` line.
    """
    rows = render_rows(universe)
    if status:
        rows.append(f"{universe.count_crates_on_goal()}/{universe.crate_count()}")
    return "\n".join(rows)
