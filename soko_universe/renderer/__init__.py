"""Renderers reading a :class:`soko_universe.universe.Universe` frame by frame.

Both renderers use only the facade's read queries.
"""

from .text import render_text
from .texture import DEFAULT_RESOLUTION, TextureRenderer, render

__all__ = [
    "DEFAULT_RESOLUTION",
    "TextureRenderer",
    "render",
    "render_text",
]
