"""Deterministic crate-pushing puzzle engine.

Build a :class:`Universe` from level data and drive it with
``move_player(dx, dy)``; see :mod:`soko_universe.universe`.
"""

from .exceptions import InvalidMoveError, LevelDecodeError, OutOfBoundsError
from .types import BackgroundElementType, ForegroundElementType
from .universe import Universe

__all__ = [
    "BackgroundElementType",
    "ForegroundElementType",
    "InvalidMoveError",
    "LevelDecodeError",
    "OutOfBoundsError",
    "Universe",
]
