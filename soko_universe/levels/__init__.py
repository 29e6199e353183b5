"""Level encoding and compiled-in levels.

Levels are rectangular grids of single-character cell codes, see
:mod:`soko_universe.levels.codec`. :mod:`soko_universe.levels.builtin` holds
the named levels shipped with the package.
"""

from .builtin import DEFAULT_LEVEL_NAME, LEVEL_REGISTRY, get_level
from .codec import decode_level, encode_level

__all__ = [
    "DEFAULT_LEVEL_NAME",
    "LEVEL_REGISTRY",
    "decode_level",
    "encode_level",
    "get_level",
]
