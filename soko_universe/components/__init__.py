"""Component dataclasses.

Re-exports the immutable value types the rest of the engine is built from:
:class:`Position` and :class:`ForegroundElement`.
"""

from .element import ForegroundElement
from .position import Position

__all__ = [
    "ForegroundElement",
    "Position",
]
