"""Errors raised by the engine.

All of them signal caller bugs or malformed input. A move blocked by a wall or
crate is *not* an error and never raises.
"""


class OutOfBoundsError(IndexError):
    """A cell coordinate or foreground index outside the valid range."""


class InvalidMoveError(ValueError):
    """A direction that is not one of the four orthogonal unit vectors."""


class LevelDecodeError(ValueError):
    """Level data that does not follow the fixed character encoding."""
