"""Exceptions for misuse of the board engine.

Rule violations (clashing letters, blocked cells) are not exceptions: they
come back from placement as :class:`~src.board.models.Conflict` values.
"""


class BoardError(Exception):
    """Base class for programming errors when driving a grid."""


class EmptyEntryError(BoardError, ValueError):
    """Raised when an entry without any characters is placed."""


class OutOfBoundsError(BoardError, IndexError):
    """Raised when a coordinate falls outside the grid's pre-sized array."""


class CorruptGridError(BoardError, RuntimeError):
    """Raised when a write accepted during the scan is rejected on apply."""


class InvalidCharacterError(BoardError, ValueError):
    """Raised when an entry holds a character that does not fit in a cell."""
