"""
Letter cell codec.

A cell is a small integer packing two fields:

- bits 0-7: the character code
- bits 8-15: the usage counter (how many placed entries go through the cell)

A counter of 0 means the cell is empty, whatever the character bits say.
All knowledge of the bit layout lives in this module.
"""

from typing import Optional


EMPTY = 0

_CHAR_BITS = 8
_CHAR_MASK = (1 << _CHAR_BITS) - 1
_COUNT_UNIT = 1 << _CHAR_BITS
MAX_COUNT = 255


def count(cell: int) -> int:
    """Number of entries currently using the cell."""
    return (cell >> _CHAR_BITS) & MAX_COUNT


def character(cell: int) -> str:
    """The stored character, or a space if the cell is empty."""
    if count(cell) == 0:
        return " "
    return chr(cell & _CHAR_MASK)


def write(cell: int, char: str) -> Optional[int]:
    """
    Return the cell updated to hold one more use of ``char``.

    Returns None when the cell already holds a different character, or when
    its counter cannot go any higher.
    """
    used = count(cell)
    if used and chr(cell & _CHAR_MASK) != char:
        return None
    if used == MAX_COUNT:
        return None
    return ((used + 1) << _CHAR_BITS) | ord(char)


def erase(cell: int) -> int:
    """Return the cell with one use removed. Character bits are left as-is."""
    return cell - _COUNT_UNIT


def is_encodable(char: str) -> bool:
    """Whether ``char`` fits in the character field."""
    return len(char) == 1 and ord(char) <= _CHAR_MASK
