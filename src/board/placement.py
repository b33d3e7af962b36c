"""
Placement engine.

Placing an entry is two-phase: a read-only scan walks the entry and either
stops at the first conflict or builds the full :class:`Change` as a local
draft; only then is the draft applied to the grid. A conflict therefore never
leaves partial state behind.

Besides blocked cells and clashing letters, a newly written letter may not
sit right beside an existing one across the entry's line, and an entry may
not run into a letter just past either of its ends.

Forbidden coordinates contributed by a placement:

- the padding cell right before the start and right after the end
- around every intersection, the four diagonal cells (the letters there
  would touch both crossing words), except the two before the first letter
  and the two after the last one
"""

from collections import Counter
from typing import List, Union

from . import letters
from .errors import CorruptGridError, EmptyEntryError, InvalidCharacterError, OutOfBoundsError
from .geometry import YX
from .grid import Grid
from .models import Change, Conflict, Entry, Orientation
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def _diagonals(yx: YX, orientation: Orientation) -> List[List[YX]]:
    """Diagonal neighbours of ``yx``: the pair before it, then the pair after it."""
    step = orientation.step
    side = orientation.other.step
    before = yx.shift(step, -1)
    after = yx.shift(step)
    return [
        [before.shift(side, -1), before.shift(side)],
        [after.shift(side, -1), after.shift(side)],
    ]


def _touches_side(yx: YX, orientation: Orientation, grid: Grid) -> bool:
    """Whether a letter sits right beside ``yx``, across the entry's line."""
    side = orientation.other.step
    return grid.is_occupied(yx.shift(side, -1)) or grid.is_occupied(yx.shift(side))


def _check_preconditions(entry: Entry, grid: Grid) -> None:
    if not entry.text:
        raise EmptyEntryError("Cannot place an empty entry")
    for yx in (entry.start, entry.end):
        if not grid.in_bounds(yx):
            raise OutOfBoundsError(
                f"Entry '{entry.text}' reaches {tuple(yx)}, outside a grid of size {grid.size}"
            )
    for char in entry.text:
        if not letters.is_encodable(char):
            raise InvalidCharacterError(
                f"Character {char!r} of '{entry.text}' cannot be stored in a cell"
            )


def scan(entry: Entry, grid: Grid) -> Union[Conflict, Change]:
    """
    Check ``entry`` against the grid without touching it.

    Returns the first conflict in reading order, or the change that placing
    the entry would make.
    """
    _check_preconditions(entry, grid)

    orientation = entry.orientation
    step = orientation.step
    last = len(entry.text) - 1
    blocks = Counter([entry.start.shift(step, -1), entry.end.shift(step)])
    chars: Counter = Counter()

    for i, (yx, char) in enumerate(entry.positions()):
        if grid.is_blocked(yx):
            return Conflict(yx=yx, new_char=char, old_char=None)

        cell = grid.letter(yx)
        if letters.write(cell, char) is None:
            return Conflict(yx=yx, new_char=char, old_char=letters.character(cell))

        if (i == 0 and grid.is_occupied(yx.shift(step, -1))) or (
            i == last and grid.is_occupied(yx.shift(step))
        ):
            # The entry would run straight into a letter past its own end.
            return Conflict(yx=yx, new_char=char, old_char=None)

        if letters.count(cell) == 0:
            if _touches_side(yx, orientation, grid):
                return Conflict(yx=yx, new_char=char, old_char=None)
            chars[char] += 1
        else:
            before, after = _diagonals(yx, orientation)
            if i > 0:
                blocks.update(before)
            if i < last:
                blocks.update(after)

    # Every field was built here from checked values.
    return Change.model_construct(entry=entry, blocks=blocks, chars=chars)


def _apply(change: Change, grid: Grid) -> None:
    for yx, char in change.entry.positions():
        cell = letters.write(grid.letter(yx), char)
        if cell is None:
            raise CorruptGridError(f"Cell {tuple(yx)} rejected '{char}' after a clean scan")
        grid.set_letter(yx, cell)
    grid.push_change(change)
    grid.add_blocks(change.blocks)


def place(entry: Entry, grid: Grid) -> Union[Conflict, Counter]:
    """
    Attempt to add ``entry`` to the grid. Word validity is not checked.

    Returns the conflict that prevented the placement, or the multiset of
    characters the placement consumed (letters reused from the board are
    not included).

    Raises:
        EmptyEntryError: If the entry has no characters
        OutOfBoundsError: If the entry does not fit in the grid
        InvalidCharacterError: If a character does not fit in a cell
    """
    result = scan(entry, grid)
    if isinstance(result, Conflict):
        LOGGER.debug("Rejected %s %s at %s: %s", entry.text, entry.orientation.value,
                     tuple(entry.start), result)
        return result

    _apply(result, grid)
    LOGGER.debug("Placed %s %s at %s using %s", entry.text, entry.orientation.value,
                 tuple(entry.start), dict(result.chars))
    return Counter(result.chars)
