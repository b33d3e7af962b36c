"""
Candidate search.

Finds every letter on the board that a new perpendicular word could cross,
and how far that word could reach on each side. Growing an existing word
along its own line (CAT into CATS) is never a candidate.

Bounds follow the placement rules: the sweep stops before a forbidden cell
and before an empty cell with a letter beside it, and a bound never ends
right in front of another letter. A word covering the full bounds, with the
recorded letters at their offsets, can always be placed.
"""

from typing import List, NamedTuple, Optional

from . import letters
from .geometry import YX
from .grid import Grid
from .models import Candidate, Orientation


class ExtensionPoint(NamedTuple):
    """A letter used by exactly one entry, with the orientation of that entry."""
    yx: YX
    char: str
    orientation: Orientation


def extension_points(grid: Grid) -> List[ExtensionPoint]:
    """All letters that are not already intersections, in placement order."""
    points: List[ExtensionPoint] = []
    for entry in grid.entries():
        for yx in entry.coordinates():
            cell = grid.letter(yx)
            if letters.count(cell) > 1:
                continue
            points.append(ExtensionPoint(yx, letters.character(cell), entry.orientation))
    return points


def _is_free(grid: Grid, yx: YX, side: YX) -> bool:
    """Whether a new word could cover ``yx``."""
    if not grid.in_bounds(yx) or grid.is_blocked(yx):
        return False
    if grid.is_occupied(yx):
        return True
    return not (grid.is_occupied(yx.shift(side, -1)) or grid.is_occupied(yx.shift(side)))


def _sweep(
    grid: Grid, origin: YX, step: YX, side: YX, sign: int, max_length: int
) -> Optional[int]:
    """
    Walk away from ``origin`` and return how far a word may reach.

    None means a word through ``origin`` would run into a letter on this
    side whatever its length.
    """
    reach = max_length
    for offset in range(1, max_length + 1):
        if not _is_free(grid, origin.shift(step, sign * offset), side):
            reach = offset - 1
            break
    while grid.is_occupied(origin.shift(step, sign * (reach + 1))):
        reach -= 1
        if reach < 0:
            return None
    return reach


def _to_candidate(point: ExtensionPoint, grid: Grid, max_length: int) -> Optional[Candidate]:
    orientation = point.orientation.other
    step = orientation.step
    side = point.orientation.step
    before = _sweep(grid, point.yx, step, side, -1, max_length)
    after = _sweep(grid, point.yx, step, side, 1, max_length)
    if before is None or after is None:
        return None
    chars = tuple(
        (offset, letters.character(grid.letter(point.yx.shift(step, offset))))
        for offset in range(-before, after + 1)
        if offset == 0 or grid.is_occupied(point.yx.shift(step, offset))
    )
    return Candidate(yx=point.yx, orientation=orientation, chars=chars, bounds=(before, after))


def candidates(max_length: int, grid: Grid) -> List[Candidate]:
    """
    Return all candidate locations for adding new words to the grid.

    Args:
        max_length: Limits the sweep in each direction. Set it to the longest
            word that could be placed, plus one.
        grid: The grid to search

    Returns:
        Candidates with room for at least one more letter, in placement order
    """
    found = []
    for point in extension_points(grid):
        candidate = _to_candidate(point, grid, max_length)
        if candidate is None:
            continue
        if candidate.bounds[0] > 0 or candidate.bounds[1] > 0:
            found.append(candidate)
    return found
