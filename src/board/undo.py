"""Undo engine: reverts the most recent placement."""

from collections import Counter

from . import letters
from .grid import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def undo_last(grid: Grid) -> Counter:
    """
    Remove the last added entry from the grid.

    Only the most recent change can be undone, which keeps the forbidden
    zone a plain counted set.

    Returns:
        The characters the placement had consumed, so they can go back on
        a rack. Empty if the grid holds no entries.
    """
    change = grid.pop_change()
    if change is None:
        return Counter()

    for yx, _ in change.entry.positions():
        grid.set_letter(yx, letters.erase(grid.letter(yx)))
    grid.remove_blocks(change.blocks)

    LOGGER.debug("Undid %s at %s", change.entry.text, tuple(change.entry.start))
    return Counter(change.chars)
