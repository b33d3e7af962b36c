"""
Grid store: the mutable state behind a board.

The grid owns three things:

- a fixed-size array of packed letters covering ``[-(size+2), size+2]`` on
  both axes (the padding lets neighbour lookups skip edge special cases)
- the forbidden multiset of coordinates that must stay blank
- the stack of applied changes, oldest first

It enforces no game rules. Only the placement and undo engines mutate it.
"""

from array import array
from collections import Counter
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from . import letters
from .errors import OutOfBoundsError
from .geometry import YX, Box
from .models import Change, Entry


PADDING = 2


class Grid(BaseModel):
    """
    A Bananagrams grid centred on the origin.

    Attributes:
        size: Largest absolute coordinate the caller intends to use
        changes: Applied changes, oldest first
        blocks: Forbidden coordinates, counted once per contributing change
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    size: int = Field(..., ge=0)
    changes: List[Change] = Field(default_factory=list)
    blocks: Counter = Field(default_factory=Counter)
    _letters: array = PrivateAttr()
    _extent: int = PrivateAttr()
    _width: int = PrivateAttr()

    def model_post_init(self, __context) -> None:
        """Allocate the letter array, every cell empty."""
        self._extent = self.size + PADDING
        self._width = 2 * self._extent + 1
        self._letters = array("H", [letters.EMPTY]) * (self._width * self._width)

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------
    @property
    def box(self) -> Box:
        """Every coordinate backed by the array."""
        return Box(YX(-self._extent, -self._extent), YX(self._extent, self._extent))

    def in_bounds(self, yx: YX) -> bool:
        return -self._extent <= yx[0] <= self._extent and -self._extent <= yx[1] <= self._extent

    def _index(self, yx: YX) -> int:
        if not self.in_bounds(yx):
            raise OutOfBoundsError(f"{tuple(yx)} is outside a grid of size {self.size}")
        return (yx[0] + self._extent) * self._width + (yx[1] + self._extent)

    def letter(self, yx: YX) -> int:
        """Packed letter stored at ``yx``."""
        return self._letters[self._index(yx)]

    def set_letter(self, yx: YX, cell: int) -> None:
        self._letters[self._index(yx)] = cell

    def is_occupied(self, yx: YX) -> bool:
        """Whether ``yx`` holds a letter. Coordinates off the array are empty."""
        return self.in_bounds(yx) and letters.count(self.letter(yx)) > 0

    # ------------------------------------------------------------------
    # Forbidden zone
    # ------------------------------------------------------------------
    def is_blocked(self, yx: YX) -> bool:
        return self.blocks[yx] > 0

    def add_blocks(self, blocks: Counter) -> None:
        self.blocks += blocks

    def remove_blocks(self, blocks: Counter) -> None:
        """Counted difference: a coordinate stays blocked while others still list it."""
        self.blocks -= blocks

    # ------------------------------------------------------------------
    # Change stack
    # ------------------------------------------------------------------
    def push_change(self, change: Change) -> None:
        self.changes.append(change)

    def pop_change(self) -> Optional[Change]:
        if not self.changes:
            return None
        return self.changes.pop()

    def last_change(self) -> Optional[Change]:
        return self.changes[-1] if self.changes else None

    def entries(self) -> List[Entry]:
        """Entries currently on the grid, in placement order."""
        return [change.entry for change in self.changes]


def new_grid(size: int) -> Grid:
    """Create an empty grid able to hold coordinates up to ``size`` from the origin."""
    return Grid(size=size)


def current_entries(grid: Grid) -> List[Entry]:
    """All entries set in the grid."""
    return grid.entries()
