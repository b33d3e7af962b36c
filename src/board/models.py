"""Data models for the board engine."""

from collections import Counter
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .geometry import YX, DOWN, RIGHT


class Orientation(str, Enum):
    """Direction a word is read in."""
    HORIZONTAL = "H"
    VERTICAL = "V"

    @property
    def step(self) -> YX:
        """Unit vector from one letter of an entry to the next."""
        return RIGHT if self is Orientation.HORIZONTAL else DOWN

    @property
    def other(self) -> "Orientation":
        """The perpendicular orientation."""
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Entry(BaseModel):
    """
    A word placed (or proposed) on the board.

    Entries are immutable. Emptiness and bounds are checked on placement,
    not here.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    orientation: Orientation
    start: YX

    def __init__(self, text: str, orientation: Orientation, start: YX, **data: Any) -> None:
        super().__init__(text=text, orientation=orientation, start=start, **data)

    @property
    def end(self) -> YX:
        """Coordinate of the last letter."""
        return self.start.shift(self.orientation.step, len(self.text) - 1)

    def positions(self) -> List[Tuple[YX, str]]:
        """Coordinate and character of every letter, in reading order."""
        step = self.orientation.step
        return [(self.start.shift(step, i), char) for i, char in enumerate(self.text)]

    def coordinates(self) -> List[YX]:
        return [yx for yx, _ in self.positions()]


class Change(BaseModel):
    """The effect of one successful placement, kept so it can be undone."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    entry: Entry
    blocks: Counter = Field(default_factory=Counter)  # Coordinates that must stay blank
    chars: Counter = Field(default_factory=Counter)  # Characters taken from the rack


class Conflict(BaseModel):
    """Why a proposed entry cannot be placed."""
    model_config = ConfigDict(frozen=True)

    yx: YX
    new_char: str
    old_char: Optional[str] = None  # None if the position must stay blank

    def describe(self) -> str:
        if self.old_char is None:
            return f"'{self.new_char}' at {tuple(self.yx)} would touch a cell that must stay blank"
        return f"'{self.new_char}' at {tuple(self.yx)} clashes with existing '{self.old_char}'"


class Candidate(BaseModel):
    """A letter on the board from which a new perpendicular word could grow."""
    model_config = ConfigDict(frozen=True)

    yx: YX
    orientation: Orientation  # Orientation of the new word
    chars: Tuple[Tuple[int, str], ...]  # (signed offset from yx, letter) already on the line
    bounds: Tuple[int, int]  # Free steps before and after yx

    def letter_at(self, offset: int) -> Optional[str]:
        """Letter already on the board at ``offset``, or None if the cell is free."""
        for at, char in self.chars:
            if at == offset:
                return char
        return None

    @property
    def max_length(self) -> int:
        """Longest word that fits through this candidate."""
        return self.bounds[0] + self.bounds[1] + 1


class NotationError(BaseModel):
    """A problem found while reading a board written in notation."""
    code: str
    message: str
    word: Optional[str] = None
    line: Optional[int] = None
