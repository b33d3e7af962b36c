"""Board engine for Bananagrams-style grids."""

from .models import Orientation, Entry, Change, Conflict, Candidate, NotationError
from .geometry import YX, Box
from .errors import (
    BoardError,
    EmptyEntryError,
    OutOfBoundsError,
    InvalidCharacterError,
    CorruptGridError,
)
from .grid import Grid, new_grid, current_entries
from .placement import place
from .undo import undo_last
from .candidates import candidates, extension_points, ExtensionPoint
from .render import render_grid, render_entries
from .notation import parse_board, extract_board_content, board_extent

__all__ = [
    # Models
    "Orientation",
    "Entry",
    "Change",
    "Conflict",
    "Candidate",
    "NotationError",
    "YX",
    "Box",
    # Errors
    "BoardError",
    "EmptyEntryError",
    "OutOfBoundsError",
    "InvalidCharacterError",
    "CorruptGridError",
    # Grid operations
    "Grid",
    "new_grid",
    "current_entries",
    "place",
    "undo_last",
    "candidates",
    "extension_points",
    "ExtensionPoint",
    # Debugging
    "render_grid",
    "render_entries",
    # Notation
    "parse_board",
    "extract_board_content",
    "board_extent",
]
