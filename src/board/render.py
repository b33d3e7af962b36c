"""Debug rendering of grids and entry lists."""

from typing import List, Optional, Union

from . import letters
from .geometry import Box, bounding_box
from .grid import Grid, new_grid
from .models import Conflict, Entry
from .placement import place


def entries_box(entries: List[Entry]) -> Optional[Box]:
    """Smallest box containing every entry, or None if there are none."""
    corners = []
    for entry in entries:
        corners.extend([entry.start, entry.end])
    return bounding_box(corners)


def render_grid(grid: Grid) -> str:
    """Render the part of the grid covered by its entries. Empty cells are spaces."""
    box = entries_box(grid.entries())
    if box is None:
        return ""

    lines = [
        ''.join(
            letters.character(grid.letter((y, x)))
            for x in range(box.top_left.x, box.bottom_right.x + 1)
        )
        for y in range(box.top_left.y, box.bottom_right.y + 1)
    ]

    return '\n'.join(lines)


def render_entries(entries: List[Entry]) -> Union[Conflict, str]:
    """
    Render a standalone list of entries on a throwaway grid.

    Every entry is replayed in order; the first conflict encountered is
    returned instead of the rendering.
    """
    corners = [yx for entry in entries for yx in (entry.start, entry.end)]
    if not corners:
        return ""

    grid = new_grid(max(max(abs(y), abs(x)) for y, x in corners))
    conflicts = []
    for entry in entries:
        result = place(entry, grid)
        if isinstance(result, Conflict):
            conflicts.append(result)

    if conflicts:
        return conflicts[0]
    return render_grid(grid)
