"""Integer coordinate helpers for the board."""

from typing import Iterable, NamedTuple, Optional


class YX(NamedTuple):
    """A board coordinate. ``y`` grows downward, ``x`` grows to the right."""
    y: int
    x: int

    def shift(self, step: "YX", times: int = 1) -> "YX":
        """Return the coordinate ``times`` steps away along ``step``."""
        return YX(self.y + times * step[0], self.x + times * step[1])


DOWN = YX(1, 0)
RIGHT = YX(0, 1)


class Box(NamedTuple):
    """An inclusive rectangle between two corners."""
    top_left: YX
    bottom_right: YX


def bounding_box(corners: Iterable[YX]) -> Optional[Box]:
    """Smallest box containing every corner, or None when there are none."""
    corners = list(corners)
    if not corners:
        return None

    top_left = YX(min(c[0] for c in corners), min(c[1] for c in corners))
    bottom_right = YX(max(c[0] for c in corners), max(c[1] for c in corners))
    return Box(top_left, bottom_right)
