"""Tests for candidate search."""

import pytest

from src.board import (
    Candidate,
    Conflict,
    Entry,
    Orientation,
    candidates,
    extension_points,
    new_grid,
    place,
    undo_last,
)
from src.board import letters


H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


@pytest.fixture
def crossed():
    """CAT across with AT hanging down from its A."""
    grid = new_grid(10)
    place(Entry("CAT", H, (0, 0)), grid)
    place(Entry("AT", V, (0, 1)), grid)
    return grid


class TestExtensionPoints:
    """Letters that can host a crossing word."""

    def test_empty_grid(self):
        """No entries, no points."""
        assert extension_points(new_grid(3)) == []

    def test_every_letter_of_a_single_word(self):
        """Each letter of a lone word is a point in that word's orientation."""
        grid = new_grid(5)
        place(Entry("CAT", H, (0, 0)), grid)
        points = extension_points(grid)
        assert [(p.yx, p.char, p.orientation) for p in points] == [
            ((0, 0), "C", H),
            ((0, 1), "A", H),
            ((0, 2), "T", H),
        ]

    def test_intersections_are_excluded(self, crossed):
        """A letter shared by two entries cannot be crossed again."""
        yxs = [p.yx for p in extension_points(crossed)]
        assert (0, 1) not in yxs
        assert yxs == [(0, 0), (0, 2), (1, 1)]


class TestCandidates:
    """Bounded sweeps from extension points."""

    def test_empty_grid(self):
        """An empty grid has no candidates."""
        assert candidates(5, new_grid(5)) == []

    def test_lone_word(self):
        """A lone word can be crossed anywhere, up to the sweep limit."""
        grid = new_grid(10)
        place(Entry("CAT", H, (0, 0)), grid)
        found = candidates(4, grid)
        assert found == [
            Candidate(yx=(0, 0), orientation=V, chars=((0, "C"),), bounds=(4, 4)),
            Candidate(yx=(0, 1), orientation=V, chars=((0, "A"),), bounds=(4, 4)),
            Candidate(yx=(0, 2), orientation=V, chars=((0, "T"),), bounds=(4, 4)),
        ]

    def test_blocks_stop_the_sweep(self, crossed):
        """Forbidden cells cut the bounds short."""
        found = {c.yx: c for c in candidates(4, crossed)}
        assert found[(0, 0)].bounds == (4, 0)
        assert found[(0, 2)].bounds == (4, 0)

    def test_boxed_in_point_is_filtered(self, crossed):
        """A point blocked on both sides offers no placement and is dropped."""
        found = candidates(1, crossed)
        assert (1, 1) not in [c.yx for c in found]
        assert all(c.bounds[0] > 0 or c.bounds[1] > 0 for c in found)

    def test_grid_edge_stops_the_sweep(self):
        """The sweep never leaves the array."""
        grid = new_grid(0)
        place(Entry("A", H, (0, 0)), grid)
        assert candidates(5, grid) == [
            Candidate(yx=(0, 0), orientation=V, chars=((0, "A"),), bounds=(2, 2)),
        ]

    def test_letters_on_the_line_are_recorded(self):
        """Letters met during the sweep are mapped by signed offset."""
        grid = new_grid(10)
        place(Entry("CAT", H, (0, 0)), grid)
        place(Entry("DOG", H, (3, 0)), grid)
        found = {c.yx: c for c in candidates(4, grid)}
        assert found[(0, 0)].chars == ((0, "C"), (3, "D"))
        assert found[(3, 0)].chars == ((-3, "C"), (0, "D"))
        assert found[(0, 2)].chars == ((0, "T"), (3, "G"))
        assert found[(0, 2)].letter_at(3) == "G"
        assert found[(0, 2)].letter_at(1) is None

    def test_sweep_limit_zero(self):
        """A zero sweep leaves no room anywhere."""
        grid = new_grid(3)
        place(Entry("CAT", H, (0, 0)), grid)
        assert candidates(0, grid) == []

    def test_candidates_are_perpendicular(self, crossed):
        """Candidates never extend a word along its own line."""
        entries = {(yx, entry.orientation) for entry in [Entry("CAT", H, (0, 0))] for yx in entry.coordinates()}
        for candidate in candidates(6, crossed):
            assert (candidate.yx, candidate.orientation) not in entries

    def test_soundness(self, crossed):
        """Offset 0 always holds the letter actually on the board."""
        for candidate in candidates(6, crossed):
            assert candidate.letter_at(0) == letters.character(crossed.letter(candidate.yx))
            assert candidate.bounds[0] > 0 or candidate.bounds[1] > 0

    def test_candidate_fits_a_word(self):
        """A word laid through a candidate within its bounds is accepted."""
        grid = new_grid(10)
        place(Entry("CAT", H, (0, 0)), grid)
        candidate = next(c for c in candidates(4, grid) if c.yx == (0, 2))
        start = candidate.yx.shift(candidate.orientation.step, -1)
        result = place(Entry("STY", candidate.orientation, start), grid)
        assert sorted(result.elements()) == ["S", "Y"]

    def test_max_length(self):
        """Candidates report the longest word they can host."""
        candidate = Candidate(yx=(0, 0), orientation=V, chars=((0, "C"),), bounds=(2, 3))
        assert candidate.max_length == 6

    def test_candidates_are_hashable(self, crossed):
        """Candidates can be collected in sets and used as keys."""
        found = candidates(4, crossed)
        assert len(set(found)) == len(found)
        assert set(candidates(4, crossed)) == set(found)

    def test_letter_beside_the_line_stops_the_sweep(self):
        """An empty cell next to a letter cannot take a new letter, so the sweep stops there."""
        grid = new_grid(10)
        place(Entry("CAT", H, (0, 0)), grid)
        place(Entry("XY", V, (1, 3)), grid)
        found = {c.yx: c for c in candidates(4, grid)}
        assert found[(0, 2)].bounds == (4, 0)
        assert found[(0, 1)].bounds == (4, 4)

    def test_bound_never_ends_before_a_letter(self):
        """A bound is cut short when the next cell along the line holds a letter."""
        grid = new_grid(10)
        place(Entry("CAT", H, (0, 0)), grid)
        place(Entry("DOG", H, (4, 0)), grid)
        found = {c.yx: c for c in candidates(3, grid)}
        assert found[(0, 0)].bounds == (3, 2)
        assert found[(0, 0)].chars == ((0, "C"),)


def fill(candidate):
    """A word spanning the full bounds, reusing the letters already on its line."""
    before, after = candidate.bounds
    text = "".join(
        candidate.letter_at(offset) or "Z" for offset in range(-before, after + 1)
    )
    start = candidate.yx.shift(candidate.orientation.step, -before)
    return Entry(text, candidate.orientation, start)


BOARDS = [
    [Entry("CAT", H, (0, 0))],
    [Entry("CAT", H, (0, 0)), Entry("AT", V, (0, 1))],
    [Entry("CAT", H, (0, 0)), Entry("XY", V, (1, 3))],
    [Entry("CAT", H, (0, 0)), Entry("DOG", H, (3, 0))],
    [Entry("CAT", H, (0, 0)), Entry("DOG", H, (4, 0))],
    [
        Entry("CAT", H, (0, 0)),
        Entry("TAR", V, (0, 2)),
        Entry("RUG", H, (2, 2)),
        Entry("ICE", V, (-1, 0)),
    ],
]


@pytest.mark.parametrize("size", [1, 6])
@pytest.mark.parametrize("board", BOARDS)
def test_full_bounds_can_be_placed(board, size):
    """Every candidate hosts a word covering its whole reported reach."""
    grid = new_grid(size)
    for entry in board:
        if not all(grid.in_bounds(yx) for yx in (entry.start, entry.end)):
            pytest.skip("board does not fit")
        assert not isinstance(place(entry, grid), Conflict)

    for candidate in candidates(5, grid):
        entry = fill(candidate)
        result = place(entry, grid)
        assert not isinstance(result, Conflict), (candidate, result)
        undo_last(grid)
