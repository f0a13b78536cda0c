"""Tests for flattening candidate sets into display grids."""

import pytest

from waystations.grid import Point
from waystations.puzzle_config import to_crossword_grid
from waystations.render import (
    filter_word,
    flatten_as_crossword,
    flatten_word,
    format_grid,
    word_view,
)
from waystations.tiles import NO_WORDS, Fixed, OneWord, TwoWords


def two_candidates():
    # "ABC" from (0,0) to (1,1), turning at (1,0) or (0,1)
    grid = to_crossword_grid("A...C....", 3, 3)
    first = grid.replace(Point(1, 0), OneWord("B", "ABC"))
    second = grid.replace(Point(0, 1), OneWord("B", "ABC"))
    return [first, second]


def test_single_grid_flattens_to_its_characters():
    grid = to_crossword_grid("A.C", 1, 3).replace(Point(1, 0), TwoWords("B", "ABC", "CBA"))
    assert format_grid(flatten_as_crossword([grid])) == "AbC"


def test_disagreeing_cells_are_blank():
    flat = flatten_as_crossword(two_candidates())
    assert format_grid(flat) == "A  \n C \n   "


def test_agreeing_cells_are_kept():
    grid = to_crossword_grid("A.C", 1, 3).replace(Point(1, 0), OneWord("B", "ABC"))
    assert format_grid(flatten_as_crossword([grid, grid])) == "AbC"


def test_empty_set_rejected():
    with pytest.raises(ValueError):
        flatten_as_crossword([])


def test_word_view_keeps_anchors_and_own_tiles():
    grid = to_crossword_grid("A..D", 1, 4)
    grid = grid.replace(Point(1, 0), OneWord("X", "AXD"))
    grid = grid.replace(Point(2, 0), TwoWords("Y", "AXD", "DYA"))

    assert word_view(grid, "AXD").tiles == grid.tiles
    assert word_view(grid, "DYA").tiles == [
        Fixed("A"),
        NO_WORDS,
        TwoWords("Y", "AXD", "DYA"),
        Fixed("D"),
    ]
    assert word_view(grid, "OTHER").tiles == [Fixed("A"), NO_WORDS, NO_WORDS, Fixed("D")]


def test_filter_and_flatten_word():
    grid = to_crossword_grid("A.C", 1, 3)
    crossed = grid.replace(Point(1, 0), OneWord("B", "ABC"))
    assert len(filter_word([grid, crossed], "ABC")) == 2
    assert format_grid(flatten_word([crossed], "ABC")) == "AbC"
    assert format_grid(flatten_word([crossed], "CBA")) == "A C"
