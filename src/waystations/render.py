"""Collapse candidate grids into a single grid of display characters."""

from collections.abc import Sequence

import numpy as np

from waystations.grid import Grid
from waystations.tiles import NO_WORDS, CrosswordGrid, Fixed, TileData, default_char, words_on

StringGrid = Grid[str]


def word_view(grid: CrosswordGrid, word: str) -> CrosswordGrid:
    """Keep only the anchors and the tiles claimed by `word`; blank everything else."""

    def keep(tile: TileData) -> TileData:
        if isinstance(tile, Fixed) or word in words_on(tile):
            return tile
        return NO_WORDS

    return grid.map(keep)


def filter_word(grids: Sequence[CrosswordGrid], word: str) -> list[CrosswordGrid]:
    """Apply `word_view` to every grid of a candidate set."""
    return [word_view(grid, word) for grid in grids]


def flatten_as_crossword(grids: Sequence[CrosswordGrid]) -> StringGrid:
    """Reduce a candidate set to one grid of characters.

    Each cell shows its display character if all candidates agree on it, and a
    space otherwise.

    Raises:
        ValueError: If `grids` is empty.
    """
    if not grids:
        raise ValueError("Cannot flatten an empty set of grids.")
    width, height = grids[0].width, grids[0].height
    if any(g.width != width or g.height != height for g in grids):
        raise ValueError("Cannot flatten grids of different shapes.")

    # One row per candidate, one column per tile
    chars = np.array([[default_char(tile) for tile in g.tiles] for g in grids], dtype="<U1")
    agree = (chars == chars[0]).all(axis=0)
    folded = np.where(agree, chars[0], " ")
    return Grid(folded.tolist(), width, height)


def flatten_word(grids: Sequence[CrosswordGrid], word: str) -> StringGrid:
    """Flatten the candidate set, showing only the tiles of a single word."""
    return flatten_as_crossword(filter_word(grids, word))


def format_grid(grid: StringGrid) -> str:
    """Render a character grid as lines of text."""
    return "\n".join("".join(row) for row in grid.rows())
