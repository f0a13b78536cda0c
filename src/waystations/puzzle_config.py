"""Loader for puzzle grid and word list files."""

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from waystations.grid import Grid
from waystations.tiles import NO_WORDS, CrosswordGrid, Fixed, TileData

EMPTY = "."
"""Board string character for an empty tile."""


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    name: str
    """A name for the puzzle, used to label logs."""

    dims: tuple[int, int]
    """The height and width of the puzzle grid."""

    board_str: str
    """The initial state of the grid, in row-major order.

    Anchor tiles are represented by uppercase letters.  Empty tiles are
    represented by dots ('.').
    """

    words: list[str]
    """The words to place, uppercase, in the order they were given."""

    def __post_init__(self) -> None:
        """Validate the grid and the word list."""
        height, width = self.dims
        if height <= 0 or width <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.dims}.")
        if len(self.board_str) != height * width:
            raise ValueError(f"Board string length does not match dimensions {self.dims}.")

        bad_chars = {ch for ch in self.board_str if ch != EMPTY and not ch.isalpha()}
        if bad_chars:
            raise ValueError(f"Board contains invalid characters: {sorted(bad_chars)}")

        if not self.words:
            raise ValueError("The word list is empty.")
        bad_words = [w for w in self.words if not w.isalpha()]
        if bad_words:
            raise ValueError(f"Words must contain only letters: {bad_words}")

    def __str__(self) -> str:
        """Return a string representation of the puzzle."""
        width = self.dims[1]
        rows = [self.board_str[i : i + width] for i in range(0, len(self.board_str), width)]
        return (
            f"{self.name} ({self.dims[0]}x{self.dims[1]}): {len(self.words)} words\n"
            + "\n".join(rows)
        )

    def to_grid(self) -> CrosswordGrid:
        """Build the initial crossword grid: anchors and empty tiles only."""
        return to_crossword_grid(self.board_str, *self.dims)


def to_crossword_grid(board_str: str, height: int, width: int) -> CrosswordGrid:
    """Convert a row-major board string to a grid of tiles."""

    def to_tile(ch: str) -> TileData:
        return NO_WORDS if ch == EMPTY else Fixed(ch.upper())

    return Grid((to_tile(ch) for ch in board_str), width, height)


def parse_grid_lines(lines: Iterable[str]) -> tuple[str, tuple[int, int]]:
    """Parse the lines of a grid file into a board string and `(height, width)`.

    A space or '.' is an empty tile; any other character is an anchor letter.
    Short lines are padded with empty tiles to the width of the longest line,
    and trailing blank lines are ignored.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise ValueError("The grid is empty.")

    width = max(len(row) for row in rows)
    board_str = "".join(row.ljust(width).replace(" ", EMPTY) for row in rows).upper()
    return board_str, (len(rows), width)


def parse_words(lines: Iterable[str]) -> list[str]:
    """Parse word list lines: one word per line, blank lines and # comments skipped."""
    words: list[str] = []
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        words.append(word.upper())
    return words


def load_puzzle(grid_path: PathLike | str, words_path: PathLike | str) -> PuzzleConfig:
    """Load a puzzle from a grid file and a word list file.

    Args:
        grid_path (PathLike | str): Path to the grid file.
        words_path (PathLike | str): Path to the word list file.
    """
    grid_file = Path(grid_path)
    words_file = Path(words_path)
    for path in (grid_file, words_file):
        if not path.is_file():
            raise FileNotFoundError(f"Puzzle file not found: {path}")

    with grid_file.open("r", encoding="utf-8") as f:
        board_str, dims = parse_grid_lines(f)
    with words_file.open("r", encoding="utf-8") as f:
        words = parse_words(f)

    return PuzzleConfig(name=grid_file.stem, dims=dims, board_str=board_str, words=words)
