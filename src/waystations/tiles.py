"""Tile states and the rules for claiming a tile with a word."""

from dataclasses import dataclass
from typing import TypeAlias

from waystations.grid import Grid


@dataclass(frozen=True, slots=True)
class Fixed:
    """A pre-filled anchor letter.  Never changes, never used as an interior path step."""

    letter: str


@dataclass(frozen=True, slots=True)
class NoWords:
    """An empty tile not yet used by any word."""


@dataclass(frozen=True, slots=True)
class OneWord:
    """A tile used by exactly one word."""

    letter: str
    """The letter shown on the tile."""

    word: str
    """The word that claimed the tile."""


@dataclass(frozen=True, slots=True)
class TwoWords:
    """A tile used by two distinct words.  No further words may claim it."""

    letter: str
    first_word: str
    second_word: str


NO_WORDS = NoWords()
"""Shared instance for empty tiles."""

TileData: TypeAlias = Fixed | NoWords | OneWord | TwoWords

CrosswordGrid: TypeAlias = Grid[TileData]


def try_claim(tile: TileData, word: str, letter: str) -> TileData | None:
    """Attempt to claim a tile as an interior step of `word`, showing `letter`.

    Occupancy only moves forward (`NoWords` -> `OneWord` -> `TwoWords`).

    Args:
        tile: The current state of the tile.
        word: The word being laid along a path.
        letter: The letter of `word` that lands on this tile.

    Returns:
        The new tile state, or None if the claim is rejected: the tile is full,
        shows a different letter, was already claimed by `word`, or is an anchor.
    """
    if isinstance(tile, NoWords):
        return OneWord(letter, word)
    if isinstance(tile, OneWord):
        if tile.letter == letter and tile.word != word:
            return TwoWords(tile.letter, tile.word, word)
        return None
    # TwoWords is full; Fixed tiles are path endpoints only
    return None


def default_char(tile: TileData) -> str:
    """Get the display character for a tile.

    Anchors are upper case, letters placed by words are lower case, and empty
    tiles are a space.
    """
    if isinstance(tile, Fixed):
        return tile.letter.upper()
    if isinstance(tile, (OneWord, TwoWords)):
        return tile.letter.lower()
    return " "


def is_covered(tile: TileData) -> bool:
    """Return whether a tile is finished: an anchor, or used by two words."""
    return isinstance(tile, (Fixed, TwoWords))


def is_solved(grid: CrosswordGrid) -> bool:
    """Return whether every tile of the grid is covered."""
    return all(is_covered(tile) for tile in grid.tiles)


def words_on(tile: TileData) -> tuple[str, ...]:
    """Get the words that have claimed a tile."""
    if isinstance(tile, OneWord):
        return (tile.word,)
    if isinstance(tile, TwoWords):
        return (tile.first_word, tile.second_word)
    return ()
