"""Anchor lookup: map each pre-filled letter to its grid position."""

from collections.abc import Iterable
from typing import NamedTuple

from waystations.grid import Point
from waystations.tiles import CrosswordGrid, Fixed

AnchorIndex = dict[str, Point]
"""Mapping from an (upper case) anchor letter to its unique grid position."""


class AnchorError(ValueError):
    """Base class for puzzle configuration errors involving anchors."""


class DuplicateAnchorError(AnchorError):
    """Raised when the same letter appears on more than one anchor tile."""

    def __init__(self, letter: str, first: Point, second: Point) -> None:
        super().__init__(f"Already have letter: {letter} at point {first} (again at {second})")
        self.letter = letter
        self.first = first
        self.second = second


class MissingAnchorError(AnchorError):
    """Raised when a word's first or last letter has no anchor on the grid."""

    def __init__(self, word: str, letter: str) -> None:
        super().__init__(f'No anchor for letter "{letter}" needed by word "{word}"')
        self.word = word
        self.letter = letter


class WordPlacement(NamedTuple):
    """A word together with the anchors its path must start and end on."""

    word: str
    start: Point
    end: Point


def build_anchor_index(grid: CrosswordGrid) -> AnchorIndex:
    """Build the letter -> point lookup for all anchor tiles of a grid.

    Raises:
        DuplicateAnchorError: If a letter is used by more than one anchor.
    """
    anchors: AnchorIndex = {}
    for p in grid.points():
        tile = grid[p]
        if not isinstance(tile, Fixed):
            continue
        letter = tile.letter.upper()
        if letter in anchors:
            raise DuplicateAnchorError(letter, anchors[letter], p)
        anchors[letter] = p
    return anchors


def word_endpoints(anchors: AnchorIndex, word: str) -> tuple[Point, Point]:
    """Look up the start and end anchors for a word (case-insensitive).

    Raises:
        ValueError: If the word is empty.
        MissingAnchorError: If the first or last letter has no anchor.
    """
    if not word:
        raise ValueError("Cannot place an empty word.")
    upper = word.upper()
    endpoints = []
    for letter in (upper[0], upper[-1]):
        if letter not in anchors:
            raise MissingAnchorError(word, letter)
        endpoints.append(anchors[letter])
    start, end = endpoints
    return start, end


def order_words(words: Iterable[str]) -> list[str]:
    """Sort words shortest first.  Words of equal length keep their input order."""
    return sorted(words, key=len)


def plan_words(anchors: AnchorIndex, words: Iterable[str]) -> list[WordPlacement]:
    """Resolve the endpoints of every word, in the given order.

    All words are checked before any search starts, so a configuration error
    is reported up front.
    """
    return [WordPlacement(word, *word_endpoints(anchors, word)) for word in words]
