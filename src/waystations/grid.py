"""Classes and functions for representing the puzzle grid."""

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
"""Offsets of the four axis-aligned neighbors of a cell."""


class OutOfBoundsError(IndexError):
    """Raised when writing to a point outside the grid."""


class Point(NamedTuple):
    """A cell coordinate: `x` is the column, `y` is the row."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        """Return the point shifted by `(dx, dy)`."""
        return Point(self.x + dx, self.y + dy)

    def dist(self, other: "Point") -> int:
        """Return the Manhattan distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)


class Grid(Generic[T]):
    """Store a 2D matrix of cells as a 1D list in row-major order.

    A grid handed to other code is treated as immutable: use `replace` to derive
    a modified copy.  `set` exists for building a grid before it is shared.
    """

    def __init__(self, tiles: Iterable[T], width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Invalid grid dimensions {width}x{height}.")
        self.tiles: list[T] = list(tiles)
        self.width = width
        self.height = height
        if len(self.tiles) != width * height:
            raise ValueError(
                f"Grid has {len(self.tiles)} tiles, expected {width * height} ({width}x{height})."
            )

    def is_valid(self, p: Point) -> bool:
        """Return whether the point lies inside the grid."""
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def _index(self, p: Point) -> int:
        return p.y * self.width + p.x

    def get(self, p: Point) -> T | None:
        """Get the cell at `p`, or None if `p` is outside the grid."""
        if not self.is_valid(p):
            return None
        return self.tiles[self._index(p)]

    def __getitem__(self, p: Point) -> T:
        """Get the cell at `p`, raising `OutOfBoundsError` for invalid points."""
        if not self.is_valid(p):
            raise OutOfBoundsError(f"Point {p} is outside the {self.width}x{self.height} grid.")
        return self.tiles[self._index(p)]

    def set(self, p: Point, value: T) -> None:
        """Overwrite the cell at `p` in place."""
        if not self.is_valid(p):
            raise OutOfBoundsError(
                f"Cannot write {value!r} to point {p} outside the {self.width}x{self.height} grid."
            )
        self.tiles[self._index(p)] = value

    def replace(self, p: Point, value: T) -> "Grid[T]":
        """Return a copy of the grid with the cell at `p` overwritten.

        The receiver is left untouched.
        """
        if not self.is_valid(p):
            raise OutOfBoundsError(
                f"Cannot write {value!r} to point {p} outside the {self.width}x{self.height} grid."
            )
        new_grid = Grid(self.tiles, self.width, self.height)
        new_grid.tiles[self._index(p)] = value
        return new_grid

    def map(self, fn: Callable[[T], U]) -> "Grid[U]":
        """Apply `fn` to every cell, returning a new grid of the same shape."""
        return Grid((fn(tile) for tile in self.tiles), self.width, self.height)

    def neighbors(self, p: Point) -> list[Point]:
        """Get the (up to four) axis-aligned neighbors of `p` that lie inside the grid."""
        return [q for q in (p.offset(dx, dy) for dx, dy in STEPS) if self.is_valid(q)]

    def points(self) -> Iterator[Point]:
        """Iterate over all points in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def rows(self) -> Iterator[list[T]]:
        """Iterate over the rows of the grid."""
        for y in range(self.height):
            yield self.tiles[y * self.width : (y + 1) * self.width]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.tiles == other.tiles
        )

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, tiles={self.tiles!r})"
