"""Path search: enumerate every way of laying one word between two anchors."""

from dataclasses import dataclass, field
from time import time
from typing import TextIO

from waystations.grid import Point
from waystations.solver.config import config as solver_config
from waystations.solver.utils import int_comma, time_str
from waystations.tiles import CrosswordGrid, try_claim


@dataclass(kw_only=True)
class SearchStats:
    """Counters shared by all path searches of a solver run."""

    report_interval: int = field(default_factory=lambda: solver_config.report_interval)
    """Report progress every time this many grid states have been examined."""

    out: TextIO | None = None
    """Stream for progress reports (None means stdout)."""

    start_time: float = field(default_factory=time)
    """Timestamp when the run started, in seconds since the epoch."""

    n_states_examined: int = 0
    """Number of (grid, point) states visited by the search."""

    n_paths_found: int = 0
    """Number of completed word placements found."""

    def examine(self) -> None:
        """Count one examined state, reporting progress at each interval."""
        self.n_states_examined += 1
        if self.report_interval > 0 and self.n_states_examined % self.report_interval == 0:
            print(
                f"  ... examined {int_comma(self.n_states_examined)} states, "
                f"found {int_comma(self.n_paths_found)} paths "
                f"({time_str(time() - self.start_time)})",
                file=self.out,
                flush=True,
            )


def all_paths(
    grid: CrosswordGrid,
    word: str,
    start: Point,
    dest: Point,
    *,
    stats: SearchStats | None = None,
) -> list[CrosswordGrid]:
    """Find every grid that results from laying `word` along a path from `start` to `dest`.

    The path moves one tile up, down, left or right per letter.  Both ends are the
    anchor tiles of the word's first and last letters and are left as they are;
    every tile in between is claimed with `try_claim`.  The search is exhaustive
    and does not merge identical grids reached along different paths.

    Args:
        grid (CrosswordGrid): The grid to lay the word on.  Not modified.
        word (str): The word to place.
        start (Point): Anchor of the first letter.
        dest (Point): Anchor of the last letter.
        stats (SearchStats | None): Counters for progress reporting.

    Returns:
        A list of new grids, one per admissible path (possibly empty).
    """
    if stats is None:
        stats = SearchStats()
    results: list[CrosswordGrid] = []
    if start.dist(dest) > len(word) - 1:
        return results  # Too far apart for a word this short
    _extend(grid, word, start, dest, word, results, stats)
    return results


def _extend(
    grid: CrosswordGrid,
    word: str,
    point: Point,
    dest: Point,
    remaining: str,
    results: list[CrosswordGrid],
    stats: SearchStats,
) -> None:
    """Step from `point` (already holding `remaining[0]`) into each neighbor."""
    suffix = remaining[1:]
    for neighbor in grid.neighbors(point):
        _visit(grid, word, neighbor, dest, suffix, results, stats)


def _visit(
    grid: CrosswordGrid,
    word: str,
    point: Point,
    dest: Point,
    remaining: str,
    results: list[CrosswordGrid],
    stats: SearchStats,
) -> None:
    """Try to put `remaining[0]` on `point` and continue the path from there."""
    stats.examine()
    steps_left = len(remaining) - 1
    if point == dest and steps_left == 0:
        stats.n_paths_found += 1
        results.append(grid)
        return
    # Each step covers at most one unit of Manhattan distance
    if point.dist(dest) > steps_left:
        return

    new_tile = try_claim(grid[point], word, remaining[0])
    if new_tile is None:
        return
    _extend(grid.replace(point, new_tile), word, point, dest, remaining, results, stats)
