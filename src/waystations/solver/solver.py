"""Main solver module for Waystations puzzles."""

import sys
from datetime import datetime
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from waystations.anchors import build_anchor_index, order_words, plan_words
from waystations.puzzle_config import PuzzleConfig
from waystations.render import flatten_as_crossword, flatten_word, format_grid
from waystations.solver.config import SolverConfig
from waystations.solver.config import config as solver_config
from waystations.solver.placement import PlacementResult, place_all
from waystations.solver.search import SearchStats
from waystations.solver.utils import TIMESTAMP_FMT, int_comma, time_str
from waystations.tiles import is_solved


def run(config: PuzzleConfig, *, settings: SolverConfig | None = None) -> PlacementResult:
    """Run the solver on the given puzzle, logging to a per-puzzle log file.

    Args:
        config (PuzzleConfig): The puzzle to solve.
        settings (SolverConfig | None): Solver settings.  Defaults to the global config.
    """
    settings = settings or solver_config
    print(f"puzzle: {config}")

    logfile = Path(settings.log_dir) / f"{config.name}-{config.dims[0]}x{config.dims[1]}.log"
    print(f"Log file: {logfile}")
    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            result = solve_one(config, logf=logf, settings=settings)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    if result.success:
        n_grids = int_comma(len(result.candidates))
        print(f"All {len(result.outcomes)} words placed on {n_grids} grids.")
    else:
        print(f'Could not place "{result.failed_word}".')
    print(format_grid(flatten_as_crossword(result.candidates)))
    print()
    return result


def solve_one(
    puzzle_config: PuzzleConfig,
    *,
    logf: TextIO,
    settings: SolverConfig | None = None,
) -> PlacementResult:
    """Attempt to solve a Waystations puzzle.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        logf: File object to log the solving process.
        settings (SolverConfig | None): Solver settings.  Defaults to the global config.

    Raises:
        AnchorError: If the grid repeats an anchor letter or a word has no anchor
            for its first or last letter.  Raised before any search is done.
    """
    settings = settings or solver_config

    print(f"Selected puzzle: {puzzle_config.name}", file=logf, flush=True)
    print(f"Dimensions: {puzzle_config.dims}", file=logf, flush=True)
    print("Initial grid:", file=logf, flush=True)
    print("", file=logf, flush=True)
    width = puzzle_config.dims[1]
    for row_start in range(0, len(puzzle_config.board_str), width):
        print(puzzle_config.board_str[row_start : row_start + width], file=logf, flush=True)
    print("", file=logf, flush=True)

    grid = puzzle_config.to_grid()
    anchors = build_anchor_index(grid)
    words = puzzle_config.words
    if settings.sort_words_by_length:
        words = order_words(words)
    placements = plan_words(anchors, words)
    print(f"loaded {len(words)} words!", file=logf, flush=True)

    print("Solver config:", file=logf, flush=True)
    pprint(settings.model_dump(), stream=logf, width=120)

    stats = SearchStats(report_interval=settings.report_interval, out=logf)
    start_time_str = datetime.fromtimestamp(stats.start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print("", file=logf, flush=True)

    result = place_all(grid, placements, settings=settings, stats=stats, out=logf)

    print("", file=logf, flush=True)
    print(
        f"Examined {int_comma(stats.n_states_examined)} states in "
        f"{time_str(time() - stats.start_time)}.",
        file=logf,
        flush=True,
    )
    report_result(result, logf=logf, settings=settings)
    return result


def report_result(
    result: PlacementResult,
    *,
    logf: TextIO | None = None,
    settings: SolverConfig | None = None,
) -> None:
    """Print the flattened candidate set, per-word outcomes and per-word views."""
    settings = settings or solver_config

    if result.success:
        print("Solution found!", file=logf, flush=True)
    else:
        print(f'No solution found: could not place "{result.failed_word}".', file=logf, flush=True)

    n_solved = sum(1 for grid in result.candidates if is_solved(grid))
    print(
        f"{int_comma(len(result.candidates))} candidate grids, "
        f"{int_comma(n_solved)} fully covered.",
        file=logf,
        flush=True,
    )
    print(format_grid(flatten_as_crossword(result.candidates)), file=logf, flush=True)
    print("", file=logf, flush=True)

    for outcome in result.outcomes:
        print(f"  {outcome.word}: {outcome.status}", file=logf, flush=True)

    if not settings.show_word_views:
        return
    for outcome in result.outcomes:
        if outcome.status != "placed":
            continue
        print("", file=logf, flush=True)
        print(f'Showing only "{outcome.word}":', file=logf, flush=True)
        print(format_grid(flatten_word(result.candidates, outcome.word)), file=logf, flush=True)
