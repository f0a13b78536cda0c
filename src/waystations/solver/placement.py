"""Place words one at a time, carrying every grid still consistent with all words so far."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, TextIO

from waystations.anchors import WordPlacement
from waystations.solver.config import SolverConfig
from waystations.solver.config import config as solver_config
from waystations.solver.search import SearchStats, all_paths
from waystations.solver.utils import int_comma
from waystations.tiles import CrosswordGrid, TileData

WordStatus = Literal["placed", "failed", "skipped"]


@dataclass
class WordOutcome:
    """What happened to one word during placement."""

    word: str
    status: WordStatus
    """Whether the word fits in at least one candidate ("placed") or in none ("failed").

    Words after a failed word are never attempted and are marked "skipped".
    """

    n_candidates: int = 0
    """Size of the candidate set after placing this word (0 unless placed)."""


@dataclass
class PlacementResult:
    """Final candidate set plus the outcome of every word."""

    candidates: list[CrosswordGrid]
    """The last non-empty candidate set."""

    outcomes: list[WordOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether every word was placed."""
        return all(outcome.status == "placed" for outcome in self.outcomes)

    @property
    def failed_word(self) -> str | None:
        """The word that could not be placed, if any."""
        for outcome in self.outcomes:
            if outcome.status == "failed":
                return outcome.word
        return None

    def placed(self, word: str) -> bool:
        """Whether `word` was placed in the surviving candidates."""
        return any(o.word == word and o.status == "placed" for o in self.outcomes)


def deduplicate(grids: Sequence[CrosswordGrid]) -> list[CrosswordGrid]:
    """Drop exact duplicate grids, keeping the first occurrence of each."""
    seen: set[tuple[TileData, ...]] = set()
    unique: list[CrosswordGrid] = []
    for grid in grids:
        key = tuple(grid.tiles)
        if key in seen:
            continue
        seen.add(key)
        unique.append(grid)
    return unique


def place_all(
    initial_grid: CrosswordGrid,
    placements: Sequence[WordPlacement],
    *,
    settings: SolverConfig | None = None,
    stats: SearchStats | None = None,
    out: TextIO | None = None,
) -> PlacementResult:
    """Lay each word, in the given order, on every grid that survived the previous words.

    There is no backtracking across words: if a word fits on none of the current
    candidates, it is reported as failed, the remaining words are skipped, and the
    candidates gathered so far are returned.

    Args:
        initial_grid (CrosswordGrid): The puzzle before any word is placed.
        placements (Sequence[WordPlacement]): Words with their anchors, in placement order.
        settings (SolverConfig | None): Solver settings.  Defaults to the global config.
        stats (SearchStats | None): Shared search counters.  Created if not given.
        out: Stream for progress messages (None means stdout).

    Returns:
        A PlacementResult with the final candidate set and per-word outcomes.
    """
    settings = settings or solver_config
    if stats is None:
        stats = SearchStats(report_interval=settings.report_interval, out=out)

    candidates: list[CrosswordGrid] = [initial_grid]
    outcomes: list[WordOutcome] = []

    for idx, (word, start, end) in enumerate(placements):
        print(
            f'searching "{word}" on {int_comma(len(candidates))} grids',
            file=out,
            flush=True,
        )
        next_candidates: list[CrosswordGrid] = []
        for grid in candidates:
            next_candidates.extend(all_paths(grid, word, start, end, stats=stats))

        if not next_candidates:
            print(f'could not produce any paths to fit "{word}"!', file=out, flush=True)
            outcomes.append(WordOutcome(word, "failed"))
            outcomes.extend(WordOutcome(p.word, "skipped") for p in placements[idx + 1 :])
            break

        if settings.deduplicate_candidates:
            n_before = len(next_candidates)
            next_candidates = deduplicate(next_candidates)
            if len(next_candidates) < n_before:
                print(
                    f"  dropped {int_comma(n_before - len(next_candidates))} duplicate grids",
                    file=out,
                    flush=True,
                )
        if len(next_candidates) > settings.candidate_warning_threshold:
            print(
                f"  candidate set has grown to {int_comma(len(next_candidates))} grids "
                f'after "{word}"',
                file=out,
                flush=True,
            )

        candidates = next_candidates
        outcomes.append(WordOutcome(word, "placed", len(candidates)))

    return PlacementResult(candidates, outcomes)
