"""Tests for placing a whole word list."""

from waystations.anchors import WordPlacement, build_anchor_index, plan_words
from waystations.grid import Point
from waystations.puzzle_config import to_crossword_grid
from waystations.solver.config import SolverConfig
from waystations.solver.placement import deduplicate, place_all
from waystations.tiles import OneWord, TwoWords, is_solved


def quiet_settings(**kwargs) -> SolverConfig:
    return SolverConfig(report_interval=0, **kwargs)


def plan(board_str: str, height: int, width: int, words: list[str]):
    grid = to_crossword_grid(board_str, height, width)
    return grid, plan_words(build_anchor_index(grid), words)


def test_two_words_share_a_tile():
    grid, placements = plan("A.C", 1, 3, ["ABC", "CBA"])
    result = place_all(grid, placements, settings=quiet_settings())

    assert result.success
    assert result.failed_word is None
    assert len(result.candidates) == 1
    assert result.candidates[0][Point(1, 0)] == TwoWords("B", "ABC", "CBA")
    assert is_solved(result.candidates[0])
    assert [o.status for o in result.outcomes] == ["placed", "placed"]
    assert [o.n_candidates for o in result.outcomes] == [1, 1]


def test_failure_returns_last_non_empty_candidates():
    grid, placements = plan("A.C", 1, 3, ["ABC", "AXC", "CBA"])
    result = place_all(grid, placements, settings=quiet_settings())

    assert not result.success
    assert result.failed_word == "AXC"
    assert result.placed("ABC")
    assert not result.placed("AXC")
    assert [o.status for o in result.outcomes] == ["placed", "failed", "skipped"]
    # Candidates from after "ABC" are kept
    assert len(result.candidates) == 1
    assert result.candidates[0][Point(1, 0)] == OneWord("B", "ABC")


def test_third_word_cannot_use_a_full_tile():
    grid, placements = plan("A.C", 1, 3, ["ABC", "CBA", "ABC"])
    result = place_all(grid, placements, settings=quiet_settings())
    assert result.failed_word == "ABC"
    assert [o.status for o in result.outcomes] == ["placed", "placed", "failed"]


def test_word_order_changes_which_word_fails():
    grid, forward = plan("A.C", 1, 3, ["AXC", "AYC"])
    _, backward = plan("A.C", 1, 3, ["AYC", "AXC"])

    assert place_all(grid, forward, settings=quiet_settings()).failed_word == "AYC"
    assert place_all(grid, backward, settings=quiet_settings()).failed_word == "AXC"


def test_candidates_multiply_across_words():
    #   A . .
    #   . B .
    #   . . C
    # "AXB" can turn at (1,0) or (0,1); "BYC" at (2,1) or (1,2)
    grid, placements = plan("A...B...C", 3, 3, ["AXB", "BYC"])
    result = place_all(grid, placements, settings=quiet_settings())
    assert result.success
    assert [o.n_candidates for o in result.outcomes] == [2, 4]


def test_failure_is_reported(capsys):
    grid, placements = plan("A.C", 1, 3, ["AXC", "AYC"])
    place_all(grid, placements, settings=quiet_settings())
    out = capsys.readouterr().out
    assert 'searching "AXC" on 1 grids' in out
    assert 'could not produce any paths to fit "AYC"!' in out


def test_empty_word_list_keeps_initial_grid():
    grid = to_crossword_grid("A.C", 1, 3)
    result = place_all(grid, [], settings=quiet_settings())
    assert result.success
    assert result.candidates == [grid]


def test_duplicates_kept_unless_enabled():
    # Looping around the 2x2 block clockwise or anticlockwise gives the same grid
    grid = to_crossword_grid("A...", 2, 2)
    placements = [WordPlacement("ABBBA", Point(0, 0), Point(0, 0))]

    result = place_all(grid, placements, settings=quiet_settings())
    assert len(result.candidates) == 2
    assert result.candidates[0] == result.candidates[1]

    deduped = place_all(grid, placements, settings=quiet_settings(deduplicate_candidates=True))
    assert len(deduped.candidates) == 1
    assert deduplicate(result.candidates) == deduped.candidates
