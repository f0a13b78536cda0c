"""Waystations Puzzle Solver.

Lays a list of words along paths through a grid of anchor letters.  Each word
starts on the anchor of its first letter, ends on the anchor of its last letter,
and moves one tile up, down, left or right per letter.  No tile may be used by
more than two words.  Words are placed shortest first, keeping every grid that
is still consistent with the words placed so far.
"""

from sys import argv, exit

from .anchors import AnchorError
from .puzzle_config import load_puzzle
from .solver import solver


def main() -> None:
    """Main entry point for the Waystations solver."""
    # Expect two arguments: the grid file and the word list file
    if len(argv) != 3:
        print("Usage: python -m waystations <grid_file> <words_file>")
        exit(1)
    puzzle = load_puzzle(argv[1], argv[2])

    try:
        result = solver.run(puzzle)
    except AnchorError as e:
        print(f"Invalid puzzle: {e}")
        exit(1)
    if not result.success:
        exit(2)
