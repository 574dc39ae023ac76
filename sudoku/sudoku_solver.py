"""
Sudoku Solver - Main Application Module
"""

import argparse
import os
import sys

from .board import PuzzleLoadError, find_given_conflicts, load_board
from .render import MIN_CELL_SIZE, format_board, save_board_image
from .solver import SolveOutcome, SolveResult, is_grid_valid, solve


class SudokuApp:
    """
    Command-line application around the backtracking solver.

    Loads a puzzle file, shows the starting board, solves it and reports
    the outcome. Optionally writes the resulting board as an image.
    """

    def __init__(self, verbose=True, cell_size=50):
        """
        Initialize the application.

        Args:
            verbose (bool): Print step banners while processing
            cell_size (int): Cell size in pixels for image output
        """
        self.verbose = verbose
        self.cell_size = cell_size

    def _log(self, message):
        if self.verbose:
            print(message)

    def process_file(self, puzzle_path, image_path=None):
        """
        Load, solve and report a single puzzle.

        Args:
            puzzle_path (str): Path to the puzzle text file
            image_path (str): Optional path for a rendered image of the result

        Returns:
            tuple: (grid, SolveResult)

        Raises:
            PuzzleLoadError: if the file cannot be read or parsed
        """
        self._log(f"\n[1/3] Loading puzzle: {os.path.basename(puzzle_path)}")
        grid = load_board(puzzle_path)
        self._log(f"      Givens: {grid.locked_count()}")

        print("\nInitial board:")
        print(format_board(grid))

        conflicts = find_given_conflicts(grid)
        if conflicts:
            # Locked cells are never revisited, so a clash among givens is final.
            self._log("\n[2/3] Givens clash, skipping search")
            result = SolveResult(SolveOutcome.EXHAUSTED)
        else:
            self._log("\n[2/3] Solving...")
            result = solve(grid)
            if result.solved and not is_grid_valid(grid):
                result = SolveResult(SolveOutcome.EXHAUSTED, result.placements, result.backtracks)

        self._log("\n[3/3] Reporting...")
        if result.solved:
            print(f"\n✓ {result.message}:")
            print(format_board(grid))
        else:
            print(f"\n✗ {result.message}")
            for note in conflicts:
                print(f"  - {note}")

        if image_path:
            save_board_image(grid, image_path, self.cell_size)
            self._log(f"      Board image saved to: {image_path}")

        return grid, result


def cell_size_arg(value):
    size = int(value)
    if size < MIN_CELL_SIZE:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_CELL_SIZE} pixels, got {size}")
    return size


def build_parser():
    parser = argparse.ArgumentParser(
        prog='sudoku',
        description='sudoku - A program that solves 9x9 sudoku puzzles.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Puzzle file format:
  Nine rows of nine cells. Digits 1-9 are givens; 0, . or _ are blanks.
  '|' and spaces inside a row, separator lines and '#' comments are ignored.

Examples:
  python -m sudoku puzzle.txt
  python -m sudoku puzzle.txt --image solved.png
        """
    )

    parser.add_argument('file',
                        help='Path to the puzzle text file')
    parser.add_argument('--image', '-i', default=None,
                        help='Write the resulting board as an image (e.g. solved.png)')
    parser.add_argument('--cell-size', '-s', type=cell_size_arg, default=50,
                        help='Cell size in pixels for --image (default: 50)')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only print boards and the result')
    return parser


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Returns the process exit status: 0 when solved, 1 on load errors or
    when the puzzle has no solution.
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)

    app = SudokuApp(verbose=not args.quiet, cell_size=args.cell_size)

    try:
        _, result = app.process_file(args.file, args.image)
    except (PuzzleLoadError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0 if result.solved else 1


if __name__ == '__main__':
    sys.exit(main())
