#!/usr/bin/env python3
"""
Solve all Sudoku puzzle files in a directory and print a summary.
"""

import sys
import os
import glob

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku.board import PuzzleLoadError
from sudoku.sudoku_solver import SudokuApp


def main():
    """Solve every .txt puzzle in the given directory (default: puzzles/)."""
    puzzle_dir = sys.argv[1] if len(sys.argv) > 1 else "puzzles"
    puzzle_files = sorted(glob.glob(os.path.join(puzzle_dir, "*.txt")))

    if not puzzle_files:
        print(f"No .txt files found in {puzzle_dir}!")
        return 1

    print(f"Found {len(puzzle_files)} puzzles to solve")
    print("=" * 60)

    app = SudokuApp(verbose=False)

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Solving {puzzle_path}...")

        try:
            _, result = app.process_file(puzzle_path)
        except PuzzleLoadError as e:
            print(f"Error loading {puzzle_path}: {e}")
            results['error'].append(puzzle_path)
            continue

        if result.solved:
            results['solved'].append(puzzle_path)
        else:
            results['unsolved'].append(puzzle_path)

    # Print summary
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['unsolved']:
        print(f"\nUnsolved puzzles: {', '.join(results['unsolved'])}")

    return 0 if not results['unsolved'] and not results['error'] else 1


if __name__ == '__main__':
    sys.exit(main())
