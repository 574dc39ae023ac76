"""
Entry point for running the sudoku module as a package.

Usage:
    python -m sudoku path/to/puzzle.txt
"""

import sys

from .sudoku_solver import main

if __name__ == '__main__':
    sys.exit(main())
