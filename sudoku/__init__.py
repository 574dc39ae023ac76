"""
Sudoku Solver - 9x9 backtracking solver

This package contains modules for:
- Loading puzzles from text files
- Checking digit placements and solving by backtracking
- Rendering boards as text or images
"""

from .board import Cell, Grid, PuzzleFileError, PuzzleLoadError, PuzzleParseError, load_board, parse_board
from .solver import SolveOutcome, SolveResult, is_placement_valid, solve

__version__ = "1.0.0"
