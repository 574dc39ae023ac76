#!/usr/bin/env python3
"""
Convenience script to solve a Sudoku puzzle file.

Usage:
    python solve_puzzle.py puzzles/easy.txt
    python solve_puzzle.py puzzles/easy.txt --image solved.png
"""

import sys
import os

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku.sudoku_solver import main

if __name__ == '__main__':
    sys.exit(main())
