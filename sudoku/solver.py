"""
Backtracking Sudoku solver with a row-major scan over unlocked cells.
"""

from dataclasses import dataclass
from enum import Enum

from .board import BOX, COLS, MAX_NUM, MIN_NUM, ROWS, Grid


class SolveOutcome(Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SolveResult:
    outcome: SolveOutcome
    placements: int = 0
    backtracks: int = 0

    @property
    def solved(self) -> bool:
        return self.outcome is SolveOutcome.SOLVED

    @property
    def message(self) -> str:
        if self.solved:
            return f"Solved in {self.placements} placements ({self.backtracks} backtracks)"
        return "No solution found"


def is_placement_valid(grid: Grid, candidate: int, row: int, col: int) -> bool:
    """
    True if ``candidate`` can sit at (row, col) without repeating a digit.

    The target cell's own value is ignored. ``candidate`` must be 1-9 and
    row/col 0-8; neither is checked here.
    """
    values = grid.values

    r0 = (row // BOX) * BOX
    c0 = (col // BOX) * BOX
    for r in range(r0, r0 + BOX):
        for c in range(c0, c0 + BOX):
            if (r, c) != (row, col) and values[r, c] == candidate:
                return False

    for c in range(COLS):
        if c != col and values[row, c] == candidate:
            return False

    for r in range(ROWS):
        if r != row and values[r, col] == candidate:
            return False

    return True


def is_grid_valid(grid: Grid) -> bool:
    """Check that no placed digit clashes with another in its row, column or box."""
    for r in range(ROWS):
        for c in range(COLS):
            v = int(grid.values[r, c])
            if v != 0 and not is_placement_valid(grid, v, r, c):
                return False
    return True


def _next(row: int, col: int):
    if col + 1 < COLS:
        return row, col + 1
    return row + 1, 0


def _prev(row: int, col: int):
    if col > 0:
        return row, col - 1
    return row - 1, COLS - 1


def solve(grid: Grid) -> SolveResult:
    """
    Fill every unlocked cell of ``grid`` in place.

    Cells are visited in row-major order and given the smallest digit that
    fits. On a dead end the cursor retreats to the previous unlocked cell and
    bumps its digit. Locked cells are never written.

    Returns a SolveResult; EXHAUSTED means the givens admit no solution and
    the grid is left partially filled.
    """
    values = grid.values
    locked = grid.locked
    placements = 0
    backtracks = 0

    row, col, min_candidate = 0, 0, MIN_NUM
    while row < ROWS:
        if locked[row, col]:
            row, col = _next(row, col)
            min_candidate = MIN_NUM
            continue

        placed = False
        for candidate in range(min_candidate, MAX_NUM + 1):
            if is_placement_valid(grid, candidate, row, col):
                values[row, col] = candidate
                placements += 1
                placed = True
                break

        if placed:
            row, col = _next(row, col)
            min_candidate = MIN_NUM
            continue

        # Dead end: clear and retreat to the previous unlocked cell.
        values[row, col] = 0
        row, col = _prev(row, col)
        while row >= 0 and locked[row, col]:
            row, col = _prev(row, col)
        if row < 0:
            return SolveResult(SolveOutcome.EXHAUSTED, placements, backtracks)

        backtracks += 1
        min_candidate = int(values[row, col]) + 1

    return SolveResult(SolveOutcome.SOLVED, placements, backtracks)
