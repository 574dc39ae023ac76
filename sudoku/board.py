"""Board model and puzzle loading for the 9x9 Sudoku solver."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

ROWS = 9
COLS = 9
BOX = 3
MIN_NUM = 1
MAX_NUM = 9

DIGIT_CHARS = set('123456789')
BLANK_CHARS = {'0', '.', '_'}
IGNORED_CHARS = {'|', ' ', '\t'}
SEPARATOR_CHARS = {'-', '+', '=', '|', ' ', '\t'}


class PuzzleLoadError(Exception):
    """Base class for errors raised before a grid reaches the solver."""


class PuzzleFileError(PuzzleLoadError):
    """The puzzle file could not be read."""


class PuzzleParseError(PuzzleLoadError, ValueError):
    """The puzzle text is not a valid 9x9 board."""

    def __init__(self, message: str, line_no: Optional[int] = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


@dataclass(frozen=True)
class Cell:
    value: int
    locked: bool


class Grid:
    """
    Fixed 9x9 Sudoku grid.

    Digits live in ``values`` (0 = empty) and the givens mask in ``locked``.
    The solver writes into ``values`` in place; ``locked`` never changes
    after construction.
    """

    def __init__(self, values: np.ndarray, locked: np.ndarray):
        values = np.asarray(values, dtype=int)
        locked = np.asarray(locked, dtype=bool)
        if values.shape != (ROWS, COLS) or locked.shape != (ROWS, COLS):
            raise ValueError(f"Grid must be {ROWS}x{COLS}, got {values.shape} / {locked.shape}")
        if values.min() < 0 or values.max() > MAX_NUM:
            raise ValueError(f"Cell values must be in 0-{MAX_NUM}")
        if np.any(locked & (values == 0)):
            raise ValueError("Locked cells must hold a digit 1-9")

        self.values = values.copy()
        self.locked = locked.copy()

    @classmethod
    def empty(cls) -> "Grid":
        return cls(np.zeros((ROWS, COLS), dtype=int), np.zeros((ROWS, COLS), dtype=bool))

    @classmethod
    def from_values(cls, values) -> "Grid":
        """Build a grid where every non-zero value is a locked given."""
        values = np.asarray(values, dtype=int)
        return cls(values, values != 0)

    def cell(self, row: int, col: int) -> Cell:
        return Cell(int(self.values[row, col]), bool(self.locked[row, col]))

    def copy(self) -> "Grid":
        return Grid(self.values, self.locked)

    def is_complete(self) -> bool:
        return bool(np.all(self.values != 0))

    def locked_count(self) -> int:
        return int(np.count_nonzero(self.locked))

    def __repr__(self):
        return f"Grid(locked={self.locked_count()}, filled={int(np.count_nonzero(self.values))})"


def _is_separator_line(line: str) -> bool:
    return all(ch in SEPARATOR_CHARS for ch in line)


def _parse_row(line: str, line_no: int) -> List[int]:
    row = []
    for ch in line:
        if ch in IGNORED_CHARS:
            continue
        if ch in BLANK_CHARS:
            row.append(0)
        elif ch in DIGIT_CHARS:
            row.append(int(ch))
        else:
            raise PuzzleParseError(f"unexpected character {ch!r}", line_no)
    if len(row) != COLS:
        raise PuzzleParseError(f"expected {COLS} cells, found {len(row)}", line_no)
    return row


def parse_board(text: str) -> Grid:
    """
    Parse puzzle text into a Grid.

    Digits 1-9 become locked givens; '0', '.' and '_' are blanks. Comment
    lines ('#'), blank lines and box separator lines are skipped, as are
    '|' and whitespace inside a row.

    Raises:
        PuzzleParseError: on bad characters, a short/long row or a wrong row count
    """
    rows = []
    last_line_no = 0
    for line_no, raw in enumerate(text.splitlines(), 1):
        last_line_no = line_no
        line = raw.strip()
        if not line or line.startswith('#') or _is_separator_line(line):
            continue
        if len(rows) == ROWS:
            raise PuzzleParseError(f"more than {ROWS} board rows", line_no)
        rows.append(_parse_row(line, line_no))

    if len(rows) != ROWS:
        raise PuzzleParseError(f"expected {ROWS} board rows, found {len(rows)}", last_line_no or None)

    return Grid.from_values(np.array(rows, dtype=int))


def load_board(path) -> Grid:
    """Read and parse a puzzle file."""
    try:
        with open(path, encoding='utf-8') as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PuzzleFileError(f"Could not read puzzle from {path}: {e}") from e
    return parse_board(text)


def find_given_conflicts(grid: Grid) -> List[str]:
    """Describe duplicate locked digits in rows, columns and boxes."""
    givens = np.where(grid.locked, grid.values, 0)
    notes: List[str] = []

    def check(cells: List[Tuple[int, int]], label: str):
        seen = set()
        for r, c in cells:
            v = int(givens[r, c])
            if v == 0:
                continue
            if v in seen:
                notes.append(f"{label} has duplicate given digit {v}")
            seen.add(v)

    for r in range(ROWS):
        check([(r, c) for c in range(COLS)], f"Row {r+1}")

    for c in range(COLS):
        check([(r, c) for r in range(ROWS)], f"Column {c+1}")

    for br in range(BOX):
        for bc in range(BOX):
            cells = [(r, c)
                     for r in range(br * BOX, br * BOX + BOX)
                     for c in range(bc * BOX, bc * BOX + BOX)]
            check(cells, f"3x3 block ({br+1},{bc+1})")

    return notes
