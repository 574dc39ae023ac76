"""Text and image rendering of Sudoku grids."""

import cv2
import numpy as np

from .board import BOX, COLS, ROWS, Grid

GIVEN_COLOR = (255, 255, 255)
SOLVED_COLOR = (0, 200, 0)
LINE_COLOR = (180, 180, 180)
BACKGROUND = (30, 30, 30)
MIN_CELL_SIZE = 10


def format_board(grid: Grid) -> str:
    """
    Render a Grid as text, one line per row.

    Blanks show as ".", boxes are split by "|" and a dashed line after
    every third row. The locked mask is not shown.
    """
    lines = []
    for r in range(ROWS):
        boxes = []
        for c0 in range(0, COLS, BOX):
            boxes.append(" ".join(str(v) if v else "." for v in grid.values[r, c0:c0 + BOX]))
        line = " | ".join(boxes)
        if r and r % BOX == 0:
            lines.append("-" * len(line))
        lines.append(line)
    return "\n".join(lines)


def render_board_image(grid: Grid, cell_size: int = 50) -> np.ndarray:
    """
    Draw the board as a BGR image.

    Given digits are drawn in white, digits placed by the solver in green.
    Box boundaries get thicker lines than cell boundaries.
    """
    if cell_size < MIN_CELL_SIZE:
        raise ValueError(f"cell_size must be at least {MIN_CELL_SIZE} pixels, got {cell_size}")

    h = ROWS * cell_size
    w = COLS * cell_size
    canvas = np.full((h, w, 3), BACKGROUND, dtype=np.uint8)

    for i in range(ROWS + 1):
        thickness = 3 if i % BOX == 0 else 1
        y = min(i * cell_size, h - 1)
        cv2.line(canvas, (0, y), (w - 1, y), LINE_COLOR, thickness)
    for j in range(COLS + 1):
        thickness = 3 if j % BOX == 0 else 1
        x = min(j * cell_size, w - 1)
        cv2.line(canvas, (x, 0), (x, h - 1), LINE_COLOR, thickness)

    font = cv2.FONT_HERSHEY_SIMPLEX
    scale = cell_size / 55.0
    for r in range(ROWS):
        for c in range(COLS):
            val = int(grid.values[r, c])
            if val == 0:
                continue
            color = GIVEN_COLOR if grid.locked[r, c] else SOLVED_COLOR
            text = str(val)
            size, _ = cv2.getTextSize(text, font, scale, 2)
            x = c * cell_size + (cell_size - size[0]) // 2
            y = r * cell_size + (cell_size + size[1]) // 2
            cv2.putText(canvas, text, (x, y), font, scale, color, 2, cv2.LINE_AA)

    return canvas


def save_board_image(grid: Grid, path: str, cell_size: int = 50) -> None:
    image = render_board_image(grid, cell_size)
    if not cv2.imwrite(path, image):
        raise ValueError(f"Could not write image to {path}")
