import cv2
import numpy as np

from models.sudoku_solver import EMPTY, GRID_SIZE

CELL_SIZE = 50
GUTTER = 20

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GIVEN_COLOR = (255, 0, 0)  # Blue (BGR)
SOLVED_COLOR = (0, 150, 0)  # Green


def render_board(grid, original=None, cell_size=CELL_SIZE, is_original=False):
    """Draw a grid as a BGR image.

    Digits that are givens in `original` are drawn blue, filled-in digits
    green. With no `original`, every digit is blue when `is_original` is set.
    """
    size = GRID_SIZE * cell_size
    image = np.full((size, size, 3), WHITE, dtype=np.uint8)

    # Draw grid lines
    for i in range(GRID_SIZE + 1):
        thickness = 3 if i % 3 == 0 else 1
        offset = min(i * cell_size, size - 1)
        cv2.line(image, (offset, 0), (offset, size), BLACK, thickness)
        cv2.line(image, (0, offset), (size, offset), BLACK, thickness)

    scale = cell_size / 62.5
    thickness = max(1, cell_size // 25)

    # Draw numbers
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            digit = grid[i][j]
            if digit == EMPTY:
                continue

            if original is not None:
                given = original[i][j] != EMPTY
            else:
                given = is_original
            color = GIVEN_COLOR if given else SOLVED_COLOR

            (text_w, text_h), _ = cv2.getTextSize(digit, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
            x = j * cell_size + (cell_size - text_w) // 2
            y = i * cell_size + (cell_size + text_h) // 2

            cv2.putText(image, digit, (x, y), cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness)

    return image


def render_comparison(original, solved, cell_size=CELL_SIZE):
    """Original puzzle and its solution side by side"""
    left = render_board(original, cell_size=cell_size, is_original=True)
    if solved is None:
        return left

    right = render_board(solved, original=original, cell_size=cell_size)
    gutter = np.full((left.shape[0], GUTTER, 3), WHITE, dtype=np.uint8)

    return np.hstack([left, gutter, right])


def save_board_image(path, image):
    try:
        written = cv2.imwrite(path, image)
    except cv2.error as e:
        raise IOError(f"Could not write image to {path}") from e

    if not written:
        raise IOError(f"Could not write image to {path}")
