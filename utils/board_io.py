import json
import sys

from models.sudoku_solver import EMPTY, GRID_SIZE, validate_board

EMPTY_CELL = EMPTY

FORMAT_ERROR_MESSAGE = "Invalid Sudoku board format. Please check your input."

EXAMPLE_PUZZLE_TEXT = """[
  ["5","3",".",".","7",".",".",".","."],
  ["6",".",".","1","9","5",".",".","."],
  [".","9","8",".",".",".",".","6","."],
  ["8",".",".",".","6",".",".",".","3"],
  ["4",".",".","8",".","3",".",".","1"],
  ["7",".",".",".","2",".",".",".","6"],
  [".","6",".",".",".",".","2","8","."],
  [".",".",".","4","1","9",".",".","5"],
  [".",".",".",".","8",".",".","7","9"]
]"""


class BoardFormatError(ValueError):
    """Raised when puzzle text is not a 9x9 grid of "." and "1"-"9" strings"""

    def __init__(self, message=FORMAT_ERROR_MESSAGE):
        super().__init__(message)


def parse_board(text):
    """Parse puzzle text in the JSON wire format into a list-of-lists grid"""
    try:
        candidate = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise BoardFormatError() from e

    if not validate_board(candidate):
        raise BoardFormatError()

    return [list(row) for row in candidate]


def read_board_text(path):
    """Read puzzle text from a file, "-" reads from stdin"""
    try:
        if path == "-":
            return sys.stdin.read()

        with open(path, encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise BoardFormatError() from e


def load_board(path):
    return parse_board(read_board_text(path))


def create_empty_board():
    return [[EMPTY_CELL] * GRID_SIZE for _ in range(GRID_SIZE)]


def format_board(grid, title=None):
    """Format grid as text with box separators"""
    lines = []
    if title:
        lines.append(title)

    for i, row in enumerate(grid):
        if i % 3 == 0 and i != 0:
            lines.append("------+-------+------")

        row_str = ""
        for j, cell in enumerate(row):
            if j % 3 == 0 and j != 0:
                row_str += "| "
            row_str += cell + " "

        lines.append(row_str.rstrip())

    return "\n".join(lines)


def board_to_json(grid):
    return json.dumps([list(row) for row in grid], separators=(",", ":"))
