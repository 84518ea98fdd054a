"""Shared fixtures for sudoku tests."""

import pytest


CLASSIC_PUZZLE = [
    ["5", "3", ".", ".", "7", ".", ".", ".", "."],
    ["6", ".", ".", "1", "9", "5", ".", ".", "."],
    [".", "9", "8", ".", ".", ".", ".", "6", "."],
    ["8", ".", ".", ".", "6", ".", ".", ".", "3"],
    ["4", ".", ".", "8", ".", "3", ".", ".", "1"],
    ["7", ".", ".", ".", "2", ".", ".", ".", "6"],
    [".", "6", ".", ".", ".", ".", "2", "8", "."],
    [".", ".", ".", "4", "1", "9", ".", ".", "5"],
    [".", ".", ".", ".", "8", ".", ".", "7", "9"],
]

CLASSIC_SOLUTION = [list(row) for row in (
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
)]


class SudokuTestHelpers:
    """Helper utilities for sudoku testing."""

    @staticmethod
    def units(grid):
        """All 27 rows, columns and boxes of a grid."""
        rows = [list(row) for row in grid]
        cols = [[grid[r][c] for r in range(9)] for c in range(9)]
        boxes = [
            [grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
            for br in range(0, 9, 3)
            for bc in range(0, 9, 3)
        ]
        return rows + cols + boxes

    @staticmethod
    def is_solved(grid):
        """Check every unit holds each digit exactly once."""
        return all(
            sorted(unit) == list("123456789")
            for unit in SudokuTestHelpers.units(grid)
        )


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return SudokuTestHelpers


@pytest.fixture
def classic_puzzle():
    return [list(row) for row in CLASSIC_PUZZLE]


@pytest.fixture
def classic_solution():
    return [list(row) for row in CLASSIC_SOLUTION]


@pytest.fixture
def empty_board():
    return [["."] * 9 for _ in range(9)]


@pytest.fixture
def duplicate_row_puzzle():
    """Two 5s in row 0; the only empty cell (3, 1) then has no candidate."""
    grid = [list(row) for row in CLASSIC_SOLUTION]
    grid[0][1] = "5"
    grid[3][1] = "."
    return grid


@pytest.fixture
def dead_end_puzzle():
    """Solvable-looking first cell whose placement forces a dead end at the next cell."""
    grid = [list(row) for row in CLASSIC_SOLUTION]
    grid[0][0] = "."
    grid[0][1] = "."
    grid[1][1] = "3"
    return grid


@pytest.fixture
def duplicate_row_empty_puzzle():
    """Two 5s in row 0 and every other cell empty."""
    grid = [["."] * 9 for _ in range(9)]
    grid[0][0] = "5"
    grid[0][1] = "5"
    return grid
