EMPTY = "."
DIGITS = tuple(str(num) for num in range(1, 10))
GRID_SIZE = 9
BOX_SIZE = 3


class SudokuSolver:
    def __init__(self):
        self.validations = 0

    def reset_stats(self):
        self.validations = 0

    def is_valid(self, grid, row, col, digit):
        """Check if placing digit at (row, col) is valid.

        Leaves the grid untouched; only the validations counter is bumped.
        """
        self.validations += 1

        # Check row
        for j in range(GRID_SIZE):
            if grid[row][j] == digit:
                return False

        # Check column
        for i in range(GRID_SIZE):
            if grid[i][col] == digit:
                return False

        # Check 3x3 box
        start_row = (row // BOX_SIZE) * BOX_SIZE
        start_col = (col // BOX_SIZE) * BOX_SIZE

        for i in range(start_row, start_row + BOX_SIZE):
            for j in range(start_col, start_col + BOX_SIZE):
                if grid[i][j] == digit:
                    return False

        return True

    def find_empty_cell(self, grid):
        """Return (row, col) of the first empty cell in row-major order, or None"""
        for i in range(GRID_SIZE):
            for j in range(GRID_SIZE):
                if grid[i][j] == EMPTY:
                    return (i, j)
        return None

    def solve(self, grid):
        """Solve the grid in place using backtracking.

        Returns True once every cell is filled. On False every speculative
        placement has been undone, so the grid is back in its original state.
        """
        empty = self.find_empty_cell(grid)

        if empty is None:
            return True
        row, col = empty

        for digit in DIGITS:
            if self.is_valid(grid, row, col, digit):
                grid[row][col] = digit

                if self.solve(grid):
                    return True

                grid[row][col] = EMPTY  # Backtrack

        return False

    def validate_board(self, candidate):
        """Check shape and symbols only; conflicting givens are accepted"""
        if not _is_sequence(candidate) or len(candidate) != GRID_SIZE:
            return False

        for row in candidate:
            if not _is_sequence(row) or len(row) != GRID_SIZE:
                return False

            for cell in row:
                if not _is_cell(cell):
                    return False

        return True

    def deep_copy_board(self, grid):
        return [list(row) for row in grid]

    def is_consistent(self, grid):
        """Check that no given digit repeats within a row, column or box.

        Read-only diagnostic, used to explain why a puzzle has no solution.
        """
        for i in range(GRID_SIZE):
            for j in range(GRID_SIZE):
                digit = grid[i][j]
                if digit == EMPTY:
                    continue

                for k in range(GRID_SIZE):
                    if k != j and grid[i][k] == digit:
                        return False
                    if k != i and grid[k][j] == digit:
                        return False

                start_row = (i // BOX_SIZE) * BOX_SIZE
                start_col = (j // BOX_SIZE) * BOX_SIZE
                for r in range(start_row, start_row + BOX_SIZE):
                    for c in range(start_col, start_col + BOX_SIZE):
                        if (r, c) != (i, j) and grid[r][c] == digit:
                            return False
        return True


def _is_sequence(value):
    return isinstance(value, (list, tuple))


def _is_cell(value):
    if not isinstance(value, str):
        return False
    return value == EMPTY or (len(value) == 1 and "1" <= value <= "9")


def validate_board(candidate):
    return SudokuSolver().validate_board(candidate)


def solve_sudoku(grid):
    return SudokuSolver().solve(grid)


def deep_copy_board(grid):
    return SudokuSolver().deep_copy_board(grid)


def is_valid(grid, row, col, digit):
    return SudokuSolver().is_valid(grid, row, col, digit)
