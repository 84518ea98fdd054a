import argparse
import logging
import sys

import cv2

from models.sudoku_solver import SudokuSolver
from utils.board_io import (
    BoardFormatError, EXAMPLE_PUZZLE_TEXT, format_board, parse_board, read_board_text
)
from utils.image_processing import render_comparison, save_board_image

EXIT_SOLVED = 0
EXIT_UNSOLVABLE = 1
EXIT_FORMAT_ERROR = 2

logger = logging.getLogger(__name__)


class SudokuApp:
    def __init__(self):
        self.sudoku_solver = SudokuSolver()
        self.original_grid = None
        self.solution_grid = None

    def solve_text(self, text):
        """Parse, validate and solve puzzle text.

        Returns (original, solution); solution is None when the puzzle has
        no completion. Raises BoardFormatError on malformed input.
        """
        board = parse_board(text)
        return self.solve_board(board)

    def solve_board(self, board):
        self.original_grid = None
        self.solution_grid = None

        if not self.sudoku_solver.validate_board(board):
            raise BoardFormatError()

        # Keep the original for display, solve a separate copy
        original = self.sudoku_solver.deep_copy_board(board)
        board_to_solve = self.sudoku_solver.deep_copy_board(board)

        self.original_grid = original

        # Conflicting givens can never be completed, skip the search
        if not self.sudoku_solver.is_consistent(original):
            logger.debug("Givens conflict, not searching")
            return self.original_grid, self.solution_grid

        self.sudoku_solver.reset_stats()
        solved = self.sudoku_solver.solve(board_to_solve)
        logger.debug("Search finished with %d validations (solved=%s)",
                     self.sudoku_solver.validations, solved)

        if solved:
            self.solution_grid = board_to_solve

        return self.original_grid, self.solution_grid

    def run(self, text, image_path=None, show=False):
        """Solve puzzle text and report the outcome, returns an exit status"""
        try:
            original, solution = self.solve_text(text)
        except BoardFormatError as e:
            print(f"Error: {e}")
            return EXIT_FORMAT_ERROR

        self.print_grid(original, "Original Puzzle:")

        if solution is not None:
            print("\nSudoku solved successfully!")
            print("The solution has been found using backtracking algorithm.")
            self.print_grid(solution, "Solved Puzzle:")
            status = EXIT_SOLVED
        else:
            print("\nNo solution exists")
            print("This Sudoku puzzle cannot be solved.")
            if not self.sudoku_solver.is_consistent(original):
                print("The puzzle contains conflicting digits (duplicates in row/column/box).")
            status = EXIT_UNSOLVABLE

        if image_path or show:
            image = render_comparison(original, solution)
            if image_path:
                try:
                    save_board_image(image_path, image)
                    print(f"Saved rendered grid to {image_path}")
                except IOError as e:
                    print(f"Error: {e}")
            if show:
                self.show_solution_window(image)

        return status

    def print_grid(self, grid, title="Grid:"):
        """Print grid to console"""
        print()
        print(format_board(grid, title))

    def show_solution_window(self, image):
        """Show the rendered grids until a key is pressed"""
        cv2.imshow('Sudoku Solver', image)
        cv2.waitKey(0)
        cv2.destroyAllWindows()


def build_parser():
    parser = argparse.ArgumentParser(description='Sudoku Solver')
    parser.add_argument('puzzle', nargs='?',
                        help='Puzzle file in JSON grid format, "-" for stdin (default: example puzzle)')
    parser.add_argument('-o', '--output', help='Save the rendered grids to this image file')
    parser.add_argument('--show', action='store_true', help='Display the rendered grids in a window')
    parser.add_argument('-l', '--log', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.log:
        logging.basicConfig(level=logging.DEBUG)

    app = SudokuApp()

    try:
        if args.puzzle is None:
            text = EXAMPLE_PUZZLE_TEXT
        else:
            text = read_board_text(args.puzzle)

        return app.run(text, image_path=args.output, show=args.show)

    except (OSError, BoardFormatError) as e:
        print(f"Error: {e}")
        return EXIT_FORMAT_ERROR


if __name__ == "__main__":
    sys.exit(main())
