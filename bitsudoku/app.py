"""
Sudoku Solver - Main Application Module
"""

import argparse
import logging
import os
import sys

from .board_io import (
    format_board,
    format_plain,
    parse_rows,
    prompt_rows,
    read_puzzle_file,
)
from .render import save_board_image
from .solver import InvalidGrid, solve, solve_puzzle


class PuzzleSolver:
    """
    Main class for the Sudoku Solver application.

    Loads a puzzle file, solves it and optionally saves an image of the
    solution next to the other outputs.
    """

    def __init__(self, output_size=450, save_image=True, max_steps=None, strict=True):
        """
        Initialize the Sudoku Solver.

        Args:
            output_size (int): Size of the rendered solution image (default: 450x450)
            save_image (bool): Whether to save the rendered solution
            max_steps (int): Cap on tentative placements, None for no cap
            strict (bool): Reject duplicate givens before searching
        """
        self.output_size = output_size
        self.save_image = save_image
        self.max_steps = max_steps
        self.strict = strict

    def process_puzzle(self, puzzle_path, output_dir='output', pretty=True):
        """
        Solve one puzzle file.

        Pipeline steps:
        1. Load and parse the puzzle
        2. Solve it
        3. Render the solution (if enabled)

        Args:
            puzzle_path (str): Path to the puzzle text file
            output_dir (str): Directory to save the rendered solution
            pretty (bool): Print boards with block separators

        Returns:
            dict: puzzle, solution (None if unsolved), message and image_path
        """
        show = format_board if pretty else format_plain

        print(f"\n{'='*60}")
        print(f"Processing: {os.path.basename(puzzle_path)}")
        print(f"{'='*60}")

        print("\n[1/3] Loading puzzle...")
        puzzle = read_puzzle_file(puzzle_path)
        given_count = int((puzzle != 0).sum())
        print(f"      Givens: {given_count}, blanks: {puzzle.size - given_count}")
        print(show(puzzle))

        print("\n[2/3] Solving...")
        solution, message = solve_puzzle(puzzle, max_steps=self.max_steps, strict=self.strict)
        if solution is None:
            print(f"      ✗ Could not solve: {message}")
        else:
            print(f"      ✓ Solved puzzle ({message}):")
            print(show(solution))

        image_path = None
        if solution is not None and self.save_image:
            print("\n[3/3] Rendering solution...")
            base_name = os.path.splitext(os.path.basename(puzzle_path))[0]
            image_path = os.path.join(output_dir, f"{base_name}_solved.png")
            save_board_image(image_path, solution, puzzle, self.output_size)
            print(f"      Saved {image_path}")

        return {
            'puzzle': puzzle,
            'solution': solution,
            'message': message,
            'image_path': image_path,
        }


def run_interactive(max_steps=None, pretty=False, input_fn=input):
    """Read 9 rows from the user, solve and print. Returns True if solved."""
    board = parse_rows(prompt_rows(input_fn=input_fn))
    solved = solve(board, max_steps=max_steps)

    print()
    print(format_board(board) if pretty else format_plain(board))
    if not solved:
        print("No solution found", file=sys.stderr)
    return solved


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Handles command-line arguments and solves puzzles.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Solver - bitmask backtracking with most-constrained-cell search',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Enter a puzzle row by row:
    python -m bitsudoku

  Solve a puzzle file and save the rendered solution:
    python -m bitsudoku --puzzle puzzles/01.txt --output out/

  Solve without saving an image:
    python -m bitsudoku --puzzle puzzles/01.txt --no-save
        """
    )

    parser.add_argument('--puzzle', '-p',
                        help='Path to a puzzle file (9 rows of 9 symbols, "." for blanks)')
    parser.add_argument('--output', '-o', default='output',
                        help='Output directory (default: output)')
    parser.add_argument('--size', '-s', type=int, default=450,
                        help='Rendered image size in pixels (default: 450)')
    parser.add_argument('--no-save', action='store_true',
                        help='Do not save the rendered solution image')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='Give up after this many placements (default: no limit)')
    parser.add_argument('--no-strict', action='store_true',
                        help='Skip the duplicate-givens check before searching')
    parser.add_argument('--pretty', action='store_true',
                        help='Print boards with block separators')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log search details')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.puzzle is None:
        try:
            solved = run_interactive(max_steps=args.max_steps, pretty=args.pretty)
        except InvalidGrid as e:
            print(f"Error: {e}")
            sys.exit(1)
        except (EOFError, KeyboardInterrupt):
            print("\nInput cancelled.")
            sys.exit(1)
        sys.exit(0 if solved else 1)

    # Check if puzzle exists
    if not os.path.exists(args.puzzle):
        print(f"Error: Puzzle file not found: {args.puzzle}")
        sys.exit(1)

    solver = PuzzleSolver(
        output_size=args.size,
        save_image=not args.no_save,
        max_steps=args.max_steps,
        strict=not args.no_strict,
    )

    try:
        result = solver.process_puzzle(args.puzzle, args.output, pretty=args.pretty)
    except (InvalidGrid, OSError) as e:
        print(f"\nError during processing: {e}")
        sys.exit(1)

    if result['solution'] is None:
        sys.exit(1)


if __name__ == '__main__':
    main()
