#!/usr/bin/env python3
"""
Solve every Sudoku puzzle file in a directory and print a summary.
"""

import glob
import os
import sys

from bitsudoku.app import PuzzleSolver
from bitsudoku.solver import InvalidGrid


def main(puzzle_dir="."):
    """Process all .txt puzzles in `puzzle_dir`."""
    puzzle_files = sorted(glob.glob(os.path.join(puzzle_dir, "*.txt")))

    if not puzzle_files:
        print(f"No .txt files found in {puzzle_dir}!")
        return None

    print(f"Found {len(puzzle_files)} puzzles to process")
    print("=" * 60)

    solver = PuzzleSolver(output_size=450, save_image=True)
    output_dir = "output"

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Processing {puzzle_path}...")

        try:
            result = solver.process_puzzle(puzzle_path, output_dir)
            if result['solution'] is not None:
                results['solved'].append(puzzle_path)
            else:
                results['unsolved'].append(puzzle_path)
        except (InvalidGrid, OSError) as e:
            print(f"Error processing {puzzle_path}: {e}")
            results['error'].append(puzzle_path)

    # Print summary
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['solved']:
        print(f"\nSolved puzzles: {', '.join(results['solved'])}")

    print(f"\nSolution images saved to: {output_dir}/")
    return results


if __name__ == '__main__':
    main(sys.argv[1] if len(sys.argv) > 1 else ".")
