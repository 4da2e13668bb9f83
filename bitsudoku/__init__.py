"""
bitsudoku - 9x9 Sudoku solver

This package contains modules for:
- Bitmask backtracking search with the most-constrained-cell heuristic
- Reading and printing boards as text
- Rendering solved boards as images
"""

from .solver import InvalidCell, InvalidGrid, is_valid, solve, solve_puzzle

__version__ = "1.0.0"
__author__ = "bitsudoku contributors"

__all__ = ["InvalidCell", "InvalidGrid", "is_valid", "solve", "solve_puzzle"]
