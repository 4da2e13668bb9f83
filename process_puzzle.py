#!/usr/bin/env python3
"""
Convenience script to solve a Sudoku puzzle file.

Usage:
    python process_puzzle.py --puzzle 01.txt
    python process_puzzle.py --puzzle path/to/puzzle.txt --output my_output/
"""

from bitsudoku.app import main

if __name__ == '__main__':
    main()
