"""
Entry point for running bitsudoku as a package.

Usage:
    python -m bitsudoku --puzzle path/to/puzzle.txt
"""

from .app import main

if __name__ == '__main__':
    main()
