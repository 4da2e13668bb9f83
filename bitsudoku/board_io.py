"""
Text input/output for Sudoku boards.

Boards travel as 9 rows of 9 symbols: '.' for a blank cell and '1'-'9'
for a digit. Internally a board is a 9x9 integer array with 0 = blank.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Union

import numpy as np

from .solver import SIZE, InvalidCell, InvalidGrid

log = logging.getLogger(__name__)

BLANK = "."
ROW_PROMPT = "Enter row {} (e.g. 53..7....): "
ROW_LENGTH_ERROR = "Invalid input. Please enter exactly 9 characters."


def _parse_symbol(symbol: str, row: int, col: int) -> int:
    if symbol == BLANK:
        return 0
    if len(symbol) == 1 and "1" <= symbol <= "9":
        return int(symbol)
    raise InvalidCell(row, col, symbol)


def parse_rows(rows: Iterable[str]) -> np.ndarray:
    """
    Build a board from 9 strings of exactly 9 symbols each.

    Raises:
        InvalidGrid: wrong number of rows or a row of the wrong length
        InvalidCell: a symbol other than '.' or '1'-'9'
    """
    rows = list(rows)
    if len(rows) != SIZE:
        raise InvalidGrid(f"Expected {SIZE} rows, got {len(rows)}")

    board = np.zeros((SIZE, SIZE), dtype=int)
    for r, row in enumerate(rows):
        if len(row) != SIZE:
            raise InvalidGrid(f"Row {r+1} has {len(row)} characters, expected {SIZE}")
        for c, symbol in enumerate(row):
            board[r, c] = _parse_symbol(symbol, r, c)
    return board


def parse_puzzle(text: str) -> np.ndarray:
    """
    Parse a puzzle written as 9 lines, or as a single 81-symbol line.

    Blank lines and lines starting with '#' are skipped; spaces inside a
    line are ignored so "5 3 . | . 7 ." style rows also work.
    """
    lines = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        line = "".join(ch for ch in line if not ch.isspace() and ch != "|")
        if line and set(line) == {"-"}:
            continue
        lines.append(line)

    if len(lines) == 1 and len(lines[0]) == SIZE * SIZE:
        flat = lines[0]
        lines = [flat[i:i + SIZE] for i in range(0, len(flat), SIZE)]

    return parse_rows(lines)


def read_puzzle_file(path: Union[str, Path]) -> np.ndarray:
    path = Path(path)
    log.debug("Reading puzzle from %s", path)
    return parse_puzzle(path.read_text(encoding="utf-8"))


def prompt_rows(input_fn: Callable[[str], str] = input,
                output_fn: Callable[[str], None] = print) -> List[str]:
    """Ask for 9 rows interactively, re-prompting until each has 9 characters."""
    rows: List[str] = []
    for i in range(SIZE):
        while True:
            row = input_fn(ROW_PROMPT.format(i + 1)).strip()
            if len(row) == SIZE:
                rows.append(row)
                break
            output_fn(ROW_LENGTH_ERROR)
    return rows


def board_to_rows(board: np.ndarray) -> List[str]:
    return ["".join(str(v) if v != 0 else BLANK for v in row) for row in board]


def format_plain(board: np.ndarray) -> str:
    """One row per line, cells separated by single spaces."""
    return "\n".join(" ".join(row) for row in board_to_rows(board))


def format_board(board: np.ndarray) -> str:
    """Render the 9x9 board as a human-friendly string."""
    lines = []
    for r, row in enumerate(board):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else BLANK)
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)
