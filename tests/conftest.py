import numpy as np
import pytest

from bitsudoku.board_io import parse_rows

PUZZLE_ROWS = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]

SOLUTION_ROWS = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]

# Same as PUZZLE_ROWS but with a second 5 in the first row.
DUPLICATE_ROWS = ["535.7...."] + PUZZLE_ROWS[1:]

# Givens never repeat, yet (0,0) and (0,1) can only both be 9.
DEAD_END_ROWS = [
    "..1234567",
    ".........",
    ".........",
    "8........",
    ".........",
    ".........",
    ".8.......",
    ".........",
    ".........",
]


@pytest.fixture
def puzzle():
    return parse_rows(PUZZLE_ROWS)


@pytest.fixture
def solution():
    return parse_rows(SOLUTION_ROWS)


@pytest.fixture
def duplicate_puzzle():
    return parse_rows(DUPLICATE_ROWS)


@pytest.fixture
def dead_end_puzzle():
    return parse_rows(DEAD_END_ROWS)


def assert_valid_solution(board):
    digits = set(range(1, 10))
    for i in range(9):
        assert set(board[i, :]) == digits, f"row {i}"
        assert set(board[:, i]) == digits, f"col {i}"
    for br in range(3):
        for bc in range(3):
            block = board[br*3:(br+1)*3, bc*3:(bc+1)*3].ravel()
            assert set(block) == digits, f"block {br},{bc}"


@pytest.fixture
def valid_solution():
    return assert_valid_solution


@pytest.fixture
def write_puzzle(tmp_path):
    def _write(name, rows):
        path = tmp_path / name
        path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return path
    return _write
