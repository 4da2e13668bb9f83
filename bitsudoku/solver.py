"""
Backtracking Sudoku solver with bitmask constraint tracking.

Each row, column and 3x3 block keeps a bitmask of the digits it already
holds (bit d set iff digit d is present). The search always branches on the
blank cell with the fewest legal digits and undoes every placement on the
way back up, so a failed solve leaves the board untouched.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

log = logging.getLogger(__name__)

SIZE = 9
BOX = 3
DIGIT_BITS = 0x3FE  # bits 1..9


class InvalidGrid(ValueError):
    """The board is not a 9x9 grid of blanks and digits."""


class InvalidCell(InvalidGrid):
    """A cell holds something other than a blank or a digit 1-9."""

    def __init__(self, row: int, col: int, value):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(f"Invalid cell ({row+1},{col+1}): {value!r}")


@dataclass
class ConstraintSet:
    rows: List[int] = field(default_factory=lambda: [0] * SIZE)
    cols: List[int] = field(default_factory=lambda: [0] * SIZE)
    blocks: List[int] = field(default_factory=lambda: [0] * SIZE)
    conflicts: int = 0

    def candidates(self, row: int, col: int) -> int:
        used = self.rows[row] | self.cols[col] | self.blocks[block_index(row, col)]
        return ~used & DIGIT_BITS

    def place(self, row: int, col: int, bit: int) -> None:
        self.rows[row] |= bit
        self.cols[col] |= bit
        self.blocks[block_index(row, col)] |= bit

    def remove(self, row: int, col: int, bit: int) -> None:
        self.rows[row] &= ~bit
        self.cols[col] &= ~bit
        self.blocks[block_index(row, col)] &= ~bit


@dataclass
class SolveStats:
    placements: int = 0
    backtracks: int = 0
    limit_hit: bool = False


def block_index(row: int, col: int) -> int:
    return (row // BOX) * BOX + col // BOX


def _check_board(board: np.ndarray) -> None:
    if not isinstance(board, np.ndarray) or board.shape != (SIZE, SIZE):
        raise InvalidGrid(f"Expected a 9x9 numpy array, got {getattr(board, 'shape', type(board).__name__)}")
    if not np.issubdtype(board.dtype, np.integer):
        raise InvalidGrid(f"Expected an integer board, got dtype {board.dtype}")


def is_valid(board: np.ndarray, row: int, col: int, digit: int) -> bool:
    """True iff no peer of (row, col) already holds `digit`."""
    r0 = (row // BOX) * BOX
    c0 = (col // BOX) * BOX
    for i in range(SIZE):
        if board[row, i] == digit or board[i, col] == digit:
            return False
        if board[r0 + i // BOX, c0 + i % BOX] == digit:
            return False
    return True


def build_initial_state(board: np.ndarray) -> Tuple[ConstraintSet, List[Tuple[int, int]]]:
    """
    Scan the board once and build the constraint masks and blank list.

    Givens that repeat a digit inside a unit are not rejected here; they are
    counted on `ConstraintSet.conflicts`.

    Raises:
        InvalidCell: a cell value outside 0..9
    """
    _check_board(board)
    state = ConstraintSet()
    blanks: List[Tuple[int, int]] = []

    for r in range(SIZE):
        for c in range(SIZE):
            v = int(board[r, c])
            if v == 0:
                blanks.append((r, c))
                continue
            if not 1 <= v <= SIZE:
                raise InvalidCell(r, c, v)
            bit = 1 << v
            b = block_index(r, c)
            if state.rows[r] & bit or state.cols[c] & bit or state.blocks[b] & bit:
                state.conflicts += 1
            state.place(r, c, bit)

    return state, blanks


def select_most_constrained(state: ConstraintSet, blanks: List[Tuple[int, int]],
                            start: int) -> Tuple[int, int]:
    """
    Pick the blank at or after `start` with the fewest candidates.

    Returns:
        (index into blanks, candidate mask); ties go to the earliest cell
    """
    best_i = start
    best_mask = 0
    best_count = SIZE + 1
    for i in range(start, len(blanks)):
        r, c = blanks[i]
        mask = state.candidates(r, c)
        count = mask.bit_count()
        if count < best_count:
            best_i, best_mask, best_count = i, mask, count
            if count == 0:
                break
    return best_i, best_mask


class _Search:
    """Depth-first search over the blank list, sharing one mutable state."""

    def __init__(self, board: np.ndarray, state: ConstraintSet,
                 blanks: List[Tuple[int, int]], max_steps: Optional[int] = None):
        self.board = board
        self.state = state
        self.blanks = blanks
        self.max_steps = max_steps
        self.stats = SolveStats()

    def run(self, depth: int = 0) -> bool:
        if depth == len(self.blanks):
            return True

        best_i, mask = select_most_constrained(self.state, self.blanks, depth)
        blanks = self.blanks
        blanks[depth], blanks[best_i] = blanks[best_i], blanks[depth]
        r, c = blanks[depth]

        while mask:
            bit = mask & -mask
            mask ^= bit

            if self.max_steps is not None and self.stats.placements >= self.max_steps:
                self.stats.limit_hit = True
                break

            self.board[r, c] = bit.bit_length() - 1
            self.state.place(r, c, bit)
            self.stats.placements += 1

            if self.run(depth + 1):
                return True

            self.board[r, c] = 0
            self.state.remove(r, c, bit)
            self.stats.backtracks += 1

        blanks[depth], blanks[best_i] = blanks[best_i], blanks[depth]
        return False


def _search(board: np.ndarray, max_steps: Optional[int] = None) -> Tuple[bool, SolveStats]:
    state, blanks = build_initial_state(board)
    if state.conflicts:
        log.debug("Givens repeat a digit %d time(s); nothing to search", state.conflicts)
        return False, SolveStats()

    log.debug("Searching %d blank cells", len(blanks))
    search = _Search(board, state, blanks, max_steps)
    solved = search.run()
    log.debug("Search %s after %d placements, %d backtracks",
              "succeeded" if solved else "failed",
              search.stats.placements, search.stats.backtracks)
    return solved, search.stats


def solve(board: np.ndarray, max_steps: Optional[int] = None) -> bool:
    """
    Solve the board in place. Returns True if solved.

    On failure the board is left exactly as it was passed in. `max_steps`
    caps the number of tentative placements; None searches exhaustively.

    Raises:
        InvalidGrid: the board is not a 9x9 integer array
        InvalidCell: a cell value outside 0..9
    """
    solved, _ = _search(board, max_steps)
    return solved


def validate_givens(board: np.ndarray) -> Tuple[bool, str]:
    """Check for duplicate givens; fails fast to avoid long searches."""
    _check_board(board)
    for i in range(SIZE):
        row_vals = [v for v in board[i, :] if v != 0]
        if len(row_vals) != len(set(row_vals)):
            return False, f"Row {i+1} has duplicate given digit"

        col_vals = [v for v in board[:, i] if v != 0]
        if len(col_vals) != len(set(col_vals)):
            return False, f"Column {i+1} has duplicate given digit"

    for br in range(BOX):
        for bc in range(BOX):
            block = board[br*3:(br+1)*3, bc*3:(bc+1)*3].ravel()
            block_vals = [v for v in block if v != 0]
            if len(block_vals) != len(set(block_vals)):
                return False, f"3x3 block ({br+1},{bc+1}) has duplicate given digit"

    return True, ""


def solve_puzzle(board: np.ndarray, max_steps: Optional[int] = None,
                 strict: bool = True) -> Tuple[Optional[np.ndarray], str]:
    """
    Return a solved copy of the board, or (None, reason) if unsolvable or invalid.

    With `strict`, duplicate givens are reported by name before any search.
    """
    if strict:
        ok, reason = validate_givens(board)
        if not ok:
            return None, reason

    working = board.copy()
    solved, stats = _search(working, max_steps)
    if solved:
        return working, f"Solved in {stats.placements} steps"
    if stats.limit_hit:
        return None, f"Stopped after {stats.placements} steps (limit {max_steps})"
    return None, "No solution found"
