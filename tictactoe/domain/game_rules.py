"""Board rules that are independent from HTTP and DB.

This module is organized by *concept* (rules), not by game object.
Cells are a flat row-major list of Symbol values of length board_size ** 2.

Rule of thumb:
- OK: board arithmetic, run scanning, the flip decision.
- Not OK: touching DB sessions, FastAPI, datetime.now(), etc.
"""

from typing import Sequence

from tictactoe.domain.errors import InvalidConfiguration
from tictactoe.domain.random_source import RandomSource
from tictactoe.domain.symbols import Symbol

MIN_BOARD_SIZE = 3
MIN_WIN_LENGTH = 3
DEFAULT_MAX_BOARD_SIZE = 19

FLIP_EVERY = 3
FLIP_DRAW_RANGE = (0, 10)
FLIP_TRIGGER = 0

# (row step, column step) in scan order: right, down, down-right, down-left.
ROW_STEP = (0, 1)
COLUMN_STEP = (1, 0)
MAIN_DIAGONAL_STEP = (1, 1)
ANTI_DIAGONAL_STEP = (1, -1)

Cells = Sequence[Symbol]
Coordinate = tuple[int, int]


# ==============================================================================
# ==== Configuration ===========================================================
# ==============================================================================


def validate_dimensions(board_size: int, win_length: int) -> None:
    """Check board size and win length against the allowed bounds.

    Raises:
        InvalidConfiguration: board_size < 3, win_length < 3 or win_length > board_size.
    """
    if board_size < MIN_BOARD_SIZE:
        raise InvalidConfiguration(
            "board_size",
            board_size,
            f"board_size must be at least {MIN_BOARD_SIZE}, got {board_size}.",
        )
    if win_length < MIN_WIN_LENGTH:
        raise InvalidConfiguration(
            "win_length",
            win_length,
            f"win_length must be at least {MIN_WIN_LENGTH}, got {win_length}.",
        )
    if win_length > board_size:
        raise InvalidConfiguration(
            "win_length",
            win_length,
            f"win_length must not exceed board_size {board_size}, got {win_length}.",
        )


def validate_board_size_limit(board_size: int, max_board_size: int) -> None:
    """Reject boards larger than the configured maximum.

    Raises:
        InvalidConfiguration: board_size > max_board_size.
    """
    if board_size > max_board_size:
        raise InvalidConfiguration(
            "board_size",
            board_size,
            f"board_size must not exceed {max_board_size}, got {board_size}.",
        )


# ==============================================================================
# ==== Win / draw detection ====================================================
# ==============================================================================


def run_anchors(board_size: int, win_length: int, step: Coordinate) -> list[Coordinate]:
    """Return every start cell from which a run of win_length fits along step."""
    last_start = board_size - win_length
    if step == ROW_STEP:
        return [(i, j) for i in range(board_size) for j in range(last_start + 1)]
    if step == COLUMN_STEP:
        return [(i, j) for j in range(board_size) for i in range(last_start + 1)]
    if step == MAIN_DIAGONAL_STEP:
        return [(i, j) for i in range(last_start + 1) for j in range(last_start + 1)]
    return [(i, j) for i in range(last_start + 1) for j in range(win_length - 1, board_size)]


def run_winner(
    cells: Cells,
    board_size: int,
    win_length: int,
    anchor: Coordinate,
    step: Coordinate,
) -> Symbol:
    """Return the symbol filling the run that starts at anchor, or NONE.

    The caller guarantees that the whole run lies on the board.
    """
    row, col = anchor
    row_step, col_step = step
    symbol = cells[row * board_size + col]
    if symbol == Symbol.NONE:
        return Symbol.NONE
    for k in range(1, win_length):
        if cells[(row + k * row_step) * board_size + col + k * col_step] != symbol:
            return Symbol.NONE
    return symbol


def _first_run(cells: Cells, board_size: int, win_length: int) -> tuple[Symbol, Coordinate, Coordinate] | None:
    for step in (ROW_STEP, COLUMN_STEP, MAIN_DIAGONAL_STEP, ANTI_DIAGONAL_STEP):
        for anchor in run_anchors(board_size, win_length, step):
            symbol = run_winner(cells, board_size, win_length, anchor, step)
            if symbol != Symbol.NONE:
                return symbol, anchor, step
    return None


def detect_outcome(cells: Cells, board_size: int, win_length: int) -> tuple[bool, Symbol]:
    """Scan the full board for a winner or a draw.

    Rows are checked first, then columns, main diagonals and anti-diagonals;
    the first run found decides the winner.

    Returns:
        tuple[bool, Symbol]: (is_over, winner). A draw is (True, Symbol.NONE).
    """
    found = _first_run(cells, board_size, win_length)
    if found is not None:
        return True, found[0]
    if all(cell != Symbol.NONE for cell in cells):
        return True, Symbol.NONE
    return False, Symbol.NONE


def winning_line(cells: Cells, board_size: int, win_length: int) -> list[Coordinate] | None:
    """Return the coordinates of the run detect_outcome would report, if any."""
    found = _first_run(cells, board_size, win_length)
    if found is None:
        return None
    _, (row, col), (row_step, col_step) = found
    return [(row + k * row_step, col + k * col_step) for k in range(win_length)]


# ==============================================================================
# ==== Flip rule ===============================================================
# ==============================================================================


def is_flip_eligible(moves_applied: int) -> bool:
    """Move numbers 3, 6, 9, ... (1-based) may flip. moves_applied is counted before the move."""
    return moves_applied > 0 and (moves_applied + 1) % FLIP_EVERY == 0


def should_flip(moves_applied: int, random_source: RandomSource) -> bool:
    """Decide whether the symbol about to be placed is inverted.

    The random source is consulted only for eligible moves, so a seeded
    source replays identically for the same sequence of moves.
    """
    if not is_flip_eligible(moves_applied):
        return False
    low, high = FLIP_DRAW_RANGE
    return random_source.next_int(low, high) == FLIP_TRIGGER
