"""Game aggregate: board state plus the single entry point that mutates it."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List
from uuid import UUID

from uuid6 import uuid7

from tictactoe.domain.errors import (
    CellOccupied,
    CoordinatesOutOfRange,
    GameAlreadyCompleted,
    WrongPlayerTurn,
)
from tictactoe.domain.game_rules import (
    detect_outcome,
    should_flip,
    validate_dimensions,
    winning_line,
)
from tictactoe.domain.random_source import RandomSource
from tictactoe.domain.symbols import Symbol

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MoveOutcome:
    """What a successful move did to the board."""
    row: int
    col: int
    submitted: Symbol       # Symbol sent by the player
    placed: Symbol          # Symbol written into the cell
    flipped: bool


@dataclass
class Game:
    """
    The complete state of one game.

    Tracks:
    - The board_size x board_size board as a flat row-major list
    - Whose turn it is
    - How many moves have been applied
    - Result (completed flag and winner, NONE meaning draw once completed)
    """

    game_id: UUID
    board_size: int
    win_length: int
    created_at: datetime
    modified_at: datetime
    cells: List[Symbol] = field(default_factory=list)
    current_turn: Symbol = Symbol.X
    moves_applied: int = 0
    completed: bool = False
    winner: Symbol = Symbol.NONE

    def cell(self, row: int, col: int) -> Symbol:
        return self.cells[row * self.board_size + col]

    def rows(self) -> List[List[Symbol]]:
        size = self.board_size
        return [self.cells[offset * size:(offset + 1) * size] for offset in range(size)]

    def winning_line(self) -> List[tuple[int, int]] | None:
        if not self.completed or self.winner == Symbol.NONE:
            return None
        return winning_line(self.cells, self.board_size, self.win_length)

    def make_move(
        self,
        row: int,
        col: int,
        symbol: Symbol,
        random_source: RandomSource,
        *,
        clock: Clock | None = None,
    ) -> MoveOutcome:
        """Validate and apply one move.

        Checks run in a fixed order and nothing is mutated until all of them pass.

        Args:
            row (int): Row index, 0-based.
            col (int): Column index, 0-based.
            symbol (Symbol): Symbol of the player making the move.
            random_source (RandomSource): Consulted by the flip rule on eligible moves.
            clock (Clock | None): Returns the modification timestamp. Defaults to UTC now.

        Raises:
            GameAlreadyCompleted: The game already has a winner or is drawn.
            WrongPlayerTurn: symbol is not the current turn.
            CoordinatesOutOfRange: row or col is off the board.
            CellOccupied: The target cell already holds a symbol.

        Returns:
            MoveOutcome: The submitted and placed symbols, and whether a flip happened.
        """
        if self.completed:
            raise GameAlreadyCompleted(self.modified_at)
        if symbol != self.current_turn:
            raise WrongPlayerTurn(self.current_turn)
        if not self._on_board(row) or not self._on_board(col):
            raise CoordinatesOutOfRange(row, col)

        index = row * self.board_size + col
        if self.cells[index] != Symbol.NONE:
            raise CellOccupied(row, col)

        flipped = should_flip(self.moves_applied, random_source)
        placed = symbol.opposite() if flipped else symbol

        self.cells[index] = placed
        self.moves_applied += 1
        self.modified_at = (clock or utc_now)()

        self.completed, self.winner = detect_outcome(self.cells, self.board_size, self.win_length)
        # Turn order follows the player who moved, not the placed symbol.
        self.current_turn = symbol.opposite()

        return MoveOutcome(row=row, col=col, submitted=symbol, placed=placed, flipped=flipped)

    def _on_board(self, coordinate: int) -> bool:
        return 0 <= coordinate < self.board_size


def create_game(board_size: int, win_length: int, *, clock: Clock | None = None) -> Game:
    """Create an empty game.

    Raises:
        InvalidConfiguration: The board size or win length is out of bounds.
    """
    validate_dimensions(board_size, win_length)
    now = (clock or utc_now)()
    return Game(
        game_id=uuid7(),
        board_size=board_size,
        win_length=win_length,
        created_at=now,
        modified_at=now,
        cells=[Symbol.NONE] * (board_size * board_size),
    )
