"""Game use cases: create, look up and play.

Each function takes its collaborators (store, settings, random source) as
arguments so that routers can inject them and tests can replace them.
"""

from datetime import datetime, timedelta
import logging
from uuid import UUID

from tictactoe.converter import DataConverter
from tictactoe.domain.errors import (
    ConcurrentModification,
    GameError,
    GameNotFound,
    SymbolNotRecognized,
)
from tictactoe.domain.game import Clock, Game, create_game, utc_now
from tictactoe.domain.game_rules import validate_board_size_limit
from tictactoe.domain.random_source import RandomSource
from tictactoe.domain.symbols import Symbol
from tictactoe.services.game_db import GameStore
from tictactoe.settings import GameSettings

data_converter = DataConverter()


def parse_symbol(raw: str) -> Symbol:
    """Map a single case-insensitive character to a player symbol.

    Raises:
        SymbolNotRecognized: raw is not "x" or "o".
    """
    lowered = raw.lower()
    if lowered == "x":
        return Symbol.X
    if lowered == "o":
        return Symbol.O
    raise SymbolNotRecognized(raw)


async def create_new_game(
    store: GameStore,
    settings: GameSettings,
    board_size: int | None = None,
    win_length: int | None = None,
) -> Game:
    """Create and store a game, using configured defaults for missing overrides.

    Raises:
        InvalidConfiguration: The dimensions are out of bounds or the board
            is larger than settings.max_board_size.
    """
    board_size = board_size if board_size is not None else settings.board_size
    validate_board_size_limit(board_size, settings.max_board_size)
    game = create_game(
        board_size,
        win_length if win_length is not None else settings.win_length,
    )
    await store.create(game)
    logging.info(
        f"Created game_id: {game.game_id} ({game.board_size}x{game.board_size}, win {game.win_length})"
    )
    return game


async def find_game(store: GameStore, game_id: UUID) -> Game:
    game = await store.find(game_id)
    if game is None:
        raise GameNotFound(game_id)
    return game


async def make_move(
    store: GameStore,
    random_source: RandomSource,
    game_id: UUID,
    row: int,
    col: int,
    symbol_text: str,
    if_match: str | None = None,
    *,
    clock: Clock | None = None,
) -> Game:
    """Apply one move to a stored game and save it.

    Args:
        store (GameStore): Game persistence
        random_source (RandomSource): Passed through to the flip rule
        game_id (UUID): To identify the game
        row (int): Row of the target cell
        col (int): Column of the target cell
        symbol_text (str): Raw symbol sent by the client
        if_match (str | None): ETag the client last saw, if any

    Raises:
        SymbolNotRecognized: symbol_text is not a player symbol
        GameNotFound: No game has this id
        ConcurrentModification: The game changed since if_match, or during this call
        GameError: Any rule violation raised by Game.make_move

    Returns:
        Game: The game after the move
    """
    symbol = parse_symbol(symbol_text)
    game = await find_game(store, game_id)

    if if_match is not None and not data_converter.etag_matches(game, if_match):
        raise ConcurrentModification(game_id)

    loaded_version = (game.modified_at, game.moves_applied)
    try:
        outcome = game.make_move(row, col, symbol, random_source, clock=clock)
    except GameError as e:
        logging.warning(f"Rejected move on game_id: {game_id} ({row}, {col}, {symbol.name}): {e}")
        raise

    await store.update(game, *loaded_version)

    if outcome.flipped:
        logging.info(f"Flipped {outcome.submitted.name} to {outcome.placed.name} at ({row}, {col}) on game_id: {game_id}")
    logging.info(f"Applied move {game.moves_applied} on game_id: {game_id} ({row}, {col}, {outcome.placed.name})")
    if game.completed:
        result = "draw" if game.winner == Symbol.NONE else f"{game.winner.name} wins"
        logging.info(f"Game completed game_id: {game_id}, {result}")
    return game


async def purge_completed_games(store: GameStore, retention_hours: float, now: datetime | None = None) -> int:
    """Delete completed games untouched for longer than retention_hours."""
    cutoff = (now or utc_now()) - timedelta(hours=retention_hours)
    deleted = await store.delete_completed_before(cutoff)
    logging.info(f"Purged {deleted} completed games modified before {cutoff.isoformat()}")
    return deleted
