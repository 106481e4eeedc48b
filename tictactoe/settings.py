from functools import lru_cache

from pydantic import BaseModel

from tictactoe import load_secrets
from tictactoe.domain.game_rules import (
    DEFAULT_MAX_BOARD_SIZE,
    validate_board_size_limit,
    validate_dimensions,
)


class GameSettings(BaseModel):
    """Defaults applied when a new game is created without overrides."""
    board_size: int = 3
    win_length: int = 3
    max_board_size: int = DEFAULT_MAX_BOARD_SIZE
    random_seed: int | None = None
    retention_hours: float = 168.0
    purge_interval_hours: float = 24.0


@lru_cache(maxsize=1)
def load_game_settings() -> GameSettings:
    """Build GameSettings from the environment.

    Raises:
        InvalidConfiguration: GAME_BOARD_SIZE / GAME_WIN_LENGTH are out of bounds,
            or GAME_BOARD_SIZE exceeds GAME_MAX_BOARD_SIZE.
    """
    settings = GameSettings(
        board_size=load_secrets.board_size,
        win_length=load_secrets.win_length,
        max_board_size=load_secrets.max_board_size,
        random_seed=load_secrets.random_seed,
        retention_hours=load_secrets.retention_hours,
        purge_interval_hours=load_secrets.purge_interval_hours,
    )
    validate_dimensions(settings.board_size, settings.win_length)
    validate_board_size_limit(settings.board_size, settings.max_board_size)
    return settings
