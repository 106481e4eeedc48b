from datetime import datetime, timezone

from tictactoe.domain.game import Game
from tictactoe.domain.symbols import Symbol
from tictactoe.models.dc_models import GameModel
from tictactoe.models.schema_models import GameSchema

DRAW_LABEL = "draw"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; every stored timestamp is UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DataConverter:
    """This class is used to convert data between different formats."""

    def convert_game_to_gameschema(self, game: Game) -> GameSchema:
        """Convert the domain Game to the GameSchema to store in the database

        Args:
            game (Game): The game after creation or after a move

        Returns:
            GameSchema: Row data for the games table
        """
        return GameSchema(
            game_id=game.game_id,
            board_size=game.board_size,
            win_length=game.win_length,
            cells=[int(cell) for cell in game.cells],
            current_turn=int(game.current_turn),
            moves_applied=game.moves_applied,
            completed=game.completed,
            winner=int(game.winner),
            created_at=game.created_at,
            modified_at=game.modified_at,
        )

    def convert_gameschema_to_game(self, game_data: GameSchema) -> Game:
        """Convert the stored GameSchema back to the domain Game

        Args:
            game_data (GameSchema): Row data read from the games table

        Returns:
            Game: The game, ready to accept the next move
        """
        return Game(
            game_id=game_data.game_id,
            board_size=game_data.board_size,
            win_length=game_data.win_length,
            created_at=_as_utc(game_data.created_at),
            modified_at=_as_utc(game_data.modified_at),
            cells=[Symbol(cell) for cell in game_data.cells],
            current_turn=Symbol(game_data.current_turn),
            moves_applied=game_data.moves_applied,
            completed=game_data.completed,
            winner=Symbol(game_data.winner),
        )

    def convert_game_to_gamemodel(self, game: Game) -> GameModel:
        """Convert the domain Game to the GameModel to send client

        Args:
            game (Game): The current game

        Returns:
            GameModel: Character grid with turn and winner labels
        """
        winner = None
        player_turn = None
        if game.completed:
            winner = DRAW_LABEL if game.winner == Symbol.NONE else game.winner.to_char()
        else:
            player_turn = game.current_turn.to_char()

        line = game.winning_line()
        return GameModel(
            id=game.game_id,
            board_size=game.board_size,
            win_length=game.win_length,
            board=[[cell.to_char() for cell in row] for row in game.rows()],
            player_turn=player_turn,
            winner=winner,
            moves_applied=game.moves_applied,
            modified_at=game.modified_at,
            winning_line=None if line is None else [[row, col] for row, col in line],
        )

    def make_etag(self, game: Game) -> str:
        """ETag value for the game version (its modification timestamp)."""
        return f'"{game.modified_at.isoformat()}"'

    def etag_matches(self, game: Game, if_match: str) -> bool:
        """If-Match check with strong comparison; weak (W/) tags never match."""
        if if_match.strip() == "*":
            return True
        candidates = [tag.strip() for tag in if_match.split(",")]
        expected = self.make_etag(game)
        return any(tag == expected for tag in candidates)
