"""DB service layer for game-related use cases.

- Routers and use cases should not touch DB sessions directly; they call GameStore.
- This layer owns session/transaction boundaries.
- Use CRUD helpers that do NOT commit inside session.begin().
"""

from datetime import datetime
import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tictactoe.converter import DataConverter
from tictactoe.crud import CreateData, DeleteData, ReadData, UpdateData
from tictactoe.domain.errors import ConcurrentModification
from tictactoe.domain.game import Game

data_converter = DataConverter()


class GameStore:
    """Loads and saves whole games by id."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create(self, game: Game) -> None:
        async with self.session_factory() as session:
            success = await CreateData.create_game_data(
                data_converter.convert_game_to_gameschema(game), session
            )
            if not success:
                raise RuntimeError("Failed to create game data")

    async def find(self, game_id: UUID) -> Game | None:
        try:
            async with self.session_factory() as session:
                game_data = await ReadData.read_game_data(game_id, session)
        except SQLAlchemyError as e:
            raise RuntimeError("Failed to read game data") from e
        if game_data is None:
            return None
        return data_converter.convert_gameschema_to_game(game_data)

    async def update(self, game: Game, expected_modified_at: datetime, expected_moves_applied: int) -> None:
        """Persist the full game in one transaction.

        Raises:
            ConcurrentModification: The stored game is no longer at the expected
                modified_at / moves_applied version.
            RuntimeError: The database rejected the update.
        """
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    updated = await UpdateData.update_game_data_no_commit(
                        data_converter.convert_game_to_gameschema(game),
                        expected_modified_at,
                        expected_moves_applied,
                        session,
                    )
        except SQLAlchemyError as e:
            raise RuntimeError("Failed to update game data") from e
        if updated == 0:
            logging.warning(f"Stale update rejected for game_id: {game.game_id}")
            raise ConcurrentModification(game.game_id)

    async def delete_completed_before(self, cutoff: datetime) -> int:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    return await DeleteData.delete_completed_games_no_commit(cutoff, session)
        except SQLAlchemyError as e:
            raise RuntimeError("Failed to delete completed games") from e
