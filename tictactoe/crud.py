from datetime import datetime
from uuid import UUID
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tictactoe.models.schema_models import GameSchema
from tictactoe.models.schemas import Game


class CreateData:
    @staticmethod
    async def create_game_data(game: GameSchema, session: AsyncSession) -> bool:
        """Create a new game row

        Args:
            game (GameSchema): Game data right after creation
            session (AsyncSession): AsyncSession object to interact with database

        Returns:
            bool: True if the row was committed
        """
        async with session:
            try:
                new_game = Game(**game.model_dump())
                session.add(new_game)
                await session.commit()
                return True
            except SQLAlchemyError as e:
                logging.error(f"Failed to create game data: {e}")
                await session.rollback()
                return False


class ReadData:
    @staticmethod
    async def read_game_data(game_id: UUID, session: AsyncSession) -> GameSchema | None:
        """Read game data from database

        Args:
            game_id (UUID): To identify the game

        Returns:
            GameSchema | None: Stored game, None if the id is unknown
        """
        async with session:
            try:
                stmt = select(Game).where(Game.game_id == game_id)
                result = await session.execute(stmt)
                result = result.scalars().first()

                if result is None:
                    return None

                return GameSchema.model_validate(result)
            except SQLAlchemyError as e:
                logging.error(f"Failed to read game data: {e}")
                raise


class UpdateData:
    @staticmethod
    async def update_game_data_no_commit(
        game: GameSchema,
        expected_modified_at: datetime,
        expected_moves_applied: int,
        session: AsyncSession,
    ) -> int:
        """Overwrite the mutable columns of a game if it is still at the expected version.

        NOTE: Does not commit; call inside session.begin().

        Args:
            game (GameSchema): Game data after the move
            expected_modified_at (datetime): modified_at the caller loaded the game with
            expected_moves_applied (int): moves_applied the caller loaded the game with

        Returns:
            int: Number of updated rows (0 means another writer got there first)
        """
        stmt = (
            update(Game)
            .where(
                Game.game_id == game.game_id,
                Game.modified_at == expected_modified_at,
                Game.moves_applied == expected_moves_applied,
            )
            .values(
                cells=game.cells,
                current_turn=game.current_turn,
                moves_applied=game.moves_applied,
                completed=game.completed,
                winner=game.winner,
                modified_at=game.modified_at,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            logging.error(f"Failed to update game data: {e}")
            raise
        return result.rowcount


class DeleteData:
    @staticmethod
    async def delete_completed_games_no_commit(cutoff: datetime, session: AsyncSession) -> int:
        """Delete completed games last modified before cutoff

        NOTE: Does not commit; call inside session.begin().

        Returns:
            int: Number of deleted rows
        """
        stmt = (
            delete(Game)
            .where(Game.completed.is_(True), Game.modified_at < cutoff)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            logging.error(f"Failed to delete completed games: {e}")
            raise
        return result.rowcount
