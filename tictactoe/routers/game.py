import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Header, Response, status

from tictactoe.converter import DataConverter
from tictactoe.db import Session
from tictactoe.domain.random_source import RandomSource, SystemRandomSource
from tictactoe.models.dc_models import GameModel, GameSettingsModel, HealthModel, MakeMoveModel
from tictactoe.services import game_service
from tictactoe.services.game_db import GameStore
from tictactoe.settings import GameSettings, load_game_settings

game_router = APIRouter()
data_converter = DataConverter()
game_store = GameStore(Session)
random_source = SystemRandomSource(load_game_settings().random_seed)


def get_game_store() -> GameStore:
    return game_store


def get_random_source() -> RandomSource:
    return random_source


def get_game_settings() -> GameSettings:
    return load_game_settings()


class HealthAPI:
    @staticmethod
    @game_router.get("/health", response_model=HealthModel)
    async def health():
        return HealthModel(status="ok")


class GameAPI:
    @staticmethod
    @game_router.post("/games", response_model=GameModel, status_code=status.HTTP_201_CREATED)
    async def create_game(
        response: Response,
        game_settings: Optional[GameSettingsModel] = None,
        store: GameStore = Depends(get_game_store),
        settings: GameSettings = Depends(get_game_settings),
    ):
        overrides = game_settings or GameSettingsModel()
        game = await game_service.create_new_game(
            store, settings, overrides.board_size, overrides.win_length
        )
        response.headers["Location"] = f"/games/{game.game_id}"
        response.headers["ETag"] = data_converter.make_etag(game)
        return data_converter.convert_game_to_gamemodel(game)

    @staticmethod
    @game_router.get("/games/{game_id}", response_model=GameModel)
    async def get_game(
        game_id: UUID,
        response: Response,
        store: GameStore = Depends(get_game_store),
    ):
        game = await game_service.find_game(store, game_id)
        response.headers["ETag"] = data_converter.make_etag(game)
        return data_converter.convert_game_to_gamemodel(game)


class MoveAPI:
    @staticmethod
    @game_router.post("/moves", response_model=GameModel)
    async def make_move(
        move: MakeMoveModel,
        response: Response,
        if_match: Optional[str] = Header(default=None),
        store: GameStore = Depends(get_game_store),
        source: RandomSource = Depends(get_random_source),
    ):
        logging.debug(f"move: {move}")
        game = await game_service.make_move(
            store, source, move.game_id, move.x, move.y, move.symbol, if_match
        )
        response.headers["ETag"] = data_converter.make_etag(game)
        return data_converter.convert_game_to_gamemodel(game)
