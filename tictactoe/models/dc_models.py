from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class GameSettingsModel(BaseModel):
    """Optional overrides sent when creating a game."""
    board_size: Optional[int] = None
    win_length: Optional[int] = None


class MakeMoveModel(BaseModel):
    game_id: UUID
    x: int  # row
    y: int  # column
    symbol: str = Field(min_length=1, max_length=1)


class GameModel(BaseModel):
    """Game view sent to the client. Board cells are "X", "O" or " "."""
    id: UUID
    board_size: int
    win_length: int
    board: List[List[str]]
    player_turn: Optional[str] = None
    winner: Optional[str] = None  # "X", "O", "draw", or None while in progress
    moves_applied: int
    modified_at: datetime
    winning_line: Optional[List[List[int]]] = None


class ErrorModel(BaseModel):
    detail: str
    category: str


class HealthModel(BaseModel):
    status: str
