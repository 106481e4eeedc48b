from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel


class GameSchema(BaseModel):
    """One row of the games table."""
    game_id: UUID
    board_size: int
    win_length: int
    cells: List[int]
    current_turn: int
    moves_applied: int
    completed: bool
    winner: int
    created_at: datetime
    modified_at: datetime

    class Config:
        from_attributes = True
