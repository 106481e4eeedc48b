from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import JSON, Boolean, DateTime, Integer, Uuid
from uuid6 import uuid7


class Base(DeclarativeBase):
    pass


class Game(Base):
    __tablename__ = "games"
    game_id = Column(Uuid, primary_key=True, default=uuid7)
    board_size = Column(Integer, nullable=False)
    win_length = Column(Integer, nullable=False)
    cells = Column(JSON, nullable=False)  # row-major list of Symbol values
    current_turn = Column(Integer, nullable=False)
    moves_applied = Column(Integer, nullable=False, default=0)
    completed = Column(Boolean, nullable=False, default=False, index=True)
    winner = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    modified_at = Column(DateTime(timezone=True), nullable=False)
