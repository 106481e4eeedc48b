"""Errors raised by game rules and use cases.

Every error carries a stable category so that the HTTP layer can pick a
status code without knowing which rule failed.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from tictactoe.domain.symbols import Symbol


class ErrorCategory(str, Enum):
    configuration = "configuration"
    not_found = "not_found"
    rule_violation = "rule_violation"
    validation = "validation"
    conflict = "conflict"


class GameError(Exception):
    category: ErrorCategory = ErrorCategory.rule_violation

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidConfiguration(GameError):
    category = ErrorCategory.configuration

    def __init__(self, bound: str, value: int, message: str):
        super().__init__(message)
        self.bound = bound
        self.value = value


class GameNotFound(GameError):
    category = ErrorCategory.not_found

    def __init__(self, game_id: UUID):
        super().__init__("Game not found.")
        self.game_id = game_id


class GameAlreadyCompleted(GameError):
    def __init__(self, completed_at: datetime):
        super().__init__(f"The Game has been completed at {completed_at.isoformat()}.")
        self.completed_at = completed_at


class WrongPlayerTurn(GameError):
    def __init__(self, expected: Symbol):
        super().__init__(f"{expected.name} has turn now.")
        self.expected = expected


class CoordinatesOutOfRange(GameError):
    def __init__(self, row: int, col: int):
        super().__init__("Coordinates are out of board range.")
        self.row = row
        self.col = col


class CellOccupied(GameError):
    def __init__(self, row: int, col: int):
        super().__init__(f"Position ({row}, {col}) is already placed.")
        self.row = row
        self.col = col


class SymbolNotRecognized(GameError):
    category = ErrorCategory.validation

    def __init__(self, raw: str):
        super().__init__("Symbol is not recognized.")
        self.raw = raw


class ConcurrentModification(GameError):
    category = ErrorCategory.conflict

    def __init__(self, game_id: UUID):
        super().__init__("The Game has been modified by another request.")
        self.game_id = game_id
