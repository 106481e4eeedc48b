"""
Shared pytest fixtures for the tic-tac-toe service tests.

The application reads its database location from the environment at import
time, so the environment is prepared here before any tictactoe module loads.
Store fixtures are function-scoped, each with its own SQLite file.
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from typing import Callable, List

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

_TEST_DB_DIR = tempfile.mkdtemp(prefix="tictactoe-tests-")
os.environ["DB_BACKEND"] = "sqlite"
os.environ["SQLITE_PATH"] = os.path.join(_TEST_DB_DIR, "app.sqlite3")
os.environ["GAME_BOARD_SIZE"] = "3"
os.environ["GAME_WIN_LENGTH"] = "3"
os.environ["GAME_MAX_BOARD_SIZE"] = "19"

from tictactoe.domain.random_source import RandomSource  # noqa: E402
from tictactoe.models.schemas import Base  # noqa: E402
from tictactoe.services.game_db import GameStore  # noqa: E402
from tictactoe.settings import GameSettings  # noqa: E402


# =============================================================================
# RANDOM SOURCES
# =============================================================================


class ConstantRandomSource(RandomSource):
    """Returns the same value on every draw and records each call."""

    def __init__(self, value: int):
        self.value = value
        self.calls: List[tuple[int, int]] = []

    def next_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


class SequenceRandomSource(RandomSource):
    """Returns the given values in order; running out is a test failure."""

    def __init__(self, values: List[int]):
        self.values = list(values)
        self.calls: List[tuple[int, int]] = []

    def next_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self.values:
            raise AssertionError("random source consulted more often than expected")
        return self.values.pop(0)


class StepClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def never_flip() -> ConstantRandomSource:
    return ConstantRandomSource(1)


@pytest.fixture
def always_flip() -> ConstantRandomSource:
    return ConstantRandomSource(0)


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return StepClock()


@pytest.fixture
def game_settings() -> GameSettings:
    return GameSettings(board_size=3, win_length=3, retention_hours=24, purge_interval_hours=1)


# =============================================================================
# STORE
# =============================================================================


@pytest_asyncio.fixture
async def game_store(tmp_path):
    """GameStore backed by a fresh SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'games.sqlite3'}", poolclass=NullPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(
        autocommit=False, class_=AsyncSession, expire_on_commit=False, bind=engine
    )
    yield GameStore(session_factory)
    await engine.dispose()


# =============================================================================
# HTTP
# =============================================================================


@pytest.fixture(scope="session")
def client():
    """One TestClient (and one app lifespan) for the whole run."""
    from fastapi.testclient import TestClient

    from tictactoe.main import app
    from tictactoe.routers.game import get_random_source

    app.dependency_overrides[get_random_source] = lambda: ConstantRandomSource(1)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
