from apscheduler.schedulers.asyncio import AsyncIOScheduler
import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from tictactoe.db import engine
from tictactoe.domain.errors import ErrorCategory, GameError
from tictactoe.load_secrets import log_level
from tictactoe.models.dc_models import ErrorModel
from tictactoe.models.schemas import Base
from tictactoe.routers import game
from tictactoe.services.game_service import purge_completed_games
from tictactoe.settings import load_game_settings

STATUS_BY_CATEGORY = {
    ErrorCategory.configuration: 400,
    ErrorCategory.validation: 400,
    ErrorCategory.rule_violation: 400,
    ErrorCategory.not_found: 404,
    ErrorCategory.conflict: 412,
}

scheduler = AsyncIOScheduler()
logging.basicConfig(level=log_level)


async def purge_job():
    settings = load_game_settings()
    await purge_completed_games(game.get_game_store(), settings.retention_hours)


@asynccontextmanager
async def lifespan(app):
    """Create the games table and start housekeeping.
    This function is called to start the server.
    """
    settings = load_game_settings()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Completed games are removed once they pass the retention window
    scheduler.add_job(
        purge_job,
        "interval",
        hours=settings.purge_interval_hours,
        id="purge_completed_games",
        replace_existing=True,
    )
    scheduler.start()
    try:
        yield
    finally:
        scheduler.shutdown()
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.include_router(game.game_router)


@app.exception_handler(GameError)
async def game_error_handler(request: Request, exc: GameError):
    status_code = STATUS_BY_CATEGORY[exc.category]
    body = ErrorModel(detail=exc.message, category=exc.category.value)
    return JSONResponse(status_code=status_code, content=body.model_dump())


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8080)
