"""FastAPI application for the habit-forge API."""

import random
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..clock import Clock
from ..db.engine import get_db_path, init_db
from ..errors import (
    AuthenticationError,
    ChallengeNotFoundError,
    HabitForgeError,
    ParticipantNotFoundError,
    ValidationError,
)
from ..services.session import open_session
from .routers import account, challenges, group, habits


def status_code_for(error: HabitForgeError) -> int:
    """HTTP status for an engine error."""
    if isinstance(error, ValidationError):
        return 422
    if isinstance(error, (ChallengeNotFoundError, ParticipantNotFoundError)):
        return 404
    if isinstance(error, AuthenticationError):
        return 401
    return 409


def create_app(
    db_path: Path | None = None,
    clock: Clock | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the session on startup, flush pending writes on shutdown."""
        path = db_path or get_db_path()
        if not path.exists():
            await init_db(path)
        app.state.session = await open_session(path, clock=clock, rng=rng)
        yield
        await app.state.session.close()

    app = FastAPI(
        title="habit-forge",
        description="Habit tracker with staked personal and group challenges",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(HabitForgeError)
    async def engine_error_handler(request: Request, exc: HabitForgeError):
        return JSONResponse(
            status_code=status_code_for(exc),
            content={"error": exc.user_message, "code": exc.code},
        )

    # Include routers
    app.include_router(account.router)
    app.include_router(challenges.router)
    app.include_router(group.router)
    app.include_router(habits.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
