"""FastAPI application factory."""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from config import settings
from domain.interfaces import IMatchRepository
from infrastructure import MatchRepository, RiotAPIClient

from . import matches, ws


def create_app(
    repository: IMatchRepository | None = None,
    *,
    session_options: dict[str, Any] | None = None,
) -> FastAPI:
    """
    Build the app. Without ``repository`` the lifespan opens one shared
    RiotAPIClient (connection pool only) for every session.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        app.state.session_options = session_options or {}
        if repository is not None:
            app.state.repository = repository
            yield
            return
        settings.validate()
        async with RiotAPIClient(settings.RIOT_API_KEY) as client:
            app.state.repository = MatchRepository(client)
            yield

    app = FastAPI(title="Season Match Analyzer", lifespan=lifespan)
    app.include_router(matches.router)
    app.include_router(ws.router)
    return app
