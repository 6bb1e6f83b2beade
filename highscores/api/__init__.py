"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import LeaderboardError
from .routers import ALL_ROUTERS


async def leaderboard_error_handler(request: Request, exc: LeaderboardError) -> JSONResponse:
    """Render service errors as ``{"error": <code>}``."""

    return JSONResponse({"error": exc.code}, status_code=exc.status_code)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and error handlers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)
    app.add_exception_handler(LeaderboardError, leaderboard_error_handler)


__all__ = ["leaderboard_error_handler", "register_routes"]
