"""FastAPI application factory and process entrypoint."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routes
from .core import (
    Settings,
    configure_logging,
    create_db_engine,
    init_schema,
    load_settings,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    try:
        init_schema(engine)
    except Exception:
        logger.exception("Failed to init DB")
        raise
    logger.info("Cozy Snake API listening on %s", app.state.settings.port)
    yield
    engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="Cozy Snake API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = create_db_engine(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


def main() -> None:
    """Run the API with uvicorn; exits non-zero without a configured store."""

    import uvicorn

    try:
        settings = load_settings()
    except RuntimeError as exc:
        configure_logging()
        logger.error("%s", exc)
        sys.exit(1)

    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
