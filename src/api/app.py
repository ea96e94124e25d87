"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from src.config import get_config
from src.petfinder.client import PetfinderClient
from src.search.dog_details import DogDetailService
from src.search.searcher import DogSearcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize shared resources on startup, clean up on shutdown.

    Creates the Petfinder client and the search and detail services
    that are shared across all requests.
    """
    config = get_config()

    app.state.config = config
    if not config.petfinder_api_key or not config.petfinder_secret:
        logger.error(
            "Petfinder credentials missing; searches will fail until "
            "PETFINDER_API_KEY and PETFINDER_SECRET are set"
        )
    app.state.petfinder = PetfinderClient(
        api_key=config.petfinder_api_key,
        secret=config.petfinder_secret,
        base_url=config.petfinder_base_url,
        timeout=config.request_timeout,
        page_size=config.search_page_size,
    )
    app.state.searcher = DogSearcher(app.state.petfinder)
    app.state.dog_details = DogDetailService(app.state.petfinder)

    yield

    app.state.petfinder.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    config = get_config()

    app = FastAPI(
        title="Simple Puppy",
        description="Search adoptable dogs listed on Petfinder",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_middleware(SessionMiddleware, secret_key=config.session_secret)

    static_dir = Path(__file__).parent.parent / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    from src.api.routes import router

    app.include_router(router)

    return app
