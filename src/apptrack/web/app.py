"""FastAPI application factory for the application tracker API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apptrack.config import load_config
from apptrack.storage import StorageUnavailableError
from apptrack.store import build_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load config and open the application store."""
    if not hasattr(app.state, "store"):
        config = load_config()
        app.state.config = config
        app.state.store = build_store(config.storage)
    yield


async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    logger.warning("Storage unavailable: %s", exc)
    return JSONResponse({"error": f"Storage unavailable: {exc}"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Application Tracker", lifespan=lifespan)
    app.add_exception_handler(StorageUnavailableError, storage_unavailable_handler)

    from apptrack.web.routes import router

    app.include_router(router)

    return app
