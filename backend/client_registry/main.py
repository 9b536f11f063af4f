"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from client_registry.config import get_settings
from client_registry.infrastructure.logging.log_config import setup_logging
from client_registry.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and make sure the data directory exists."""
    settings = get_settings()
    setup_logging()

    clients_file = Path(settings.clients_file)
    clients_file.parent.mkdir(parents=True, exist_ok=True)
    if clients_file.exists():
        logger.info("Using client store %s", clients_file.resolve())
    else:
        logger.info("Client store %s not found, starting empty", clients_file.resolve())

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "client_registry.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
