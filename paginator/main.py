"""Paginator — FastAPI application factory.

Listing routers that page with `pagination_params` are mounted onto the app
returned by `create_app()`; the factory wires logging and error translation.
"""


import logging
import sys

from fastapi import FastAPI

from paginator.core.config import settings
from paginator.core.exceptions import register_exception_handlers
from paginator.schemas.common import HealthResponse


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    logging.basicConfig(
        level=settings.resolved_log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
