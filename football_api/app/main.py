"""
Main entrypoint for the Football API.

This module assembles the FastAPI application, sets up logging, wires
the error handlers and mounts the routers under ``/api``.  The app is
instantiated at import time as ``app``, so it can be served with::

    uvicorn football_api.app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.responses import request_validation_handler, unexpected_error_handler, validation_error_handler
from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import ValidationError
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # Field errors are a client mistake: 400, not FastAPI's default 422.
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file and tables on first start.
        init_db()

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok", "service": "football-api"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
