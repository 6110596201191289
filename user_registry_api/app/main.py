"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory database and the user service, registers the
error handlers and includes the API router.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app``, so it can be served with::

    uvicorn user_registry_api.app.main:app

The interactive documentation generated by FastAPI is served at
``settings.docs_url`` (``/api-docs`` by default).
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import UserRegistryError
from .core.logging_config import setup_logging
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": message}``."""

    @app.exception_handler(UserRegistryError)
    async def user_registry_error_handler(request: Request, exc: UserRegistryError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "invalid request",
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in error["loc"]),
                        "message": error["msg"],
                    }
                    for error in exc.errors()
                ],
            },
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call creates its own in‑memory database, so two applications
    never share records.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        servers=[{"url": settings.server_url}],
        docs_url=settings.docs_url,
    )
    app.state.settings = settings

    db = Database()
    db.init_db()
    app.state.db = db
    app.state.user_service = UserService(db)

    register_error_handlers(app)
    app.include_router(router)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        db.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
