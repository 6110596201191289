"""Entry point for the User Registry API.

Starts the FastAPI application with Uvicorn on ``settings.host`` and
``settings.port`` (``0.0.0.0:3000`` by default).  Configuration is
read from environment variables, see
``user_registry_api/app/core/config.py``.

The process exits with a non‑zero status if the server cannot start,
e.g. when the port is already in use.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from user_registry_api.app.core.config import settings
from user_registry_api.app.main import app

logger = logging.getLogger(__name__)

STARTUP_FAILURE = 3


async def main() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps the handlers installed by setup_logging
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    serve_task = asyncio.create_task(server.serve())
    while not server.started and not serve_task.done():
        await asyncio.sleep(0.1)
    if server.started:
        logger.info("Server running on port %s", settings.port)
    await serve_task
    if not server.started:
        logger.error("Server failed to start on port %s", settings.port)
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
