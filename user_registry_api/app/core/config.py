"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults provided for all fields.  The
database is always an in‑memory SQLite store, so there is no setting
for its location: records live exactly as long as the process.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _default_port() -> int:
    return int(os.getenv("PORT", "3000"))


def _default_server_url() -> str:
    return os.getenv("SERVER_URL", f"http://localhost:{_default_port()}")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "API de Usuários"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    description: str = field(
        default_factory=lambda: os.getenv("API_DESCRIPTION", "API para gerenciar usuários")
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Address uvicorn binds to.  The port is fixed per deployment; clients
    # and the generated documentation expect 3000 unless overridden.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=_default_port)

    # Public base URL advertised in the OpenAPI ``servers`` list.
    server_url: str = field(default_factory=_default_server_url)

    # Path of the Swagger UI page.
    docs_url: str = field(default_factory=lambda: os.getenv("DOCS_URL", "/api-docs"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  ``create_app`` accepts an
# explicit instance, which is how tests override values.
settings = Settings()
