"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the API can be
started without any configuration, for example in local development or
in the test suite.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Football API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset, logs only go to the console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the SQLite database file.  Relative paths are resolved
    # against the package root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "football.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Pagination bounds for the list endpoints.
    default_page_size: int = 10
    max_page_size: int = 100


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
