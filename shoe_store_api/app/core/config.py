"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; override them via the
environment in a real deployment.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Shoe Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the SQLite file backing the durable map.  A relative path
    # is resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "shoe_store.db")

    # Name of the table that holds the shoe map.
    shoe_table: str = os.getenv("SHOE_TABLE", "shoes")

    # Size bounds of a single map entry, in bytes.
    max_key_size: int = int(os.getenv("MAX_KEY_SIZE", "44"))
    max_value_size: int = int(os.getenv("MAX_VALUE_SIZE", "1024"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
