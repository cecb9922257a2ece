"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_URL", "sqlite:///").replace("sqlite:///", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "dsmovie.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_seed_database() -> bool:
    """Whether to load seed data into an empty database at startup."""
    return os.getenv("SEED_DATABASE", "true").strip().lower() in ("1", "true", "yes", "on")


def get_log_dir() -> str:
    """Get the directory for the API log file."""
    return os.getenv("LOG_DIR", "logs")
