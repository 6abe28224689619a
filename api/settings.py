"""
Environment configuration and logging setup.

Values are read from the environment after loading an optional `.env` file
from the project root.

Environment variables:
- LOG_LEVEL: logging level name (default: INFO)
- LOG_FORMAT: logging format string
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Look for .env in the project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """Resolve LOG_LEVEL to a logging level number."""
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise RuntimeError(
            f"Invalid environment variable: LOG_LEVEL={name!r}. "
            "Set LOG_LEVEL to one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    return level


def get_log_format() -> str:
    return os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT


def configure_logging() -> None:
    """Configure root logging from the environment. Called by the host at startup."""
    logging.basicConfig(level=get_log_level(), format=get_log_format())


__all__ = ["get_log_level", "get_log_format", "configure_logging"]
