"""
Application settings, read from environment variables.

* CHESS_DATABASE_URL: SQLAlchemy URL of the database storing game sessions.
* CHESS_DATABASE_ECHO: log every SQL statement (1/true/yes/on).
* CHESS_LOG_LEVEL: level name passed on to the logging module.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_DATABASE_URL = "sqlite:///./chess_sessions.db"
TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (or from any mapping, which makes testing easy)."""
    env = os.environ if environ is None else environ
    return Settings(
        database_url=env.get("CHESS_DATABASE_URL", DEFAULT_DATABASE_URL),
        database_echo=env.get("CHESS_DATABASE_ECHO", "false").strip().lower() in TRUTHY,
        log_level=env.get("CHESS_LOG_LEVEL", "INFO").strip().upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
