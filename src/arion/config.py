"""Environment-driven configuration for the Arion application."""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, field_validator

DEFAULT_DATABASE = "flashcards.txt"
DEFAULT_LOG_FILE = "log.txt"


class ArionConfig(BaseModel):
    """Locations of the deck and log files, and the log level."""

    database: Path = Path(DEFAULT_DATABASE)
    log_file: Path = Path(DEFAULT_LOG_FILE)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_config() -> ArionConfig:
    """Build the configuration from ARION_* environment variables."""
    return ArionConfig(
        database=Path(os.environ.get("ARION_DATABASE", Path.cwd() / DEFAULT_DATABASE)),
        log_file=Path(os.environ.get("ARION_LOG_FILE", Path.cwd() / DEFAULT_LOG_FILE)),
        log_level=os.environ.get("ARION_LOG_LEVEL", "INFO"),
    )
