"""Shared CLI helpers: configuration, logging and deck loading."""

import functools
import logging
from collections.abc import Callable

import typer
from rich import print as rprint
from rich.markup import escape

from arion.config import ArionConfig, load_config
from arion.core.deck import Deck
from arion.core.errors import (
    DatabaseFormatError,
    DatabaseReadError,
    DatabaseWriteError,
    InvalidArgumentError,
)
from arion.core.storage import DeckDatabase

logger = logging.getLogger(__name__)

# Global config instance (initialized lazily)
_config: ArionConfig | None = None


def get_config() -> ArionConfig:
    """Get or load the configuration."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_database() -> DeckDatabase:
    """Deck database at the configured path."""
    return DeckDatabase(get_config().database)


def attach_log_handler(config: ArionConfig) -> logging.Handler:
    """Send ``arion`` log records to the configured log file.

    The file is only created once something is logged.
    """
    handler = logging.FileHandler(config.log_file, encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("arion")
    package_logger.setLevel(config.log_level)
    package_logger.addHandler(handler)
    return handler


def detach_log_handler(handler: logging.Handler) -> None:
    logging.getLogger("arion").removeHandler(handler)
    handler.close()


def log_errors(command: Callable[..., None]) -> Callable[..., None]:
    """Log unexpected errors from a command with their traceback and exit 1."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs) -> None:
        try:
            command(*args, **kwargs)
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            logger.exception("Unexpected error in '%s'", command.__name__)
            rprint(f"[red]Error: {escape(str(e))}[/red]")
            rprint(f"[dim]See {get_config().log_file} for details.[/dim]")
            raise typer.Exit(1)

    return wrapper


def load_deck(database: DeckDatabase) -> Deck:
    """Read the deck or exit with an error."""
    try:
        return database.read()
    except DatabaseReadError as e:
        logger.error("%s", e, exc_info=True)
        rprint(f"[red]Cannot read {database.path}[/red]")
        rprint("[dim]Does it exist? Run 'arion init' to create it.[/dim]")
        raise typer.Exit(1)
    except DatabaseFormatError as e:
        logger.error("%s", e, exc_info=True)
        rprint(f"[red]Database file is improperly formatted: {database.path}[/red]")
        rprint(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(1)


def save_deck(database: DeckDatabase, deck: Deck) -> None:
    """Write the deck or exit with an error."""
    try:
        database.write(deck)
    except DatabaseWriteError as e:
        logger.error("%s", e, exc_info=True)
        rprint(f"[red]Cannot write to {database.path}[/red]")
        raise typer.Exit(1)
    except InvalidArgumentError as e:
        rprint(f"[red]Could not save flashcards: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def to_index(number: int) -> int:
    """Convert a 1-based flashcard number to a deck index."""
    return number - 1
