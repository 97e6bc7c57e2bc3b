"""Main CLI entry point for Arion."""

import logging

import typer
from dotenv import load_dotenv
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from arion.cli.helpers import (
    attach_log_handler,
    detach_log_handler,
    get_config,
    get_database,
    load_deck,
    log_errors,
    save_deck,
    to_index,
)
from arion.core.deck import Deck
from arion.core.errors import InvalidArgumentError
from arion.core.models import FIELD_TITLES, Field, format_date
from arion.core.samples import sample_deck
from arion.core.session import ReviewSession

load_dotenv()

app = typer.Typer(
    name="arion",
    help="Spaced repetition flashcards kept in a plain text file.",
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main(ctx: typer.Context) -> None:
    """Spaced repetition flashcards kept in a plain text file."""
    handler = attach_log_handler(get_config())
    ctx.call_on_close(lambda: detach_log_handler(handler))


# ============================================================================
# INIT command
# ============================================================================


@app.command()
@log_errors
def init(
    sample: bool = typer.Option(
        False,
        "--sample",
        help="Fill the new deck with general-knowledge sample cards",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing deck file",
    ),
) -> None:
    """Create the deck file."""
    database = get_database()
    if database.exists() and not force:
        rprint(f"[red]Deck file already exists:[/red] {database.path}")
        rprint("[dim]Use --force to overwrite it.[/dim]")
        raise typer.Exit(1)

    deck = sample_deck() if sample else Deck()
    save_deck(database, deck)
    logger.info("Initialized %s with %d flashcards", database.path, len(deck))
    rprint(f"[green]Wrote {len(deck)} flashcards.[/green]")


# ============================================================================
# ADD / EDIT / DELETE commands
# ============================================================================


@app.command()
@log_errors
def add(
    front: str = typer.Argument(..., help="Question side of the card"),
    back: str = typer.Argument(..., help="Answer side of the card"),
) -> None:
    """Add a flashcard, due today."""
    database = get_database()
    deck = load_deck(database)

    deck.add([front, back])
    save_deck(database, deck)
    rprint(f"[green]Added flashcard #{len(deck)}.[/green]")


@app.command()
@log_errors
def edit(
    number: int = typer.Argument(..., help="Flashcard number, as shown by 'arion list'"),
    front: str = typer.Argument(...),
    back: str = typer.Argument(...),
    review_date: str = typer.Argument(..., help='Next review date, e.g. "October 4, 2024"'),
    review_interval: str = typer.Argument(..., help='Review interval, e.g. "3 days"'),
) -> None:
    """Replace all four fields of a flashcard."""
    database = get_database()
    deck = load_deck(database)

    try:
        result = deck.edit(to_index(number), [front, back, review_date, review_interval])
    except InvalidArgumentError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not result.applied:
        rprint(f"[yellow]Warning: {result.message}[/yellow]")
        rprint(f"[dim]{escape(str(result.error))}[/dim]")
        raise typer.Exit(1)

    save_deck(database, deck)
    rprint(f"[green]Updated flashcard #{number}.[/green]")


@app.command()
@log_errors
def delete(
    numbers: list[int] = typer.Argument(..., help="Flashcard numbers, in ascending order"),
) -> None:
    """Delete flashcards."""
    database = get_database()
    deck = load_deck(database)

    try:
        removed = deck.delete([to_index(n) for n in numbers])
    except InvalidArgumentError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    save_deck(database, deck)
    rprint(f"[green]Deleted {len(removed)} flashcards.[/green]")


# ============================================================================
# LIST / SORT commands
# ============================================================================


@app.command("list")
@log_errors
def list_cards(
    due: bool = typer.Option(
        False,
        "--due",
        "-d",
        help="Only show flashcards due today",
    ),
) -> None:
    """List flashcards in deck order."""
    deck = load_deck(get_database())
    due_indices = deck.due_indices()

    if not len(deck):
        rprint("[dim]No flashcards found.[/dim]")
        return

    table = Table(title=f"Flashcards ({len(deck)} total, {len(due_indices)} due)")
    table.add_column("#", style="dim", justify="right")
    for field, title in zip(Field, FIELD_TITLES):
        table.add_column(title, style="cyan" if field == Field.FRONT else None)

    shown = due_indices if due else range(len(deck))
    for index in shown:
        table.add_row(str(index + 1), *(Text(value) for value in deck[index].to_fields()))

    console.print(table)


@app.command()
@log_errors
def sort(
    field: Field = typer.Argument(..., help="Field to sort by"),
    reverse: bool = typer.Option(
        False,
        "--reverse",
        "-r",
        help="Sort backwards",
    ),
) -> None:
    """Reorder the deck by a field."""
    database = get_database()
    deck = load_deck(database)

    deck.sort(field, reverse)
    save_deck(database, deck)
    direction = "backwards" if reverse else "forwards"
    rprint(f"[green]Sorted {len(deck)} flashcards by {field.label.lower()}, {direction}.[/green]")


# ============================================================================
# STUDY command
# ============================================================================


@app.command()
@log_errors
def study() -> None:
    """Review every due flashcard.

    Cards answered incorrectly come around again after the rest of the
    due cards. Progress is saved after every answer.
    """
    database = get_database()
    deck = load_deck(database)
    session = ReviewSession(deck)

    if not session.start():
        rprint("[dim]There are no flashcards due to study.[/dim]")
        return

    while not session.complete:
        console.print(
            Panel(Text(session.current_text), title=f"Front ({session.remaining} remaining)")
        )
        typer.prompt("Press Enter to flip", default="", show_default=False)

        session.flip()
        console.print(Panel(Text(session.current_text), title="Back"))
        success = typer.confirm("Correct?", default=True)

        result = session.grade(success)
        save_deck(database, deck)
        if result.success:
            rprint(f"[green]Next review on {format_date(result.due_next)}.[/green]\n")
        else:
            rprint("[yellow]This card will come around again.[/yellow]\n")

    console.print(
        Panel(
            f"[green]You have studied every due flashcard![/green] ({session.reviewed} answers)",
            title="Success",
        )
    )


if __name__ == "__main__":
    app()
