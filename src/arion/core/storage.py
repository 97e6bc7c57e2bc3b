"""Flat-file storage for decks.

A deck file is a header line holding the number of flashcards, followed
by four lines per flashcard::

    2
    Front
    Back
    October 4, 2024
    3 days
    ...

Lines are newline-delimited with no escaping, so card text may not
contain line breaks.
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from arion.core.deck import Deck
from arion.core.errors import (
    DatabaseFormatError,
    DatabaseReadError,
    DatabaseWriteError,
    FieldFormatError,
    InvalidArgumentError,
    NullInputError,
)
from arion.core.models import FIELD_COUNT, Flashcard

logger = logging.getLogger(__name__)

_COUNT = re.compile(r"[+-]?[0-9]+")
_LINE_BREAKS = re.compile(r"[\r\n]")


def encode_deck(cards: Iterable[Flashcard]) -> str:
    """Serialize cards, in order, to the deck file format."""
    if cards is None:
        raise NullInputError("Null flashcard sequence")

    cards = list(cards)
    lines = [str(len(cards))]
    for number, card in enumerate(cards, 1):
        if card is None:
            raise NullInputError(f"Null flashcard #{number}")
        fields = card.to_fields()
        if any(_LINE_BREAKS.search(field) for field in fields):
            raise InvalidArgumentError(f"Flashcard #{number} contains a line break.")
        lines.extend(fields)

    return "".join(f"{line}\n" for line in lines)


def decode_deck(text: str) -> list[Flashcard]:
    """Parse the deck file format.

    Raises:
        DatabaseFormatError: missing or non-numeric header, a malformed
            flashcard, or fewer or more lines than the header declares
    """
    if text is None:
        raise NullInputError("Cannot decode null text.")

    lines = iter(_split_lines(text))

    header = next(lines, None)
    if header is None:
        raise DatabaseFormatError("Database file is empty.")
    if not _COUNT.fullmatch(header):
        raise DatabaseFormatError(f"Database header is not a flashcard count: {header!r}")
    count = int(header)
    if count < 0:
        raise DatabaseFormatError(f"Database header has a negative flashcard count: {count}")

    cards = []
    for number in range(1, count + 1):
        fields = [next(lines, None) for _ in range(FIELD_COUNT)]
        if fields[-1] is None:
            raise DatabaseFormatError("Database file is too short.")

        try:
            cards.append(Flashcard.from_fields(fields))
        except FieldFormatError as e:
            raise DatabaseFormatError(
                f"Database has incorrectly formatted flashcard #{number}\n{e}"
            ) from e

    if next(lines, None) is not None:
        raise DatabaseFormatError("Database file is too long.")

    return cards


def _split_lines(text: str) -> list[str]:
    """Split on \\n, \\r\\n or \\r, ignoring a final line terminator."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class DeckDatabase:
    """Reads and writes a deck from a single flat file."""

    def __init__(self, path: Path | str):
        if path is None:
            raise NullInputError("Null file name for deck database.")
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Deck:
        """Load the whole deck. Nothing is returned unless every record parses."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DatabaseFormatError(f"{self.path} is not valid UTF-8 text.") from e
        except OSError as e:
            raise DatabaseReadError(f"Cannot read {self.path}") from e

        deck = Deck(decode_deck(text))
        logger.debug("Read %d flashcards from %s", len(deck), self.path)
        return deck

    def write(self, cards: Iterable[Flashcard]) -> None:
        """Overwrite the file with ``cards``.

        The content is fully encoded before the file is opened, so an
        unencodable deck leaves the file untouched.
        """
        if cards is None:
            raise NullInputError("Null Flashcard Array")

        cards = list(cards)
        text = encode_deck(cards)
        try:
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise DatabaseWriteError(f"Cannot write to {self.path}") from e

        logger.debug("Wrote %d flashcards to %s", len(cards), self.path)
