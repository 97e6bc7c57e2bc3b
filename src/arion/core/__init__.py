"""Core library for Arion."""

from arion.core.deck import Deck, EditResult
from arion.core.errors import (
    ArionError,
    DatabaseError,
    DatabaseFormatError,
    DatabaseReadError,
    DatabaseWriteError,
    DateFormatError,
    FieldFormatError,
    IntervalFormatError,
    InvalidArgumentError,
    NullInputError,
    SessionStateError,
)
from arion.core.models import FIELD_TITLES, FIELDS, MAX_INTERVAL, Field, Flashcard
from arion.core.session import ReviewResult, ReviewSession, SessionState, Side
from arion.core.sorter import compare, merge_sort
from arion.core.storage import DeckDatabase, decode_deck, encode_deck

__all__ = [
    # Models
    "FIELDS",
    "FIELD_TITLES",
    "MAX_INTERVAL",
    "Field",
    "Flashcard",
    # Deck
    "Deck",
    "EditResult",
    "compare",
    "merge_sort",
    # Storage
    "DeckDatabase",
    "decode_deck",
    "encode_deck",
    # Session
    "ReviewResult",
    "ReviewSession",
    "SessionState",
    "Side",
    # Errors
    "ArionError",
    "DatabaseError",
    "DatabaseFormatError",
    "DatabaseReadError",
    "DatabaseWriteError",
    "DateFormatError",
    "FieldFormatError",
    "IntervalFormatError",
    "InvalidArgumentError",
    "NullInputError",
    "SessionStateError",
]
