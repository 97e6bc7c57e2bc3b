"""In-memory deck of flashcards and its editing operations."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import date

from arion.core.errors import (
    DateFormatError,
    FieldFormatError,
    InvalidArgumentError,
    NullInputError,
)
from arion.core.models import FIELD_COUNT, Field, Flashcard
from arion.core.sorter import merge_sort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditResult:
    """Outcome of editing one flashcard.

    Exactly one of ``card`` and ``error`` is set. When ``error`` is set
    the edit was discarded and the deck is unchanged.
    """

    index: int
    card: Flashcard | None = None
    error: FieldFormatError | None = None

    @property
    def applied(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Warning describing a discarded edit, numbered from 1."""
        if self.error is None:
            return None
        what = "review date" if isinstance(self.error, DateFormatError) else "review interval"
        return f"Incorrectly formatted {what}; discarding edits to flashcard #{self.index + 1}"


class Deck:
    """Ordered collection of flashcards.

    Insertion order is meaningful: it is the default display order and
    the order written to disk.
    """

    def __init__(self, cards: Iterable[Flashcard] = ()):
        if cards is None:
            raise NullInputError("Cannot build a deck from null.")
        self._cards: list[Flashcard] = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Flashcard:
        self._check_index(index)
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Deck({self._cards!r})"

    def snapshot(self) -> tuple[Flashcard, ...]:
        """Current cards, for rendering."""
        return tuple(self._cards)

    def due_indices(self, today: date | None = None) -> list[int]:
        """Indices of due cards, in deck order."""
        return [i for i, card in enumerate(self._cards) if card.is_due(today)]

    def add(self, fields: Sequence[str]) -> Flashcard:
        """Append a card built from ``[front, back]`` with a default schedule."""
        if fields is None:
            raise NullInputError("Null field array when trying to add flashcard.")
        if len(fields) != 2:
            raise InvalidArgumentError(
                "Could not construct flashcard because field array is improperly sized."
            )

        card = Flashcard(front=fields[0], back=fields[1])
        self._cards.append(card)
        return card

    def edit(self, index: int, fields: Sequence[str]) -> EditResult:
        """Replace the card at ``index`` by parsing all four ``fields``.

        A malformed review date or interval does not raise: the edit is
        discarded and reported through the returned result.
        """
        if fields is None:
            raise NullInputError(f"Null flashcard fields when trying to edit flashcard #{index + 1}")
        if len(fields) != FIELD_COUNT:
            raise InvalidArgumentError("Editing flashcards requires four fields.")
        self._check_index(index)

        try:
            card = Flashcard.from_fields(fields)
        except FieldFormatError as e:
            logger.warning("Discarding edits to flashcard #%d: %s", index + 1, e)
            return EditResult(index=index, error=e)

        self._cards[index] = card
        return EditResult(index=index, card=card)

    def delete(self, indices: Sequence[int]) -> list[Flashcard]:
        """Remove the cards at strictly ascending ``indices``.

        All indices are validated before anything is removed. Returns the
        removed cards in ascending index order.
        """
        if indices is None:
            raise NullInputError("Null array when trying to delete flashcard.")
        indices = list(indices)

        previous = None
        for index in indices:
            self._check_index(index)
            if previous is not None and index <= previous:
                raise InvalidArgumentError("Indices to delete were not provided in ascending order.")
            previous = index

        removed = []
        for index in reversed(indices):
            removed.append(self._cards.pop(index))
        removed.reverse()

        logger.debug("Deleted %d flashcards", len(removed))
        return removed

    def replace(self, index: int, card: Flashcard) -> None:
        """Put ``card`` at ``index`` in place of the current card."""
        if card is None:
            raise NullInputError("Cannot place a null flashcard in the deck.")
        self._check_index(index)
        self._cards[index] = card

    def sort(self, field: Field, reverse: bool = False) -> None:
        """Reorder the deck by ``field``. An empty deck is left as is."""
        if field is None:
            raise NullInputError("Cannot sort with null field.")
        if not self._cards:
            return

        self._cards = merge_sort(self._cards, field, reverse)
        logger.debug("Sorted %d flashcards by %s (reverse=%s)", len(self._cards), field, reverse)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"Flashcard index must be an integer, got {index!r}.")
        if index < 0 or index >= len(self._cards):
            raise InvalidArgumentError(
                f"Invalid index {index} for a deck of {len(self._cards)} flashcards."
            )
