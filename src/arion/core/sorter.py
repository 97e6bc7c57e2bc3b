"""Field comparator and merge sort over flashcards."""

from collections.abc import Sequence

from arion.core.errors import InvalidArgumentError, NullInputError
from arion.core.models import Field, Flashcard


def compare(a: Flashcard, b: Flashcard, field: Field, reverse: bool = False) -> bool:
    """Whether ``a`` is correctly ordered before-or-equal ``b`` on ``field``.

    Text fields compare case-insensitively. With ``reverse`` the result
    of the non-strict comparison is negated, so two cards that tie on
    ``field`` compare False when reversed.
    """
    if field == Field.FRONT:
        comparison = a.front.lower() <= b.front.lower()
    elif field == Field.BACK:
        comparison = a.back.lower() <= b.back.lower()
    elif field == Field.REVIEW_DATE:
        comparison = a.review_date <= b.review_date
    elif field == Field.REVIEW_INTERVAL:
        comparison = a.review_interval <= b.review_interval
    else:
        raise InvalidArgumentError(f"Unknown field: {field!r}")

    return not comparison if reverse else comparison


def merge_sort(
    cards: Sequence[Flashcard],
    field: Field,
    reverse: bool = False,
    start: int = 0,
    length: int | None = None,
) -> list[Flashcard]:
    """Sort the window ``cards[start:start + length]`` by ``field``.

    Returns a new list; ``cards`` is not modified. ``length`` defaults to
    the rest of the sequence.
    """
    if cards is None:
        raise NullInputError("Cannot sort a null sequence of flashcards.")
    if field is None:
        raise NullInputError("Cannot sort with null field.")
    if not isinstance(field, Field):
        raise InvalidArgumentError(f"Unknown field: {field!r}")
    if length is None:
        length = len(cards) - start
    if not cards:
        raise InvalidArgumentError("Cannot sort an empty sequence of flashcards.")
    if start < 0 or length < 1 or start + length > len(cards):
        raise InvalidArgumentError(
            f"Sort window (start={start}, length={length}) is out of bounds for {len(cards)} cards."
        )

    return _merge_sort(cards, field, reverse, start, length)


def _merge_sort(
    cards: Sequence[Flashcard], field: Field, reverse: bool, start: int, length: int
) -> list[Flashcard]:
    if length == 1:
        return [cards[start]]
    if length == 2:
        first, second = cards[start], cards[start + 1]
        if compare(first, second, field, reverse):
            return [first, second]
        return [second, first]

    half = length // 2
    left = _merge_sort(cards, field, reverse, start, half)
    right = _merge_sort(cards, field, reverse, start + half, length - half)

    merged: list[Flashcard] = []
    left_idx = right_idx = 0
    while len(merged) < length:
        if left_idx == len(left):
            take_left = False
        elif right_idx == len(right):
            take_left = True
        else:
            take_left = compare(left[left_idx], right[right_idx], field, reverse)

        if take_left:
            merged.append(left[left_idx])
            left_idx += 1
        else:
            merged.append(right[right_idx])
            right_idx += 1

    return merged
