"""Tests for Deck operations."""

from datetime import date, timedelta

import pytest
from arion.core.deck import Deck, EditResult
from arion.core.errors import (
    DateFormatError,
    IntervalFormatError,
    InvalidArgumentError,
    NullInputError,
)
from arion.core.models import Field, Flashcard

TODAY = date(2024, 10, 4)


def _card(front: str, interval: int = 1, days_ahead: int = 0) -> Flashcard:
    return Flashcard(
        front=front,
        back=front.upper(),
        review_date=TODAY + timedelta(days=days_ahead),
        review_interval=interval,
    )


@pytest.fixture
def deck():
    """A deck of five cards a..e."""
    return Deck(_card(front) for front in "abcde")


def _fronts(deck: Deck) -> list[str]:
    return [card.front for card in deck]


class TestAdd:
    """Tests for Deck.add."""

    def test_add_appends_with_defaults(self, deck):
        card = deck.add(["f", "F"])
        assert len(deck) == 6
        assert deck[5] is card
        assert card.front == "f"
        assert card.back == "F"
        assert card.review_date == date.today()
        assert card.review_interval == 1

    def test_add_empty_text(self):
        deck = Deck()
        deck.add(["", ""])
        assert deck[0].front == ""

    @pytest.mark.parametrize("fields", [[], ["only front"], ["f", "b", "October 4, 2024", "1 day"]])
    def test_add_wrong_length(self, deck, fields):
        with pytest.raises(InvalidArgumentError):
            deck.add(fields)
        assert len(deck) == 5

    def test_add_null(self, deck):
        with pytest.raises(NullInputError):
            deck.add(None)


class TestEdit:
    """Tests for Deck.edit."""

    def test_edit_replaces_card(self, deck):
        result = deck.edit(1, ["new front", "new back", "March 1, 2025", "6 days"])
        assert isinstance(result, EditResult)
        assert result.applied
        assert result.error is None
        assert result.message is None
        assert deck[1] == Flashcard(
            front="new front", back="new back", review_date=date(2025, 3, 1), review_interval=6
        )
        assert result.card == deck[1]
        assert _fronts(deck) == ["a", "new front", "c", "d", "e"]

    def test_bad_date_discards_edit(self, deck):
        before = deck.snapshot()
        result = deck.edit(1, ["x", "y", "Febtober 40, 2024", "1 day"])
        assert not result.applied
        assert isinstance(result.error, DateFormatError)
        assert result.card is None
        assert result.message == "Incorrectly formatted review date; discarding edits to flashcard #2"
        assert deck.snapshot() == before

    def test_bad_interval_discards_edit(self, deck):
        before = deck.snapshot()
        result = deck.edit(4, ["x", "y", "October 4, 2024", "0 days"])
        assert not result.applied
        assert isinstance(result.error, IntervalFormatError)
        assert "review interval" in result.message
        assert "#5" in result.message
        assert deck.snapshot() == before

    @pytest.mark.parametrize("fields", [["x", "y"], ["x", "y", "October 4, 2024"]])
    def test_wrong_length(self, deck, fields):
        with pytest.raises(InvalidArgumentError):
            deck.edit(0, fields)

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_index_out_of_range(self, deck, index):
        with pytest.raises(InvalidArgumentError):
            deck.edit(index, ["x", "y", "October 4, 2024", "1 day"])

    def test_null_fields(self, deck):
        with pytest.raises(NullInputError):
            deck.edit(0, None)


class TestDelete:
    """Tests for Deck.delete."""

    def test_delete_middle(self, deck):
        removed = deck.delete([1, 2, 3])
        assert _fronts(deck) == ["a", "e"]
        assert [c.front for c in removed] == ["b", "c", "d"]

    def test_delete_first_and_last(self, deck):
        deck.delete([0, 4])
        assert _fronts(deck) == ["b", "c", "d"]

    def test_delete_nothing(self, deck):
        assert deck.delete([]) == []
        assert len(deck) == 5

    def test_delete_all(self, deck):
        deck.delete(range(5))
        assert len(deck) == 0

    @pytest.mark.parametrize(
        "indices",
        [
            [2, 3, 1],  # not ascending
            [1, 1],  # repeated
            [1, 5],  # out of range
            [-1, 2],  # negative
            [0, 2, 9],  # out of range after valid ones
        ],
    )
    def test_invalid_indices_leave_deck_unchanged(self, deck, indices):
        with pytest.raises(InvalidArgumentError):
            deck.delete(indices)
        assert _fronts(deck) == ["a", "b", "c", "d", "e"]

    def test_delete_null(self, deck):
        with pytest.raises(NullInputError):
            deck.delete(None)


class TestSortAndQueries:
    """Tests for sorting, due cards and replacement."""

    def test_sort_by_interval(self):
        deck = Deck(_card(str(i), interval=i) for i in [20, 2, 38, 10])
        deck.sort(Field.REVIEW_INTERVAL)
        assert [c.review_interval for c in deck] == [2, 10, 20, 38]

    def test_sort_reversed_front(self, deck):
        deck.sort(Field.FRONT, reverse=True)
        assert _fronts(deck) == ["e", "d", "c", "b", "a"]

    def test_sort_empty_deck(self):
        deck = Deck()
        deck.sort(Field.FRONT)
        assert len(deck) == 0

    def test_sort_null_field(self, deck):
        with pytest.raises(NullInputError):
            deck.sort(None)

    def test_due_indices(self):
        deck = Deck(
            [
                _card("past", days_ahead=-2),
                _card("future", days_ahead=3),
                _card("today", days_ahead=0),
            ]
        )
        assert deck.due_indices(TODAY) == [0, 2]
        assert deck.due_indices(TODAY + timedelta(days=3)) == [0, 1, 2]

    def test_replace(self, deck):
        deck.replace(2, _card("z"))
        assert _fronts(deck) == ["a", "b", "z", "d", "e"]

    def test_getitem_out_of_range(self, deck):
        with pytest.raises(InvalidArgumentError):
            deck[5]

    def test_snapshot_is_a_copy(self, deck):
        snapshot = deck.snapshot()
        deck.add(["f", "F"])
        assert len(snapshot) == 5

    def test_null_deck(self):
        with pytest.raises(NullInputError):
            Deck(None)
