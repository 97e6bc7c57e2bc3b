"""Pydantic model for Arion flashcards and their text representation."""

import math
import re
from collections.abc import Sequence
from datetime import date, timedelta
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field as ModelField, ValidationError

from arion.core.errors import (
    DateFormatError,
    IntervalFormatError,
    InvalidArgumentError,
    NullInputError,
)

# Growth applied to the review interval after a successful recall
INTERVAL_GROWTH = 1.6

# Longest review interval, about 273 years; keeps review dates inside the calendar
MAX_INTERVAL = 100_000

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DATE_PATTERN = re.compile(r"(?P<month>[A-Za-z]+) (?P<day>[0-9]{1,2}), (?P<year>[0-9]{4})")
_DAY_SUFFIX = re.compile(r" days?")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class Field(StrEnum):
    """The four sortable and editable fields of a flashcard."""

    FRONT = "front"
    BACK = "back"
    REVIEW_DATE = "review-date"
    REVIEW_INTERVAL = "review-interval"

    @property
    def label(self) -> str:
        """Human readable column title."""
        return self.value.replace("-", " ").title()


FIELDS = tuple(Field)
FIELD_COUNT = len(FIELDS)
FIELD_TITLES = tuple(field.label for field in FIELDS)


def format_date(value: date) -> str:
    """Format a date as e.g. "October 4, 2024"."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year:04d}"


def parse_date(text: str) -> date:
    """Parse a date written as "MonthName D, YYYY".

    The month name is case-sensitive and the date must exist on the
    calendar, so "February 29, 2023" is rejected.
    """
    if text is None:
        raise NullInputError("Cannot parse date because it is null.")

    match = _DATE_PATTERN.fullmatch(text)
    if match is None or match["month"] not in MONTH_NAMES:
        raise DateFormatError(f"Review date is improperly formatted: {text!r}")

    try:
        return date(int(match["year"]), MONTH_NAMES.index(match["month"]) + 1, int(match["day"]))
    except ValueError as e:
        raise DateFormatError(f"Review date does not exist: {text!r}") from e


def format_interval(days: int) -> str:
    """Format an interval as "1 day" or "N days"."""
    return f"{days} day" if days == 1 else f"{days} days"


def parse_interval(text: str) -> int:
    """Parse a review interval such as "3", "3 days" or "1 Day"."""
    if text is None:
        raise NullInputError("Cannot parse interval because it is null.")

    cleaned = _DAY_SUFFIX.sub("", text.lower())
    if not _INTEGER.fullmatch(cleaned):
        raise IntervalFormatError(f"Review interval is not a valid number: {text!r}")

    days = int(cleaned)
    if days <= 0:
        raise IntervalFormatError(f"Review interval must be at least one day: {text!r}")
    if days > MAX_INTERVAL:
        raise IntervalFormatError(
            f"Review interval must be at most {MAX_INTERVAL} days: {text!r}"
        )
    return days


class Flashcard(BaseModel):
    """One flashcard with its spaced-repetition schedule.

    Cards are immutable; scheduling and editing produce new instances.
    """

    model_config = ConfigDict(frozen=True)

    front: str
    back: str
    review_date: date = ModelField(default_factory=date.today)
    review_interval: int = ModelField(default=1, ge=1, le=MAX_INTERVAL)

    def __init__(self, **data: Any) -> None:
        for name in ("front", "back"):
            if data.get(name) is None:
                raise NullInputError(f"Attempted to construct flashcard with null {name}.")
        if "review_date" in data and data["review_date"] is None:
            raise NullInputError("Attempted to construct flashcard with null review_date.")

        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            location = ".".join(str(part) for part in error["loc"])
            raise InvalidArgumentError(
                f"Attempted to construct flashcard with invalid {location}: {error['msg']}"
            ) from e

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Flashcard":
        """Build a card from two (front, back) or four textual fields.

        Raises:
            DateFormatError: the review date text is malformed
            IntervalFormatError: the review interval text is malformed
        """
        if fields is None:
            raise NullInputError("Received null field array.")

        if len(fields) == 2:
            return cls(front=fields[0], back=fields[1])
        if len(fields) == FIELD_COUNT:
            return cls(
                front=fields[0],
                back=fields[1],
                review_date=parse_date(fields[2]),
                review_interval=parse_interval(fields[3]),
            )

        raise InvalidArgumentError(f"Field array has to be of length two or four, got {len(fields)}.")

    def to_fields(self) -> tuple[str, str, str, str]:
        """Render all four fields as text, in Field order."""
        return (
            self.front,
            self.back,
            format_date(self.review_date),
            format_interval(self.review_interval),
        )

    def is_due(self, today: date | None = None) -> bool:
        """Whether the card's review date is on or before today."""
        if today is None:
            today = date.today()
        return self.review_date <= today

    def update_review(self, success: bool, today: date | None = None) -> "Flashcard":
        """Return the card rescheduled after a review.

        A successful recall schedules the card the current interval ahead
        and grows the interval; a failed one makes it due today with the
        interval reset to one day. The grown interval is capped at
        MAX_INTERVAL.

        Raises:
            InvalidArgumentError: the next review date would fall after
                the last representable date
        """
        if today is None:
            today = date.today()

        if success:
            try:
                review_date = today + timedelta(days=self.review_interval)
            except OverflowError as e:
                raise InvalidArgumentError(
                    f"Review date {self.review_interval} days after {format_date(today)} "
                    "is out of range."
                ) from e
            grown = math.floor(self.review_interval * INTERVAL_GROWTH) + 1
            return self.model_copy(
                update={
                    "review_date": review_date,
                    "review_interval": min(grown, MAX_INTERVAL),
                }
            )
        return self.model_copy(update={"review_date": today, "review_interval": 1})
