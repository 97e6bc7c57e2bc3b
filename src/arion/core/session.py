"""Review session state machine over the due cards of a deck."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from arion.core.deck import Deck
from arion.core.errors import NullInputError, SessionStateError
from arion.core.models import Flashcard

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    """Lifecycle of a review session."""

    IDLE = "idle"
    REVIEWING = "reviewing"
    SUCCESS = "success"


class Side(StrEnum):
    """Which side of the current card is shown."""

    FRONT = "front"
    BACK = "back"


@dataclass
class ReviewResult:
    """Result of grading one card."""

    index: int
    success: bool
    reviewed_on: date
    card_before: Flashcard
    card: Flashcard
    requeued: bool

    @property
    def due_next(self) -> date:
        """Date the graded card is next due."""
        return self.card.review_date


class ReviewSession:
    """Drives the due cards of a deck through flip and grade steps.

    The queue holds deck indices, so the deck must not be reordered or
    shrunk while the session is reviewing. Failed cards go to the back of
    the queue and come around again after every other queued card.
    """

    def __init__(self, deck: Deck):
        if deck is None:
            raise NullInputError("Cannot review a null deck.")
        self.deck = deck
        self.state = SessionState.IDLE
        self.side: Side | None = None
        self.reviewed = 0
        self._queue: deque[int] = deque()

    @property
    def current(self) -> Flashcard | None:
        """The card under review, or None outside the reviewing state."""
        if self.state != SessionState.REVIEWING:
            return None
        return self.deck[self._queue[0]]

    @property
    def current_index(self) -> int | None:
        """Deck index of the card under review, or None."""
        if self.state != SessionState.REVIEWING:
            return None
        return self._queue[0]

    @property
    def current_text(self) -> str | None:
        """Text of the side currently shown."""
        card = self.current
        if card is None:
            return None
        return card.front if self.side == Side.FRONT else card.back

    @property
    def remaining(self) -> int:
        """Number of cards still queued, including the current one."""
        return len(self._queue)

    @property
    def complete(self) -> bool:
        return self.state == SessionState.SUCCESS

    def start(self, today: date | None = None) -> bool:
        """Queue every due card in deck order and show the first front.

        Returns False, leaving the session idle, when nothing is due.
        """
        if self.state == SessionState.REVIEWING:
            raise SessionStateError("A review session is already in progress.")

        self._queue = deque(self.deck.due_indices(today))
        self.reviewed = 0
        if not self._queue:
            self.state = SessionState.IDLE
            self.side = None
            logger.info("There are no flashcards due to study")
            return False

        self.state = SessionState.REVIEWING
        self.side = Side.FRONT
        logger.info("Started review session with %d due flashcards", len(self._queue))
        return True

    def flip(self) -> None:
        """Show the back of the current card."""
        if self.state != SessionState.REVIEWING:
            raise SessionStateError(f"Cannot flip a card while the session is {self.state}.")
        if self.side == Side.BACK:
            raise SessionStateError("The current card is already flipped.")
        self.side = Side.BACK

    def grade(self, success: bool, today: date | None = None) -> ReviewResult:
        """Reschedule the current card and advance the queue.

        A failed card is re-queued at the back. The session reaches
        SUCCESS once the queue is empty.
        """
        if self.state != SessionState.REVIEWING:
            raise SessionStateError(f"Cannot grade a card while the session is {self.state}.")
        if self.side != Side.BACK:
            raise SessionStateError("Flip the card before grading it.")
        if today is None:
            today = date.today()

        # The queue only advances once the new schedule is known
        index = self._queue[0]
        before = self.deck[index]
        after = before.update_review(success, today)
        self._queue.popleft()
        self.deck.replace(index, after)
        self.reviewed += 1

        if not success:
            self._queue.append(index)

        logger.debug(
            "Graded flashcard #%d as %s; next review %s",
            index + 1,
            "correct" if success else "incorrect",
            after.review_date,
        )

        if self._queue:
            self.side = Side.FRONT
        else:
            self.state = SessionState.SUCCESS
            self.side = None
            logger.info("Review session complete after %d gradings", self.reviewed)

        return ReviewResult(
            index=index,
            success=success,
            reviewed_on=today,
            card_before=before,
            card=after,
            requeued=not success,
        )
