"""Error types raised by the Arion core."""


class ArionError(Exception):
    """Base class for all Arion errors."""


class InvalidArgumentError(ArionError, ValueError):
    """Raised when caller-supplied data has the wrong shape, range or order."""


class NullInputError(ArionError, TypeError):
    """Raised when a required value is missing."""


class FieldFormatError(ArionError):
    """Raised when a textual flashcard field cannot be parsed."""


class DateFormatError(FieldFormatError):
    """Raised when a review date is not of the form "MonthName D, YYYY"."""


class IntervalFormatError(FieldFormatError):
    """Raised when a review interval is not a positive number of days."""


class DatabaseError(ArionError):
    """Base class for deck file errors."""


class DatabaseFormatError(DatabaseError):
    """Raised when a deck file is structurally malformed."""


class DatabaseReadError(DatabaseError):
    """Raised when a deck file cannot be read."""


class DatabaseWriteError(DatabaseError):
    """Raised when a deck file cannot be written."""


class SessionStateError(ArionError):
    """Raised when a review session is driven through an illegal transition."""
