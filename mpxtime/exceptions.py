"""Exceptions raised by mpxtime."""


class MPXTimeError(Exception):
    """Base class for errors raised by this package."""


class ParseError(MPXTimeError, ValueError):
    """Text could not be read as a duration, number or unit suffix.

    Attributes:
        text: The raw input that was being parsed
        fragment: The part of the input that failed (number or suffix)
    """

    def __init__(self, message: str, text: str, fragment: str | None = None):
        super().__init__(message)
        self.text: str = text
        self.fragment: str = text if fragment is None else fragment


class NullColumnError(MPXTimeError, TypeError):
    """A row has no integer value for a column used in a comparison.

    Rows handed to a RowComparator must carry a value for every sort column;
    the comparator reports the violation instead of guessing an order.
    """

    def __init__(self, column: str):
        super().__init__(
            f"Row has no integer value for sort column {column!r}.\n"
            f"Every row compared by a RowComparator must define all sort columns."
        )
        self.column: str = column
