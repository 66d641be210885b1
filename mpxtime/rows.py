"""Ordering of tabular rows by integer columns."""

from collections.abc import Callable, Mapping
from functools import cmp_to_key
from typing import Any, Protocol

from mpxtime.exceptions import NullColumnError


class Row(Protocol):
    def get_integer(self, name: str) -> int | None: ...


class RowComparator:
    """Compare rows column by column using integer values.

    Columns are compared in the order given; the first column whose values
    differ decides the result. Rows may be mappings of column name to integer
    or objects with a ``get_integer(name)`` method.

    Example:
        >>> compare = RowComparator("A", "B")
        >>> compare({"A": 1, "B": 2}, {"A": 1, "B": 3})
        -1
        >>> rows.sort(key=compare.key)
    """

    def __init__(self, *sort_columns: str):
        if not sort_columns:
            raise ValueError(
                "RowComparator requires at least one sort column.\n"
                "Example: RowComparator('ID', 'SEQUENCE')"
            )
        self.sort_columns: tuple[str, ...] = sort_columns

    def __call__(
        self, left: "Row | Mapping[str, Any]", right: "Row | Mapping[str, Any]"
    ) -> int:
        """Return the signed difference of the first differing column, else 0.

        Raises:
            NullColumnError: If either row has no value for a compared column
            TypeError: If a compared value is not an integer
        """
        for column in self.sort_columns:
            result = _integer(left, column) - _integer(right, column)
            if result != 0:
                return result
        return 0

    @property
    def key(self) -> Callable[[Any], Any]:
        """Key function for sorted() and list.sort()."""
        return cmp_to_key(self)


def _integer(row: "Row | Mapping[str, Any]", column: str) -> int:
    if isinstance(row, Mapping):
        value = row.get(column)
    else:
        value = row.get_integer(column)
    if value is None:
        raise NullColumnError(column)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Sort column {column!r} must hold an integer, got "
            f"{type(value).__name__!r}: {value!r}"
        )
    return value
