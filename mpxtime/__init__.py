from .context import DEFAULT_CONTEXT, DurationFormatContext, FormatContext
from .duration import Duration, parse_duration
from .exceptions import MPXTimeError, NullColumnError, ParseError
from .numbers import DEFAULT_NUMBER_FORMAT, NumberFormat
from .rows import Row, RowComparator
from .units import (
    TimeUnit,
    available_locales,
    format_unit,
    parse_unit,
    register_locale,
)

__all__ = [
    "Duration",
    "TimeUnit",
    "parse_duration",
    "format_unit",
    "parse_unit",
    "register_locale",
    "available_locales",
    "NumberFormat",
    "DEFAULT_NUMBER_FORMAT",
    "FormatContext",
    "DurationFormatContext",
    "DEFAULT_CONTEXT",
    "Row",
    "RowComparator",
    "MPXTimeError",
    "ParseError",
    "NullColumnError",
]
