"""Duration units and their per-locale text suffixes.

Each unit has a stable ordinal (its enum value) used to index lookup tables,
and a base unit that decides which day-equivalence constant it converts with.
Elapsed units share constants with their non-elapsed counterparts but are
distinct units in every other respect.

Suffixes live in per-locale tables so new locales can be registered without
touching the enumeration:

    >>> from mpxtime.units import TimeUnit, format_unit, parse_unit
    >>> format_unit(TimeUnit.ELAPSED_DAYS)
    'ed'
    >>> parse_unit("T", locale="de")
    <TimeUnit.DAYS: 2>
"""

import logging
from collections.abc import Mapping, Sequence
from enum import Enum

from mpxtime.exceptions import ParseError
from mpxtime.util import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    DEFAULT_LOCALE,
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
)

logger = logging.getLogger(__name__)

_ELAPSED_PREFIX = "ELAPSED_"


class TimeUnit(Enum):
    MINUTES = 0
    HOURS = 1
    DAYS = 2
    WEEKS = 3
    MONTHS = 4
    YEARS = 5
    PERCENT = 6
    ELAPSED_MINUTES = 7
    ELAPSED_HOURS = 8
    ELAPSED_DAYS = 9
    ELAPSED_WEEKS = 10
    ELAPSED_MONTHS = 11
    ELAPSED_YEARS = 12
    ELAPSED_PERCENT = 13

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def is_elapsed(self) -> bool:
        """True for wall-clock spans, False for working-time spans."""
        return self.name.startswith(_ELAPSED_PREFIX)

    @property
    def base(self) -> "TimeUnit":
        """The non-elapsed unit whose day-equivalence this unit converts with."""
        return TimeUnit[self.name.removeprefix(_ELAPSED_PREFIX)]

    @property
    def days_per_unit(self) -> float | None:
        """Length of one unit in days, or None for percentages."""
        ratio = _DAY_EQUIVALENCE.get(self.base)
        if ratio is None:
            return None
        per_day, days = ratio
        return days / per_day


# (units per day, days per unit) keyed by base unit. Converting to days
# divides by the first and multiplies by the second; converting back does the
# inverse. One of each pair is always 1 so the arithmetic stays exact.
_DAY_EQUIVALENCE: dict[TimeUnit, tuple[float, float]] = {
    TimeUnit.MINUTES: (MINUTES_PER_DAY, 1.0),
    TimeUnit.HOURS: (HOURS_PER_DAY, 1.0),
    TimeUnit.DAYS: (1.0, 1.0),
    TimeUnit.WEEKS: (1.0, DAYS_PER_WEEK),
    TimeUnit.MONTHS: (1.0, DAYS_PER_MONTH),
    TimeUnit.YEARS: (1.0, DAYS_PER_YEAR),
}


def to_days(magnitude: float, unit: TimeUnit) -> float:
    """Express a magnitude in days; percentages pass through unchanged."""
    ratio = _DAY_EQUIVALENCE.get(unit.base)
    if ratio is None:
        return magnitude
    per_day, days = ratio
    return magnitude / per_day * days


def from_days(days: float, unit: TimeUnit) -> float:
    """Express a day count in the given unit; percentages pass through unchanged."""
    ratio = _DAY_EQUIVALENCE.get(unit.base)
    if ratio is None:
        return days
    per_day, days_per = ratio
    return days * per_day / days_per


# Suffix tables, indexed by unit ordinal
_SUFFIXES: dict[str, tuple[str, ...]] = {}
_PARSE_MAPS: dict[str, dict[str, TimeUnit]] = {}


def register_locale(
    locale: str, suffixes: Mapping[TimeUnit, str] | Sequence[str]
) -> None:
    """Register (or replace) the unit suffix table for a locale.

    Args:
        locale: Locale tag such as "en", "de" or "fr_CA"
        suffixes: Either a mapping covering every TimeUnit, or a sequence of
            suffixes in unit ordinal order

    Raises:
        ValueError: If the table is incomplete, has empty suffixes, or two
            units share a suffix (compared case-insensitively)
    """
    if isinstance(suffixes, Mapping):
        missing = [unit.name for unit in TimeUnit if unit not in suffixes]
        if missing:
            raise ValueError(
                f"Suffix table for locale {locale!r} is missing units: "
                f"{', '.join(missing)}"
            )
        table = tuple(suffixes[unit] for unit in TimeUnit)
    else:
        table = tuple(suffixes)
        if len(table) != len(TimeUnit):
            raise ValueError(
                f"Suffix table for locale {locale!r} needs {len(TimeUnit)} "
                f"entries in unit order, got {len(table)}"
            )

    parse_map: dict[str, TimeUnit] = {}
    for unit, suffix in zip(TimeUnit, table):
        key = suffix.strip().lower()
        if not key:
            raise ValueError(
                f"Empty suffix for {unit.name} in locale {locale!r}"
            )
        if key in parse_map:
            raise ValueError(
                f"Suffix {suffix!r} is used by both {parse_map[key].name} and "
                f"{unit.name} in locale {locale!r}"
            )
        parse_map[key] = unit

    tag = _normalize(locale)
    _SUFFIXES[tag] = table
    _PARSE_MAPS[tag] = parse_map
    logger.debug("Registered duration unit suffixes for locale %r", tag)


def available_locales() -> list[str]:
    return sorted(_SUFFIXES)


def format_unit(unit: TimeUnit, locale: str = DEFAULT_LOCALE) -> str:
    """Return the suffix used to render a unit in the given locale."""
    return _SUFFIXES[_resolve(locale)][unit.ordinal]


def parse_unit(token: str, locale: str = DEFAULT_LOCALE) -> TimeUnit:
    """Resolve a suffix token back to its unit.

    Raises:
        ParseError: If the token is not a known suffix in the locale
    """
    tag = _resolve(locale)
    unit = _PARSE_MAPS[tag].get(token.strip().lower())
    if unit is None:
        known = ", ".join(repr(s) for s in _SUFFIXES[tag])
        raise ParseError(
            f"Unknown duration unit {token!r} for locale {tag!r}. "
            f"Known units: {known}",
            text=token,
        )
    return unit


def _normalize(locale: str) -> str:
    return locale.strip().replace("-", "_").lower()


def _resolve(locale: str) -> str:
    """Find the registered table for a locale: exact tag, language, default."""
    tag = _normalize(locale)
    if tag in _SUFFIXES:
        return tag
    language = tag.split("_", 1)[0]
    if language in _SUFFIXES:
        return language
    logger.debug(
        "No duration unit suffixes for locale %r, using %r", locale, DEFAULT_LOCALE
    )
    return DEFAULT_LOCALE


register_locale(
    "en",
    ("m", "h", "d", "w", "mo", "y", "%", "em", "eh", "ed", "ew", "emo", "ey", "e%"),
)
register_locale(
    "de",
    ("m", "h", "t", "w", "mo", "j", "%", "em", "eh", "et", "ew", "emo", "ej", "e%"),
)
