"""Typed durations as written in MPX project files.

A Duration pairs a magnitude with a TimeUnit. Values are immutable; create
them with the factories so that zero magnitudes share one instance per unit:

    >>> Duration.parse("3.5h")
    Duration(magnitude=3.5, unit=<TimeUnit.HOURS: 1>)
    >>> str(Duration.from_value(2, TimeUnit.WEEKS))
    '2w'
    >>> Duration.parse("1w").convert_to(TimeUnit.DAYS).magnitude
    7.0
"""

import logging
import math
import re
from dataclasses import dataclass

from typing_extensions import override

from mpxtime.context import DEFAULT_CONTEXT, DurationFormatContext
from mpxtime.exceptions import ParseError
from mpxtime.units import TimeUnit, format_unit, from_days, parse_unit, to_days

logger = logging.getLogger(__name__)

# Numeric literal runs up to and including the last digit; the suffix is
# whatever follows it.
_TOKENS = re.compile(r"(?P<number>.*\d)(?P<suffix>\D*)", re.DOTALL)


@dataclass(frozen=True)
class Duration:
    magnitude: float
    unit: TimeUnit

    def __post_init__(self) -> None:
        if not isinstance(self.unit, TimeUnit):
            raise TypeError(
                f"Duration unit must be a TimeUnit, got "
                f"{type(self.unit).__name__!r}: {self.unit!r}"
            )
        if isinstance(self.magnitude, bool) or not isinstance(
            self.magnitude, (int, float)
        ):
            raise TypeError(
                f"Duration magnitude must be a number, got "
                f"{type(self.magnitude).__name__!r}: {self.magnitude!r}"
            )
        if not math.isfinite(self.magnitude):
            raise ValueError(
                f"Duration magnitude must be finite, got {self.magnitude}"
            )
        object.__setattr__(self, "magnitude", float(self.magnitude))

    @override
    def __str__(self) -> str:
        return self.format()

    @classmethod
    def from_value(cls, magnitude: float, unit: TimeUnit) -> "Duration":
        """Pair a magnitude with a unit, sharing the cached zero instances."""
        # bool magnitudes must reach __post_init__ and fail there
        if (
            isinstance(unit, TimeUnit)
            and type(magnitude) is not bool
            and magnitude == 0
        ):
            return _ZERO_DURATIONS[unit.ordinal]
        return cls(magnitude, unit)

    @classmethod
    def parse(
        cls, text: str, context: DurationFormatContext | None = None
    ) -> "Duration":
        """Read a duration such as "5", "3.5h" or "2ed".

        Text without a unit suffix is a number of days. The number is read with
        the context's number format and the suffix with its locale; both
        default to the standard MPX settings.

        Raises:
            ParseError: If the number is malformed or the suffix is unknown
        """
        if context is None:
            context = DEFAULT_CONTEXT
        stripped = text.strip()
        match = _TOKENS.fullmatch(stripped)
        if match is None:
            raise ParseError(f"Invalid duration {text!r}: no number found", text=text)

        number, suffix = match.group("number"), match.group("suffix")
        try:
            magnitude = context.duration_number_format.parse(number)
            unit = parse_unit(suffix, context.locale) if suffix else TimeUnit.DAYS
        except ParseError as e:
            raise ParseError(
                f"Invalid duration {text!r}: {e}", text=text, fragment=e.fragment
            ) from e

        return cls.from_value(magnitude, unit)

    def format(self, context: DurationFormatContext | None = None) -> str:
        """Render as <number><suffix> using the context's format and locale."""
        if context is None:
            context = DEFAULT_CONTEXT
        return context.duration_number_format.format(self.magnitude) + format_unit(
            self.unit, context.locale
        )

    def convert_to(self, unit: TimeUnit | str) -> "Duration":
        """Approximately re-express this duration in another unit.

        Goes through days using fixed ratios (1 day = 24 hours = 1440 minutes,
        1 week = 7 days, 1 month = 28 days, 1 year = 365 days). Working calendars
        are ignored, so treat results with caution. Percentages have no day
        equivalence and pass through that step unchanged.

        Returns self when the unit is already the target.
        """
        if isinstance(unit, str):
            unit = parse_unit(unit)
        if unit is self.unit:
            return self

        if self.unit.days_per_unit is None or unit.days_per_unit is None:
            logger.debug(
                "Converting %s to %s: percentages have no day equivalence, "
                "magnitude passed through",
                self.unit.name,
                unit.name,
            )

        days = to_days(self.magnitude, self.unit)
        return Duration.from_value(from_days(days, unit), unit)


# One shared zero per unit, indexed by ordinal
_ZERO_DURATIONS: tuple[Duration, ...] = tuple(
    Duration(0.0, unit) for unit in TimeUnit
)


def parse_duration(
    text: str, context: DurationFormatContext | None = None
) -> Duration:
    """Return the Duration written in text (see Duration.parse)."""
    return Duration.parse(text, context)
