"""Formatting context shared by duration parsing and rendering.

A parent project file knows which number format and locale its durations are
written in. Durations only ever read those two settings, so anything exposing
them satisfies DurationFormatContext.
"""

from dataclasses import dataclass
from typing import Protocol

from mpxtime.numbers import DEFAULT_NUMBER_FORMAT, NumberFormat
from mpxtime.util import DEFAULT_LOCALE


class DurationFormatContext(Protocol):
    @property
    def duration_number_format(self) -> NumberFormat: ...

    @property
    def locale(self) -> str: ...


@dataclass(frozen=True)
class FormatContext:
    """Plain settings holder implementing DurationFormatContext."""

    duration_number_format: NumberFormat = DEFAULT_NUMBER_FORMAT
    locale: str = DEFAULT_LOCALE


DEFAULT_CONTEXT = FormatContext()
