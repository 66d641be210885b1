"""Locale-aware decimal formatting for duration magnitudes.

MPX files describe how numbers are written with a decimal format pattern plus
the decimal and grouping separator characters in use. NumberFormat supports
the subset of the pattern language those files need:

- ``0`` is a mandatory digit, ``#`` an optional one
- ``.`` separates the integer and fraction parts
- ``,`` in the integer part marks the grouping position; the number of
  digits after the last ``,`` is the grouping size

Examples:
    >>> NumberFormat().format(3.25)
    '3.2'
    >>> german = NumberFormat("#,##0.00", decimal_separator=",", grouping_separator=".")
    >>> german.format(1234.5)
    '1.234,50'
"""

import math
import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from mpxtime.exceptions import ParseError
from mpxtime.util import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUPING_SEPARATOR,
    DEFAULT_PATTERN,
)

# Optional digits must precede mandatory ones in both parts
_PATTERN = re.compile(r"(?P<int>[#,]*[0,]*)(?:\.(?P<frac>0*#*))?")

# Enough precision to quantize the exact binary value of any finite float
_PRECISION = 400


@dataclass(frozen=True)
class NumberFormat:
    pattern: str = DEFAULT_PATTERN
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    grouping_separator: str = DEFAULT_GROUPING_SEPARATOR

    _min_integer: int = field(init=False, repr=False, compare=False)
    _min_fraction: int = field(init=False, repr=False, compare=False)
    _max_fraction: int = field(init=False, repr=False, compare=False)
    _grouping_size: int = field(init=False, repr=False, compare=False)
    _number_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.decimal_separator) != 1:
            raise ValueError(
                f"decimal_separator must be a single character, "
                f"got {self.decimal_separator!r}"
            )
        if len(self.grouping_separator) > 1:
            raise ValueError(
                f"grouping_separator must be a single character or empty, "
                f"got {self.grouping_separator!r}"
            )
        if self.decimal_separator == self.grouping_separator:
            raise ValueError(
                f"decimal and grouping separators must differ, both are "
                f"{self.decimal_separator!r}"
            )

        match = _PATTERN.fullmatch(self.pattern)
        if match is None:
            raise ValueError(
                f"Unsupported number pattern {self.pattern!r}.\n"
                f"Use '#' and '0' digits with optional ',' grouping and '.' "
                f"fraction, e.g. '#.#', '#,##0.00', '0.###'"
            )
        integer = match.group("int")
        fraction = match.group("frac") or ""
        digits = integer.replace(",", "")
        if not digits and not fraction:
            raise ValueError(f"Number pattern {self.pattern!r} has no digits")

        grouping = 0
        if "," in integer:
            grouping = len(integer.rsplit(",", 1)[1])
            if grouping == 0:
                raise ValueError(
                    f"Number pattern {self.pattern!r} ends its integer part "
                    f"with a grouping separator"
                )

        group = re.escape(self.grouping_separator)
        decimal = re.escape(self.decimal_separator)
        if group:
            integer_re = rf"\d+(?:{group}\d+)*"
        else:
            integer_re = r"\d+"
        number_re = re.compile(
            rf"(?P<sign>[-+]?)(?P<int>{integer_re})?(?:{decimal}(?P<frac>\d+))?"
        )

        # Frozen dataclass: derived fields are set once here
        object.__setattr__(self, "_min_integer", digits.count("0"))
        object.__setattr__(self, "_min_fraction", fraction.count("0"))
        object.__setattr__(self, "_max_fraction", len(fraction))
        object.__setattr__(self, "_grouping_size", grouping)
        object.__setattr__(self, "_number_re", number_re)

    def format(self, value: float) -> str:
        """Render a number using this pattern and these separators.

        Rounds half-even to the pattern's maximum fraction digits and drops
        optional trailing zeros. A value that rounds to zero is never rendered
        with a minus sign.
        """
        if not math.isfinite(value):
            raise ValueError(f"Cannot format non-finite number {value!r}")

        with localcontext() as ctx:
            ctx.prec = _PRECISION
            quantum = Decimal(1).scaleb(-self._max_fraction)
            number = Decimal(float(value)).quantize(
                quantum, rounding=ROUND_HALF_EVEN
            )
            negative = number < 0
            text = f"{abs(number):f}"

        integer, _, fraction = text.partition(".")
        integer = integer.lstrip("0").rjust(self._min_integer, "0")
        fraction = fraction.rstrip("0").ljust(self._min_fraction, "0")

        if not integer and not fraction:
            integer = "0"
        if self._grouping_size and self.grouping_separator:
            integer = self._group(integer)

        result = integer
        if fraction:
            result += self.decimal_separator + fraction
        return f"-{result}" if negative else result

    def parse(self, text: str) -> float:
        """Read a number written with these separators.

        Raises:
            ParseError: If the text is not a number in this format
        """
        match = self._number_re.fullmatch(text.strip())
        if match is None or match.group("int", "frac") == (None, None):
            expected = f"{self.decimal_separator!r} as decimal separator"
            if self.grouping_separator:
                expected += f" and {self.grouping_separator!r} as grouping separator"
            raise ParseError(
                f"Invalid number {text!r}: expected digits with {expected}",
                text=text,
            )

        integer = match.group("int") or "0"
        if self.grouping_separator:
            integer = integer.replace(self.grouping_separator, "")
        fraction = match.group("frac") or "0"
        return float(f"{match.group('sign')}{integer}.{fraction}")

    def _group(self, integer: str) -> str:
        size = self._grouping_size
        head = len(integer) % size or size
        groups = [integer[:head]]
        groups.extend(integer[i : i + size] for i in range(head, len(integer), size))
        return self.grouping_separator.join(groups)


DEFAULT_NUMBER_FORMAT = NumberFormat()
