"""Tests for parsing, formatting and constructing durations."""

from dataclasses import FrozenInstanceError

import pytest

from mpxtime import (
    Duration,
    FormatContext,
    NumberFormat,
    ParseError,
    TimeUnit,
    parse_duration,
)

german = FormatContext(
    duration_number_format=NumberFormat(
        "#.#", decimal_separator=",", grouping_separator="."
    ),
    locale="de",
)


class ProjectFile:
    """Minimal stand-in for a parent file exposing its duration settings."""

    duration_number_format = NumberFormat("0.00")
    locale = "de"


# --- parsing ---


def test_bare_number_is_days():
    """Test that a number without suffix is a number of days."""
    result = Duration.parse("5")
    assert result.magnitude == 5.0
    assert result.unit is TimeUnit.DAYS


def test_single_digit():
    """Test that a single digit parses as days."""
    assert Duration.parse("7") == Duration(7.0, TimeUnit.DAYS)


def test_suffix_selects_unit():
    """Test that the suffix after the last digit selects the unit."""
    result = Duration.parse("3.5h")
    assert result.magnitude == 3.5
    assert result.unit is TimeUnit.HOURS


@pytest.mark.parametrize(
    "text,expected",
    [
        ("10ed", Duration(10.0, TimeUnit.ELAPSED_DAYS)),
        ("2EMO", Duration(2.0, TimeUnit.ELAPSED_MONTHS)),
        (" 4w ", Duration(4.0, TimeUnit.WEEKS)),
        ("1,234.5m", Duration(1234.5, TimeUnit.MINUTES)),
        ("50%", Duration(50.0, TimeUnit.PERCENT)),
        ("12.5e%", Duration(12.5, TimeUnit.ELAPSED_PERCENT)),
        (".5y", Duration(0.5, TimeUnit.YEARS)),
    ],
)
def test_parse_examples(text, expected):
    """Test parsing of various suffixes and number shapes."""
    assert Duration.parse(text) == expected


def test_parse_with_context():
    """Test parsing with German separators and suffixes."""
    assert Duration.parse("1,5t", german) == Duration(1.5, TimeUnit.DAYS)
    assert Duration.parse("2ej", german) == Duration(2.0, TimeUnit.ELAPSED_YEARS)


@pytest.mark.parametrize("text", ["abc", "", "d", "h5"])
def test_parse_without_valid_number_fails(text):
    """Test that text without a readable number fails."""
    with pytest.raises(ParseError) as exc_info:
        Duration.parse(text)
    assert exc_info.value.text == text


def test_unknown_suffix_fails():
    """Test that an unknown suffix fails and names the suffix."""
    with pytest.raises(ParseError, match="Unknown duration unit") as exc_info:
        Duration.parse("5q")
    assert exc_info.value.text == "5q"
    assert exc_info.value.fragment == "q"


def test_malformed_number_fails():
    """Test that a malformed number fails and names the number."""
    with pytest.raises(ParseError, match="Invalid number") as exc_info:
        Duration.parse("1.2.3d")
    assert exc_info.value.fragment == "1.2.3"


def test_parse_error_is_value_error():
    """Test that callers catching ValueError also catch parse failures."""
    with pytest.raises(ValueError):
        parse_duration("abc")


# --- formatting ---


def test_format_default():
    """Test rendering with the default format and locale."""
    assert Duration(2.0, TimeUnit.WEEKS).format() == "2w"
    assert str(Duration(3.5, TimeUnit.ELAPSED_HOURS)) == "3.5eh"
    assert str(Duration(0.0, TimeUnit.DAYS)) == "0d"


def test_format_with_context():
    """Test rendering with German separators and suffixes."""
    assert Duration(2.5, TimeUnit.YEARS).format(german) == "2,5j"


def test_format_with_parent_file():
    """Test that any object exposing the two settings works as a context."""
    assert Duration(1.5, TimeUnit.DAYS).format(ProjectFile()) == "1.50t"


@pytest.mark.parametrize("unit", list(TimeUnit))
@pytest.mark.parametrize("magnitude", [0.0, 1.0, 2.5, 7.0, 1440.0, 12345.5])
def test_format_then_parse_returns_equal_duration(unit, magnitude):
    """Test the round-trip law for the default format."""
    original = Duration.from_value(magnitude, unit)
    assert Duration.parse(original.format()) == original


def test_round_trip_with_context():
    """Test the round-trip law for a non-default context."""
    original = Duration.from_value(1234.5, TimeUnit.ELAPSED_WEEKS)
    assert Duration.parse(original.format(german), german) == original


# --- construction ---


def test_from_value_pairs_magnitude_and_unit():
    """Test direct construction."""
    result = Duration.from_value(3, TimeUnit.MONTHS)
    assert result.magnitude == 3.0
    assert isinstance(result.magnitude, float)
    assert result.unit is TimeUnit.MONTHS


def test_zero_instances_are_shared_per_unit():
    """Test that zero durations come from the shared cache."""
    for unit in TimeUnit:
        assert Duration.from_value(0.0, unit) is Duration.from_value(0.0, unit)
        assert Duration.from_value(0, unit) is Duration.from_value(-0.0, unit)
    assert Duration.from_value(0.0, TimeUnit.DAYS) is not Duration.from_value(
        0.0, TimeUnit.ELAPSED_DAYS
    )


def test_parsed_zero_is_shared():
    """Test that parsing zero also returns the shared instance."""
    assert Duration.parse("0h") is Duration.from_value(0.0, TimeUnit.HOURS)
    assert Duration.parse("0") is Duration.from_value(0.0, TimeUnit.DAYS)


def test_equality_is_structural():
    """Test equality by value rather than identity."""
    assert Duration(5, TimeUnit.DAYS) == Duration(5.0, TimeUnit.DAYS)
    assert Duration(0.0, TimeUnit.DAYS) == Duration.from_value(0.0, TimeUnit.DAYS)
    assert Duration(5, TimeUnit.DAYS) != Duration(5, TimeUnit.ELAPSED_DAYS)
    assert Duration(5, TimeUnit.DAYS) != Duration(5, TimeUnit.HOURS)
    assert len({Duration(1, TimeUnit.HOURS), Duration(1.0, TimeUnit.HOURS)}) == 1


def test_durations_are_immutable():
    """Test that fields cannot be reassigned."""
    value = Duration(1.0, TimeUnit.HOURS)
    with pytest.raises(FrozenInstanceError):
        value.magnitude = 2.0  # type: ignore[misc]


def test_rejects_invalid_fields():
    """Test validation of unit and magnitude."""
    with pytest.raises(TypeError, match="must be a TimeUnit"):
        Duration(1.0, "d")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="must be a number"):
        Duration("5", TimeUnit.DAYS)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="must be finite"):
        Duration.from_value(float("nan"), TimeUnit.DAYS)


@pytest.mark.parametrize("flag", [False, True])
def test_from_value_rejects_bool_magnitudes(flag):
    """Test that booleans are refused, including False on the zero path."""
    with pytest.raises(TypeError, match="must be a number"):
        Duration.from_value(flag, TimeUnit.DAYS)
