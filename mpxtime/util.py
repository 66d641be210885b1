"""Utility constants for mpxtime.

Day-equivalence constants drive the approximate unit conversion. They are
fixed ratios and deliberately ignore working calendars.
"""

# Day-equivalence constants
MINUTES_PER_DAY = 1440.0
HOURS_PER_DAY = 24.0
DAYS_PER_WEEK = 7.0
DAYS_PER_MONTH = 28.0
DAYS_PER_YEAR = 365.0

# Default duration number format as written by MPX files
DEFAULT_PATTERN = "#.#"
DEFAULT_DECIMAL_SEPARATOR = "."
DEFAULT_GROUPING_SEPARATOR = ","

DEFAULT_LOCALE = "en"
