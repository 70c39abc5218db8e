"""Unit conversion constants for duration arithmetic."""

DAYS_PER_YEAR = 365
"""Fixed year length used by total-duration conversions."""

DAYS_PER_MONTH = 30
"""Fixed month length used by total-duration conversions."""

DAYS_PER_WEEK = 7

HOURS_PER_DAY = 24

MINUTES_PER_HOUR = 60

SECONDS_PER_MINUTE = 60

SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

MICROSECONDS_PER_SECOND = 1_000_000

FRACTION_DIGITS = 6
"""Decimal digits kept from a fractional-seconds literal."""
