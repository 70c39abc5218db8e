"""pytimefmt - ISO 8601 durations and POSIX date/time format translation."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from functools import lru_cache

from pytimefmt._errors import (
    DurationSyntaxError,
    TimeFormatError,
    UnsupportedFeatureError,
    UnsupportedSpecifierError,
)
from pytimefmt._version import __version__
from pytimefmt.duration import Duration
from pytimefmt.interval import IntervalFields
from pytimefmt.posix import PosixFormat

__all__ = [
    "format_duration",
    "parse_duration",
    "posix_format",
    "strftime",
    "Duration",
    "IntervalFields",
    "PosixFormat",
    "DurationSyntaxError",
    "TimeFormatError",
    "UnsupportedFeatureError",
    "UnsupportedSpecifierError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse_duration(text: str) -> Duration:
    """Parse an ISO 8601 duration literal.

    Args:
        text: The literal, e.g. ``"P1Y2M3DT4H5M6.78912S"``. A decimal point
            is allowed on the seconds field only.

    Returns:
        The parsed Duration.

    Raises:
        DurationSyntaxError: If the literal is not a supported ISO 8601 duration.
    """
    return Duration(text)


def format_duration(value: str | Duration | IntervalFields | timedelta) -> str:
    """Return the minimal ISO 8601 literal for a duration-like value.

    Raises:
        DurationSyntaxError: If ``value`` is a string that does not parse.
        TypeError: If ``value`` cannot be read as a duration.
    """
    return str(Duration(value))


@lru_cache(maxsize=256)
def posix_format(fmt: str) -> PosixFormat:
    """Return the shared translator for a POSIX format string.

    Raises:
        UnsupportedSpecifierError: If the format contains an unknown specifier.
    """
    return PosixFormat(fmt)


def strftime(value: date | datetime, fmt: str) -> str:
    """Render a date or datetime with a POSIX format string.

    Args:
        value: The date or datetime to render. Dates render as midnight.
        fmt: POSIX strftime-style format, e.g. ``"%F %T"``.

    Returns:
        The formatted text.

    Raises:
        UnsupportedSpecifierError: If the format contains an unknown specifier.
    """
    return posix_format(fmt).apply_to(value)
