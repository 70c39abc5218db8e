"""POSIX strftime-style format translation.

A POSIX format such as ``%d/%m/%Y`` is translated into a ``str.format``
template over named date/time fields (``{day:02d}/{month:02d}/{year:04d}``),
a shape string showing the width of each field (``dd/mm/YYYY``), and the
length of the rendered result when every field has a fixed width.
"""

from __future__ import annotations

import calendar
import logging
import re
from collections.abc import Callable
from datetime import date, datetime, time
from types import MappingProxyType
from typing import Any, NamedTuple

from pytimefmt._errors import UnsupportedSpecifierError

logger = logging.getLogger(__name__)


class SpecifierEntry(NamedTuple):
    """Host template fragment and shape fragment for one specifier."""

    host: str
    shape: str


VARIABLE_WIDTH = "*"
"""Shape placeholder for fields without a fixed width."""

POSIX_SPECIFIERS: MappingProxyType[str, SpecifierEntry] = MappingProxyType({
    # year
    "%G": SpecifierEntry("{iso_year:04d}", "GGGG"),
    "%Y": SpecifierEntry("{year:04d}", "YYYY"),
    "%y": SpecifierEntry("{year_of_century:02d}", "yy"),
    # month
    "%B": SpecifierEntry("{month_name}", VARIABLE_WIDTH),
    "%b": SpecifierEntry("{month_abbr}", "bbb"),
    "%h": SpecifierEntry("{month_abbr}", "hhh"),
    "%m": SpecifierEntry("{month:02d}", "mm"),
    # week
    "%V": SpecifierEntry("{iso_week:02d}", "VV"),
    # day
    "%A": SpecifierEntry("{weekday_name}", VARIABLE_WIDTH),
    "%a": SpecifierEntry("{weekday_abbr}", "aaa"),
    "%d": SpecifierEntry("{day:02d}", "dd"),
    "%u": SpecifierEntry("{iso_weekday:d}", "u"),
    "%w": SpecifierEntry("{weekday:d}", "w"),
    # hour
    "%H": SpecifierEntry("{hour:02d}", "HH"),
    "%I": SpecifierEntry("{hour12:02d}", "II"),
    "%p": SpecifierEntry("{meridian}", "pp"),
    "%P": SpecifierEntry("{meridian_lower}", "PP"),
    # minute
    "%M": SpecifierEntry("{minute:02d}", "MM"),
    # second
    "%S": SpecifierEntry("{second:02d}", "SS"),
    "%s": SpecifierEntry("{timestamp:d}", VARIABLE_WIDTH),
    # timezone
    "%z": SpecifierEntry("{utc_offset}", "zzzzz"),
    "%Z": SpecifierEntry("{tz_name}", VARIABLE_WIDTH),
    # composite
    "%D": SpecifierEntry(
        "{month:02d}/{day:02d}/{year_of_century:02d}", "mm/dd/yy"
    ),
    "%F": SpecifierEntry("{year:04d}-{month:02d}-{day:02d}", "YYYY-MM-DD"),
    "%r": SpecifierEntry(
        "{hour12:02d}:{minute:02d}:{second:02d} {meridian}", "II:MM:SS pp"
    ),
    "%R": SpecifierEntry("{hour:02d}:{minute:02d}", "HH:MM"),
    "%T": SpecifierEntry("{hour:02d}:{minute:02d}:{second:02d}", "HH:MM:SS"),
    # characters
    "%n": SpecifierEntry("\n", "n"),
    "%t": SpecifierEntry("\t", "t"),
    "%%": SpecifierEntry("%", "%"),
})
"""Map of POSIX specifiers to host fragments and fixed-width shapes."""

# A lone trailing "%" matches with an empty specifier character.
_SPECIFIER_RE = re.compile(r"%(.?)", re.DOTALL)


def _local(value: datetime) -> datetime:
    """Attach the local time zone to naive datetimes."""
    return value if value.tzinfo is not None else value.astimezone()


def _meridian(value: datetime) -> str:
    return "AM" if value.hour < 12 else "PM"


_FIELD_GETTERS: dict[str, Callable[[datetime], Any]] = {
    "year": lambda v: v.year,
    "iso_year": lambda v: v.isocalendar()[0],
    "year_of_century": lambda v: v.year % 100,
    "month": lambda v: v.month,
    "month_name": lambda v: calendar.month_name[v.month],
    "month_abbr": lambda v: calendar.month_abbr[v.month],
    "iso_week": lambda v: v.isocalendar()[1],
    "day": lambda v: v.day,
    "weekday_name": lambda v: calendar.day_name[v.weekday()],
    "weekday_abbr": lambda v: calendar.day_abbr[v.weekday()],
    "iso_weekday": lambda v: v.isoweekday(),
    "weekday": lambda v: v.isoweekday() % 7,
    "hour": lambda v: v.hour,
    "hour12": lambda v: v.hour % 12 or 12,
    "meridian": _meridian,
    "meridian_lower": lambda v: _meridian(v).lower(),
    "minute": lambda v: v.minute,
    "second": lambda v: v.second,
    "timestamp": lambda v: int(v.timestamp()),
    "utc_offset": lambda v: _local(v).strftime("%z"),
    "tz_name": lambda v: _local(v).tzname() or "",
}


class HostFields:
    """Read-only mapping of named date/time fields for ``str.format_map``.

    Fields are computed on access, so rendering a template only evaluates
    the fields it names.
    """

    __slots__ = ("_value",)

    def __init__(self, value: date | datetime) -> None:
        if not isinstance(value, datetime):
            value = datetime.combine(value, time())
        self._value = value

    def __getitem__(self, name: str) -> Any:
        return _FIELD_GETTERS[name](self._value)

    def __contains__(self, name: object) -> bool:
        return name in _FIELD_GETTERS


class PosixFormat:
    """Translated POSIX date/time format.

    Provides an equivalent host template, a human-readable shape, and the
    length of the result if fixed::

        >>> fmt = PosixFormat("%d/%m/%Y %H:%M")
        >>> fmt.shape
        'dd/mm/YYYY HH:MM'
        >>> fmt.length
        16
    """

    __slots__ = ("_posix_format", "_host_format", "_shape", "_length")

    def __init__(self, posix_format: str) -> None:
        self._posix_format = posix_format
        self._host_format = _translate(posix_format, _host_fragment, _escape_braces)
        self._shape = _translate(posix_format, _shape_fragment, str)
        self._length = None if VARIABLE_WIDTH in self._shape else len(self._shape)
        logger.debug(
            "translated posix format %r to host format %r",
            posix_format,
            self._host_format,
        )

    @property
    def posix_format(self) -> str:
        return self._posix_format

    @property
    def host_format(self) -> str:
        return self._host_format

    @property
    def shape(self) -> str:
        """Textual representation of the result.

        Fixed-width fields appear as their specifier character repeated to
        the field width, variable-width fields as ``*``.
        """
        return self._shape

    @property
    def length(self) -> int | None:
        """Length of the result, if fixed."""
        return self._length

    def apply_to(self, value: date | datetime) -> str:
        return self._host_format.format_map(HostFields(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._posix_format!r})"


def _host_fragment(entry: SpecifierEntry) -> str:
    return entry.host


def _shape_fragment(entry: SpecifierEntry) -> str:
    return entry.shape


def _escape_braces(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


def _translate(
    posix_format: str,
    fragment: Callable[[SpecifierEntry], str],
    literal: Callable[[str], str],
) -> str:
    """Substitute each specifier of a POSIX format with a table fragment.

    Raises:
        UnsupportedSpecifierError: If a specifier is not in the table.
    """
    parts: list[str] = []
    pos = 0
    for m in _SPECIFIER_RE.finditer(posix_format):
        parts.append(literal(posix_format[pos : m.start()]))
        entry = POSIX_SPECIFIERS.get(m.group(0))
        if entry is None:
            logger.debug(
                "unsupported specifier %r in posix format %r",
                m.group(0),
                posix_format,
            )
            raise UnsupportedSpecifierError(m.group(0), posix_format)
        parts.append(fragment(entry))
        pos = m.end()
    parts.append(literal(posix_format[pos:]))
    return "".join(parts)
