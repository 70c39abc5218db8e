"""ISO 8601 duration value type with fractional-second support."""

from __future__ import annotations

import logging
import re
from datetime import timedelta
from typing import Any

from pytimefmt import _constants as const
from pytimefmt._errors import ERR_MSG_BAD_FRACTION, DurationSyntaxError
from pytimefmt._grammar import parse_interval
from pytimefmt.interval import IntervalFields

logger = logging.getLogger(__name__)

_FRACTION_TAIL_RE = re.compile(r"^([0-9]*)S$")


class Duration:
    """An immutable ISO 8601 duration.

    Unlike :class:`datetime.timedelta`, a Duration keeps calendar fields
    (years, months) apart from day counts, and its literals may carry a
    fraction of a second::

        >>> d = Duration("P1Y2M3DT4H5M6.78912S")
        >>> str(d)
        'P1Y2M3DT4H5M6.78912S'
        >>> d.total_days
        428

    Total conversions count a year as ``DAYS_PER_YEAR`` days and a month as
    ``DAYS_PER_MONTH`` days. Subclasses may override both.
    """

    DAYS_PER_YEAR = const.DAYS_PER_YEAR
    DAYS_PER_MONTH = const.DAYS_PER_MONTH

    __slots__ = ("_fields",)

    def __init__(self, source: str | Duration | IntervalFields | timedelta) -> None:
        if isinstance(source, Duration):
            fields = source._fields
        elif isinstance(source, IntervalFields):
            fields = source
        elif isinstance(source, timedelta):
            fields = IntervalFields.from_timedelta(source)
        elif isinstance(source, str):
            fields = _parse_literal(source)
        else:
            raise TypeError(
                f"cannot build a Duration from {type(source).__name__}"
            )
        object.__setattr__(self, "_fields", fields)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Components ---

    @property
    def fields(self) -> IntervalFields:
        return self._fields

    @property
    def sign(self) -> int:
        return self._fields.sign

    @property
    def years(self) -> int:
        return self._fields.years

    @property
    def months(self) -> int:
        return self._fields.months

    @property
    def days(self) -> int:
        return self._fields.days

    @property
    def total_days_field(self) -> int | None:
        """The collapsed day count, or None if years/months/days apply."""
        return self._fields.total_days

    @property
    def hours(self) -> int:
        return self._fields.hours

    @property
    def minutes(self) -> int:
        return self._fields.minutes

    @property
    def seconds(self) -> int:
        return self._fields.seconds

    @property
    def microseconds(self) -> int:
        return self._fields.microseconds

    @property
    def fraction(self) -> float:
        """Fractional second in [0, 1)."""
        return self._fields.microseconds / const.MICROSECONDS_PER_SECOND

    # --- Totals ---

    @property
    def total_days(self) -> int:
        """Total number of days, ignoring smaller units.

        Months and years are counted with their fixed conversion sizes.
        """
        return self.sign * self._magnitude_days()

    @property
    def total_hours(self) -> int:
        return self.sign * self._magnitude_hours()

    @property
    def total_minutes(self) -> int:
        return self.sign * self._magnitude_minutes()

    @property
    def total_seconds(self) -> float:
        f = self._fields
        return self.sign * (
            self._magnitude_minutes() * const.SECONDS_PER_MINUTE
            + f.seconds
            + self.fraction
        )

    def as_timedelta(self) -> timedelta:
        """Convert to a timedelta using the fixed month and year sizes."""
        return timedelta(seconds=self.total_seconds)

    def _magnitude_days(self) -> int:
        f = self._fields
        if f.total_days is not None and f.total_days > 0:
            return f.total_days
        return f.years * self.DAYS_PER_YEAR + f.months * self.DAYS_PER_MONTH + f.days

    def _magnitude_hours(self) -> int:
        return self._magnitude_days() * const.HOURS_PER_DAY + self._fields.hours

    def _magnitude_minutes(self) -> int:
        return self._magnitude_hours() * const.MINUTES_PER_HOUR + self._fields.minutes

    # --- Serialization ---

    def __str__(self) -> str:
        """Return the minimal ISO 8601 representation."""
        f = self._fields
        if f.is_zero():
            return "P0D"

        date = ""
        if f.total_days:
            date = f"{f.total_days}D"
        else:
            if f.years:
                date += f"{f.years}Y"
            if f.months:
                date += f"{f.months}M"
            if f.days:
                date += f"{f.days}D"

        time = ""
        if f.hours:
            time += f"{f.hours}H"
        if f.minutes:
            time += f"{f.minutes}M"
        if f.seconds or f.microseconds:
            time += str(f.seconds)
            if f.microseconds:
                digits = f"{f.microseconds:0{const.FRACTION_DIGITS}d}".rstrip("0")
                time += f".{digits}"
            time += "S"

        sign = "-" if f.negative else ""
        if time:
            time = f"T{time}"
        return f"{sign}P{date}{time}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def _key(self) -> tuple[str, float]:
        return str(self), self.total_seconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def _parse_literal(text: str) -> IntervalFields:
    """Parse a literal that may carry a fraction on its seconds field."""
    head, dot, tail = text.partition(".")

    if not dot:
        return parse_interval(text)

    m = _FRACTION_TAIL_RE.match(tail)
    if not m:
        logger.debug("rejected duration literal %r: %s", text, ERR_MSG_BAD_FRACTION)
        raise DurationSyntaxError(text, len(head), ERR_MSG_BAD_FRACTION)

    sign, body = ("", head) if head[:1] not in ("-", "+") else (head[0], head[1:])

    # With only zeros before the dot the integer part must not carry seconds.
    stripped = body.rstrip("0")
    if not stripped or stripped[-1] not in "123456789":
        integral = sign + ("P0D" if stripped == "PT" else stripped.rstrip("T"))
    else:
        integral = f"{head}S"

    # Apart from the P0D stand-in, which always parses, the integer part is a
    # prefix of head plus at most a seconds designator: offsets past head
    # point at the dot.
    try:
        fields = parse_interval(integral)
    except DurationSyntaxError as e:
        offset = min(e.offset, len(head))
        raise DurationSyntaxError(text, offset, e.internal(), wrapped=e) from e

    digits = m.group(1)[: const.FRACTION_DIGITS].ljust(const.FRACTION_DIGITS, "0")
    return IntervalFields(
        years=fields.years,
        months=fields.months,
        days=fields.days,
        hours=fields.hours,
        minutes=fields.minutes,
        seconds=fields.seconds,
        microseconds=int(digits),
        negative=fields.negative,
        total_days=fields.total_days,
    )
