"""Plain interval component struct shared by the parser and Duration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from pytimefmt._constants import (
    MICROSECONDS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


@dataclass(frozen=True)
class IntervalFields:
    """Components of an interval, stored as given without carrying.

    ``total_days`` is ``None`` when the years/months/days triple is
    authoritative for day-scale magnitude, otherwise it holds the collapsed
    day count.
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    microseconds: int = 0
    negative: bool = False
    total_days: int | None = None

    def __post_init__(self) -> None:
        for name in ("years", "months", "days", "hours", "minutes", "seconds"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if not 0 <= self.microseconds < MICROSECONDS_PER_SECOND:
            raise ValueError("microseconds must be in [0, 1000000)")
        if self.total_days is not None and self.total_days < 0:
            raise ValueError("total_days must not be negative")

    @property
    def sign(self) -> int:
        return -1 if self.negative else 1

    def is_zero(self) -> bool:
        return not (
            self.years
            or self.months
            or self.days
            or self.total_days
            or self.hours
            or self.minutes
            or self.seconds
            or self.microseconds
        )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> IntervalFields:
        """Split a timedelta into a collapsed day count and time fields."""
        magnitude = abs(delta)
        hours, rest = divmod(magnitude.seconds, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        return cls(
            days=magnitude.days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            microseconds=magnitude.microseconds,
            negative=delta < timedelta(0),
            total_days=magnitude.days,
        )
