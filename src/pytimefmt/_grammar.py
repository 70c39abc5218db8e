"""Lark grammar for integer-only ISO 8601 duration literals."""

from __future__ import annotations

import logging
from typing import Any

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from pytimefmt._constants import DAYS_PER_WEEK
from pytimefmt._errors import (
    ERR_MSG_EMPTY_DURATION,
    ERR_MSG_EMPTY_TIME_PART,
    DurationSyntaxError,
)
from pytimefmt.interval import IntervalFields

logger = logging.getLogger(__name__)

DURATION_GRAMMAR = r"""
    duration: SIGN? "P" date_part time_part?

    date_part: years? months? weeks? days?
    time_part: "T" hours? minutes? seconds?

    years: INT "Y"
    months: INT "M"
    weeks: INT "W"
    days: INT "D"
    hours: INT "H"
    minutes: INT "M"
    seconds: INT "S"

    SIGN: "+" | "-"
    INT: /[0-9]+/
"""

_parser = Lark(DURATION_GRAMMAR, start="duration", parser="lalr")


class _IntervalBuilder(Transformer):
    """Collect designator values into plain dicts."""

    def INT(self, token: Token) -> int:
        return int(token)

    def years(self, children: list[int]) -> tuple[str, int]:
        return "years", children[0]

    def months(self, children: list[int]) -> tuple[str, int]:
        return "months", children[0]

    def weeks(self, children: list[int]) -> tuple[str, int]:
        return "weeks", children[0]

    def days(self, children: list[int]) -> tuple[str, int]:
        return "days", children[0]

    def hours(self, children: list[int]) -> tuple[str, int]:
        return "hours", children[0]

    def minutes(self, children: list[int]) -> tuple[str, int]:
        return "minutes", children[0]

    def seconds(self, children: list[int]) -> tuple[str, int]:
        return "seconds", children[0]

    def date_part(self, children: list[tuple[str, int]]) -> dict[str, int]:
        return dict(children)

    def time_part(self, children: list[tuple[str, int]]) -> dict[str, int]:
        return dict(children)

    def duration(self, children: list[Any]) -> tuple[bool, dict, dict | None]:
        negative = False
        if isinstance(children[0], Token):
            negative = children[0] == "-"
            children = children[1:]
        date = children[0]
        time = children[1] if len(children) > 1 else None
        return negative, date, time


def parse_interval(text: str) -> IntervalFields:
    """Parse an ISO 8601 duration literal without fractional seconds.

    A literal whose date part uses days or weeks but no years or months
    yields a collapsed ``total_days`` field.

    Raises:
        DurationSyntaxError: If the literal does not match the grammar.
    """
    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        offset = getattr(e, "pos_in_stream", None)
        if not isinstance(offset, int) or offset < 0 or offset > len(text):
            offset = len(text)
        logger.debug("rejected duration literal %r: %s", text, e)
        raise DurationSyntaxError(text, offset, str(e), wrapped=e) from e

    negative, date, time = _IntervalBuilder().transform(tree)

    if not date and not time:
        raise DurationSyntaxError(text, len(text), ERR_MSG_EMPTY_DURATION)
    if time is not None and not time:
        raise DurationSyntaxError(text, len(text), ERR_MSG_EMPTY_TIME_PART)

    time = time or {}
    days = date.get("days", 0) + date.get("weeks", 0) * DAYS_PER_WEEK
    collapsed = "years" not in date and "months" not in date and (
        "days" in date or "weeks" in date
    )

    return IntervalFields(
        years=date.get("years", 0),
        months=date.get("months", 0),
        days=days,
        hours=time.get("hours", 0),
        minutes=time.get("minutes", 0),
        seconds=time.get("seconds", 0),
        negative=negative,
        total_days=days if collapsed else None,
    )
