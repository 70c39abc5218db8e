"""Exception hierarchy for duration parsing and format translation."""

from __future__ import annotations


class TimeFormatError(Exception):
    """Base exception for pytimefmt errors.

    Provides dual messaging: a user-facing message and internal details
    for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class DurationSyntaxError(TimeFormatError, ValueError):
    """Raised when a literal is not a supported ISO 8601 duration."""

    def __init__(
        self,
        text: str,
        offset: int,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        self.text = text
        self.offset = offset
        super().__init__(
            f'Syntax error in "{text}" at offset {offset} '
            f'("{_excerpt(text, offset)}"); {ERR_MSG_UNSUPPORTED_DURATION}',
            internal_details,
            wrapped,
        )


class UnsupportedFeatureError(TimeFormatError):
    """Raised when an input asks for something this library does not do."""

    def __init__(self, feature: str, internal_details: str = "") -> None:
        self.feature = feature
        super().__init__(f'"{feature}" not supported', internal_details)


class UnsupportedSpecifierError(UnsupportedFeatureError):
    """Raised when a POSIX format contains an unknown specifier."""

    def __init__(self, specifier: str, posix_format: str = "") -> None:
        self.specifier = specifier
        super().__init__(
            f"Posix format specifier {specifier}",
            f"specifier {specifier!r} in format {posix_format!r}",
        )


def _excerpt(text: str, offset: int) -> str:
    rest = text[offset:]
    if len(rest) > MAX_EXCERPT_LENGTH:
        return rest[:MAX_EXCERPT_LENGTH] + "..."
    return rest


MAX_EXCERPT_LENGTH = 20

# Message constants
ERR_MSG_UNSUPPORTED_DURATION = "not a supported ISO 8601 duration"
ERR_MSG_EMPTY_DURATION = "duration has no fields"
ERR_MSG_EMPTY_TIME_PART = "time designator without time fields"
ERR_MSG_BAD_FRACTION = "fraction is only allowed on seconds"
