"""Exceptions raised by the relative time formatter.

All errors are raised synchronously to the immediate caller. Each class also
derives from the closest builtin exception so callers may catch either.
"""

from __future__ import annotations

from typing import Sequence


class RelativeFormatError(Exception):
    """Base exception for all relative time formatting errors."""

    pass


class InvalidLocaleDataError(RelativeFormatError, ValueError):
    """Raised when a locale registration payload is incomplete or malformed."""

    pass


class MalformedLocaleTagError(RelativeFormatError, ValueError):
    """Raised when a requested language tag is not structurally valid."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Language tag is not structurally valid: {tag}")


class UnsupportedLocaleError(RelativeFormatError, LookupError):
    """Raised when none of the requested locales has registered data."""

    def __init__(self, tags: Sequence[str]) -> None:
        self.tags = list(tags)
        super().__init__(
            f"No locale data has been added for: {', '.join(self.tags)}"
        )


class InvalidUnitError(RelativeFormatError, ValueError):
    """Raised when a fixed ``units`` option is not a known unit."""

    def __init__(
        self,
        units: str,
        valid: Sequence[str],
        suggestion: str | None = None,
    ) -> None:
        self.units = units
        self.suggestion = suggestion
        if suggestion:
            msg = f'"{units}" is not a valid units value, did you mean: {suggestion}'
        else:
            msg = (
                f'"{units}" is not a valid units value, '
                f"it must be one of: {', '.join(valid)}"
            )
        super().__init__(msg)


class InvalidDateError(RelativeFormatError, TypeError):
    """Raised when a value passed to ``format()`` is not a real instant."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"A date must be provided to format(), got {value!r}"
        )


class MissingUnitDataError(RelativeFormatError, LookupError):
    """Raised when a locale has no relative time phrases for a unit."""

    def __init__(self, locale: str, unit: str) -> None:
        self.locale = locale
        self.unit = unit
        super().__init__(
            f"Locale '{locale}' has no relativeTime data for unit '{unit}'"
        )


class InvalidThresholdError(RelativeFormatError, ValueError):
    """Raised when a threshold update names an unknown unit or bad value."""

    pass


class MessageFormatError(RelativeFormatError, ValueError):
    """Raised when a message pattern cannot be compiled or evaluated."""

    pass
