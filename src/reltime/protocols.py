"""Shared types and collaborator protocols for relative time formatting.

This module defines the enums, locale data records and the structural
interfaces (protocols) that the formatter's collaborators follow, so that the
diff calculation and the message engine can be swapped out independently.

Types:
- Unit: calendar units a phrase can be expressed in
- PluralCategory: CLDR plural categories
- Direction: past / future branch of a relative phrase
- LocaleData / FieldData / RelativeTimePatterns: CLDR-style locale fields

Protocols:
- DiffProvider: computes per-unit differences between two instants
- MessageCompiler: compiles a synthesized pattern into a formatter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol, runtime_checkable

from reltime.exceptions import InvalidLocaleDataError

if TYPE_CHECKING:
    from reltime.diff import DiffReport
    from reltime.message import CompiledMessage, SelectPattern


# ==============================================================================
# Enums
# ==============================================================================

class Unit(str, Enum):
    """Calendar units, from finest to coarsest."""
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


# Escalation order used by unit selection
PRIORITY: tuple[Unit, ...] = (
    Unit.SECOND,
    Unit.MINUTE,
    Unit.HOUR,
    Unit.DAY,
    Unit.MONTH,
    Unit.YEAR,
)


class PluralCategory(str, Enum):
    """CLDR plural categories.

    Based on Unicode CLDR plural rules:
    https://cldr.unicode.org/index/cldr-spec/plural-rules
    """
    ZERO = "zero"      # 0 items
    ONE = "one"        # 1 item (singular)
    TWO = "two"        # 2 items (dual)
    FEW = "few"        # Small number (e.g., 2-4 in Slavic languages)
    MANY = "many"      # Larger number (e.g., 5+ in Slavic languages)
    OTHER = "other"    # Default/fallback


class Direction(str, Enum):
    """Direction of a relative phrase."""
    PAST = "past"
    FUTURE = "future"

    @classmethod
    def of(cls, offset: int | float) -> "Direction":
        """Negative offsets are in the past, everything else in the future."""
        return cls.PAST if offset < 0 else cls.FUTURE


PluralRuleFunc = Callable[[float | int], PluralCategory]


# ==============================================================================
# Locale Data
# ==============================================================================

@dataclass(frozen=True)
class RelativeTimePatterns:
    """Pluralized relative time phrases for one unit.

    Attributes:
        future: Plural category -> phrase (e.g. "one" -> "in {0} day")
        past: Plural category -> phrase (e.g. "other" -> "{0} days ago")
    """
    future: Mapping[str, str]
    past: Mapping[str, str]

    def for_direction(self, direction: Direction) -> Mapping[str, str]:
        return self.future if direction is Direction.FUTURE else self.past


@dataclass(frozen=True)
class FieldData:
    """CLDR field data for a single unit.

    Attributes:
        display_name: Human readable name of the unit (e.g. "Day")
        relative: Exact offset -> literal phrase (e.g. -1 -> "yesterday")
        relative_time: Pluralized phrases, or None when the locale lacks them
    """
    display_name: str | None = None
    relative: Mapping[int, str] = field(default_factory=dict)
    relative_time: RelativeTimePatterns | None = None

    @classmethod
    def from_dict(cls, unit: str, data: Mapping[str, Any]) -> "FieldData":
        """Parse CLDR-style field JSON.

        Accepts both the CLDR key names (``displayName``, ``relativeTime``)
        and their snake_case equivalents.
        """
        if not isinstance(data, Mapping):
            raise InvalidLocaleDataError(f"field data for '{unit}' must be a mapping")

        raw_relative = data.get("relative") or {}
        if not isinstance(raw_relative, Mapping):
            raise InvalidLocaleDataError(f"relative for '{unit}' must be a mapping")

        relative: dict[int, str] = {}
        for offset, phrase in raw_relative.items():
            try:
                relative[int(offset)] = str(phrase)
            except (TypeError, ValueError):
                raise InvalidLocaleDataError(
                    f"relative offset for '{unit}' is not an integer: {offset!r}"
                ) from None

        raw_relative_time = data.get("relativeTime", data.get("relative_time"))
        relative_time = None
        if raw_relative_time is not None:
            if not isinstance(raw_relative_time, Mapping):
                raise InvalidLocaleDataError(
                    f"relativeTime for '{unit}' must be a mapping"
                )
            directions = {}
            for direction in (Direction.FUTURE, Direction.PAST):
                phrases = raw_relative_time.get(direction.value) or {}
                if not isinstance(phrases, Mapping):
                    raise InvalidLocaleDataError(
                        f"relativeTime.{direction.value} for '{unit}' must be a mapping"
                    )
                directions[direction.value] = dict(phrases)
            relative_time = RelativeTimePatterns(**directions)

        return cls(
            display_name=data.get("displayName", data.get("display_name")),
            relative=relative,
            relative_time=relative_time,
        )


@dataclass(frozen=True)
class LocaleData:
    """A locale registration record.

    Attributes:
        locale: Locale tag as supplied (e.g. "en-US")
        fields: Unit name -> field data
        plural_rule: Optional cardinal plural rule shipped with the data
    """
    locale: str
    fields: Mapping[str, FieldData]
    plural_rule: PluralRuleFunc | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocaleData":
        """Build a record from a CLDR-style ``{"locale", "fields"}`` payload.

        Raises:
            InvalidLocaleDataError: If ``locale`` or ``fields`` is missing
        """
        if not isinstance(data, Mapping) or not data.get("locale"):
            raise InvalidLocaleDataError(
                "Locale data does not contain a `locale` property"
            )
        if not data.get("fields"):
            raise InvalidLocaleDataError(
                "Locale data does not contain a `fields` property"
            )
        if not isinstance(data["fields"], Mapping):
            raise InvalidLocaleDataError(
                "Locale data `fields` must map unit names to field data"
            )

        fields = {
            str(unit): value if isinstance(value, FieldData) else FieldData.from_dict(unit, value)
            for unit, value in data["fields"].items()
        }
        return cls(
            locale=str(data["locale"]),
            fields=fields,
            plural_rule=data.get("plural_rule"),
        )


# ==============================================================================
# Protocols (Interfaces)
# ==============================================================================

@runtime_checkable
class DiffProvider(Protocol):
    """Protocol for the per-unit difference calculation."""

    def __call__(self, from_dt: datetime, to_dt: datetime) -> "DiffReport":
        """Compute signed per-unit differences from ``from_dt`` to ``to_dt``.

        Negative values mean ``to_dt`` lies in the past.
        """
        ...


@runtime_checkable
class MessageCompiler(Protocol):
    """Protocol for the pluralization engine's compile step."""

    def __call__(self, pattern: "SelectPattern", locale: str) -> "CompiledMessage":
        """Compile a structured pattern for a locale."""
        ...
