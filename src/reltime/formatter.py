"""Locale-aware relative time formatting.

This module provides ``RelativeFormatter``, which turns an instant into a
phrase such as "3 days ago", "in 2 hours" or "yesterday" relative to now.

Flow of ``format()``:
    1. Coerce the input into a datetime (``InvalidDateError`` otherwise)
    2. Compute per-unit differences from now
    3. Use the fixed unit, or select one through the threshold table
    4. Return an exact-match phrase for the signed offset if the locale has one
    5. Otherwise evaluate the unit's synthesized plural/direction message

Usage:
    from reltime import RelativeFormatter, load_builtin_locales

    load_builtin_locales(["de"])

    formatter = RelativeFormatter(["de-AT", "en"])
    formatter.format(datetime.now() - timedelta(hours=3))  # "vor 3 Stunden"

    days = RelativeFormatter("en", units="day")
    days.format(datetime.now() - timedelta(days=1))  # "yesterday"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Sequence

from reltime.catalog import LocaleCatalog, LocaleResolver, get_catalog
from reltime.config import get_config
from reltime.diff import coerce_instant, diff
from reltime.message import CompiledMessage
from reltime.phrases import resolve_exact
from reltime.protocols import Direction, DiffProvider, Unit
from reltime.synthesis import COUNT_ARGUMENT, WHEN_ARGUMENT, MessageSynthesizer
from reltime.units import select_unit, validate_units


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedOptions:
    """Options a formatter resolved at construction.

    Attributes:
        locale: Resolved locale key
        units: Fixed unit, or None when units are selected automatically
    """
    locale: str
    units: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"locale": self.locale, "units": self.units}


class RelativeFormatter:
    """Format instants relative to now for a resolved locale.

    Args:
        locales: A language tag or ordered sequence of tags; the configured
            default locale is used when empty
        units: Optional fixed unit ("second" ... "year")
        catalog: Locale catalog (process-wide by default)
        clock: Zero-argument callable returning "now"
        diff_provider: Per-unit difference calculation

    Raises:
        MalformedLocaleTagError: If no tag matched and one was malformed
        UnsupportedLocaleError: If no requested locale has data
        InvalidUnitError: If ``units`` is not a valid unit
    """

    def __init__(
        self,
        locales: str | Sequence[str] | None = None,
        units: str | Unit | None = None,
        *,
        catalog: LocaleCatalog | None = None,
        clock: Callable[[], datetime] | None = None,
        diff_provider: DiffProvider | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else get_catalog()
        self._locale = LocaleResolver(self._catalog).resolve(locales)
        self._units: Unit | None = validate_units(units) if units else None
        self._clock = clock or datetime.now
        self._diff = diff_provider or diff
        self._synthesizer = MessageSynthesizer(self._catalog)
        self._messages: dict[Unit, CompiledMessage] = {}

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def units(self) -> Unit | None:
        return self._units

    def resolved_options(self) -> ResolvedOptions:
        """Get the resolved locale and fixed unit."""
        return ResolvedOptions(
            locale=self._locale,
            units=self._units.value if self._units is not None else None,
        )

    def format(self, value: Any) -> str:
        """Format an instant relative to now.

        Args:
            value: datetime, date, POSIX timestamp (seconds) or date string

        Returns:
            Localized relative time phrase

        Raises:
            InvalidDateError: If ``value`` is not a real instant
            MissingUnitDataError: If the locale lacks phrases for the unit
        """
        target = coerce_instant(value)
        report = self._diff(self._clock(), target)

        units = self._units or select_unit(report, get_config().thresholds)
        offset = report[units.value]

        phrase = resolve_exact(self._locale, units, offset, self._catalog)
        if phrase is not None:
            return phrase

        message = self._synthesizer.get_or_build(self._messages, self._locale, units)
        return message.format({
            COUNT_ARGUMENT: abs(offset),
            WHEN_ARGUMENT: Direction.of(offset).value,
        })

    def __repr__(self) -> str:
        return f"RelativeFormatter(locale={self._locale!r}, units={self.resolved_options().units!r})"


def format_relative(
    value: Any,
    locales: str | Sequence[str] | None = None,
    units: str | Unit | None = None,
) -> str:
    """Format a single instant relative to now.

    Example:
        format_relative(datetime.now() - timedelta(minutes=5))  # "5 minutes ago"
    """
    return RelativeFormatter(locales, units).format(value)
