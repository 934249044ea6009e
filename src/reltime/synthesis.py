"""Synthesize direction- and plural-aware messages from CLDR field data.

For a unit the synthesized pattern is:

    select(when):
        future -> plural(count): {category: phrase, ...}
        past   -> plural(count): {category: phrase, ...}

with the ``{0}`` placeholder of each CLDR phrase replaced by the plural
argument marker, so the number is rendered by the message engine.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import MutableMapping

from reltime.catalog import LocaleCatalog, get_catalog
from reltime.exceptions import MissingUnitDataError
from reltime.message import (
    PLURAL_ARGUMENT,
    CompiledMessage,
    PluralPattern,
    SelectPattern,
    compile_message,
)
from reltime.protocols import Direction, MessageCompiler, Unit


logger = logging.getLogger(__name__)

WHEN_ARGUMENT = "when"
COUNT_ARGUMENT = "count"
PLACEHOLDER = "{0}"

MessageCache = MutableMapping[Unit, CompiledMessage]


def tokenize_phrase(phrase: str) -> tuple:
    """Split a CLDR phrase on its first ``{0}`` placeholder."""
    before, sep, after = phrase.partition(PLACEHOLDER)
    if not sep:
        return (phrase,)
    return tuple(part for part in (before, PLURAL_ARGUMENT, after) if part != "")


class MessageSynthesizer:
    """Build and cache compiled relative time messages.

    The cache belongs to the caller (one per formatter); entries are never
    rebuilt once created, even if the locale is registered again later.
    """

    def __init__(
        self,
        catalog: LocaleCatalog | None = None,
        compiler: MessageCompiler | None = None,
    ) -> None:
        self._catalog = catalog
        self._compiler = compiler

    @property
    def catalog(self) -> LocaleCatalog:
        return self._catalog if self._catalog is not None else get_catalog()

    def build_pattern(self, locale: str, unit: Unit) -> SelectPattern:
        """Build the structured select/plural pattern for a unit.

        Raises:
            MissingUnitDataError: If the locale has no relativeTime for the unit
        """
        fields = self.catalog.lookup(locale) or {}
        field = fields.get(unit.value)
        if field is None or field.relative_time is None:
            raise MissingUnitDataError(locale, unit.value)

        branches = {}
        for direction in (Direction.FUTURE, Direction.PAST):
            forms = {
                category: tokenize_phrase(phrase)
                for category, phrase in field.relative_time.for_direction(direction).items()
            }
            branches[direction.value] = PluralPattern(COUNT_ARGUMENT, forms)

        return SelectPattern(WHEN_ARGUMENT, branches)

    def get_or_build(self, cache: MessageCache, locale: str, unit: Unit) -> CompiledMessage:
        """Return the cached message for a unit, compiling it on first use."""
        message = cache.get(unit)
        if message is None:
            pattern = self.build_pattern(locale, unit)
            compiler = self._compiler or partial(
                compile_message, plural_rules=self.catalog.plural_rules
            )
            message = compiler(pattern, locale)
            cache[unit] = message
            logger.debug(
                "Synthesized '%s' message for '%s' (future: %s; past: %s)",
                unit.value,
                locale,
                ", ".join(pattern.branches[Direction.FUTURE.value].forms),
                ", ".join(pattern.branches[Direction.PAST.value].forms),
            )
        return message
