"""Locale catalog and locale resolution.

The catalog is a registry from locale key (the lower-cased root language
subtag, e.g. "en" for "en-US") to the field data registered for it.
Registration overwrites any previous data for the same key; there is no
merge and no removal.

Usage:
    from reltime.catalog import get_catalog, resolve_locale

    catalog = get_catalog()
    catalog.register({"locale": "en-US", "fields": {...}})
    resolve_locale(["xx-YY", "en-GB"])  # "en"
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Iterator, Mapping, Sequence

from reltime.config import get_config
from reltime.data import BUILTIN_LOCALE_DATA
from reltime.exceptions import (
    InvalidLocaleDataError,
    MalformedLocaleTagError,
    UnsupportedLocaleError,
)
from reltime.plural import CLDRPluralRules, get_plural_rules
from reltime.protocols import FieldData, LocaleData


logger = logging.getLogger(__name__)

_LOCALE_KEY_PATTERN = re.compile(r"[a-z]{2,3}")


def normalize_locale_key(tag: str) -> str:
    """Reduce a language tag to its lower-cased root subtag."""
    return tag.split("-")[0].lower()


def is_valid_locale_key(key: str) -> bool:
    """Check the structural validity of a locale key (2-3 letters)."""
    return _LOCALE_KEY_PATTERN.fullmatch(key) is not None


# ==============================================================================
# Locale Catalog
# ==============================================================================

class LocaleCatalog:
    """Thread-safe registry of locale field data.

    Example:
        catalog = LocaleCatalog()
        catalog.register(BUILTIN_LOCALE_DATA["en"])
        catalog.is_registered("en")  # True
        catalog.lookup("en")["day"].relative[-1]  # "yesterday"
    """

    def __init__(self, plural_rules: CLDRPluralRules | None = None) -> None:
        self._locales: dict[str, LocaleData] = {}
        self._lock = threading.RLock()
        self._plural_rules = plural_rules or get_plural_rules()

    def register(self, data: LocaleData | Mapping[str, Any]) -> str:
        """Register locale data, replacing any data with the same key.

        Args:
            data: A ``LocaleData`` record or a ``{"locale", "fields"}`` mapping

        Returns:
            The locale key the data was stored under

        Raises:
            InvalidLocaleDataError: If the locale tag or field data is absent
        """
        if data is None:
            raise InvalidLocaleDataError("Locale data must be provided")

        record = data if isinstance(data, LocaleData) else LocaleData.from_dict(data)
        if not record.locale:
            raise InvalidLocaleDataError("Locale data does not contain a `locale` property")
        if not record.fields:
            raise InvalidLocaleDataError("Locale data does not contain a `fields` property")

        key = normalize_locale_key(record.locale)
        if not is_valid_locale_key(key):
            logger.warning(
                "Registering locale '%s' under key '%s', which locale resolution never matches",
                record.locale,
                key,
            )

        with self._lock:
            if key in self._locales:
                logger.warning("Overwriting locale data registered for '%s'", key)
            self._locales[key] = record
            if record.plural_rule is not None:
                self._plural_rules.register_cardinal_rule(key, record.plural_rule)

        logger.debug("Registered locale '%s' (%s)", key, ", ".join(record.fields))
        return key

    def lookup(self, key: str) -> Mapping[str, FieldData] | None:
        """Get the field data for a locale key, or None if not registered."""
        with self._lock:
            record = self._locales.get(key)
        return record.fields if record is not None else None

    def get_locale_data(self, key: str) -> LocaleData | None:
        """Get the full registration record for a locale key."""
        with self._lock:
            return self._locales.get(key)

    def is_registered(self, key: str) -> bool:
        with self._lock:
            return key in self._locales

    @property
    def plural_rules(self) -> CLDRPluralRules:
        """Plural rules that rules shipped with locale data are installed into."""
        return self._plural_rules

    @property
    def available_locales(self) -> list[str]:
        """Registered locale keys, in registration order."""
        with self._lock:
            return list(self._locales)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.is_registered(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.available_locales)

    def __len__(self) -> int:
        with self._lock:
            return len(self._locales)


_catalog: LocaleCatalog | None = None
_catalog_lock = threading.Lock()


def get_catalog() -> LocaleCatalog:
    """Get the process-wide catalog, seeded with English on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                catalog = LocaleCatalog()
                catalog.register(BUILTIN_LOCALE_DATA["en"])
                _catalog = catalog
    return _catalog


def register_locale_data(data: LocaleData | Mapping[str, Any]) -> str:
    """Register locale data with the process-wide catalog."""
    return get_catalog().register(data)


# ==============================================================================
# Locale Resolution
# ==============================================================================

class LocaleResolver:
    """Pick the first requested locale that has registered data.

    Candidates are scanned in order; a structurally invalid tag does not stop
    the scan, it only determines the error raised when nothing matches.
    """

    def __init__(self, catalog: LocaleCatalog | None = None) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> LocaleCatalog:
        return self._catalog if self._catalog is not None else get_catalog()

    def resolve(
        self,
        requested: str | Sequence[str] | None,
        default: str | None = None,
    ) -> str:
        """Resolve requested tags to a registered locale key.

        Args:
            requested: A tag or ordered sequence of tags
            default: Tag used when nothing is requested (defaults to the
                configured default locale)

        Returns:
            The locale key of the first supported candidate

        Raises:
            MalformedLocaleTagError: If no candidate matched and at least one
                was structurally invalid
            UnsupportedLocaleError: If no candidate has registered data
        """
        if isinstance(requested, str):
            requested = [requested]
        tags = [tag for tag in (requested or []) if tag]
        if not tags:
            tags = [default or get_config().default_locale]

        catalog = self.catalog
        malformed: str | None = None

        for tag in tags:
            key = normalize_locale_key(tag)

            if not is_valid_locale_key(key):
                logger.warning("Skipping structurally invalid language tag: %s", tag)
                malformed = malformed or tag
                continue

            if catalog.is_registered(key):
                logger.debug("Resolved locale '%s' from %s", key, tags)
                return key

        if malformed is not None:
            raise MalformedLocaleTagError(malformed)
        raise UnsupportedLocaleError(tags)


def resolve_locale(
    requested: str | Sequence[str] | None,
    default: str | None = None,
    catalog: LocaleCatalog | None = None,
) -> str:
    """Resolve requested tags against a catalog (process-wide by default)."""
    return LocaleResolver(catalog).resolve(requested, default)
