"""Locale loader for external relative time data files.

This module loads CLDR-style field data from JSON and YAML files and
registers it with a locale catalog.

File shape:
    {"locale": "nl", "fields": {"day": {"relativeTime": {...}}, ...}}

The ``locale`` key may be omitted, in which case it is inferred from the
file name (``nl.json`` -> "nl").
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable

import yaml

from reltime.catalog import LocaleCatalog, get_catalog, normalize_locale_key
from reltime.data import BUILTIN_LOCALE_DATA
from reltime.exceptions import InvalidLocaleDataError, RelativeFormatError
from reltime.protocols import LocaleData


logger = logging.getLogger(__name__)

# Suffix -> (format name, parser)
_READERS: dict[str, tuple[str, Callable[[str], Any]]] = {
    ".json": ("JSON", json.loads),
    ".yaml": ("YAML", yaml.safe_load),
    ".yml": ("YAML", yaml.safe_load),
}


class LocaleLoader:
    """Loader for external locale files.

    Example:
        loader = LocaleLoader()

        # Load single file
        loader.load_file(Path("locales/nl.json"))

        # Load directory of locale files
        loader.load_directory(Path("locales/"), pattern="*.yaml")
    """

    def __init__(
        self,
        catalog: LocaleCatalog | None = None,
        auto_register: bool = True,
    ) -> None:
        """Initialize loader.

        Args:
            catalog: Catalog to register into (process-wide by default)
            auto_register: Automatically register loaded data
        """
        self._catalog = catalog
        self._auto_register = auto_register
        self._loaded: dict[str, LocaleData] = {}

    @property
    def catalog(self) -> LocaleCatalog:
        return self._catalog if self._catalog is not None else get_catalog()

    def load_file(self, path: Path | str) -> LocaleData:
        """Load a locale file.

        Args:
            path: Path to locale file (JSON or YAML).

        Returns:
            Parsed locale data.

        Raises:
            FileNotFoundError: If file doesn't exist.
            InvalidLocaleDataError: If the format is unsupported or the
                payload is malformed.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Locale file not found: {path}")

        reader = _READERS.get(path.suffix.lower())
        if reader is None:
            raise InvalidLocaleDataError(
                f"Unsupported locale file format: {path.suffix or path.name}"
            )

        format_name, read = reader
        try:
            payload = read(path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise InvalidLocaleDataError(f"Invalid {format_name} in {path}: {e}") from e

        record = self._parse_locale_data(payload, path)
        self._loaded[record.locale] = record

        if self._auto_register:
            self.catalog.register(record)

        logger.info("Loaded locale '%s' from %s", record.locale, path)
        return record

    def load_directory(
        self,
        directory: Path | str,
        pattern: str = "*.json",
    ) -> dict[str, LocaleData]:
        """Load all locale files from a directory.

        Files that fail to parse are logged and skipped.

        Args:
            directory: Directory containing locale files.
            pattern: Glob pattern for files.

        Returns:
            Dictionary of locale tag to locale data.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        loaded = {}
        for file_path in sorted(directory.glob(pattern)):
            try:
                record = self.load_file(file_path)
            except (RelativeFormatError, OSError) as e:
                logger.warning("Skipping locale file %s: %s", file_path, e)
                continue
            loaded[record.locale] = record

        logger.info("Loaded %d locale file(s) from %s", len(loaded), directory)
        return loaded

    def _parse_locale_data(self, payload: Any, path: Path) -> LocaleData:
        """Parse a file payload, inferring the locale from the file name."""
        if not isinstance(payload, dict):
            raise InvalidLocaleDataError(f"Locale file {path} must contain a mapping")

        if not payload.get("locale"):
            payload = {**payload, "locale": path.stem}

        return LocaleData.from_dict(payload)

    def get_loaded(self) -> dict[str, LocaleData]:
        """Get all locale data loaded by this loader."""
        return self._loaded.copy()


def load_locale_file(
    path: Path | str,
    catalog: LocaleCatalog | None = None,
) -> LocaleData:
    """Load and register a locale file."""
    return LocaleLoader(catalog).load_file(path)


def load_locales_from_directory(
    directory: Path | str,
    pattern: str = "*.json",
    catalog: LocaleCatalog | None = None,
) -> dict[str, LocaleData]:
    """Load and register every matching locale file in a directory."""
    return LocaleLoader(catalog).load_directory(directory, pattern)


def load_builtin_locales(
    locales: Iterable[str] | None = None,
    catalog: LocaleCatalog | None = None,
) -> list[str]:
    """Register bundled locale data.

    Args:
        locales: Keys to register (all bundled locales by default)
        catalog: Catalog to register into (process-wide by default)

    Returns:
        The registered locale keys

    Raises:
        InvalidLocaleDataError: If a requested locale is not bundled
    """
    if catalog is None:
        catalog = get_catalog()

    names = list(locales) if locales is not None else list(BUILTIN_LOCALE_DATA)
    registered = []
    for name in names:
        key = normalize_locale_key(name)
        if key not in BUILTIN_LOCALE_DATA:
            raise InvalidLocaleDataError(
                f"No bundled locale data for '{name}'; "
                f"available: {', '.join(BUILTIN_LOCALE_DATA)}"
            )
        registered.append(catalog.register(BUILTIN_LOCALE_DATA[key]))
    return registered
