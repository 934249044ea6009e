"""reltime - Locale-aware relative time formatting.

Turns an instant into a phrase such as "3 days ago", "in 2 hours" or
"yesterday", picking the most natural unit and the locale's plural and
direction wording from CLDR field data.

Example:
    from datetime import datetime, timedelta
    from reltime import RelativeFormatter, load_builtin_locales

    load_builtin_locales()

    RelativeFormatter("en").format(datetime.now() - timedelta(seconds=30))
    # -> "30 seconds ago"
    RelativeFormatter(["xx-YY", "ru-RU"]).format(datetime.now() + timedelta(days=5))
    # -> "через 5 дней"
    RelativeFormatter("fr", units="day").format(datetime.now() - timedelta(days=1))
    # -> "hier"
"""

# Formatter
from reltime.formatter import RelativeFormatter, ResolvedOptions, format_relative

# Catalog and locale resolution
from reltime.catalog import (
    LocaleCatalog,
    LocaleResolver,
    get_catalog,
    normalize_locale_key,
    register_locale_data,
    resolve_locale,
)

# Configuration
from reltime.config import (
    DEFAULT_THRESHOLDS,
    RelativeTimeConfig,
    configure,
    get_config,
    reset_config,
    set_default_locale,
    set_thresholds,
)

# Locale data
from reltime.data import BUILTIN_LOCALE_DATA, get_builtin_locales
from reltime.loader import (
    LocaleLoader,
    load_builtin_locales,
    load_locale_file,
    load_locales_from_directory,
)

# Building blocks
from reltime.diff import DiffReport, coerce_instant, diff
from reltime.message import (
    PLURAL_ARGUMENT,
    CompiledMessage,
    PluralPattern,
    SelectPattern,
    compile_message,
    evaluate,
)
from reltime.phrases import resolve_exact
from reltime.plural import CLDRPluralRules, get_plural_category
from reltime.protocols import (
    PRIORITY,
    Direction,
    FieldData,
    LocaleData,
    PluralCategory,
    RelativeTimePatterns,
    Unit,
)
from reltime.synthesis import MessageSynthesizer
from reltime.units import select_unit, validate_units

# Exceptions
from reltime.exceptions import (
    InvalidDateError,
    InvalidLocaleDataError,
    InvalidThresholdError,
    InvalidUnitError,
    MalformedLocaleTagError,
    MessageFormatError,
    MissingUnitDataError,
    RelativeFormatError,
    UnsupportedLocaleError,
)

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("reltime")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Formatter
    "RelativeFormatter",
    "ResolvedOptions",
    "format_relative",
    # Catalog
    "LocaleCatalog",
    "LocaleResolver",
    "get_catalog",
    "normalize_locale_key",
    "register_locale_data",
    "resolve_locale",
    # Configuration
    "DEFAULT_THRESHOLDS",
    "RelativeTimeConfig",
    "configure",
    "get_config",
    "reset_config",
    "set_default_locale",
    "set_thresholds",
    # Locale data
    "BUILTIN_LOCALE_DATA",
    "get_builtin_locales",
    "LocaleLoader",
    "load_builtin_locales",
    "load_locale_file",
    "load_locales_from_directory",
    # Building blocks
    "DiffReport",
    "coerce_instant",
    "diff",
    "PLURAL_ARGUMENT",
    "CompiledMessage",
    "PluralPattern",
    "SelectPattern",
    "compile_message",
    "evaluate",
    "resolve_exact",
    "CLDRPluralRules",
    "get_plural_category",
    "PRIORITY",
    "Direction",
    "FieldData",
    "LocaleData",
    "PluralCategory",
    "RelativeTimePatterns",
    "Unit",
    "MessageSynthesizer",
    "select_unit",
    "validate_units",
    # Exceptions
    "RelativeFormatError",
    "InvalidDateError",
    "InvalidLocaleDataError",
    "InvalidThresholdError",
    "InvalidUnitError",
    "MalformedLocaleTagError",
    "MessageFormatError",
    "MissingUnitDataError",
    "UnsupportedLocaleError",
]
