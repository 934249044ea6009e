"""Process-wide configuration for relative time formatting.

The configuration holds the default locale used when a formatter is created
without requested locales, and the threshold table used by unit selection.

Lifecycle:
    The initial configuration is read from the environment on import.
    Hosts may replace it at runtime; every update builds a complete new
    ``RelativeTimeConfig`` and swaps the module reference under a lock, so
    readers always see either the old or the new table in full.

Environment variables:
    RELTIME_DEFAULT_LOCALE: default locale tag (e.g. "en-GB")
    RELTIME_THRESHOLDS: comma-separated overrides (e.g. "second=30,minute=50")

Usage:
    >>> from reltime.config import get_config, set_thresholds
    >>> get_config().thresholds["second"]
    45
    >>> config = set_thresholds(second=30)
    >>> get_config().thresholds["second"]
    30
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from reltime.exceptions import InvalidThresholdError
from reltime.protocols import Unit


logger = logging.getLogger(__name__)

ENV_DEFAULT_LOCALE = "RELTIME_DEFAULT_LOCALE"
ENV_THRESHOLDS = "RELTIME_THRESHOLDS"

# Relative time thresholds from moment.js
DEFAULT_THRESHOLDS: Mapping[str, int] = MappingProxyType({
    Unit.SECOND.value: 45,  # seconds to minute
    Unit.MINUTE.value: 45,  # minutes to hour
    Unit.HOUR.value: 22,    # hours to day
    Unit.DAY.value: 26,     # days to month
    Unit.MONTH.value: 11,   # months to year
})


def _validate_thresholds(thresholds: Mapping[str, Any]) -> dict[str, int]:
    """Validate a (possibly partial) threshold table."""
    validated: dict[str, int] = {}
    for unit, value in thresholds.items():
        key = unit.value if isinstance(unit, Unit) else str(unit)
        if key not in DEFAULT_THRESHOLDS:
            raise InvalidThresholdError(
                f"Unknown threshold unit '{key}', "
                f"it must be one of: {', '.join(DEFAULT_THRESHOLDS)}"
            )
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidThresholdError(
                f"Threshold for '{key}' must be a positive integer, got {value!r}"
            )
        validated[key] = value
    return validated


def _parse_thresholds(raw: str) -> dict[str, int]:
    """Parse ``"second=30,minute=50"`` into a threshold mapping."""
    parsed: dict[str, Any] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        unit, sep, value = item.partition("=")
        if not sep:
            raise InvalidThresholdError(f"Invalid threshold entry: {item!r}")
        try:
            parsed[unit.strip()] = int(value.strip())
        except ValueError:
            raise InvalidThresholdError(
                f"Threshold for '{unit.strip()}' must be an integer, got {value.strip()!r}"
            ) from None
    return _validate_thresholds(parsed)


@dataclass(frozen=True)
class RelativeTimeConfig:
    """Immutable snapshot of the process-wide configuration.

    Attributes:
        default_locale: Locale tag used when no locales are requested
        thresholds: Unit -> magnitude below which the unit is still used
    """
    default_locale: str = "en"
    thresholds: Mapping[str, int] = field(default_factory=lambda: DEFAULT_THRESHOLDS)

    def __post_init__(self) -> None:
        merged = dict(DEFAULT_THRESHOLDS)
        merged.update(_validate_thresholds(self.thresholds))
        object.__setattr__(self, "thresholds", MappingProxyType(merged))

    def with_thresholds(self, **updates: int) -> "RelativeTimeConfig":
        """Return a copy with some thresholds replaced."""
        merged = dict(self.thresholds)
        merged.update(_validate_thresholds(updates))
        return replace(self, thresholds=merged)

    @classmethod
    def from_env(cls) -> "RelativeTimeConfig":
        """Build a configuration from environment variables."""
        default_locale = os.environ.get(ENV_DEFAULT_LOCALE, "").strip() or "en"
        raw_thresholds = os.environ.get(ENV_THRESHOLDS, "").strip()
        thresholds = _parse_thresholds(raw_thresholds) if raw_thresholds else {}
        return cls(default_locale=default_locale, thresholds=thresholds)

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_locale": self.default_locale,
            "thresholds": dict(self.thresholds),
        }


_lock = threading.RLock()
_config = RelativeTimeConfig.from_env()


def get_config() -> RelativeTimeConfig:
    """Get the current configuration snapshot."""
    return _config


def _publish(config: RelativeTimeConfig) -> None:
    global _config
    _config = config
    logger.debug("Published relative time config: %s", config.to_dict())


def configure(
    default_locale: str | None = None,
    thresholds: Mapping[str, int] | None = None,
) -> RelativeTimeConfig:
    """Update the configuration.

    Args:
        default_locale: New default locale tag
        thresholds: Threshold overrides merged into the current table

    Returns:
        The published configuration
    """
    with _lock:
        config = _config
        if thresholds:
            config = config.with_thresholds(**_validate_thresholds(thresholds))
        if default_locale is not None:
            config = replace(config, default_locale=default_locale)
        _publish(config)
        return config


def set_thresholds(**updates: int) -> RelativeTimeConfig:
    """Replace individual thresholds (e.g. ``set_thresholds(second=30)``)."""
    return configure(thresholds=updates)


def set_default_locale(tag: str) -> RelativeTimeConfig:
    """Set the locale used when a formatter is created without locales."""
    return configure(default_locale=tag)


def reset_config() -> RelativeTimeConfig:
    """Restore the built-in defaults (environment overrides are not re-read)."""
    with _lock:
        config = RelativeTimeConfig()
        _publish(config)
        return config
