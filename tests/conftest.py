"""Shared fixtures for reltime tests."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest

from reltime.catalog import LocaleCatalog
from reltime.config import reset_config
from reltime.data import BUILTIN_LOCALE_DATA
from reltime.loader import load_builtin_locales


NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture(autouse=True)
def reset_relative_time_config():
    """Reset process-wide configuration around each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Fixed clock so formatting is deterministic."""
    return lambda: NOW


@pytest.fixture
def catalog() -> LocaleCatalog:
    """Catalog with every bundled locale registered."""
    catalog = LocaleCatalog()
    load_builtin_locales(catalog=catalog)
    return catalog


@pytest.fixture
def en_catalog() -> LocaleCatalog:
    """Catalog with only English registered."""
    catalog = LocaleCatalog()
    catalog.register(BUILTIN_LOCALE_DATA["en"])
    return catalog
