"""Tests for loading locale data files."""

import json
from pathlib import Path

import pytest
import yaml

from reltime.catalog import LocaleCatalog
from reltime.data import BUILTIN_LOCALE_DATA, get_builtin_locales
from reltime.exceptions import InvalidLocaleDataError
from reltime.loader import (
    LocaleLoader,
    load_builtin_locales,
    load_locale_file,
    load_locales_from_directory,
)


NL_DATA = {
    "locale": "nl",
    "fields": {
        "day": {
            "displayName": "dag",
            "relative": {"-1": "gisteren", "0": "vandaag", "1": "morgen"},
            "relativeTime": {
                "future": {"one": "over {0} dag", "other": "over {0} dagen"},
                "past": {"one": "{0} dag geleden", "other": "{0} dagen geleden"},
            },
        },
    },
}


@pytest.fixture
def nl_json(tmp_path: Path) -> Path:
    path = tmp_path / "nl.json"
    path.write_text(json.dumps(NL_DATA), encoding="utf-8")
    return path


@pytest.fixture
def sv_yaml(tmp_path: Path) -> Path:
    """YAML locale file without a ``locale`` key."""
    payload = {
        "fields": {
            "hour": {
                "relative_time": {
                    "future": {"one": "om {0} timme", "other": "om {0} timmar"},
                    "past": {"one": "för {0} timme sedan", "other": "för {0} timmar sedan"},
                },
            },
        },
    }
    path = tmp_path / "sv.yaml"
    path.write_text(yaml.safe_dump(payload, allow_unicode=True), encoding="utf-8")
    return path


class TestLocaleLoader:
    """Tests for LocaleLoader."""

    def test_load_json(self, nl_json):
        catalog = LocaleCatalog()
        record = LocaleLoader(catalog).load_file(nl_json)

        assert record.locale == "nl"
        assert catalog.is_registered("nl")
        assert catalog.lookup("nl")["day"].relative[-1] == "gisteren"

    def test_load_yaml_infers_locale_from_name(self, sv_yaml):
        catalog = LocaleCatalog()
        record = load_locale_file(sv_yaml, catalog=catalog)

        assert record.locale == "sv"
        assert catalog.lookup("sv")["hour"].relative_time.past["other"] == "för {0} timmar sedan"

    def test_without_auto_register(self, nl_json):
        catalog = LocaleCatalog()
        loader = LocaleLoader(catalog, auto_register=False)
        loader.load_file(nl_json)

        assert not catalog.is_registered("nl")
        assert list(loader.get_loaded()) == ["nl"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocaleLoader(LocaleCatalog()).load_file(tmp_path / "missing.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "nl.toml"
        path.write_text("locale = 'nl'")
        with pytest.raises(InvalidLocaleDataError, match="Unsupported"):
            LocaleLoader(LocaleCatalog()).load_file(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "nl.json"
        path.write_text("{not json")
        with pytest.raises(InvalidLocaleDataError, match="Invalid JSON"):
            LocaleLoader(LocaleCatalog()).load_file(path)

    def test_payload_must_be_mapping(self, tmp_path):
        path = tmp_path / "nl.yaml"
        path.write_text("- day\n- hour\n")
        with pytest.raises(InvalidLocaleDataError):
            LocaleLoader(LocaleCatalog()).load_file(path)

    def test_missing_fields(self, tmp_path):
        path = tmp_path / "nl.json"
        path.write_text(json.dumps({"locale": "nl"}))
        with pytest.raises(InvalidLocaleDataError, match="fields"):
            LocaleLoader(LocaleCatalog()).load_file(path)

    def test_load_directory_skips_invalid_files(self, tmp_path, nl_json, caplog):
        (tmp_path / "broken.json").write_text("{not json")
        catalog = LocaleCatalog()

        with caplog.at_level("WARNING", logger="reltime.loader"):
            loaded = load_locales_from_directory(tmp_path, catalog=catalog)

        assert list(loaded) == ["nl"]
        assert catalog.available_locales == ["nl"]
        assert "broken.json" in caplog.text

    def test_load_directory_skips_wrongly_shaped_files(self, tmp_path, nl_json, caplog):
        (tmp_path / "aa.json").write_text(json.dumps({"fields": ["day"]}))
        catalog = LocaleCatalog()

        with caplog.at_level("WARNING", logger="reltime.loader"):
            loaded = LocaleLoader(catalog).load_directory(tmp_path)

        assert list(loaded) == ["nl"]
        assert catalog.available_locales == ["nl"]
        assert "aa.json" in caplog.text

    def test_load_directory_pattern(self, tmp_path, nl_json, sv_yaml):
        catalog = LocaleCatalog()
        loaded = LocaleLoader(catalog).load_directory(tmp_path, pattern="*.yaml")
        assert list(loaded) == ["sv"]

    def test_load_directory_requires_directory(self, nl_json):
        with pytest.raises(NotADirectoryError):
            LocaleLoader(LocaleCatalog()).load_directory(nl_json)


class TestBuiltinLocales:
    """Tests for registering bundled locale data."""

    def test_all(self):
        catalog = LocaleCatalog()
        keys = load_builtin_locales(catalog=catalog)

        assert keys == get_builtin_locales()
        assert len(keys) == 9
        assert sorted(catalog.available_locales) == sorted(BUILTIN_LOCALE_DATA)

    def test_subset_with_region_tags(self):
        catalog = LocaleCatalog()
        assert load_builtin_locales(["de-AT", "fr"], catalog=catalog) == ["de", "fr"]
        assert catalog.available_locales == ["de", "fr"]

    def test_unknown_locale(self):
        with pytest.raises(InvalidLocaleDataError, match="xx"):
            load_builtin_locales(["xx"], catalog=LocaleCatalog())

    @pytest.mark.parametrize("key", sorted(BUILTIN_LOCALE_DATA))
    def test_every_bundled_locale_covers_every_unit(self, key):
        catalog = LocaleCatalog()
        load_builtin_locales([key], catalog=catalog)
        fields = catalog.lookup(key)
        for unit in ("second", "minute", "hour", "day", "month", "year"):
            assert fields[unit].relative_time is not None
            assert "other" in fields[unit].relative_time.past
