"""Tests for message synthesis and exact-match phrases."""

from unittest.mock import MagicMock

import pytest

from reltime.exceptions import MissingUnitDataError
from reltime.message import PLURAL_ARGUMENT, CompiledMessage, compile_message
from reltime.phrases import resolve_exact
from reltime.protocols import Unit
from reltime.synthesis import MessageSynthesizer, tokenize_phrase


class TestTokenizePhrase:
    """Tests for splitting CLDR phrases on the placeholder."""

    @pytest.mark.parametrize("phrase,tokens", [
        ("in {0} days", ("in ", PLURAL_ARGUMENT, " days")),
        ("{0} days ago", (PLURAL_ARGUMENT, " days ago")),
        ("{0}日前", (PLURAL_ARGUMENT, "日前")),
        ("قبل يومين", ("قبل يومين",)),
        ("{0}", (PLURAL_ARGUMENT,)),
    ])
    def test_tokenize(self, phrase, tokens):
        assert tokenize_phrase(phrase) == tokens

    def test_hash_is_literal(self):
        """Phrases containing '#' are not treated as plural markers."""
        assert tokenize_phrase("#{0} in line") == ("#", PLURAL_ARGUMENT, " in line")


class TestMessageSynthesizer:
    """Tests for building select/plural messages from field data."""

    def test_pattern_shape(self, en_catalog):
        pattern = MessageSynthesizer(en_catalog).build_pattern("en", Unit.DAY)

        assert pattern.argument == "when"
        assert list(pattern.branches) == ["future", "past"]
        future = pattern.branches["future"]
        assert future.argument == "count"
        assert future.forms == {
            "one": ("in ", PLURAL_ARGUMENT, " day"),
            "other": ("in ", PLURAL_ARGUMENT, " days"),
        }
        assert pattern.branches["past"].forms["other"] == (PLURAL_ARGUMENT, " days ago")

    def test_arabic_forms(self, catalog):
        pattern = MessageSynthesizer(catalog).build_pattern("ar", Unit.HOUR)
        assert set(pattern.branches["past"].forms) == {"zero", "one", "two", "few", "many", "other"}

    def test_compiled_message(self, en_catalog):
        message = MessageSynthesizer(en_catalog).get_or_build({}, "en", Unit.HOUR)
        assert isinstance(message, CompiledMessage)
        assert message.format({"when": "past", "count": 1}) == "1 hour ago"
        assert message.format({"when": "future", "count": 3}) == "in 3 hours"

    def test_message_is_compiled_once(self, en_catalog):
        compiler = MagicMock(side_effect=compile_message)
        synthesizer = MessageSynthesizer(en_catalog, compiler=compiler)
        cache = {}

        first = synthesizer.get_or_build(cache, "en", Unit.DAY)
        second = synthesizer.get_or_build(cache, "en", Unit.DAY)
        synthesizer.get_or_build(cache, "en", Unit.HOUR)

        assert first is second
        assert compiler.call_count == 2
        assert set(cache) == {Unit.DAY, Unit.HOUR}

    def test_separate_caches(self, en_catalog):
        synthesizer = MessageSynthesizer(en_catalog)
        assert synthesizer.get_or_build({}, "en", Unit.DAY) is not synthesizer.get_or_build({}, "en", Unit.DAY)

    def test_missing_unit(self, en_catalog):
        en_catalog.register({"locale": "xx", "fields": {"day": {"relative": {"0": "today"}}}})
        synthesizer = MessageSynthesizer(en_catalog)

        with pytest.raises(MissingUnitDataError) as exc_info:
            synthesizer.build_pattern("xx", Unit.DAY)
        assert exc_info.value.unit == "day"

        with pytest.raises(MissingUnitDataError):
            synthesizer.get_or_build({}, "xx", Unit.HOUR)

    def test_cache_is_not_populated_on_failure(self, en_catalog):
        en_catalog.register({"locale": "xx", "fields": {"day": {"relative": {"0": "today"}}}})
        cache = {}
        with pytest.raises(MissingUnitDataError):
            MessageSynthesizer(en_catalog).get_or_build(cache, "xx", Unit.DAY)
        assert cache == {}


class TestResolveExact:
    """Tests for exact offset phrases."""

    @pytest.mark.parametrize("unit,offset,phrase", [
        (Unit.DAY, -1, "yesterday"),
        (Unit.DAY, 0, "today"),
        (Unit.DAY, 1, "tomorrow"),
        (Unit.SECOND, 0, "now"),
        ("month", 1, "next month"),
        (Unit.YEAR, -1, "last year"),
    ])
    def test_hit(self, en_catalog, unit, offset, phrase):
        assert resolve_exact("en", unit, offset, en_catalog) == phrase

    @pytest.mark.parametrize("unit,offset", [
        (Unit.DAY, -2),
        (Unit.DAY, 5),
        (Unit.HOUR, 0),
        (Unit.SECOND, 1),
    ])
    def test_miss(self, en_catalog, unit, offset):
        assert resolve_exact("en", unit, offset, en_catalog) is None

    def test_integral_float(self, en_catalog):
        assert resolve_exact("en", Unit.DAY, -1.0, en_catalog) == "yesterday"

    def test_fractional_float_never_matches(self, en_catalog):
        assert resolve_exact("en", Unit.DAY, -0.5, en_catalog) is None

    def test_unregistered_locale(self, en_catalog):
        assert resolve_exact("fr", Unit.DAY, -1, en_catalog) is None

    def test_locale_specific_idioms(self, catalog):
        assert resolve_exact("de", Unit.DAY, -2, catalog) == "vorgestern"
        assert resolve_exact("ja", Unit.MONTH, 1, catalog) == "来月"
