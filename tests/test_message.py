"""Tests for structured select/plural messages."""

import pytest

from reltime.exceptions import MessageFormatError
from reltime.message import (
    PLURAL_ARGUMENT,
    CompiledMessage,
    PluralPattern,
    SelectPattern,
    compile_message,
    evaluate,
)
from reltime.plural import CLDRPluralRules
from reltime.protocols import Direction, PluralCategory


@pytest.fixture
def day_pattern() -> SelectPattern:
    return SelectPattern("when", {
        "future": PluralPattern("count", {
            "one": ("in ", PLURAL_ARGUMENT, " day"),
            "other": ("in ", PLURAL_ARGUMENT, " days"),
        }),
        "past": PluralPattern("count", {
            "one": (PLURAL_ARGUMENT, " day ago"),
            "other": (PLURAL_ARGUMENT, " days ago"),
        }),
    })


class TestCompiledMessage:
    """Tests for compiling and evaluating messages."""

    def test_plural_selection(self, day_pattern):
        message = compile_message(day_pattern, "en")
        assert message.format({"when": "past", "count": 1}) == "1 day ago"
        assert message.format({"when": "past", "count": 3}) == "3 days ago"
        assert message.format({"when": "future", "count": 1}) == "in 1 day"
        assert message.format({"when": "future", "count": 2}) == "in 2 days"

    def test_enum_arguments(self, day_pattern):
        """Enum selector values select by their value."""
        message = compile_message(day_pattern, "en")
        assert message.format({"when": Direction.PAST, "count": 2}) == "2 days ago"

    def test_category_keys_may_be_enums(self):
        pattern = SelectPattern("when", {
            Direction.PAST: PluralPattern("count", {PluralCategory.OTHER: "# days ago"}),
        })
        message = compile_message(pattern, "en")
        assert message.format({"when": "past", "count": 4}) == "4 days ago"

    def test_icu_style_string_forms(self):
        pattern = SelectPattern("when", {
            "future": PluralPattern("count", {"one": "in # hour", "other": "in # hours"}),
        })
        message = compile_message(pattern, "en")
        assert message.format({"when": "future", "count": 5}) == "in 5 hours"

    def test_number_is_rendered_with_locale_grouping(self, day_pattern):
        assert compile_message(day_pattern, "en").format({"when": "past", "count": 1234}) == "1,234 days ago"
        assert compile_message(day_pattern, "de").format({"when": "past", "count": 1234}) == "1.234 days ago"

    def test_missing_category_falls_back_to_other(self):
        pattern = SelectPattern("when", {
            "past": PluralPattern("count", {"other": "# дня назад"}),
        })
        message = compile_message(pattern, "ru")
        assert message.format({"when": "past", "count": 5}) == "5 дня назад"

    def test_other_select_branch_is_used_for_unknown_selector(self):
        pattern = SelectPattern("when", {
            "other": PluralPattern("count", {"other": "# units"}),
        })
        message = compile_message(pattern, "en")
        assert message.format({"when": "sideways", "count": 2}) == "2 units"

    def test_custom_plural_rules(self):
        rules = CLDRPluralRules()
        rules.register_cardinal_rule("xx", lambda n: PluralCategory.FEW)
        pattern = SelectPattern("when", {
            "past": PluralPattern("count", {"few": "few: #", "other": "other: #"}),
        })

        message = compile_message(pattern, "xx", plural_rules=rules)
        assert message.format({"when": "past", "count": 9}) == "few: 9"

    def test_evaluate_matches_format(self, day_pattern):
        message = compile_message(day_pattern, "en")
        args = {"when": "future", "count": 7}
        assert evaluate(message, args) == message.format(args)

    def test_repr(self, day_pattern):
        message = compile_message(day_pattern, "en")
        assert isinstance(message, CompiledMessage)
        assert "en" in repr(message)
        assert message.selectors == ["future", "past"]


class TestMessageErrors:
    """Tests for compile and evaluation failures."""

    def test_unknown_plural_category(self):
        pattern = SelectPattern("when", {
            "past": PluralPattern("count", {"several": "# ago"}),
        })
        with pytest.raises(MessageFormatError, match="several"):
            compile_message(pattern, "en")

    def test_invalid_template_token(self):
        pattern = SelectPattern("when", {
            "past": PluralPattern("count", {"other": (1, " days ago")}),
        })
        with pytest.raises(MessageFormatError):
            compile_message(pattern, "en")

    def test_empty_branch(self):
        pattern = SelectPattern("when", {"past": PluralPattern("count", {})})
        with pytest.raises(MessageFormatError):
            compile_message(pattern, "en")

    def test_no_branches(self):
        with pytest.raises(MessageFormatError):
            compile_message(SelectPattern("when", {}), "en")

    def test_missing_select_argument(self, day_pattern):
        message = compile_message(day_pattern, "en")
        with pytest.raises(MessageFormatError, match="when"):
            message.format({"count": 1})

    def test_missing_plural_argument(self, day_pattern):
        message = compile_message(day_pattern, "en")
        with pytest.raises(MessageFormatError, match="count"):
            message.format({"when": "past"})

    def test_unknown_selector_without_other(self, day_pattern):
        message = compile_message(day_pattern, "en")
        with pytest.raises(MessageFormatError, match="sideways"):
            message.format({"when": "sideways", "count": 1})
