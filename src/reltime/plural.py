"""Cardinal plural rules for relative time counts.

Each built-in rule is written against the CLDR plural operands of a number
(see ``PluralOperands``) and shared by every language that uses the same
rule. Locale data may ship its own rule, which takes the raw number.

Usage:
    from reltime.plural import get_plural_category

    get_plural_category(1, "en")  # PluralCategory.ONE
    get_plural_category(5, "ru")  # PluralCategory.MANY
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from reltime.protocols import PluralCategory, PluralRuleFunc


@dataclass(frozen=True)
class PluralOperands:
    """CLDR plural operands of a number.

    See: https://unicode.org/reports/tr35/tr35-numbers.html#Operands

    Attributes:
        n: Absolute value
        i: Integer digits of n
        v: Number of visible fraction digits
        f: Visible fraction digits as an integer
    """
    n: float
    i: int
    v: int = 0
    f: int = 0

    @classmethod
    def from_number(cls, number: float | int) -> "PluralOperands":
        value = abs(number)
        if isinstance(value, int):
            return cls(n=float(value), i=value)

        # Fixed notation keeps "1e-05" from hiding its fraction digits
        _, _, fraction = format(Decimal(repr(value)), "f").partition(".")
        return cls(
            n=float(value),
            i=int(value),
            v=len(fraction),
            f=int(fraction) if fraction else 0,
        )


OperandRule = Callable[[PluralOperands], PluralCategory]


# ==============================================================================
# Rules
# ==============================================================================

def _one_other(op: PluralOperands) -> PluralCategory:
    if op.i == 1 and op.v == 0:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def _zero_or_one(op: PluralOperands) -> PluralCategory:
    return PluralCategory.ONE if op.i in (0, 1) else PluralCategory.OTHER


def _east_slavic(op: PluralOperands) -> PluralCategory:
    if op.v:
        return PluralCategory.OTHER
    last, last_two = op.i % 10, op.i % 100
    if last == 1 and last_two != 11:
        return PluralCategory.ONE
    if 2 <= last <= 4 and not 12 <= last_two <= 14:
        return PluralCategory.FEW
    return PluralCategory.MANY


def _polish(op: PluralOperands) -> PluralCategory:
    if op.v:
        return PluralCategory.OTHER
    if op.i == 1:
        return PluralCategory.ONE
    last, last_two = op.i % 10, op.i % 100
    if 2 <= last <= 4 and not 12 <= last_two <= 14:
        return PluralCategory.FEW
    return PluralCategory.MANY


def _west_slavic(op: PluralOperands) -> PluralCategory:
    if op.v:
        return PluralCategory.MANY
    if op.i == 1:
        return PluralCategory.ONE
    if 2 <= op.i <= 4:
        return PluralCategory.FEW
    return PluralCategory.OTHER


def _arabic(op: PluralOperands) -> PluralCategory:
    if op.n in (0, 1, 2):
        return (PluralCategory.ZERO, PluralCategory.ONE, PluralCategory.TWO)[int(op.n)]
    if op.n.is_integer():
        last_two = op.i % 100
        if 3 <= last_two <= 10:
            return PluralCategory.FEW
        if 11 <= last_two <= 99:
            return PluralCategory.MANY
    return PluralCategory.OTHER


def _hebrew(op: PluralOperands) -> PluralCategory:
    if op.v == 0 and op.i == 1:
        return PluralCategory.ONE
    if op.v == 0 and op.i == 2:
        return PluralCategory.TWO
    return PluralCategory.OTHER


def _invariant(op: PluralOperands) -> PluralCategory:
    return PluralCategory.OTHER


_LANGUAGE_RULES: tuple[tuple[OperandRule, tuple[str, ...]], ...] = (
    (_one_other, ("en", "de", "nl", "it", "es", "ca", "sv", "da", "nb", "no",
                  "fi", "et", "el", "hu", "tr", "bg", "hi", "bn")),
    (_zero_or_one, ("fr", "pt")),
    (_east_slavic, ("ru", "uk", "be")),
    (_polish, ("pl",)),
    (_west_slavic, ("cs", "sk")),
    (_arabic, ("ar",)),
    (_hebrew, ("he",)),
    (_invariant, ("ja", "ko", "zh", "vi", "th", "id", "ms")),
)


def _with_operands(rule: OperandRule) -> PluralRuleFunc:
    return lambda count: rule(PluralOperands.from_number(count))


# ==============================================================================
# Registry
# ==============================================================================

class CLDRPluralRules:
    """Registry of cardinal plural rules keyed by root language subtag.

    Languages without a rule use ``other`` for every number.

    Example:
        rules = CLDRPluralRules()
        rules.get_category(2, "ru")  # FEW
        rules.register_cardinal_rule("xx", lambda n: PluralCategory.OTHER)
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._rules: dict[str, PluralRuleFunc] = {
            language: _with_operands(rule)
            for rule, languages in _LANGUAGE_RULES
            for language in languages
        }

    def register_cardinal_rule(self, language: str, rule: PluralRuleFunc) -> None:
        """Install a rule for a language, replacing any existing one."""
        with self._lock:
            self._rules[language.lower()] = rule

    def get_category(self, count: float | int, language: str) -> PluralCategory:
        """Get the plural category of ``count`` in ``language``.

        Region and script subtags are ignored ("en-GB" uses the "en" rule).
        """
        key = language.replace("_", "-").split("-")[0].lower()
        with self._lock:
            rule = self._rules.get(key)
        return rule(count) if rule is not None else PluralCategory.OTHER

    def get_supported_languages(self) -> list[str]:
        with self._lock:
            return list(self._rules)


# Global instance
_plural_rules = CLDRPluralRules()


def get_plural_category(count: float | int, language: str) -> PluralCategory:
    """Get the plural category of a number using the global rules."""
    return _plural_rules.get_category(count, language)


def get_plural_rules() -> CLDRPluralRules:
    """Get the global plural rules instance."""
    return _plural_rules
