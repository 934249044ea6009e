"""Structured plural/select messages.

A message is a two-level tree: a ``select`` on a string argument whose
branches are each a ``plural`` on a numeric argument. Plural forms are
sequences of literal text and the ``PLURAL_ARGUMENT`` marker, which is
replaced by the locale-formatted number when the message is evaluated.
Keeping the pattern structured means locale phrases never need escaping.

Usage:
    from reltime.message import (
        PLURAL_ARGUMENT, PluralPattern, SelectPattern, compile_message,
    )

    pattern = SelectPattern("when", {
        "past": PluralPattern("count", {
            "one": (PLURAL_ARGUMENT, " day ago"),
            "other": (PLURAL_ARGUMENT, " days ago"),
        }),
        "future": PluralPattern("count", {
            "one": "in # day",
            "other": "in # days",
        }),
    })
    message = compile_message(pattern, "en")
    message.format({"when": "past", "count": 3})  # "3 days ago"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence, Union

from reltime.exceptions import MessageFormatError
from reltime.numbers import format_number
from reltime.plural import CLDRPluralRules, get_plural_rules
from reltime.protocols import PluralCategory


class _PluralArgument:
    """Marker for the position of the plural argument inside a form."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "#"


PLURAL_ARGUMENT = _PluralArgument()

# ICU-style string ("in # days") or pre-split token sequence
Template = Union[str, Sequence[Union[str, _PluralArgument]]]


@dataclass(frozen=True)
class PluralPattern:
    """Plural branching on a numeric argument.

    Attributes:
        argument: Name of the numeric argument
        forms: Plural category -> template
    """
    argument: str
    forms: Mapping[str, Template]


@dataclass(frozen=True)
class SelectPattern:
    """Select branching on a string argument.

    Attributes:
        argument: Name of the selector argument
        branches: Selector value -> plural pattern
    """
    argument: str
    branches: Mapping[str, PluralPattern]


def _tokenize(template: Template) -> tuple[str | _PluralArgument, ...]:
    """Split a template into literal text and plural markers."""
    if isinstance(template, str):
        tokens: list[str | _PluralArgument] = []
        for index, part in enumerate(template.split("#")):
            if index:
                tokens.append(PLURAL_ARGUMENT)
            if part:
                tokens.append(part)
        return tuple(tokens)

    tokens = []
    for token in template:
        if token is not PLURAL_ARGUMENT and not isinstance(token, str):
            raise MessageFormatError(f"Invalid template token: {token!r}")
        tokens.append(token)
    return tuple(tokens)


def _key(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


class CompiledMessage:
    """A validated, ready-to-evaluate select/plural message.

    Compilation normalizes plural categories and tokenizes every form once,
    so evaluation is a dictionary lookup plus a join.
    """

    def __init__(
        self,
        pattern: SelectPattern,
        locale: str,
        plural_rules: CLDRPluralRules | None = None,
    ) -> None:
        self.pattern = pattern
        self.locale = locale
        self._rules = plural_rules or get_plural_rules()
        self._branches: dict[
            str, tuple[str, dict[PluralCategory, tuple[str | _PluralArgument, ...]]]
        ] = {}

        for selector, plural in pattern.branches.items():
            forms: dict[PluralCategory, tuple[str | _PluralArgument, ...]] = {}
            for category, template in plural.forms.items():
                try:
                    plural_category = PluralCategory(_key(category).lower())
                except ValueError:
                    raise MessageFormatError(
                        f"Unknown plural category '{_key(category)}' in branch '{_key(selector)}'"
                    ) from None
                forms[plural_category] = _tokenize(template)
            if not forms:
                raise MessageFormatError(
                    f"Branch '{_key(selector)}' has no plural forms"
                )
            self._branches[_key(selector)] = (plural.argument, forms)

        if not self._branches:
            raise MessageFormatError("Message has no select branches")

    def format(self, arguments: Mapping[str, Any]) -> str:
        """Evaluate the message.

        Args:
            arguments: Values for the select and plural arguments

        Returns:
            Formatted text

        Raises:
            MessageFormatError: If an argument is missing or no branch or
                form matches
        """
        select_argument = self.pattern.argument
        if select_argument not in arguments:
            raise MessageFormatError(f"Missing argument '{select_argument}'")

        selector = _key(arguments[select_argument])
        branch = self._branches.get(selector, self._branches.get("other"))
        if branch is None:
            raise MessageFormatError(
                f"No branch for {select_argument}={selector!r}; "
                f"available: {', '.join(self._branches)}"
            )

        plural_argument, forms = branch
        if plural_argument not in arguments:
            raise MessageFormatError(f"Missing argument '{plural_argument}'")

        count = arguments[plural_argument]
        category = self._rules.get_category(count, self.locale)
        tokens = forms.get(category, forms.get(PluralCategory.OTHER))
        if tokens is None:
            raise MessageFormatError(
                f"No plural form for category '{category.value}' "
                f"in branch '{selector}'"
            )

        number = format_number(count, self.locale)
        return "".join(number if token is PLURAL_ARGUMENT else token for token in tokens)

    @property
    def selectors(self) -> list[str]:
        return list(self._branches)

    def __repr__(self) -> str:
        return f"CompiledMessage(locale={self.locale!r}, selectors={self.selectors!r})"


def compile_message(
    pattern: SelectPattern,
    locale: str,
    plural_rules: CLDRPluralRules | None = None,
) -> CompiledMessage:
    """Compile a structured pattern for a locale."""
    return CompiledMessage(pattern, locale, plural_rules)


def evaluate(message: CompiledMessage, arguments: Mapping[str, Any]) -> str:
    """Evaluate a compiled message with arguments."""
    return message.format(arguments)
