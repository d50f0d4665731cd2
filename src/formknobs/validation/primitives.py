"""Leaf schemas: string, literal and enum.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from re import Pattern as RegexPattern
from typing import Any, Callable, Tuple

from formknobs.exceptions import SchemaDefinitionError

from .base import Schema
from .result import ParseResult

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

StringTransform = Callable[[str], str]


@dataclass(frozen=True)
class StringRule:
    """A string validator: ``check`` must hold or ``message`` is reported."""

    check: Callable[[str], bool]
    message: str


def _keep_on_none(fn: Callable[[str], Any]) -> StringTransform:
    def apply(value: str) -> str:
        result = fn(value)
        return value if result is None else str(result)

    return apply


@dataclass(frozen=True)
class StringSchema(Schema[str]):
    """Text schema with transforms and validators.

    The raw input is coerced with ``str()``, every transform runs in
    registration order, then every validator runs in registration order.
    """

    transforms: Tuple[StringTransform, ...] = ()
    rules: Tuple[StringRule, ...] = ()

    def _with_transform(self, transform: StringTransform) -> StringSchema:
        return replace(self, transforms=self.transforms + (transform,))

    def _with_rule(self, check: Callable[[str], bool], message: str) -> StringSchema:
        return replace(self, rules=self.rules + (StringRule(check, message),))

    def min(self, length: int, message: str | None = None) -> StringSchema:
        """Require at least ``length`` characters."""
        if length < 0:
            raise SchemaDefinitionError(
                f"min length cannot be negative: {length}",
                context={"length": length},
            )
        return self._with_rule(
            lambda value: len(value) >= length,
            message or f"Must be at least {length} characters",
        )

    def trim(self) -> StringSchema:
        """Strip leading and trailing whitespace."""
        return self._with_transform(str.strip)

    def to_lower_case(self) -> StringSchema:
        """Lowercase the value."""
        return self._with_transform(str.lower)

    def regex(self, pattern: str | RegexPattern, message: str = "Invalid format") -> StringSchema:
        """Require the value to contain a match for ``pattern``.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            message: Failure message

        Returns:
            New StringSchema with the added rule
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self._with_rule(lambda value: compiled.search(value) is not None, message)

    def uuid(self, message: str = "Invalid UUID") -> StringSchema:
        """Require a canonical 8-4-4-4-12 hex UUID, in any case."""
        return self._with_rule(lambda value: UUID_PATTERN.match(value) is not None, message)

    def transform(self, fn: Callable[[str], Any]) -> StringSchema:
        """Project the value through ``fn``.

        A ``None`` result keeps the previous value; anything else is
        coerced to ``str``.
        """
        return self._with_transform(_keep_on_none(fn))

    def _check(self, value: Any) -> ParseResult[str]:
        if value is None:
            return ParseResult.fail_with("Required")

        text = str(value)
        for transform in self.transforms:
            text = transform(text)
        for rule in self.rules:
            if not rule.check(text):
                return ParseResult.fail_with(rule.message)
        return ParseResult.ok(text)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class LiteralSchema(Schema[Any]):
    """Accepts exactly one value.

    Matching is strict: the input must equal ``expected`` and share its type,
    so ``1`` does not match ``True`` or ``"1"``. Numbers compare by value,
    so ``1`` matches ``1.0``. An optional transform replaces the matched
    constant on success.
    """

    expected: Any
    transform_fn: Callable[[Any], Any] | None = None

    def transform(self, fn: Callable[[Any], Any]) -> LiteralSchema:
        """Map the matched constant to ``fn(expected)`` on success."""
        return replace(self, transform_fn=fn)

    def _matches(self, value: Any) -> bool:
        if _is_number(value) and _is_number(self.expected):
            return value == self.expected
        return type(value) is type(self.expected) and value == self.expected

    def _check(self, value: Any) -> ParseResult[Any]:
        if not self._matches(value):
            return ParseResult.fail_with("Invalid literal")
        if self.transform_fn is not None:
            return ParseResult.ok(self.transform_fn(self.expected))
        return ParseResult.ok(self.expected)


@dataclass(frozen=True)
class EnumSchema(Schema[str]):
    """Accepts one of a fixed, ordered set of string tags. Case-sensitive."""

    options: Tuple[str, ...]

    def __post_init__(self) -> None:
        options = tuple(self.options)
        if not options:
            raise SchemaDefinitionError("Enum schema requires at least one option")
        for option in options:
            if not isinstance(option, str):
                raise SchemaDefinitionError(
                    f"Enum options must be strings, got {type(option).__name__}",
                    context={"option": option},
                )
        object.__setattr__(self, "options", options)

    def _check(self, value: Any) -> ParseResult[str]:
        if not isinstance(value, str) or value not in self.options:
            return ParseResult.fail_with("Invalid enum value")
        return ParseResult.ok(value)
