"""Combinator schemas: optional, union, object and array.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Tuple

from formknobs.exceptions import SchemaDefinitionError, ValidationError

from .base import Schema, T
from .result import Issue, ParseResult


def _require_schema(candidate: Any, role: str) -> None:
    if not isinstance(candidate, Schema):
        raise SchemaDefinitionError(
            f"{role} must be a Schema, got {type(candidate).__name__}",
            context={"role": role},
        )


@dataclass(frozen=True)
class OptionalSchema(Schema[Any]):
    """Treats None and the empty string as absent; otherwise delegates.

    An empty form field means "not provided", so ``""`` never reaches the
    inner schema.
    """

    inner: Schema[Any]

    def __post_init__(self) -> None:
        _require_schema(self.inner, "Optional inner schema")

    def _check(self, value: Any) -> ParseResult[Any]:
        if value is None or (isinstance(value, str) and value == ""):
            return ParseResult.ok(None)
        return self.inner._check(value)


@dataclass(frozen=True)
class UnionSchema(Schema[Any]):
    """Ordered alternatives; the first one that parses wins.

    When every alternative fails, the issues of all of them are reported in
    declaration order.
    """

    options: Tuple[Schema[Any], ...]

    def __post_init__(self) -> None:
        options = tuple(self.options)
        if not options:
            raise SchemaDefinitionError("Union schema requires at least one alternative")
        for option in options:
            _require_schema(option, "Union alternative")
        object.__setattr__(self, "options", options)

    def or_(self, other: Schema[Any]) -> UnionSchema:
        return UnionSchema(self.options + (other,))

    def _check(self, value: Any) -> ParseResult[Any]:
        issues: List[Issue] = []
        for option in self.options:
            result = option.safe_parse(value)
            if result.success:
                return result
            issues.extend(result.issues)
        return ParseResult.fail(ValidationError(issues))


@dataclass(frozen=True)
class ObjectSchema(Schema[Dict[str, Any]]):
    """Validates a fixed set of named fields.

    Fields are parsed in declaration order and the first failure aborts the
    parse. Fields that parse to None are left out of the result, and input
    keys that are not declared are dropped.
    """

    fields: Tuple[Tuple[str, Schema[Any]], ...]

    def __post_init__(self) -> None:
        fields = self.fields
        if isinstance(fields, Mapping):
            fields = tuple(fields.items())
        fields = tuple((name, schema) for name, schema in fields)
        for name, schema in fields:
            _require_schema(schema, f"Field '{name}'")
        object.__setattr__(self, "fields", fields)

    @property
    def shape(self) -> Dict[str, Schema[Any]]:
        """Field name to schema mapping, in declaration order."""
        return dict(self.fields)

    def _check(self, value: Any) -> ParseResult[Dict[str, Any]]:
        if not isinstance(value, Mapping):
            return ParseResult.fail_with("Expected object")

        parsed: Dict[str, Any] = {}
        for name, schema in self.fields:
            result = schema._check(value.get(name))
            if not result.success:
                return ParseResult.fail(result.error.with_prefix(name))  # type: ignore[union-attr]
            if result.data is not None:
                parsed[name] = result.data
        return ParseResult.ok(parsed)


@dataclass(frozen=True)
class ArraySchema(Schema[List[T]]):
    """Validates every element against one schema, then each minimum length.

    Every ``min`` call adds a rule; rules are checked in registration order
    once all elements have parsed.
    """

    element: Schema[T]
    min_rules: Tuple[Tuple[int, str], ...] = ()

    def __post_init__(self) -> None:
        _require_schema(self.element, "Array element schema")

    def min(self, length: int, message: str | None = None) -> ArraySchema[T]:
        """Require at least ``length`` items."""
        if length < 0:
            raise SchemaDefinitionError(
                f"min length cannot be negative: {length}",
                context={"length": length},
            )
        rule = (length, message or f"Must contain at least {length} items")
        return replace(self, min_rules=self.min_rules + (rule,))

    def _check(self, value: Any) -> ParseResult[List[T]]:
        if not isinstance(value, (list, tuple)):
            return ParseResult.fail_with("Expected array")

        items: List[T] = []
        for index, item in enumerate(value):
            result = self.element._check(item)
            if not result.success:
                return ParseResult.fail(result.error.with_prefix(index))  # type: ignore[union-attr]
            items.append(result.data)  # type: ignore[arg-type]

        for length, message in self.min_rules:
            if len(items) < length:
                return ParseResult.fail_with(message)
        return ParseResult.ok(items)
