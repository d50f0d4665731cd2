"""Issue and parse result types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from formknobs.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Issue:
    """One atomic validation failure.

    Attributes:
        message: Human-readable failure message
        path: Location of the failing node, field names for objects and
            indexes for arrays. Empty for the root value.
    """

    message: str
    path: tuple[str | int, ...] = ()

    def nested(self, segment: str | int) -> Issue:
        """Return a copy of this issue located under ``segment``."""
        return Issue(self.message, (segment,) + self.path)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing a value against a schema.

    Exactly one of ``data`` (on success) or ``error`` (on failure) is
    meaningful; a result is never both.
    """

    success: bool
    data: T | None = None
    error: ValidationError | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check success."""
        return self.success

    @property
    def issues(self) -> list[Issue]:
        """Issues of a failed result, empty on success."""
        return self.error.issues if self.error is not None else []

    @classmethod
    def ok(cls, data: Any) -> ParseResult[Any]:
        """Create a successful result.

        Args:
            data: The parsed value

        Returns:
            Successful ParseResult
        """
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ValidationError) -> ParseResult[Any]:
        """Create a failed result.

        Args:
            error: The validation error

        Returns:
            Failed ParseResult
        """
        return cls(success=False, error=error)

    @classmethod
    def fail_with(cls, message: str) -> ParseResult[Any]:
        """Create a failed result carrying a single issue."""
        return cls.fail(ValidationError.from_message(message))
