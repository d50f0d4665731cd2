"""Base schema with the parse / safe_parse contract.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from formknobs.exceptions import DEFAULT_MESSAGE, ValidationError

from .result import ParseResult

if TYPE_CHECKING:
    from .combinators import OptionalSchema, UnionSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Schema(ABC, Generic[T]):
    """Base class for all schema kinds.

    A schema is immutable once built. Builder methods on subclasses return a
    new schema carrying the added rule, so a schema can be shared between
    parents and parsed concurrently.
    """

    @abstractmethod
    def _check(self, value: Any) -> ParseResult[T]:
        """Parse a value into a result without raising for validation failures.

        Args:
            value: Untyped input value

        Returns:
            ParseResult with the parsed value or the validation error
        """
        pass

    def parse(self, value: Any) -> T:
        """Parse a value, raising on failure.

        Args:
            value: Untyped input value

        Returns:
            The parsed, possibly transformed value

        Raises:
            ValidationError: If the value does not satisfy the schema
        """
        result = self._check(value)
        if not result.success:
            raise result.error  # type: ignore[misc]
        return result.data  # type: ignore[return-value]

    def safe_parse(self, value: Any) -> ParseResult[T]:
        """Parse a value, never raising.

        Exceptions other than ValidationError (for example from a user
        transform) are converted into a single-issue failure.
        """
        try:
            return self._check(value)
        except ValidationError as e:
            return ParseResult.fail(e)
        except Exception as e:
            logger.debug(f"Converting {type(e).__name__} raised during parse: {e}")
            return ParseResult.fail_with(str(e) or DEFAULT_MESSAGE)

    def optional(self) -> OptionalSchema:
        """Wrap this schema so that None and "" parse to None."""
        from .combinators import OptionalSchema

        return OptionalSchema(self)

    def or_(self, other: Schema[Any]) -> UnionSchema:
        """Combine with OR: the first alternative that parses wins."""
        from .combinators import UnionSchema

        return UnionSchema((self, other))
