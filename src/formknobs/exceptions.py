"""Exception hierarchy for formknobs.

All errors raised by the package extend :class:`FormknobsError`, which carries
an optional context dictionary with structured details about the failure.

Example:
    ```python
    from formknobs.exceptions import FormknobsError, ValidationError

    try:
        schema.parse(payload)
    except ValidationError as e:
        logger.warning(f"Rejected payload: {e.message}")
    except FormknobsError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable

if TYPE_CHECKING:
    from formknobs.validation.result import Issue

DEFAULT_MESSAGE = "Invalid input"


class FormknobsError(Exception):
    """Base exception for all formknobs errors.

    Attributes:
        context: Dictionary containing contextual information about the error

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field names, keys, etc.)
    """

    def __init__(self, message: str, context: Dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ValidationError(FormknobsError):
    """Raised when a value fails to parse against a schema.

    Holds an ordered, non-empty list of issues. The first issue's message is
    the headline message shown to users, and is also ``str(error)``.

    Example:
        ```python
        error = ValidationError([Issue("Required")])
        error.message
        # 'Required'
        ```
    """

    def __init__(
        self,
        issues: Iterable[Issue],
        context: Dict[str, Any] | None = None,
    ):
        from formknobs.validation.result import Issue

        collected = list(issues)
        if not collected:
            collected = [Issue(DEFAULT_MESSAGE)]
        self.issues: list[Issue] = collected
        super().__init__(collected[0].message, context=context)

    @property
    def message(self) -> str:
        """The first issue's message."""
        return self.issues[0].message

    @classmethod
    def from_message(cls, message: str) -> ValidationError:
        """Build a single-issue error from a message."""
        from formknobs.validation.result import Issue

        return cls([Issue(message)])

    def with_prefix(self, segment: str | int) -> ValidationError:
        """Return a copy whose issue paths are nested under ``segment``."""
        return ValidationError(
            [issue.nested(segment) for issue in self.issues],
            context=self.context,
        )

    def __repr__(self) -> str:
        return f"ValidationError({self.issues!r})"


class SchemaDefinitionError(FormknobsError):
    """Raised when a schema is constructed with invalid arguments.

    Example:
        ```python
        raise SchemaDefinitionError(
            "Enum schema requires at least one option",
            context={"options": []}
        )
        ```
    """

    pass


class ConfigurationError(FormknobsError):
    """Raised when a schema configuration is invalid or missing."""

    pass


class NotFoundError(FormknobsError):
    """Raised when a requested registry item is not found."""

    pass


class OperationError(FormknobsError):
    """Raised when a registry operation fails."""

    pass
