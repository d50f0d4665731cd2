"""Form validation for the learning-management application.

This package provides:

- **Validation**: Composable schemas with parse / safe_parse
- **Exceptions**: Package exception hierarchy with context support
- **Registry**: Named schema registry
- **Forms**: The application's form schemas and submission helpers

Example:
    ```python
    from formknobs import z

    schema = z.object({"title": z.string().min(3)})
    result = schema.safe_parse({"title": "Algebra"})
    if not result.success:
        print(result.error.issues[0].message)
    ```
"""

from formknobs.exceptions import (
    ConfigurationError,
    FormknobsError,
    NotFoundError,
    OperationError,
    SchemaDefinitionError,
    ValidationError,
)
from formknobs.registry import Registry, SchemaRegistry
from formknobs.validation import Issue, ParseResult, Schema, z

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FormknobsError",
    "NotFoundError",
    "OperationError",
    "SchemaDefinitionError",
    "ValidationError",
    "Registry",
    "SchemaRegistry",
    "Issue",
    "ParseResult",
    "Schema",
    "z",
]
