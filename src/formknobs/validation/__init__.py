"""Schema validation engine.

Schemas are built once with the construction namespace and parsed many
times:
- Leaf schemas: string, literal, enum
- Combinators: optional, union, object, array
- parse() raises ValidationError; safe_parse() returns a ParseResult
- Schemas can also be built from YAML/JSON configuration
"""

from formknobs.exceptions import ValidationError

from .base import Schema
from .builders import array, enum, literal, object, optional, string, union, z
from .combinators import ArraySchema, ObjectSchema, OptionalSchema, UnionSchema
from .factory import SchemaFactory, blank_to_none, load_schemas, schema_factory
from .primitives import UUID_PATTERN, EnumSchema, LiteralSchema, StringSchema
from .result import Issue, ParseResult

__all__ = [
    # Result types
    "Issue",
    "ParseResult",
    "ValidationError",
    # Schemas
    "Schema",
    "StringSchema",
    "LiteralSchema",
    "EnumSchema",
    "OptionalSchema",
    "UnionSchema",
    "ObjectSchema",
    "ArraySchema",
    "UUID_PATTERN",
    # Construction
    "z",
    "string",
    "enum",
    "literal",
    "optional",
    "union",
    "object",
    "array",
    "blank_to_none",
    # Factories
    "SchemaFactory",
    "schema_factory",
    "load_schemas",
]
