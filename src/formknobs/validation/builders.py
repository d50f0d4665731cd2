"""Construction namespace for schemas.

The functions here are the public way to assemble schema trees. They are
also bundled on the ``z`` namespace so that call sites read like the form
definitions they describe:

```python
from formknobs.validation import z

upsert_subject = z.object({
    "id": z.string().uuid().optional(),
    "title": z.string().min(3, "Title must be at least 3 characters long"),
    "status": z.enum(["draft", "published", "archived"]).optional(),
})
```

Note that ``object`` and ``enum`` shadow the builtin and the stdlib module
inside this module only.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Iterable, Mapping

from .base import Schema
from .combinators import ArraySchema, ObjectSchema, OptionalSchema, UnionSchema
from .primitives import EnumSchema, LiteralSchema, StringSchema


def string() -> StringSchema:
    return StringSchema()


def enum(options: Iterable[str]) -> EnumSchema:
    return EnumSchema(tuple(options))


def literal(value: Any) -> LiteralSchema:
    return LiteralSchema(value)


def optional(schema: Schema[Any]) -> OptionalSchema:
    return OptionalSchema(schema)


def union(schemas: Iterable[Schema[Any]]) -> UnionSchema:
    return UnionSchema(tuple(schemas))


def object(shape: Mapping[str, Schema[Any]]) -> ObjectSchema:  # noqa: A001
    return ObjectSchema(tuple(shape.items()))


def array(element: Schema[Any]) -> ArraySchema[Any]:
    return ArraySchema(element)


z = SimpleNamespace(
    string=string,
    enum=enum,
    literal=literal,
    optional=optional,
    union=union,
    object=object,
    array=array,
)
