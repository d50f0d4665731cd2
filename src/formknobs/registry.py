"""Registry of named schemas.

Example:
    ```python
    from formknobs.registry import SchemaRegistry

    registry = SchemaRegistry("forms")
    registry.register("subject.upsert", upsert_subject_schema)
    result = registry.validate("subject.upsert", payload)
    ```
"""

import logging
import threading
from typing import Any, Dict, Generic, List, Mapping, TypeVar

from formknobs.exceptions import NotFoundError, OperationError
from formknobs.validation.base import Schema
from formknobs.validation.result import ParseResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """Thread-safe registry of items by unique key.

    Args:
        name: Name for this registry instance
    """

    def __init__(self, name: str):
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Args:
            key: Unique identifier for the item
            item: Item to register
            allow_overwrite: Whether to allow overwriting existing items

        Raises:
            OperationError: If item already exists and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item
            logger.debug(f"Registered '{key}' in {self._name}")

    def unregister(self, key: str) -> T:
        """Unregister and return an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={"key": key, "registry": self._name},
                )
            logger.debug(f"Unregistered '{key}' from {self._name}")
            return self._items.pop(key)

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={"key": key, "registry": self._name, "available_keys": list(self._items.keys())},
                )
            return self._items[key]

    def get_optional(self, key: str) -> T | None:
        """Get an item by key, returning None if not found."""
        with self._lock:
            return self._items.get(key)

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._items

    def list_keys(self) -> List[str]:
        with self._lock:
            return list(self._items.keys())

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: str) -> bool:
        return self.has(key)


class SchemaRegistry(Registry[Schema[Any]]):
    """Registry of schemas that can validate by name."""

    def register_schemas(
        self,
        schemas: Mapping[str, Schema[Any]],
        prefix: str | None = None,
        allow_overwrite: bool = False,
    ) -> None:
        """Register several schemas at once.

        Args:
            schemas: Mapping of name to schema
            prefix: Optional prefix joined to each name with a dot
            allow_overwrite: Whether to allow overwriting existing items
        """
        for name, schema in schemas.items():
            key = f"{prefix}.{name}" if prefix else name
            self.register(key, schema, allow_overwrite=allow_overwrite)

    def validate(self, key: str, value: Any) -> ParseResult[Any]:
        """Safe-parse a value with the schema registered under ``key``.

        Raises:
            NotFoundError: If no schema is registered under ``key``
        """
        return self.get(key).safe_parse(value)
