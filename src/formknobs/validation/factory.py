"""Factory for building schema trees from configuration."""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Union

from formknobs.config import load_config
from formknobs.exceptions import ConfigurationError, SchemaDefinitionError

from . import builders
from .base import Schema

logger = logging.getLogger(__name__)

_COMMON_KEYS = {"type", "optional", "description"}

_KNOWN_KEYS = {
    "string": {
        "trim", "lowercase", "blank_to_none", "min", "min_message",
        "regex", "regex_message", "ignore_case", "uuid", "uuid_message",
    },
    "enum": {"values"},
    "literal": {"value", "maps_to"},
    "object": {"fields"},
    "array": {"items", "min", "min_message"},
    "union": {"options"},
}


def blank_to_none(value: str) -> str | None:
    """Return None for values that are empty after trimming.

    Registered with ``StringSchema.transform``, a None result keeps the
    previous value, so as a string transform this leaves every value
    unchanged: ``"   "`` still parses to ``"   "``. Only ``optional`` turns
    the empty string into an absent value.
    """
    return None if value.strip() == "" else value


class SchemaFactory:
    """Factory for creating schemas from configuration.

    Configuration Options:
        type (str): string, enum, literal, object, array or union
        optional (bool): Wrap the schema so None and "" parse to None

    String Options:
        trim, lowercase, blank_to_none (bool): Transforms, applied in this order
        min (int), min_message (str): Minimum length rule
        regex (str), regex_message (str), ignore_case (bool): Pattern rule
        uuid (bool), uuid_message (str): UUID rule

    Other Options:
        enum: values (list of str)
        literal: value, maps_to (constant returned on a match)
        object: fields (mapping of field name to schema configuration)
        array: items (schema configuration), min (int), min_message (str)
        union: options (list of schema configurations)

    Example Configuration:
        schemas:
          upsert_subject:
            type: object
            fields:
              id:
                type: string
                uuid: true
                optional: true
              title:
                type: string
                min: 3
                min_message: Title must be at least 3 characters long
              status:
                type: enum
                values: [draft, published, archived]
                optional: true
    """

    def create(self, **config: Any) -> Schema[Any]:
        """Create a Schema from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        return self._build(config, path="$")

    def create_all(self, config: Dict[str, Any]) -> Dict[str, Schema[Any]]:
        """Create every schema under the top-level ``schemas`` mapping.

        Args:
            config: Configuration with a ``schemas`` mapping

        Returns:
            Dictionary of schema name to Schema
        """
        definitions = config.get("schemas", {})
        if not isinstance(definitions, dict):
            raise ConfigurationError(
                "'schemas' must be a mapping of name to schema configuration",
                context={"type": type(definitions).__name__},
            )

        schemas: Dict[str, Schema[Any]] = {}
        for name, definition in definitions.items():
            logger.info(f"Creating schema: {name}")
            schemas[name] = self._build(definition, path=name)
        return schemas

    def _build(self, config: Any, path: str) -> Schema[Any]:
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Schema configuration at '{path}' must be a mapping",
                context={"path": path},
            )

        schema_type = str(config.get("type", "")).lower()
        if schema_type not in _KNOWN_KEYS:
            raise ConfigurationError(
                f"Unknown schema type at '{path}': {schema_type or '<missing>'}",
                context={"path": path, "available_types": sorted(_KNOWN_KEYS)},
            )

        for key in config:
            if key not in _COMMON_KEYS and key not in _KNOWN_KEYS[schema_type]:
                logger.warning(f"Ignoring unknown key '{key}' for {schema_type} schema at '{path}'")

        try:
            schema = getattr(self, f"_build_{schema_type}")(config, path)
        except SchemaDefinitionError as e:
            raise ConfigurationError(f"Invalid schema at '{path}': {e}", context={"path": path}) from e

        if config.get("optional", False):
            schema = schema.optional()
        return schema

    def _build_string(self, config: Dict[str, Any], path: str) -> Schema[Any]:
        schema = builders.string()

        if config.get("trim"):
            schema = schema.trim()
        if config.get("lowercase"):
            schema = schema.to_lower_case()
        if config.get("blank_to_none"):
            schema = schema.transform(blank_to_none)

        if config.get("min") is not None:
            schema = schema.min(int(config["min"]), config.get("min_message"))
        if config.get("regex"):
            flags = re.IGNORECASE if config.get("ignore_case") else 0
            try:
                pattern = re.compile(config["regex"], flags)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid regex at '{path}': {e}",
                    context={"path": path, "regex": config["regex"]},
                ) from e
            schema = schema.regex(pattern, config.get("regex_message", "Invalid format"))
        if config.get("uuid"):
            schema = schema.uuid(config.get("uuid_message", "Invalid UUID"))

        return schema

    def _build_enum(self, config: Dict[str, Any], path: str) -> Schema[Any]:
        values = config.get("values") or []
        if not isinstance(values, list):
            raise ConfigurationError(
                f"Enum 'values' at '{path}' must be a list",
                context={"path": path},
            )
        return builders.enum(values)

    def _build_literal(self, config: Dict[str, Any], path: str) -> Schema[Any]:
        if "value" not in config:
            raise ConfigurationError(
                f"Literal schema at '{path}' requires 'value'",
                context={"path": path},
            )
        schema = builders.literal(config["value"])
        if "maps_to" in config:
            mapped = config["maps_to"]
            schema = schema.transform(lambda _: mapped)
        return schema

    def _build_object(self, config: Dict[str, Any], path: str) -> Schema[Any]:
        fields = config.get("fields") or {}
        if not isinstance(fields, dict):
            raise ConfigurationError(
                f"Object 'fields' at '{path}' must be a mapping",
                context={"path": path},
            )
        return builders.object({
            name: self._build(field_config, f"{path}.{name}")
            for name, field_config in fields.items()
        })

    def _build_array(self, config: Dict[str, Any], path: str) -> Schema[Any]:
        if "items" not in config:
            raise ConfigurationError(
                f"Array schema at '{path}' requires 'items'",
                context={"path": path},
            )
        schema = builders.array(self._build(config["items"], f"{path}[]"))
        if config.get("min") is not None:
            schema = schema.min(int(config["min"]), config.get("min_message"))
        return schema

    def _build_union(self, config: Dict[str, Any], path: str) -> Schema[Any]:
        options = config.get("options") or []
        if not isinstance(options, list):
            raise ConfigurationError(
                f"Union 'options' at '{path}' must be a list",
                context={"path": path},
            )
        return builders.union(
            self._build(option, f"{path}|{index}") for index, option in enumerate(options)
        )


def load_schemas(source: Union[str, Path, dict]) -> Dict[str, Schema[Any]]:
    """Load named schemas from a YAML/JSON file or a dict.

    Args:
        source: File path or dictionary with a top-level ``schemas`` mapping

    Returns:
        Dictionary of schema name to Schema
    """
    return schema_factory.create_all(load_config(source))


# Create singleton instance for registration
schema_factory = SchemaFactory()
