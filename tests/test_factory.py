"""Tests for config-driven schema construction."""

import json

import pytest
import yaml

from formknobs.exceptions import ConfigurationError
from formknobs.validation import (
    ArraySchema,
    ObjectSchema,
    OptionalSchema,
    SchemaFactory,
    StringSchema,
    UnionSchema,
    blank_to_none,
    load_schemas,
    schema_factory,
    z,
)

VALID_UUID = "123e4567-e89b-12d3-a456-426614174000"

SUBJECT_CONFIG = {
    "schemas": {
        "upsert_subject": {
            "type": "object",
            "fields": {
                "id": {"type": "string", "uuid": True, "optional": True},
                "title": {
                    "type": "string",
                    "min": 3,
                    "min_message": "Title must be at least 3 characters long",
                },
                "status": {"type": "enum", "values": ["draft", "published", "archived"], "optional": True},
            },
        },
        "reorder_subjects": {
            "type": "object",
            "fields": {
                "classroomId": {"type": "string", "uuid": True},
                "orderedIds": {"type": "array", "items": {"type": "string", "uuid": True}, "min": 1},
            },
        },
    }
}


class TestSchemaFactory:
    """Test SchemaFactory.create for each schema type."""

    def test_string_rules(self):
        """Test string transforms and validators from configuration."""
        schema = schema_factory.create(
            type="string", trim=True, lowercase=True, regex="^[a-z0-9-]{2,40}$",
            regex_message="Bad subdomain",
        )
        assert schema.parse("  My-School ") == "my-school"
        assert schema.safe_parse("x").error.message == "Bad subdomain"

    def test_string_ignore_case_regex(self):
        """Test the ignore_case flag."""
        schema = schema_factory.create(type="string", regex="^#[0-9a-f]{6}$", ignore_case=True)
        assert schema.parse("#ABCDEF") == "#ABCDEF"

    def test_string_uuid(self):
        """Test the uuid rule with a custom message."""
        schema = schema_factory.create(type="string", uuid=True, uuid_message="Pick a classroom")
        assert schema.safe_parse("nope").error.message == "Pick a classroom"

    def test_blank_to_none(self):
        """Test the blank_to_none transform keeps blank values."""
        schema = schema_factory.create(type="string", blank_to_none=True, optional=True)
        assert schema.parse("   ") == "   "
        assert schema.parse("") is None

    def test_blank_to_none_leaves_values_unchanged(self):
        """Test that blank_to_none returns None but the string transform keeps the value."""
        assert blank_to_none("  ") is None
        assert blank_to_none("text") == "text"
        schema = z.string().transform(blank_to_none)
        assert schema.parse("  ") == "  "
        assert schema.parse(" text ") == " text "

    def test_factory_is_standalone(self):
        """Test that SchemaFactory builds schemas without a base factory class."""
        assert SchemaFactory.__bases__ == (object,)
        assert isinstance(SchemaFactory().create(type="string"), StringSchema)

    def test_literal_maps_to(self):
        """Test a checkbox literal mapped to a boolean."""
        schema = schema_factory.create(type="literal", value="on", maps_to=True)
        assert schema.parse("on") is True
        assert not schema.safe_parse("off").success

    def test_optional_wrapping(self):
        """Test the optional flag."""
        schema = schema_factory.create(type="enum", values=["a"], optional=True)
        assert isinstance(schema, OptionalSchema)
        assert schema.parse("") is None

    def test_union(self):
        """Test union options keep their order."""
        schema = schema_factory.create(
            type="union",
            options=[{"type": "literal", "value": "on", "maps_to": True}, {"type": "string"}],
        )
        assert isinstance(schema, UnionSchema)
        assert schema.parse("on") is True
        assert schema.parse("off") == "off"

    def test_array(self):
        """Test array items and min length."""
        schema = schema_factory.create(type="array", items={"type": "string"}, min=2, min_message="Two please")
        assert isinstance(schema, ArraySchema)
        assert schema.safe_parse(["a"]).error.message == "Two please"

    def test_object(self):
        """Test a nested object configuration."""
        schema = SchemaFactory().create(**SUBJECT_CONFIG["schemas"]["upsert_subject"])
        assert isinstance(schema, ObjectSchema)
        assert schema.parse({"title": "Algebra", "status": ""}) == {"title": "Algebra"}
        assert schema.safe_parse({"title": "Al"}).error.message == "Title must be at least 3 characters long"

    def test_unknown_type(self):
        """Test that an unknown type is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            schema_factory.create(type="number")
        assert "number" in str(exc_info.value)

    def test_missing_type(self):
        """Test that a missing type is a configuration error."""
        with pytest.raises(ConfigurationError):
            schema_factory.create(min=3)

    def test_invalid_definition_wrapped(self):
        """Test that definition errors surface as configuration errors with a path."""
        with pytest.raises(ConfigurationError) as exc_info:
            schema_factory.create(type="object", fields={"status": {"type": "enum", "values": []}})
        assert exc_info.value.context["path"] == "$.status"

    def test_invalid_regex(self):
        """Test that a bad pattern is a configuration error."""
        with pytest.raises(ConfigurationError):
            schema_factory.create(type="string", regex="([unclosed")

    def test_literal_requires_value(self):
        """Test that a literal needs a value."""
        with pytest.raises(ConfigurationError):
            schema_factory.create(type="literal")

    def test_unknown_key_warns(self, caplog):
        """Test that unknown keys are ignored with a warning."""
        with caplog.at_level("WARNING", logger="formknobs.validation.factory"):
            schema = schema_factory.create(type="string", max=10)
        assert schema.parse("x" * 20) == "x" * 20
        assert "max" in caplog.text


class TestLoadSchemas:
    """Test loading named schemas from dicts and files."""

    def test_from_dict(self):
        """Test create_all via load_schemas with a dict."""
        schemas = load_schemas(SUBJECT_CONFIG)
        assert set(schemas) == {"upsert_subject", "reorder_subjects"}
        result = schemas["reorder_subjects"].safe_parse({"classroomId": VALID_UUID, "orderedIds": []})
        assert result.error.message == "Must contain at least 1 items"

    def test_from_yaml_file(self, tmp_path):
        """Test loading from a YAML file."""
        path = tmp_path / "forms.yaml"
        path.write_text(yaml.safe_dump(SUBJECT_CONFIG))

        schemas = load_schemas(path)
        assert schemas["upsert_subject"].parse({"id": VALID_UUID, "title": "Geometry"}) == {
            "id": VALID_UUID,
            "title": "Geometry",
        }

    def test_from_json_file(self, tmp_path):
        """Test loading from a JSON file given as a string path."""
        path = tmp_path / "forms.json"
        path.write_text(json.dumps(SUBJECT_CONFIG))

        schemas = load_schemas(str(path))
        assert "reorder_subjects" in schemas

    def test_empty_file(self, tmp_path):
        """Test that an empty YAML file yields no schemas."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_schemas(path) == {}

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigurationError):
            load_schemas(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        """Test that unknown extensions are rejected."""
        path = tmp_path / "forms.toml"
        path.write_text("schemas = {}")
        with pytest.raises(ConfigurationError):
            load_schemas(path)

    def test_non_mapping_content(self, tmp_path):
        """Test that a YAML list at the top level is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_schemas(path)

    def test_schemas_must_be_mapping(self):
        """Test that 'schemas' must map names to definitions."""
        with pytest.raises(ConfigurationError):
            load_schemas({"schemas": ["a"]})
