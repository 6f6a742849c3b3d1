"""Tests for building validators from configuration."""

import json
import logging
from datetime import datetime, timezone

import pytest
import yaml

from dataknobs_schema import (
    ArrayValidator,
    DateValidator,
    ObjectValidator,
    SchemaConfigurationError,
    SchemaFactory,
    StringValidator,
    load_schema,
    schema_factory,
)


USER_CONFIG = {
    "type": "object",
    "fields": {
        "username": {
            "type": "string",
            "min_length": 3,
            "max_length": 20,
            "pattern": "^[a-zA-Z0-9_]+$",
        },
        "email": {"type": "string", "email": True},
        "age": {"type": "number", "integer": True, "range": [13, 120], "optional": True},
        "tags": {"type": "array", "items": {"type": "string"}, "max": 3},
        "newsletter": {"type": "boolean", "optional": True},
    },
}


class TestSchemaFactory:
    """Test SchemaFactory.create."""

    def test_create_object(self):
        """Nested configuration builds nested validators."""
        validator = SchemaFactory().create(**USER_CONFIG)

        assert isinstance(validator, ObjectValidator)
        assert list(validator.fields) == ["username", "email", "age", "tags", "newsletter"]
        assert isinstance(validator.fields["tags"], ArrayValidator)
        assert validator.fields["age"].is_optional

        assert validator.validate({"username": "john_doe", "email": "j@example.com", "tags": []}).is_valid

    def test_configured_validator_reports_errors(self):
        """Config-built validators report the same messages as fluent ones."""
        validator = schema_factory.create(**USER_CONFIG)
        result = validator.validate({
            "username": "jo",
            "email": "nope",
            "age": 12.5,
            "tags": ["a", "b", "c", 4],
        })
        assert result.errors == (
            "username: String must be at least 3 characters long",
            "email: Must be a valid email address",
            "age: Value must be an integer, Value must be greater than or equal to 13",
            "tags: Array must contain at most 3 items",
        )

    def test_option_order_is_registration_order(self):
        """Constraints are registered in the order options appear."""
        validator = schema_factory.build({"type": "number", "positive": True, "integer": True, "max_value": 10})
        assert [c.name for c in validator.constraints] == ["positive", "integer", "max_value"]

    def test_message_and_optional(self):
        """message overrides constraint messages; optional accepts absence."""
        validator = schema_factory.build({
            "type": "string",
            "min_length": 5,
            "message": "Too short",
            "optional": True,
        })
        assert validator.validate(None).is_valid
        assert validator.validate("abc").errors == ("Too short",)

    def test_false_flags_are_skipped(self):
        """A flag set to false adds nothing."""
        validator = schema_factory.build({"type": "number", "positive": False})
        assert validator.constraints == ()

    def test_string_options(self):
        """All string options are recognized."""
        validator = schema_factory.build({
            "type": "string",
            "length": 3,
            "alphanumeric": True,
            "one_of": ["abc", "xyz"],
        })
        assert validator.validate("abc").is_valid
        assert not validator.validate("a-c").is_valid

    def test_boolean_options(self):
        """Boolean flags and equals are recognized, including YAML boolean keys."""
        validator = schema_factory.build({"type": "boolean", True: True})
        assert not validator.validate(False).is_valid

        schema = schema_factory.build({
            "type": "object",
            "fields": {
                "a": {"type": "boolean"},
                "b": {"type": "boolean", "equals": "a"},
            },
        })
        assert not schema.validate({"a": True, "b": False}).is_valid

    def test_date_options(self):
        """Date options accept ISO strings, dates and datetimes."""
        validator = schema_factory.build({
            "type": "date",
            "after": "2023-01-01T00:00:00Z",
            "between": ["2023-01-01", datetime(2025, 1, 1, tzinfo=timezone.utc)],
            "format": r"^\d{4}-\d{2}-\d{2}",
            "format_description": "YYYY-MM-DD",
        })
        assert isinstance(validator, DateValidator)
        assert validator.validate(datetime(2024, 6, 1)).is_valid
        assert validator.validate(datetime(2026, 1, 1)).errors == (
            "Date must be between 2023-01-01T00:00:00.000Z and 2025-01-01T00:00:00.000Z",
        )

    def test_unknown_option_logged(self, caplog):
        """Unknown options are skipped with a warning."""
        with caplog.at_level(logging.WARNING, logger="dataknobs_schema.factory"):
            validator = schema_factory.build({"type": "string", "min_lenght": 3})
        assert isinstance(validator, StringValidator)
        assert validator.constraints == ()
        assert "min_lenght" in caplog.text

    @pytest.mark.parametrize("config", [
        {},
        {"type": "uuid"},
        {"type": None},
        {"type": "array"},
        {"type": "object", "fields": ["a"]},
        {"type": "number", "range": 5},
        {"type": "number", "positive": "yes"},
        {"type": "date", "after": "yesterday"},
        {"type": "date", "before": 12},
        {"type": "string", "min_length": -1},
        {"type": "object", "fields": {"a": "string"}},
        {"type": "string", "one_of": 5},
        {"type": "boolean", "equals": 5},
    ])
    def test_invalid_configuration(self, config):
        """Invalid configuration raises SchemaConfigurationError."""
        with pytest.raises(SchemaConfigurationError):
            schema_factory.build(config)

    def test_error_path_in_context(self):
        """Errors name the location of the bad configuration."""
        with pytest.raises(SchemaConfigurationError) as exc_info:
            schema_factory.build({
                "type": "object",
                "fields": {"tags": {"type": "array", "items": {"type": "nope"}}},
            })
        assert exc_info.value.context["path"] == "$.fields.tags.items"

    def test_type_is_case_insensitive(self):
        """Type names are matched case-insensitively."""
        assert isinstance(schema_factory.build({"type": "STRING"}), StringValidator)


class TestLoadSchema:
    """Test load_schema."""

    def test_load_yaml(self, schema_dir):
        """YAML files are loaded with safe_load."""
        path = schema_dir / "user.yaml"
        path.write_text(yaml.safe_dump(USER_CONFIG, sort_keys=False))

        validator = load_schema(path)
        assert isinstance(validator, ObjectValidator)
        assert not validator.validate({"username": "jo", "email": "j@example.com", "tags": []}).is_valid

    def test_load_yaml_text(self, schema_dir):
        """Hand-written YAML, including unquoted boolean keys and dates, works."""
        path = schema_dir / "event.yml"
        path.write_text(
            "type: object\n"
            "fields:\n"
            "  title: {type: string, min_length: 1}\n"
            "  accepted: {type: boolean, true: true}\n"
            "  starts:\n"
            "    type: date\n"
            "    after: 2024-01-01\n"
        )
        validator = load_schema(path)
        result = validator.validate({
            "title": "Launch",
            "accepted": False,
            "starts": datetime(2023, 6, 1),
        })
        assert result.errors == (
            "accepted: Value must be true",
            "starts: Date must be after 2024-01-01T00:00:00.000Z",
        )

    def test_load_yaml_top_level_boolean_key(self, schema_dir):
        """An unquoted top-level true: key is read as the true option."""
        path = schema_dir / "accepted.yaml"
        path.write_text("type: boolean\ntrue: true\n")

        validator = load_schema(path)
        assert validator.validate(True).is_valid
        assert validator.validate(False).errors == ("Value must be true",)

    def test_load_yaml_invalid_option_value(self, schema_dir):
        """Bad option values in a file raise SchemaConfigurationError."""
        path = schema_dir / "bad.yaml"
        path.write_text("type: boolean\nfalse: maybe\n")
        with pytest.raises(SchemaConfigurationError):
            load_schema(path)

    def test_load_json(self, schema_dir):
        """JSON files are supported."""
        path = schema_dir / "tags.json"
        path.write_text(json.dumps({"type": "array", "items": {"type": "number"}, "min": 1}))

        validator = load_schema(str(path))
        assert validator.validate([1, 2]).is_valid
        assert validator.validate([]).errors == ("Array must contain at least 1 items",)

    def test_missing_file(self, schema_dir):
        """A missing file is a configuration error."""
        with pytest.raises(SchemaConfigurationError, match="not found"):
            load_schema(schema_dir / "missing.yaml")

    def test_unsupported_format(self, schema_dir):
        """Unknown suffixes are rejected."""
        path = schema_dir / "schema.toml"
        path.write_text("type = 'string'")
        with pytest.raises(SchemaConfigurationError, match="Unsupported"):
            load_schema(path)

    def test_non_mapping_file(self, schema_dir):
        """Files must contain a mapping."""
        path = schema_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(SchemaConfigurationError, match="mapping"):
            load_schema(path)
