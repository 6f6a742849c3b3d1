"""Factory for building validators from configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import SchemaConfigurationError
from .schema import Schema
from .validators import BaseValidator

logger = logging.getLogger(__name__)

# How each option's value is turned into builder arguments
FLAG = "flag"
VALUE = "value"
PAIR = "pair"
DATE = "date"
DATE_PAIR = "date_pair"

COMMON_KEYS = frozenset({"type", "optional", "message", "description"})

OPTIONS: dict[str, dict[str, str]] = {
    "string": {
        "min_length": VALUE,
        "max_length": VALUE,
        "length": VALUE,
        "pattern": VALUE,
        "email": FLAG,
        "url": FLAG,
        "alphanumeric": FLAG,
        "one_of": VALUE,
    },
    "number": {
        "min_value": VALUE,
        "max_value": VALUE,
        "positive": FLAG,
        "negative": FLAG,
        "integer": FLAG,
        "range": PAIR,
    },
    "boolean": {
        "true": FLAG,
        "false": FLAG,
        "equals": VALUE,
    },
    "date": {
        "after": DATE,
        "before": DATE,
        "past": FLAG,
        "future": FLAG,
        "between": DATE_PAIR,
        "format": VALUE,
    },
    "array": {
        "min": VALUE,
        "max": VALUE,
        "length": VALUE,
    },
    "object": {},
}

# Keys consumed while constructing the validator itself
STRUCTURAL_KEYS = {
    "array": frozenset({"items"}),
    "object": frozenset({"fields"}),
    "date": frozenset({"format_description"}),
}


class SchemaFactory:
    """Factory for creating validators from configuration.

    Configuration Options:
        type (str): One of string, number, boolean, date, array, object
        optional (bool): Accept missing/None values (default: False)
        message (str): Override message for every failing constraint
        description (str): Free-form documentation, ignored
        items (dict): Item validator configuration (array only, required)
        fields (dict): Field name to validator configuration (object only)

    Constraint options are named after the builder methods and applied in
    the order they appear. Flags (``email``, ``integer``, ``past``, ...) take
    a boolean; ``range`` and ``between`` take a two-item list; ``after``,
    ``before`` and ``between`` take ISO-8601 strings or dates; ``format``
    takes a regex and reads its description from ``format_description``.

    Example Configuration:
        type: object
        fields:
          username:
            type: string
            min_length: 3
            max_length: 20
            pattern: "^[a-zA-Z0-9_]+$"
          age:
            type: number
            integer: true
            range: [13, 120]
            optional: true
          tags:
            type: array
            items: {type: string}
            max: 5
    """

    def create(self, **config: Any) -> BaseValidator[Any]:
        """Create a validator from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Configured validator

        Raises:
            SchemaConfigurationError: If the configuration is invalid
        """
        validator = self.build(config)
        logger.info(f"Created {config.get('type')} validator from configuration")
        return validator

    def build(self, config: Mapping[str, Any], path: str = "$") -> BaseValidator[Any]:
        """Build a validator tree from a configuration mapping.

        Args:
            config: Validator configuration
            path: Location of ``config`` within the enclosing configuration,
                used in error messages

        Returns:
            Configured validator
        """
        if not isinstance(config, Mapping):
            raise SchemaConfigurationError(
                f"Validator configuration at {path} must be a mapping, got {type(config).__name__}",
                context={"path": path},
            )

        type_name = config.get("type")
        if not isinstance(type_name, str) or type_name.lower() not in OPTIONS:
            raise SchemaConfigurationError(
                f"Unknown validator type at {path}: {type_name!r}",
                context={"path": path, "type": type_name, "available_types": sorted(OPTIONS)},
            )
        type_name = type_name.lower()

        validator = self._create_validator(type_name, config, path)
        options = OPTIONS[type_name]
        structural = STRUCTURAL_KEYS.get(type_name, frozenset())

        for key, value in config.items():
            if isinstance(key, bool):
                # YAML reads unquoted true/false keys as booleans
                key = str(key).lower()
            if key in COMMON_KEYS or key in structural:
                continue
            kind = options.get(key)
            if kind is None:
                logger.warning(f"Unknown option '{key}' for {type_name} validator at {path}, skipping")
                continue
            self._apply(validator, key, kind, value, config, f"{path}.{key}")

        if config.get("optional", False):
            validator.optional()
        message = config.get("message")
        if message is not None:
            validator.with_message(str(message))

        return validator

    def _create_validator(
        self, type_name: str, config: Mapping[str, Any], path: str
    ) -> BaseValidator[Any]:
        if type_name == "array":
            if "items" not in config:
                raise SchemaConfigurationError(
                    f"Array validator at {path} requires 'items'",
                    context={"path": path},
                )
            return Schema.array(self.build(config["items"], f"{path}.items"))

        if type_name == "object":
            fields = config.get("fields") or {}
            if not isinstance(fields, Mapping):
                raise SchemaConfigurationError(
                    f"Object 'fields' at {path} must be a mapping",
                    context={"path": path},
                )
            return Schema.object({
                name: self.build(field_config, f"{path}.fields.{name}")
                for name, field_config in fields.items()
            })

        factories: dict[str, Callable[[], BaseValidator[Any]]] = {
            "string": Schema.string,
            "number": Schema.number,
            "boolean": Schema.boolean,
            "date": Schema.date,
        }
        return factories[type_name]()

    def _apply(
        self,
        validator: BaseValidator[Any],
        key: str,
        kind: str,
        value: Any,
        config: Mapping[str, Any],
        path: str,
    ) -> None:
        builder = getattr(validator, key)

        if kind == FLAG:
            if not isinstance(value, bool):
                raise SchemaConfigurationError(
                    f"Option at {path} must be true or false, got {value!r}",
                    context={"path": path},
                )
            if value:
                builder()
        elif kind == PAIR:
            builder(*_pair(value, path))
        elif kind == DATE:
            builder(_parse_datetime(value, path))
        elif kind == DATE_PAIR:
            start, end = _pair(value, path)
            builder(_parse_datetime(start, path), _parse_datetime(end, path))
        elif key == "format":
            builder(value, config.get("format_description", str(value)))
        else:
            builder(value)


def _pair(value: Any, path: str) -> tuple[Any, Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)) or len(value) != 2:
        raise SchemaConfigurationError(
            f"Option at {path} must be a two-item list, got {value!r}",
            context={"path": path},
        )
    return value[0], value[1]


def _parse_datetime(value: Any, path: str) -> datetime:
    """Accept datetimes, dates (YAML timestamps) and ISO-8601 strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        try:
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise SchemaConfigurationError(
                f"Invalid ISO-8601 date at {path}: {value!r}",
                context={"path": path},
            ) from e
    raise SchemaConfigurationError(
        f"Option at {path} must be a date, got {type(value).__name__}",
        context={"path": path},
    )


def load_schema(path: str | Path, factory: SchemaFactory | None = None) -> BaseValidator[Any]:
    """Load a validator definition from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file
        factory: Factory to build with; defaults to :data:`schema_factory`

    Returns:
        Configured validator

    Raises:
        SchemaConfigurationError: If the file is missing, has an unsupported
            format, or holds an invalid definition
    """
    path = Path(path).resolve()
    if not path.exists():
        raise SchemaConfigurationError(
            f"Schema file not found: {path}",
            context={"path": str(path)},
        )

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise SchemaConfigurationError(
                f"Unsupported schema file format: {suffix}",
                context={"path": str(path)},
            )

    if not isinstance(data, Mapping):
        raise SchemaConfigurationError(
            f"Schema file must contain a mapping: {path}",
            context={"path": str(path)},
        )

    logger.info(f"Loading schema from {path}")
    validator = (factory or schema_factory).build(data)
    logger.info(f"Created {data.get('type')} validator from {path.name}")
    return validator


# Singleton instance for registration
schema_factory = SchemaFactory()
