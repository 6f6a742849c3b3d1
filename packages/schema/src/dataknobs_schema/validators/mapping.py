"""Keyed-structure validator with recursive, context-propagating fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ..exceptions import SchemaConfigurationError
from ..result import MISSING, REQUIRED_MESSAGE, ValidationResult, is_absent
from .base import BaseValidator, Context, Validator


class ObjectValidator(BaseValidator[Mapping[str, Any]]):
    """Validator for a mapping with a fixed set of fields.

    Each declared field is validated by its own validator, which receives
    the whole mapping as context. That is what lets a field rule look at
    a sibling, e.g. a confirmation field comparing itself to ``password``.

    Fields are checked in declaration order. A field that is missing or
    ``None`` is skipped when its validator is optional and reported as
    ``"{field}: Value is required"`` otherwise. Keys that are not declared
    are ignored.

    Child validators are shared, not copied, so the same validator can
    appear in several schemas. Schemas are trees: a validator must not
    contain itself.
    """

    def __init__(self, fields: Mapping[str, Validator[Any]]) -> None:
        """Initialize the validator.

        Args:
            fields: Mapping of field name to validator

        Raises:
            SchemaConfigurationError: If ``fields`` is not a mapping of
                string names to validators
        """
        super().__init__()
        if not isinstance(fields, Mapping):
            raise SchemaConfigurationError(
                f"Object fields must be a mapping, got {type(fields).__name__}",
                context={"fields": repr(fields)},
            )
        for name, validator in fields.items():
            if not isinstance(name, str):
                raise SchemaConfigurationError(
                    f"Field names must be strings, got {name!r}",
                    context={"field": repr(name)},
                )
            if not isinstance(validator, Validator):
                raise SchemaConfigurationError(
                    f"Field '{name}' must map to a Validator, got {type(validator).__name__}",
                    context={"field": name},
                )
        self._fields: dict[str, Validator[Any]] = dict(fields)

    @property
    def fields(self) -> Mapping[str, Validator[Any]]:
        """Read-only view of the declared fields."""
        return MappingProxyType(self._fields)

    def validate(self, value: Any = MISSING, context: Context | None = None) -> ValidationResult:
        """Validate the mapping, its own constraints and every declared field.

        Args:
            value: Value to validate
            context: Enclosing mapping, seen only by this object's own
                ``custom`` rules; fields receive ``value`` as their context

        Returns:
            ValidationResult with the object-level errors if any constraint
            failed, otherwise one ``"{field}: ..."`` entry per failing field
        """
        if is_absent(value):
            return self._absent_result()

        type_result = self._validate_type(value)
        if not type_result.is_valid:
            return type_result

        errors = self._check_constraints(value, context)
        if errors:
            return ValidationResult.failure(errors)

        for name, validator in self._fields.items():
            field_value = value.get(name, MISSING)
            if is_absent(field_value):
                if not validator.is_optional:
                    errors.append(f"{name}: {REQUIRED_MESSAGE}")
                continue

            field_result = validator.validate(field_value, value)
            if not field_result.is_valid:
                errors.append(f"{name}: {', '.join(field_result.errors)}")

        return ValidationResult.from_errors(errors)

    def _validate_type(self, value: Any) -> ValidationResult:
        return self._type_result(isinstance(value, Mapping), "Value must be an object")
