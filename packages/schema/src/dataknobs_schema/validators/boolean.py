"""Boolean validator.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import SchemaConfigurationError
from ..result import ValidationResult
from .base import BaseValidator


class BooleanValidator(BaseValidator[bool]):
    """Validator for ``bool`` values. ``0``, ``1`` and ``"true"`` are not booleans."""

    def true(self) -> BooleanValidator:
        """Require ``True``."""
        return self._add("true", lambda value, context: value is True, "Value must be true")

    def false(self) -> BooleanValidator:
        """Require ``False``."""
        return self._add("false", lambda value, context: value is False, "Value must be false")

    def equals(self, field_name: str) -> BooleanValidator:
        """Require the same boolean as the sibling field ``field_name``.

        The sibling is read from the validation context, which is the
        enclosing mapping when this validator is used inside
        :class:`~dataknobs_schema.validators.mapping.ObjectValidator`.

        Args:
            field_name: Name of the sibling field to compare against

        Returns:
            Self for chaining

        Raises:
            SchemaConfigurationError: If ``field_name`` is not a string
        """
        if not isinstance(field_name, str):
            raise SchemaConfigurationError(
                f"equals expects a field name, got {field_name!r}",
                context={"builder": "equals", "value": field_name},
            )
        return self._add(
            "equals",
            lambda value, context: context.get(field_name) is value,
            f"Value must equal the value of field '{field_name}'",
        )

    def _validate_type(self, value: Any) -> ValidationResult:
        return self._type_result(isinstance(value, bool), "Value must be a boolean")
