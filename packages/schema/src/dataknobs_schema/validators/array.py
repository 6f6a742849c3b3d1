"""Sequence validator with per-item delegation.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ..exceptions import SchemaConfigurationError
from ..result import MISSING, ValidationResult, is_absent
from .base import BaseValidator, Context, Validator, require_int

T = TypeVar("T")


class ArrayValidator(BaseValidator[list], Generic[T]):
    """Validator for a homogeneous ``list`` or ``tuple``.

    Each item is validated by ``item_validator``, which may be any validator
    including another array or an object validator. Items receive the same
    context as the array itself, so cross-field rules on items see the
    mapping that encloses the array.

    Example:
        ```python
        tags = ArrayValidator(StringValidator().min_length(1)).max(5)
        tags.validate(["a", 2]).errors
        # ('Item at index 1: Value must be a string',)
        ```
    """

    def __init__(self, item_validator: Validator[T]) -> None:
        """Initialize the validator.

        Args:
            item_validator: Validator applied to every item

        Raises:
            SchemaConfigurationError: If ``item_validator`` is not a Validator
        """
        super().__init__()
        if not isinstance(item_validator, Validator):
            raise SchemaConfigurationError(
                f"Array item validator must be a Validator, got {type(item_validator).__name__}",
                context={"item_validator": repr(item_validator)},
            )
        self.item_validator = item_validator

    def min(self, length: int) -> ArrayValidator[T]:
        """Require at least ``length`` items."""
        length = require_int("min", length)
        return self._add(
            "min",
            lambda value, context: len(value) >= length,
            f"Array must contain at least {length} items",
        )

    def max(self, length: int) -> ArrayValidator[T]:
        """Require at most ``length`` items."""
        length = require_int("max", length)
        return self._add(
            "max",
            lambda value, context: len(value) <= length,
            f"Array must contain at most {length} items",
        )

    def length(self, exact_length: int) -> ArrayValidator[T]:
        """Require exactly ``exact_length`` items.

        Like ``min`` and ``max`` this only adds a constraint; bounds
        registered by earlier calls stay in force.
        """
        exact_length = require_int("length", exact_length)
        return self._add(
            "length",
            lambda value, context: len(value) == exact_length,
            f"Array must contain exactly {exact_length} items",
        )

    def validate(self, value: Any = MISSING, context: Context | None = None) -> ValidationResult:
        """Validate the list, its own constraints and then every item.

        Args:
            value: Value to validate
            context: Enclosing mapping, passed unchanged to every item

        Returns:
            ValidationResult with the list-level errors if any constraint
            failed, otherwise one ``"Item at index {i}: ..."`` entry per
            failing item
        """
        if is_absent(value):
            return self._absent_result()

        type_result = self._validate_type(value)
        if not type_result.is_valid:
            return type_result

        errors = self._check_constraints(value, context)
        if errors:
            return ValidationResult.failure(errors)

        for index, item in enumerate(value):
            item_result = self.item_validator.validate(item, context)
            if not item_result.is_valid:
                errors.append(f"Item at index {index}: {', '.join(item_result.errors)}")

        return ValidationResult.from_errors(errors)

    def _validate_type(self, value: Any) -> ValidationResult:
        return self._type_result(isinstance(value, (list, tuple)), "Value must be an array")
