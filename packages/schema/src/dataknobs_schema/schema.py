"""Factory entry points for building validators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from .validators import (
    ArrayValidator,
    BooleanValidator,
    DateValidator,
    NumberValidator,
    ObjectValidator,
    StringValidator,
    Validator,
)
from .validators.date import Clock

T = TypeVar("T")


class Schema:
    """Static factories for every validator kind.

    Example:
        ```python
        from dataknobs_schema import Schema

        user = Schema.object({
            "id": Schema.string(),
            "age": Schema.number().integer().optional(),
            "tags": Schema.array(Schema.string()).max(10),
        })

        result = user.validate({"id": "5", "tags": ["x", 2]})
        result.errors
        # ('tags: Item at index 1: Value must be a string',)
        ```
    """

    @staticmethod
    def string() -> StringValidator:
        return StringValidator()

    @staticmethod
    def number() -> NumberValidator:
        return NumberValidator()

    @staticmethod
    def boolean() -> BooleanValidator:
        return BooleanValidator()

    @staticmethod
    def date(clock: Clock | None = None) -> DateValidator:
        """Create a date validator; ``clock`` pins "now" for past/future checks."""
        return DateValidator(clock=clock)

    @staticmethod
    def array(item_validator: Validator[T]) -> ArrayValidator[T]:
        return ArrayValidator(item_validator)

    @staticmethod
    def object(fields: Mapping[str, Validator[Any]]) -> ObjectValidator:
        return ObjectValidator(fields)
