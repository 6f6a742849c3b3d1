"""Number validator.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

from ..exceptions import SchemaConfigurationError
from ..result import ValidationResult
from .base import BaseValidator


class NumberValidator(BaseValidator[Real]):
    """Validator for real numbers.

    ``bool`` is rejected even though it subclasses ``int``, and so is NaN.
    """

    def min_value(self, minimum: Real) -> NumberValidator:
        """Require ``value >= minimum``."""
        minimum = _require_number("min_value", minimum)
        return self._add(
            "min_value",
            lambda value, context: value >= minimum,
            f"Value must be greater than or equal to {minimum}",
        )

    def max_value(self, maximum: Real) -> NumberValidator:
        """Require ``value <= maximum``."""
        maximum = _require_number("max_value", maximum)
        return self._add(
            "max_value",
            lambda value, context: value <= maximum,
            f"Value must be less than or equal to {maximum}",
        )

    def positive(self) -> NumberValidator:
        """Require ``value > 0``."""
        return self._add(
            "positive",
            lambda value, context: value > 0,
            "Value must be positive (greater than 0)",
        )

    def negative(self) -> NumberValidator:
        """Require ``value < 0``."""
        return self._add(
            "negative",
            lambda value, context: value < 0,
            "Value must be negative (less than 0)",
        )

    def integer(self) -> NumberValidator:
        """Require a whole number; ``3.0`` passes, ``3.5`` and infinities do not."""
        return self._add("integer", lambda value, context: _is_integer(value), "Value must be an integer")

    def range(self, minimum: Real, maximum: Real) -> NumberValidator:
        """Require ``minimum <= value <= maximum``.

        Registers the same two constraints as ``min_value(minimum)`` followed
        by ``max_value(maximum)``.

        Raises:
            SchemaConfigurationError: If ``minimum`` is greater than ``maximum``
        """
        minimum = _require_number("range", minimum)
        maximum = _require_number("range", maximum)
        if minimum > maximum:
            raise SchemaConfigurationError(
                f"range minimum ({minimum}) cannot be greater than maximum ({maximum})",
                context={"builder": "range", "min": minimum, "max": maximum},
            )
        return self.min_value(minimum).max_value(maximum)

    def _validate_type(self, value: Any) -> ValidationResult:
        return self._type_result(_is_number(value), "Value must be a valid number")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return True
    return not math.isnan(value)


def _is_integer(value: Real) -> bool:
    if isinstance(value, Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()


def _require_number(name: str, value: Any) -> Real:
    if not _is_number(value):
        raise SchemaConfigurationError(
            f"{name} expects a number, got {value!r}",
            context={"builder": name, "value": value},
        )
    return value
