"""Validation result type and absence sentinels.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Final

from .exceptions import SchemaValidationError

REQUIRED_MESSAGE: Final = "Value is required"


class _Missing:
    """Marker for a value that was not supplied at all."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def is_absent(value: Any) -> bool:
    """Return True if ``value`` stands for "no value".

    ``None`` and :data:`MISSING` are treated identically everywhere.
    """
    return value is None or value is MISSING


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of a ``validate`` call.

    ``errors`` is empty if and only if ``is_valid`` is True. The result is
    truthy when valid, so ``if schema.validate(payload):`` reads naturally.
    """

    is_valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if self.is_valid == bool(self.errors):
            raise ValueError("ValidationResult is valid if and only if it has no errors")

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a successful validation result."""
        return _SUCCESS

    @classmethod
    def failure(cls, errors: Iterable[str]) -> ValidationResult:
        """Create a failed validation result.

        Args:
            errors: Non-empty sequence of error messages

        Returns:
            Failed ValidationResult
        """
        return cls(is_valid=False, errors=tuple(errors))

    @classmethod
    def from_errors(cls, errors: Iterable[str]) -> ValidationResult:
        """Create a result whose validity is decided by ``errors`` being empty."""
        errors = tuple(errors)
        if not errors:
            return _SUCCESS
        return cls(is_valid=False, errors=errors)

    def raise_for_errors(self) -> None:
        """Raise :class:`SchemaValidationError` if this result is invalid.

        Raises:
            SchemaValidationError: With the ordered error messages in
                ``context["errors"]``
        """
        if not self.is_valid:
            raise SchemaValidationError(list(self.errors))


_SUCCESS: Final = ValidationResult(is_valid=True)
