"""Exception hierarchy for the dataknobs schema package.

Invalid *data* never raises: ``validate`` always returns a
:class:`~dataknobs_schema.result.ValidationResult`. Exceptions are reserved
for misuse while a validator is being configured, and for callers that
explicitly ask for a failed result to be raised.

Example:
    ```python
    from dataknobs_schema import Schema, SchemaValidationError

    user = Schema.object({"name": Schema.string().min_length(2)})

    try:
        user.validate({"name": "J"}).raise_for_errors()
    except SchemaValidationError as e:
        logger.error(f"Rejected payload: {e.context['errors']}")
    ```
"""

from __future__ import annotations

from typing import Any


class SchemaError(Exception):
    """Base exception for the schema package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class SchemaConfigurationError(SchemaError):
    """Raised when a validator is configured incorrectly.

    Covers every construction-time misuse: non-callable predicates,
    malformed field schemas, invalid builder arguments (negative lengths,
    inverted ranges, bad regular expressions), invalid factory
    configuration and unreadable schema files.

    Example:
        ```python
        raise SchemaConfigurationError(
            "min_length cannot be negative",
            context={"builder": "min_length", "value": -1}
        )
        ```
    """

    pass


class SchemaValidationError(SchemaError):
    """Raised on request when a validation result is invalid.

    The ``errors`` entry of :attr:`context` holds the ordered list of
    violation messages.
    """

    def __init__(self, errors: list[str], message: str | None = None):
        super().__init__(
            message or f"Validation failed with {len(errors)} error(s): {'; '.join(errors)}",
            context={"errors": list(errors)},
        )
        self.errors = list(errors)


__all__ = [
    "SchemaError",
    "SchemaConfigurationError",
    "SchemaValidationError",
]
