"""String validator.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from re import Pattern as RegexPattern
from typing import Any

from ..exceptions import SchemaConfigurationError
from ..result import ValidationResult
from .base import BaseValidator, require_int

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")
URL_PATTERN = re.compile(r"^(https?://)?([\da-z.-]+)\.([a-z.]{2,6})([/\w .-]*)/?\Z")
ALPHANUMERIC_PATTERN = re.compile(r"^[a-zA-Z0-9]+\Z")


class StringValidator(BaseValidator[str]):
    """Validator for ``str`` values."""

    def min_length(self, length: int) -> StringValidator:
        """Require at least ``length`` characters."""
        length = require_int("min_length", length)
        return self._add(
            "min_length",
            lambda value, context: len(value) >= length,
            f"String must be at least {length} characters long",
        )

    def max_length(self, length: int) -> StringValidator:
        """Require at most ``length`` characters."""
        length = require_int("max_length", length)
        return self._add(
            "max_length",
            lambda value, context: len(value) <= length,
            f"String must be at most {length} characters long",
        )

    def length(self, exact_length: int) -> StringValidator:
        """Require exactly ``exact_length`` characters."""
        exact_length = require_int("length", exact_length)
        return self._add(
            "length",
            lambda value, context: len(value) == exact_length,
            f"String must be exactly {exact_length} characters long",
        )

    def pattern(self, regex: str | RegexPattern[str]) -> StringValidator:
        """Require the string to contain a match for ``regex``.

        Matching uses :func:`re.search`; anchor the pattern with ``^`` and
        ``$`` to match the whole string.

        Args:
            regex: Pattern string or compiled pattern

        Returns:
            Self for chaining

        Raises:
            SchemaConfigurationError: If ``regex`` does not compile
        """
        compiled = _compile(regex)
        return self._add(
            "pattern",
            lambda value, context: compiled.search(value) is not None,
            f"String must match pattern /{compiled.pattern}/",
        )

    def email(self) -> StringValidator:
        """Require a plausible e-mail address (``local@domain.tld``).

        Sets the override message, so every failing constraint of this
        validator reports "Must be a valid email address".
        """
        return self.pattern(EMAIL_PATTERN).with_message("Must be a valid email address")

    def url(self) -> StringValidator:
        """Require an http(s) URL or bare host name with a dotted domain.

        Like :meth:`email`, sets the override message.
        """
        return self.pattern(URL_PATTERN).with_message("Must be a valid URL")

    def alphanumeric(self) -> StringValidator:
        """Require ASCII letters and digits only."""
        return self.pattern(ALPHANUMERIC_PATTERN).with_message(
            "String must contain only letters and numbers"
        )

    def one_of(self, allowed_values: Iterable[str]) -> StringValidator:
        """Require the string to be one of ``allowed_values``.

        Raises:
            SchemaConfigurationError: If no allowed values are given
        """
        if isinstance(allowed_values, str):
            raise SchemaConfigurationError(
                "one_of expects a collection of strings, not a single string",
                context={"builder": "one_of", "value": allowed_values},
            )
        try:
            allowed = tuple(allowed_values)
        except TypeError as e:
            raise SchemaConfigurationError(
                f"one_of expects a collection of strings, got {allowed_values!r}",
                context={"builder": "one_of", "value": allowed_values},
            ) from e
        if not allowed:
            raise SchemaConfigurationError(
                "one_of requires at least one allowed value",
                context={"builder": "one_of"},
            )
        return self._add(
            "one_of",
            lambda value, context: value in allowed,
            f"Value must be one of: {', '.join(str(v) for v in allowed)}",
        )

    def _validate_type(self, value: Any) -> ValidationResult:
        return self._type_result(isinstance(value, str), "Value must be a string")


def _compile(regex: str | RegexPattern[str]) -> RegexPattern[str]:
    if isinstance(regex, RegexPattern):
        return regex
    try:
        return re.compile(regex)
    except (re.error, TypeError) as e:
        raise SchemaConfigurationError(
            f"Invalid pattern {regex!r}: {e}",
            context={"builder": "pattern", "value": regex},
        ) from e
