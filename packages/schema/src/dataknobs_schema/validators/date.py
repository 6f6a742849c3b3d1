"""Date validator.

Naive datetimes are interpreted as UTC so that naive and aware values can
always be compared. ``past()`` and ``future()`` read the clock each time
``validate`` runs; they are the only constraints whose outcome can change
between two calls with the same value. Pass ``clock`` to pin the time in
tests.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timezone
from re import Pattern as RegexPattern
from typing import Any

from ..exceptions import SchemaConfigurationError
from ..result import ValidationResult
from .base import BaseValidator

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Convert ``value`` to aware UTC, treating naive values as UTC."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def iso_format(value: datetime) -> str:
    """Canonical ISO-8601 form: ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    return to_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DateValidator(BaseValidator[datetime]):
    """Validator for ``datetime`` values."""

    def __init__(self, clock: Clock | None = None) -> None:
        """Initialize the validator.

        Args:
            clock: Callable returning the current time; defaults to :func:`utc_now`
        """
        super().__init__()
        self._clock = clock or utc_now

    def after(self, date: datetime) -> DateValidator:
        """Require a date strictly after ``date``."""
        bound = _require_datetime("after", date)
        return self._add(
            "after",
            lambda value, context: to_utc(value) > bound,
            f"Date must be after {iso_format(bound)}",
        )

    def before(self, date: datetime) -> DateValidator:
        """Require a date strictly before ``date``."""
        bound = _require_datetime("before", date)
        return self._add(
            "before",
            lambda value, context: to_utc(value) < bound,
            f"Date must be before {iso_format(bound)}",
        )

    def past(self) -> DateValidator:
        """Require a date strictly before the clock's current time."""
        return self._add(
            "past",
            lambda value, context: to_utc(value) < to_utc(self._clock()),
            "Date must be in the past",
        )

    def future(self) -> DateValidator:
        """Require a date strictly after the clock's current time."""
        return self._add(
            "future",
            lambda value, context: to_utc(value) > to_utc(self._clock()),
            "Date must be in the future",
        )

    def between(self, start: datetime, end: datetime) -> DateValidator:
        """Require ``start <= date <= end``.

        Raises:
            SchemaConfigurationError: If ``start`` is after ``end``
        """
        lower = _require_datetime("between", start)
        upper = _require_datetime("between", end)
        if lower > upper:
            raise SchemaConfigurationError(
                f"between start ({iso_format(lower)}) cannot be after end ({iso_format(upper)})",
                context={"builder": "between"},
            )
        return self._add(
            "between",
            lambda value, context: lower <= to_utc(value) <= upper,
            f"Date must be between {iso_format(lower)} and {iso_format(upper)}",
        )

    def format(self, regex: str | RegexPattern[str], description: str) -> DateValidator:
        """Require the canonical ISO-8601 text of the date to match ``regex``.

        Args:
            regex: Pattern searched in :func:`iso_format` output
            description: Human-readable format name used in the error message

        Returns:
            Self for chaining
        """
        try:
            compiled = re.compile(regex)
        except (re.error, TypeError) as e:
            raise SchemaConfigurationError(
                f"Invalid format pattern {regex!r}: {e}",
                context={"builder": "format", "value": regex},
            ) from e
        return self._add(
            "format",
            lambda value, context: compiled.search(iso_format(value)) is not None,
            f"Date must be in {description} format",
        )

    def _validate_type(self, value: Any) -> ValidationResult:
        # NaT-like values are datetime instances that are not equal to themselves
        is_valid = isinstance(value, datetime) and value == value
        return self._type_result(is_valid, "Value must be a valid date")


def _require_datetime(name: str, value: Any) -> datetime:
    if not isinstance(value, datetime):
        raise SchemaConfigurationError(
            f"{name} expects a datetime, got {type(value).__name__}",
            context={"builder": name, "value": value},
        )
    return to_utc(value)
