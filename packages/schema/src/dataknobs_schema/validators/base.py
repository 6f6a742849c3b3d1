"""Validator contract and the shared validation engine.

Every validator follows the same two-phase evaluation:

1. Presence and type. An absent value (``None`` or ``MISSING``) passes only
   if the validator is optional. A present value of the wrong kind fails
   with a single type error and nothing else is checked, so a number never
   produces a cascade of "too short" messages meant for strings.
2. Constraints. Every registered constraint runs in registration order and
   every failure is collected.
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from ..exceptions import SchemaConfigurationError
from ..result import MISSING, REQUIRED_MESSAGE, ValidationResult, is_absent

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V", bound="BaseValidator[Any]")

Context = Mapping[str, Any]
Predicate = Callable[..., Any]

EMPTY_CONTEXT: Context = MappingProxyType({})


@dataclass(frozen=True)
class Constraint:
    """A single named rule bound to a validator.

    Attributes:
        name: Short rule name (``min_length``, ``custom``, ...)
        check: Callable ``(value, context) -> bool``; True means the rule passed
        message: Default error message reported when the rule fails
    """

    name: str
    check: Callable[[Any, Context], bool]
    message: str

    def evaluate(self, value: Any, context: Context) -> bool:
        """Run the rule, treating an exception from the rule as a failure."""
        try:
            return bool(self.check(value, context))
        except Exception as e:
            logger.debug(f"Constraint '{self.name}' raised {type(e).__name__}: {e}")
            return False


class Validator(ABC, Generic[T]):
    """Common capability shared by every validator."""

    @property
    @abstractmethod
    def is_optional(self) -> bool:
        """Whether an absent value is accepted."""

    @abstractmethod
    def validate(self, value: Any = MISSING, context: Context | None = None) -> ValidationResult:
        """Validate ``value``.

        Args:
            value: Value to validate
            context: The nearest enclosing mapping, used by cross-field rules

        Returns:
            ValidationResult with the outcome
        """

    @abstractmethod
    def optional(self) -> Validator[T]:
        """Accept absent values (fluent API)."""

    @abstractmethod
    def with_message(self, message: str) -> Validator[T]:
        """Replace every constraint failure message (fluent API)."""

    @abstractmethod
    def custom(self, predicate: Predicate, message: str) -> Validator[T]:
        """Add a rule evaluated by ``predicate`` (fluent API)."""


class BaseValidator(Validator[T]):
    """Shared engine for the concrete validators.

    Builder methods mutate the validator and return it. Finish configuring
    a validator before validating with it or sharing it; ``validate`` itself
    never changes the configuration, so a configured validator can be used
    from any number of callers.

    Subclasses implement :meth:`_validate_type`.
    """

    def __init__(self) -> None:
        self._constraints: list[Constraint] = []
        self._optional = False
        self._message: str | None = None

    @property
    def is_optional(self) -> bool:
        return self._optional

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        """Registered constraints in evaluation order."""
        return tuple(self._constraints)

    def optional(self: V) -> V:
        """Accept ``None`` and ``MISSING`` as valid (fluent API).

        Returns:
            Self for chaining
        """
        self._optional = True
        return self

    def with_message(self: V, message: str) -> V:
        """Override constraint failure messages (fluent API).

        The override is all-or-nothing: every failing constraint reports
        ``message``, so two failing constraints yield ``[message, message]``.
        The last call wins. Presence and type errors are not affected.

        Args:
            message: Message reported for each failing constraint

        Returns:
            Self for chaining
        """
        self._message = message
        return self

    def custom(self: V, predicate: Predicate, message: str) -> V:
        """Add a caller-defined rule (fluent API).

        ``predicate`` is called as ``predicate(value, context)`` or, if it
        takes a single argument, ``predicate(value)``. A truthy return means
        the rule passed.

        Args:
            predicate: Rule callable
            message: Error message if the rule fails

        Returns:
            Self for chaining

        Raises:
            SchemaConfigurationError: If ``predicate`` is not callable or
                accepts neither calling form
        """
        return self._add("custom", _bind_predicate(predicate), message)

    def validate(self, value: Any = MISSING, context: Context | None = None) -> ValidationResult:
        """Validate ``value`` against presence, type and constraints.

        Args:
            value: Value to validate; ``None`` and ``MISSING`` mean absent
            context: Enclosing mapping for cross-field rules

        Returns:
            ValidationResult with the outcome
        """
        if is_absent(value):
            return self._absent_result()

        type_result = self._validate_type(value)
        if not type_result.is_valid:
            return type_result

        return ValidationResult.from_errors(self._check_constraints(value, context))

    def validate_many(
        self,
        values: Iterable[Any],
        context: Context | None = None,
        stop_on_error: bool = False,
    ) -> list[ValidationResult]:
        """Validate multiple values.

        Args:
            values: Values to validate
            context: Enclosing mapping shared by every call
            stop_on_error: If True, stop at the first invalid value

        Returns:
            List of ValidationResults, one per validated value
        """
        results = []
        for value in values:
            result = self.validate(value, context)
            results.append(result)
            if not result.is_valid and stop_on_error:
                break
        return results

    @abstractmethod
    def _validate_type(self, value: Any) -> ValidationResult:
        """Check that a present value is of the expected kind."""

    def _add(
        self: V,
        name: str,
        check: Callable[[Any, Context], bool],
        message: str,
    ) -> V:
        self._constraints.append(Constraint(name, check, message))
        return self

    def _absent_result(self) -> ValidationResult:
        if self._optional:
            return ValidationResult.success()
        return ValidationResult.failure([REQUIRED_MESSAGE])

    def _check_constraints(self, value: Any, context: Context | None) -> list[str]:
        """Evaluate every constraint and collect failure messages."""
        if context is None:
            context = EMPTY_CONTEXT
        errors = []
        for constraint in self._constraints:
            if not constraint.evaluate(value, context):
                errors.append(self._message if self._message is not None else constraint.message)
        return errors

    @staticmethod
    def _type_result(is_valid: bool, message: str) -> ValidationResult:
        if is_valid:
            return ValidationResult.success()
        return ValidationResult.failure([message])


def _bind_predicate(predicate: Predicate) -> Callable[[Any, Context], bool]:
    """Adapt a one- or two-argument predicate to ``(value, context)``."""
    if not callable(predicate):
        raise SchemaConfigurationError(
            "Custom predicate must be callable",
            context={"predicate": repr(predicate)},
        )

    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures are unary predicates
        return lambda value, context: predicate(value)

    if _accepts(signature, 2):
        return lambda value, context: predicate(value, context)
    if _accepts(signature, 1):
        return lambda value, context: predicate(value)

    raise SchemaConfigurationError(
        "Custom predicate must accept (value) or (value, context)",
        context={"predicate": repr(predicate), "signature": str(signature)},
    )


def _accepts(signature: inspect.Signature, count: int) -> bool:
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True


def require_int(name: str, value: Any, minimum: int = 0) -> int:
    """Check a builder's integer argument at configuration time."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaConfigurationError(
            f"{name} must be an integer, got {type(value).__name__}",
            context={"builder": name, "value": value},
        )
    if value < minimum:
        raise SchemaConfigurationError(
            f"{name} cannot be less than {minimum}: {value}",
            context={"builder": name, "value": value},
        )
    return value
