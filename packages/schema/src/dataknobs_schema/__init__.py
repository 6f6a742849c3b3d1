"""Declarative validation of runtime values.

This package provides composable validators for primitives, lists and
nested mappings:
- Fluent builders that return the validator for chaining
- Predictable results (always a ValidationResult, never an exception for bad data)
- Type errors short-circuit; constraint errors are all collected
- Cross-field rules through the enclosing mapping passed as context
- Validators built from YAML/JSON configuration

Example:
    ```python
    from dataknobs_schema import Schema

    signup = Schema.object({
        "password": Schema.string().min_length(8),
        "confirm": Schema.string().custom(
            lambda value, obj: value == obj["password"], "Passwords must match"
        ),
    })

    result = signup.validate({"password": "longenough", "confirm": "different"})
    result.errors
    # ('confirm: Passwords must match',)
    ```

DataFrame validation lives in :mod:`dataknobs_schema.dataframe` and needs
the ``dataframe`` extra.
"""

from .exceptions import SchemaConfigurationError, SchemaError, SchemaValidationError
from .factory import SchemaFactory, load_schema, schema_factory
from .result import MISSING, ValidationResult, is_absent
from .schema import Schema
from .validators import (
    ArrayValidator,
    BaseValidator,
    BooleanValidator,
    Constraint,
    DateValidator,
    NumberValidator,
    ObjectValidator,
    StringValidator,
    Validator,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Facade
    "Schema",
    # Result types
    "ValidationResult",
    "MISSING",
    "is_absent",
    # Validators
    "Validator",
    "BaseValidator",
    "Constraint",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "DateValidator",
    "ArrayValidator",
    "ObjectValidator",
    # Configuration
    "SchemaFactory",
    "schema_factory",
    "load_schema",
    # Exceptions
    "SchemaError",
    "SchemaConfigurationError",
    "SchemaValidationError",
]
