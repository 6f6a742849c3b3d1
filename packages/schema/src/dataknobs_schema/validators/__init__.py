"""Validator implementations."""

from .array import ArrayValidator
from .base import BaseValidator, Constraint, Validator
from .boolean import BooleanValidator
from .date import DateValidator
from .mapping import ObjectValidator
from .number import NumberValidator
from .string import StringValidator

__all__ = [
    "Validator",
    "BaseValidator",
    "Constraint",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "DateValidator",
    "ArrayValidator",
    "ObjectValidator",
]
