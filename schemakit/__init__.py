"""
schemakit - composable validators with typed results.

Usage:
    from schemakit import Schema

    user = Schema.object({
        "name": Schema.string().min_length(1),
        "email": Schema.string().email(),
        "age": Schema.number().integer().min(0).optional(),
    })

    result = user.validate(data)
"""

from .algebraic import LiteralValidator, UnionValidator
from .base import LengthConstrainedValidator, RangeConstrainedValidator, Validator
from .composites import ArrayValidator, ObjectValidator
from .context import is_strict, validation_context
from .exceptions import SchemaValidationError
from .primitives import BooleanValidator, DateValidator, NumberValidator, StringValidator
from .schema import Schema, to_pydantic
from .types import Err, Ok, ValidationResult

__all__ = [
    # Result types
    "Ok",
    "Err",
    "ValidationResult",
    "SchemaValidationError",
    # Facade
    "Schema",
    "to_pydantic",
    # Configuration
    "validation_context",
    "is_strict",
    # Validators
    "Validator",
    "RangeConstrainedValidator",
    "LengthConstrainedValidator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "DateValidator",
    "ArrayValidator",
    "ObjectValidator",
    "UnionValidator",
    "LiteralValidator",
]
