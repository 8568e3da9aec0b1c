"""
Schema facade and Pydantic interop for schemakit.

Provides the Schema factory and to_pydantic().
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Mapping
from typing import Optional as TypingOptional
from typing import Union

from pydantic import create_model

from .algebraic import LiteralValidator, LiteralValue, UnionValidator
from .base import Validator
from .composites import ArrayValidator, ObjectValidator
from .primitives import BooleanValidator, DateValidator, NumberValidator, StringValidator


class Schema:
    """
    Static factory for every validator kind.

    Usage:
        user = Schema.object({
            "name": Schema.string().min_length(1),
            "email": Schema.string().email(),
            "age": Schema.number().min(0).optional(),
        })

        result = user.validate(data)
        if result.success:
            print(result.data["name"])
        else:
            print(result.errors)
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
    def date() -> DateValidator:
        return DateValidator()

    @staticmethod
    def array(item: Validator[Any]) -> ArrayValidator:
        return ArrayValidator(item=item)

    @staticmethod
    def object(shape: Mapping[str, Validator[Any]]) -> ObjectValidator:
        return ObjectValidator(shape=shape)

    @staticmethod
    def union(*options: Validator[Any]) -> UnionValidator:
        return UnionValidator(options=options)

    @staticmethod
    def literal(value: LiteralValue) -> LiteralValidator:
        return LiteralValidator(value=value)

    @staticmethod
    def enum(*values: LiteralValue) -> UnionValidator:
        """
        Union of literals.

        Usage:
            Schema.enum("pending", "shipped", "delivered")
        """
        if not values:
            raise ValueError("Enum requires at least one value")
        return UnionValidator(options=tuple(LiteralValidator(value=v) for v in values))


def to_pydantic(name: str, validator: ObjectValidator) -> type:
    """
    Compile an object validator to a Pydantic model.

    Args:
        name: Name of the generated model class
        validator: Object validator describing the fields

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", Schema.object({
            "name": Schema.string(),
            "email": Schema.string().optional(),
        }))
        user = User(name="Alice")
    """
    if not isinstance(validator, ObjectValidator):
        raise TypeError(f"to_pydantic requires an ObjectValidator, got {type(validator).__name__}")

    fields: dict[str, Any] = {}

    for key, v in validator.shape.items():
        field_type = _python_type(v, f"{name}_{key}")
        if v.is_optional:
            fields[key] = (TypingOptional[field_type], None)
        else:
            fields[key] = (field_type, ...)

    return create_model(name, **fields)


def _python_type(v: Validator[Any], name: str) -> Any:
    """Python type annotation for a validator, ignoring optionality."""
    match v:
        case StringValidator():
            return str
        case NumberValidator(require_integer=True):
            return int
        case NumberValidator():
            return float
        case BooleanValidator():
            return bool
        case DateValidator():
            return datetime
        case ArrayValidator(item=item):
            item_type = _python_type(item, f"{name}_item")
            if item.is_optional:
                item_type = TypingOptional[item_type]
            return list[item_type]  # type: ignore[valid-type]
        case ObjectValidator():
            return to_pydantic(name, v)
        case UnionValidator(options=options):
            return Union[tuple(_python_type(o, f"{name}_{i}") for i, o in enumerate(options))]
        case LiteralValidator(value=value):
            return Literal[value]

    return Any
