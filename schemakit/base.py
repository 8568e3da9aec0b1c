"""
Base validator classes for schemakit.

Provides the abstract Validator dataclass plus the range (min/max) and
length (min_length/max_length) layers shared by the concrete validators.
Every configuration call returns a new validator; instances are never
mutated after construction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Generic, TypeVar

from .types import Err, Ok, ValidationResult

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class Validator(ABC, Generic[T]):
    """
    Immutable validator node.

    Handles the nullish short-circuit and custom messages; subclasses only
    implement `_check` for values that are known not to be None.
    """

    is_optional: bool = False
    message: str | None = None

    @abstractmethod
    def _check(self, value: Any) -> ValidationResult[T]:
        """Type and constraint checks for a non-None value."""

    def validate(self, value: Any) -> ValidationResult[T]:
        """
        Validate a value.

        Returns:
            Ok(data) if validation passes (data is None for an absent optional)
            Err(errors) if validation fails
        """
        if value is None:
            if self.is_optional:
                return Ok(None)
            return self._fail("Value is required")
        return self._check(value)

    def __call__(self, value: Any) -> ValidationResult[T]:
        return self.validate(value)

    def parse(self, value: Any) -> T:
        """Validate and return the data, raising SchemaValidationError on failure."""
        return self.validate(value).unwrap()

    def optional(self):
        """Return new validator that accepts None."""
        return replace(self, is_optional=True)

    def with_message(self, msg: str):
        """Return new validator with custom error message."""
        if not isinstance(msg, str):
            raise TypeError(f"Message must be a str, got {type(msg).__name__}")
        return replace(self, message=msg)

    def __or__(self, other: Validator[Any]):
        """
        Combine into a union: first matching alternative wins.

        Usage:
            Schema.string() | Schema.number()
        """
        from .algebraic import UnionValidator

        if not isinstance(other, Validator):
            return NotImplemented
        return UnionValidator(options=(*_union_options(self), *_union_options(other)))

    def _fail(self, msg: str) -> Err:
        return Err((self.message or msg,))


def _union_options(v: Validator[Any]) -> tuple[Validator[Any], ...]:
    from .algebraic import UnionValidator

    # Only bare unions are flattened; a configured union keeps its own settings
    if type(v) is UnionValidator and not v.is_optional and v.message is None:
        return v.options
    return (v,)


@dataclass(frozen=True, slots=True, kw_only=True)
class RangeConstrainedValidator(Validator[T]):
    """Validator with inclusive min/max bounds."""

    _label: ClassVar[str] = "Number"

    minimum: Any = None
    maximum: Any = None

    def min(self, value: Any):
        bound = self._coerce_bound(value)
        _check_order(bound, self.maximum, "min", "max")
        return replace(self, minimum=bound)

    def max(self, value: Any):
        bound = self._coerce_bound(value)
        _check_order(self.minimum, bound, "min", "max")
        return replace(self, maximum=bound)

    def _coerce_bound(self, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Bound must be a number, got {type(value).__name__}")
        return value

    def _range_error(self, value: Any) -> str | None:
        if self.minimum is not None and value < self.minimum:
            return f"{self._label} must be at least {self.minimum}"
        if self.maximum is not None and value > self.maximum:
            return f"{self._label} must be no more than {self.maximum}"
        return None


@dataclass(frozen=True, slots=True, kw_only=True)
class LengthConstrainedValidator(Validator[T]):
    """Validator with inclusive min_length/max_length bounds."""

    _label: ClassVar[str] = "String"
    _length_unit: ClassVar[str] = "characters long"

    min_len: int | None = None
    max_len: int | None = None

    def min_length(self, n: int):
        _check_length(n)
        _check_order(n, self.max_len, "min_length", "max_length")
        return replace(self, min_len=n)

    def max_length(self, n: int):
        _check_length(n)
        _check_order(self.min_len, n, "min_length", "max_length")
        return replace(self, max_len=n)

    def _length_error(self, length: int) -> str | None:
        if self.min_len is not None and length < self.min_len:
            return f"{self._label} must have at least {self.min_len} {self._length_unit}"
        if self.max_len is not None and length > self.max_len:
            return f"{self._label} must have no more than {self.max_len} {self._length_unit}"
        return None


def _check_length(n: Any) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Length must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Length cannot be negative: {n}")


def _check_order(lower: Any, upper: Any, lower_name: str, upper_name: str) -> None:
    if lower is not None and upper is not None and lower > upper:
        raise ValueError(f"{lower_name} ({lower}) cannot exceed {upper_name} ({upper})")
