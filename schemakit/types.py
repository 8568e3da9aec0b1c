"""
Type definitions for schemakit.

Provides the Result type (Ok/Err) returned by every validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .exceptions import SchemaValidationError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing the validated (possibly converted) value."""

    data: T

    @property
    def success(self) -> bool:
        return True

    @property
    def errors(self) -> tuple[str, ...]:
        return ()

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True, slots=True)
class Err:
    """Failure result carrying one or more human-readable error messages."""

    errors: tuple[str, ...]

    def __init__(self, errors: Any) -> None:
        if isinstance(errors, str):
            errors = (errors,)
        errors = tuple(errors)
        if not errors:
            raise ValueError("Err requires at least one error message")
        object.__setattr__(self, "errors", errors)

    @property
    def success(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise SchemaValidationError(self.errors)


ValidationResult = Union[Ok[T], Err]
