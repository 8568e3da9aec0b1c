"""
Composite validators: arrays and objects.

Composites never stop at the first failing child. Every item or field is
validated and all child errors are reported together, each prefixed with
its locator.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, ClassVar

from .base import LengthConstrainedValidator, Validator
from .context import is_strict
from .types import Err, Ok, ValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ArrayValidator(LengthConstrainedValidator[list]):
    """Validator for list/tuple structures with homogeneous item validation."""

    _label: ClassVar[str] = "Array"
    _length_unit: ClassVar[str] = "items"

    item: Validator[Any]

    def __post_init__(self) -> None:
        if not isinstance(self.item, Validator):
            raise TypeError(f"Array item must be a Validator, got {type(self.item).__name__}")

    def _check(self, value: Any) -> ValidationResult[list]:
        if not isinstance(value, (list, tuple)):
            return self._fail("Value must be an array")

        length_error = self._length_error(len(value))
        if length_error:
            return self._fail(length_error)

        items: list[Any] = []
        errors: list[str] = []

        for i, element in enumerate(value):
            result = self.item.validate(element)
            if result.is_ok():
                items.append(result.data)
            else:
                errors.extend(f"Item at index {i}: {err}" for err in result.errors)

        return Err(errors) if errors else Ok(items)

    def non_empty(self) -> ArrayValidator:
        return replace(self, min_len=1, message="Array cannot be empty")


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectValidator(Validator[dict]):
    """
    Validator for mapping structures with per-field validators.

    Keys the shape does not declare are ignored unless strict key checking
    is on (strict() or validation_context(strict=True)), in which case they
    are rejected before any field is validated.
    """

    shape: Mapping[str, Validator[Any]]
    strict_keys: bool = False

    def __post_init__(self) -> None:
        for key, validator in self.shape.items():
            if not isinstance(key, str):
                raise TypeError(f"Field names must be str, got {type(key).__name__}")
            if not isinstance(validator, Validator):
                raise TypeError(
                    f"Field '{key}' must be a Validator, got {type(validator).__name__}"
                )
        object.__setattr__(self, "shape", MappingProxyType(dict(self.shape)))

    def _check(self, value: Any) -> ValidationResult[dict]:
        if not isinstance(value, Mapping):
            return self._fail("Value must be an object")

        if self.strict_keys or is_strict():
            unexpected = [key for key in value if key not in self.shape]
            if unexpected:
                logger.debug("Rejected unexpected keys: %s", unexpected)
                return self._fail("Object contains unexpected properties")

        validated: dict[str, Any] = {}
        errors: list[str] = []

        for key, validator in self.shape.items():
            result = validator.validate(value.get(key))
            if result.is_ok():
                # Absent optional fields are omitted rather than set to None
                if result.data is not None:
                    validated[key] = result.data
            else:
                errors.extend(f"Field '{key}': {err}" for err in result.errors)

        if errors:
            logger.debug("Object validation failed with %d error(s)", len(errors))
            return Err(errors)
        return Ok(validated)

    def strict(self) -> ObjectValidator:
        """Return new validator that rejects keys not declared in the shape."""
        return replace(self, strict_keys=True)

    def to_pydantic(self, name: str) -> type:
        """Compile this object validator into a Pydantic model."""
        from .schema import to_pydantic

        return to_pydantic(name, self)
