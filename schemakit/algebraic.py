"""
Algebraic validators: unions (choice) and literals (exact value).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .base import Validator
from .types import Ok, ValidationResult

logger = logging.getLogger(__name__)

LiteralValue = str | int | float | bool


@dataclass(frozen=True, slots=True, kw_only=True)
class UnionValidator(Validator[Any]):
    """
    Tries each alternative in order; the first success is returned as is.

    When nothing matches, the alternatives' own errors are discarded in
    favour of a single generic message.
    """

    options: tuple[Validator[Any], ...]

    def __post_init__(self) -> None:
        options = tuple(self.options)
        if not options:
            raise ValueError("Union requires at least one alternative")
        for option in options:
            if not isinstance(option, Validator):
                raise TypeError(f"Union alternatives must be Validators, got {type(option).__name__}")
        object.__setattr__(self, "options", options)

    def _check(self, value: Any) -> ValidationResult[Any]:
        for option in self.options:
            result = option.validate(value)
            if result.is_ok():
                return result

        logger.debug("No union alternative matched among %d option(s)", len(self.options))
        return self._fail("Value does not match any of the allowed types")


@dataclass(frozen=True, slots=True, kw_only=True)
class LiteralValidator(Validator[Any]):
    """Accepts exactly one str, number or bool value (no cross-kind equality)."""

    value: LiteralValue

    def __post_init__(self) -> None:
        if _kind(self.value) is None:
            raise TypeError(f"Literal must be a str, number, or bool, got {type(self.value).__name__}")

    def _check(self, value: Any) -> ValidationResult[Any]:
        if not strict_equals(value, self.value):
            return self._fail(f"Value must be exactly {_render(self.value)}")
        return Ok(value)


def _kind(value: Any) -> str | None:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that never crosses kinds: True != 1 and "1" != 1, but 1 == 1.0."""
    kind = _kind(left)
    return kind is not None and kind == _kind(right) and left == right


def _render(value: LiteralValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
