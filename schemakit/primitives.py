"""
Primitive validators: string, number, boolean and date.

Primitives fail fast: the first violated rule determines the single error.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timezone
from typing import Any, ClassVar

from pydantic import TypeAdapter

from .base import LengthConstrainedValidator, RangeConstrainedValidator, Validator
from .types import Ok, ValidationResult

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^https?://.+")

_DATETIME = TypeAdapter(datetime)


@dataclass(frozen=True, slots=True, kw_only=True)
class StringValidator(LengthConstrainedValidator[str]):
    """Accepts str, with optional length bounds and a regex pattern."""

    regex: re.Pattern[str] | None = None

    def _check(self, value: Any) -> ValidationResult[str]:
        if not isinstance(value, str):
            return self._fail("Value must be a string")

        length_error = self._length_error(len(value))
        if length_error:
            return self._fail(length_error)

        if self.regex is not None and self.regex.search(value) is None:
            return self._fail("Value does not match the required pattern")

        return Ok(value)

    def pattern(self, regex: str | re.Pattern[str]) -> StringValidator:
        """
        Require a regex match anywhere in the string (anchor it for a full match).

        Usage:
            Schema.string().pattern(r"^[a-z]+$")
        """
        if isinstance(regex, str):
            regex = re.compile(regex)
        elif not isinstance(regex, re.Pattern):
            raise TypeError(f"Pattern must be a str or re.Pattern, got {type(regex).__name__}")
        return replace(self, regex=regex)

    def email(self) -> StringValidator:
        return replace(self, regex=EMAIL_PATTERN, message="Must be a valid email address")

    def url(self) -> StringValidator:
        return replace(self, regex=URL_PATTERN, message="Must be a valid URL")


@dataclass(frozen=True, slots=True, kw_only=True)
class NumberValidator(RangeConstrainedValidator[float]):
    """
    Accepts int or float (never bool, never NaN).

    Constraints run in a fixed order: range, integer, positive.
    """

    require_integer: bool = False
    require_positive: bool = False

    def _check(self, value: Any) -> ValidationResult[float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or _is_nan(value):
            return self._fail("Value must be a number")

        range_error = self._range_error(value)
        if range_error:
            return self._fail(range_error)

        if self.require_integer and not (isinstance(value, int) or value.is_integer()):
            return self._fail("Number must be an integer")

        if self.require_positive and value <= 0:
            return self._fail("Number must be positive")

        return Ok(value)

    def integer(self) -> NumberValidator:
        return replace(self, require_integer=True)

    def positive(self) -> NumberValidator:
        return replace(self, require_positive=True)


@dataclass(frozen=True, slots=True, kw_only=True)
class BooleanValidator(Validator[bool]):
    def _check(self, value: Any) -> ValidationResult[bool]:
        if not isinstance(value, bool):
            return self._fail("Value must be a boolean")
        return Ok(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class DateValidator(RangeConstrainedValidator[datetime]):
    """
    Accepts datetime, date, ISO 8601 strings and Unix timestamps.

    Strings are parsed with pydantic's lax datetime parsing; numbers are
    Unix time in milliseconds.
    Results are always timezone-aware; naive values are taken as UTC.
    """

    _label: ClassVar[str] = "Date"

    def _check(self, value: Any) -> ValidationResult[datetime]:
        if not _is_date_like(value):
            return self._fail("Value must be a Date, string, or number")

        try:
            parsed = to_datetime(value)
        except ValueError:
            return self._fail("Value must be a valid date")

        range_error = self._range_error(parsed)
        if range_error:
            return self._fail(range_error)

        return Ok(parsed)

    def _coerce_bound(self, value: Any) -> datetime:
        if not _is_date_like(value):
            raise TypeError(f"Date bound must be a date, string, or number, got {type(value).__name__}")
        return to_datetime(value)

    def _range_error(self, value: datetime) -> str | None:
        if self.minimum is not None and value < self.minimum:
            return f"Date must be after {format_iso(self.minimum)}"
        if self.maximum is not None and value > self.maximum:
            return f"Date must be before {format_iso(self.maximum)}"
        return None

    def future(self) -> DateValidator:
        return replace(
            self,
            minimum=datetime.now(timezone.utc),
            message="Date must be in the future",
        )

    def past(self) -> DateValidator:
        return replace(
            self,
            maximum=datetime.now(timezone.utc),
            message="Date must be in the past",
        )


def _is_nan(value: int | float) -> bool:
    # math.isnan overflows on very large ints
    return isinstance(value, float) and math.isnan(value)


def _is_date_like(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (date, str, int, float))


def to_datetime(value: datetime | date | str | float) -> datetime:
    """
    Convert a date-like value to an aware datetime.

    Numbers are Unix time in milliseconds. Strings go through pydantic's lax
    datetime parsing; naive results are taken as UTC.

    Raises:
        ValueError: if a string or number does not describe a valid date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    elif isinstance(value, str):
        # pydantic's ValidationError is a ValueError
        parsed = _DATETIME.validate_python(value)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
    else:
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Timestamp out of range: {value}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_iso(value: datetime) -> str:
    """Render as UTC with millisecond precision, e.g. 2023-01-01T00:00:00.000Z."""
    utc = value.astimezone(timezone.utc)
    return f"{utc.year:04d}-{utc:%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"
