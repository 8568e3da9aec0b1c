"""
Exceptions raised by schemakit.

Validation failures are normally returned as Err values; this exception is
only raised when a caller explicitly asks for the data (parse/unwrap).
"""

from __future__ import annotations

from typing import Iterable


class SchemaValidationError(ValueError):
    """Raised by parse()/unwrap() when a value fails validation."""

    def __init__(self, errors: Iterable[str]):
        self.errors: tuple[str, ...] = tuple(errors)
        super().__init__("; ".join(self.errors))
