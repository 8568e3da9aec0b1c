"""
Context manager for validation configuration (e.g., strict objects).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict key checking
_strict_mode: ContextVar[bool] = ContextVar("schemakit_strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict key checking is currently enabled."""
    return _strict_mode.get()


@contextmanager
def validation_context(*, strict: bool = False):
    """
    Context manager for validation configuration.

    Args:
        strict: If True, every object validator rejects input keys it does
               not declare, as if strict() had been called on it.

    Example:
        from schemakit import Schema, validation_context

        user = Schema.object({"name": Schema.string()})

        user.validate({"name": "Ada", "extra": 1})  # Ok, extra ignored

        with validation_context(strict=True):
            user.validate({"name": "Ada", "extra": 1})  # Err
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
