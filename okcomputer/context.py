"""
Context manager for validation configuration (e.g., value logging).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for including the offending value in assertion failures
_log_value: ContextVar[bool] = ContextVar("log_value", default=False)


def is_logging_values() -> bool:
    """Check if value logging is currently enabled."""
    return _log_value.get()


@contextmanager
def validation_context(*, log_value: bool = False):
    """
    Context manager for validation configuration.

    Args:
        log_value: If True, `assert_valid` includes the rejected value in the
                   ValidationError message and exposes it as `error.value`.
                   Off by default since values may hold credentials or PII.

    Example:
        from okcomputer import Object, String, assert_valid, validation_context

        user = Object({"name": String})

        # Normal: message only describes the first error
        assert_valid({"name": 1}, user)
        # ValidationError: Invalid: first of 1 errors: name: Expected string

        # Logging: message also carries the value
        with validation_context(log_value=True):
            assert_valid({"name": 1}, user)
        # ValidationError: Invalid: first of 1 errors: name: Expected string (value: {'name': 1})
    """
    token = _log_value.set(log_value)
    try:
        yield
    finally:
        _log_value.reset(token)
