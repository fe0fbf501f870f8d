"""
Assertion layer: turn error values into exceptions or booleans.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .context import is_logging_values
from .core import to_validator
from .errors import ConfigurationError, ValidationError
from .flatten import is_error, list_errors
from .schema import render_error
from .types import ErrItem, FailureDetails

logger = logging.getLogger(__name__)

OnError = bool | str | BaseException | Callable[[FailureDetails], Any] | None


def _failure_message(error_list: list[ErrItem], value: Any, log_value: bool) -> str:
    first = error_list[0]
    parts = [
        f"Invalid: first of {len(error_list)} errors",
        first.path,
        render_error(first.err),
    ]
    message = ": ".join(part for part in parts if part)
    if log_value:
        message = f"{message} (value: {value!r})"
    return message


def assert_valid(value: Any, validator: Any, on_error: OnError = None) -> None:
    """
    Raise if the value does not pass the validator.

    Args:
        value: The value to validate
        validator: A validator, or anything `to_validator` accepts
        on_error: How to fail:
            None  -> ValidationError describing the first error
            True  -> same, with the value included in the message
            str   -> ValidationError with this message
            exception instance -> raised as is
            callable -> called with FailureDetails; a returned string becomes
                a ValidationError message, anything else is raised

    Raises:
        ValidationError: If the value has errors (by default)

    Usage:
        assert_valid(request.body, user_schema)
        assert_valid(data, user_schema, "Invalid user")
        assert_valid(data, user_schema, lambda d: ApiError(400, d.error))
    """
    error = to_validator(validator)(value)
    error_list = list_errors(error)
    if not error_list:
        return

    logger.debug(
        "Validation failed with %d errors, first at %r", len(error_list), error_list[0].path
    )

    if on_error is None or on_error is True:
        log_value = on_error is True or is_logging_values()
        raise ValidationError(
            error_list,
            _failure_message(error_list, value, log_value),
            value if log_value else None,
        )
    if isinstance(on_error, str):
        raise ValidationError(error_list, on_error)
    if isinstance(on_error, BaseException):
        raise on_error
    if callable(on_error):
        result = on_error(FailureDetails(error=error, error_list=error_list))
        if isinstance(result, str):
            raise ValidationError(error_list, result)
        raise result
    raise ConfigurationError(f"Unsupported on_error: {type(on_error).__name__}")


def okay(value: Any, validator: Any) -> bool:
    """
    Check if the value passes the validator.

    Usage:
        if okay(payload, user_schema):
            save(payload)
    """
    return not is_error(to_validator(validator)(value))
