"""
Helper functions shared by the error model and the combinators.
"""

from collections.abc import Mapping
from inspect import isawaitable
from typing import Any

PRIMITIVE_TYPES = (str, int, float, complex, bool, bytes)


def lower_first(text: str) -> str:
    """Lower-case the first character of a string."""
    return text[:1].lower() + text[1:]


def is_primitive(value: Any) -> bool:
    """Check if a value is a scalar that renders meaningfully with str()."""
    return value is None or isinstance(value, PRIMITIVE_TYPES)


def is_pending(value: Any) -> bool:
    """
    Check if a value is an asynchronous placeholder.

    Awaitables are reserved for asynchronous validation and are never
    reported as errors.
    """
    return isawaitable(value)


def is_plain_mapping(value: Any) -> bool:
    """Check if a value is a dict-like key/value container."""
    return isinstance(value, dict)


def lookup(container: Any, key: Any) -> Any:
    """Read `key` from a mapping; anything else yields None."""
    if isinstance(container, Mapping):
        return container.get(key)
    return None
