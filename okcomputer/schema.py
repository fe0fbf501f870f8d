"""
Schema operations for okcomputer.

Provides validate() and the pydantic-backed serialization of error lists.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from .core import to_validator
from .errors import is_error_object
from .flatten import list_errors
from .lib.helpers import is_primitive
from .types import ErrItem

_ANY = TypeAdapter(Any)
_ERR_ITEMS = TypeAdapter(list[ErrItem])


def _fallback(value: Any) -> Any:
    """Serialize values pydantic does not know, error objects first."""
    if is_error_object(value):
        return value.to_primitive_error()
    return repr(value)


def validate(value: Any, schema: Any) -> list[ErrItem]:
    """
    Validate a value against a schema.

    Args:
        value: The value to validate
        schema: A validator, or anything `to_validator` accepts

    Returns:
        The flattened errors, empty if validation passes

    Usage:
        schema = {
            "name": String,
            "email": Or(Nullish, Email),
            "tags": [str],
        }
        errors = validate({"name": "Alice", "tags": ["a", 1]}, schema)
        # [ErrItem(path="tags.1", err="Expected str")]
    """
    return list_errors(to_validator(schema)(value))


def render_error(err: Any) -> str:
    """Render a single error as text: primitives as is, anything else as JSON."""
    if is_primitive(err):
        return str(err)
    return _ANY.dump_json(err, fallback=_fallback).decode()


def dump_errors(error: Any) -> list[dict[str, Any]]:
    """
    Flatten an error value into JSON-ready dicts.

    Usage:
        dump_errors(Object({"name": String})({}))
        # [{"path": "name", "err": "Expected string"}]
    """
    return _ERR_ITEMS.dump_python(list_errors(error), mode="json", fallback=_fallback)


def dump_errors_json(error: Any, indent: int | None = None) -> str:
    """Flatten an error value into a JSON array of {path, err} objects."""
    return _ERR_ITEMS.dump_json(
        list_errors(error), indent=indent, fallback=_fallback
    ).decode()
