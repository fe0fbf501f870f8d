"""
Flattening of nested error values into (path, error) items.
"""

from typing import Any, Iterable

from .errors import StructDict, StructList, is_erroneous, to_primitive
from .types import ErrItem


def list_errors(error: Any) -> list[ErrItem]:
    """
    List every leaf error in a (possibly nested) error value.

    Performs a depth-first, pre-order walk. Structural records are visited in
    insertion order and structural lists in index order; each member extends
    the path with ".<key>". Anything else that is erroneous is reported at
    the current path, error objects in their primitive form.

    Examples:
        list_errors(None)                                  # []
        list_errors("Expected string")                     # [ErrItem("", "Expected string")]
        list_errors(as_structure({"tags": as_structure([None, "Bad"])}))
        # [ErrItem("tags.1", "Bad")]
    """
    return _list_errors(error, "")


def _list_errors(error: Any, path: str) -> list[ErrItem]:
    members: Iterable[tuple[Any, Any]]
    match error:
        case StructDict():
            members = error.items()
        case StructList():
            members = enumerate(error)
        case _:
            if is_erroneous(error):
                return [ErrItem(path, to_primitive(error))]
            return []

    items: list[ErrItem] = []
    for key, value in members:
        segment = str(key)
        items.extend(_list_errors(value, f"{path}.{segment}" if path else segment))
    return items


def is_error(error: Any) -> bool:
    """Check if an error value contains at least one leaf error."""
    return len(list_errors(error)) > 0


# Some validators return one error, some return many
has_error = is_error
