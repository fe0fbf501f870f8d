"""
Error model for okcomputer.

Validation failures are plain data: leaf values (usually strings), the
error objects defined here, and structural containers whose members are
themselves results. Exceptions are reserved for configuration mistakes
and for the assertion layer.
"""

from __future__ import annotations

from typing import Any, Iterable

from .lib.helpers import is_pending, is_primitive, lower_first
from .types import ErrItem

# =============================================================================
# Exceptions
# =============================================================================


class OkComputerError(Exception):
    """Base class for all okcomputer exceptions."""


class ConfigurationError(OkComputerError):
    """A combinator was built or used incorrectly (a programmer error)."""


class IntrospectionError(ConfigurationError):
    """A validator did not report an error when asked for its failure shape."""


class ValidationError(OkComputerError, ValueError):
    """
    Raised by `assert_valid` when a value has errors.

    Attributes:
        errors: The flattened list of ErrItem
        value: The offending value, only set when value logging is enabled
    """

    def __init__(self, errors: list[ErrItem], message: str, value: Any = None):
        super().__init__(message)
        self.errors = errors
        self.value = value


# =============================================================================
# Structural containers
# =============================================================================


class StructDict(dict):
    """A record of child results, recursed into when listing errors."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"StructDict({dict.__repr__(self)})"


class StructList(list):
    """An ordered list of child results, recursed into when listing errors."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"StructList({list.__repr__(self)})"


def as_structure(container: Any) -> StructDict | StructList:
    """
    Tag a dict or list as a structural container.

    Structural input is returned unchanged; dicts become StructDict and
    lists or tuples become StructList.

    Raises:
        ConfigurationError: If `container` is None or not a dict/list
    """
    if isinstance(container, (StructDict, StructList)):
        return container
    if isinstance(container, dict):
        return StructDict(container)
    if isinstance(container, (list, tuple)):
        return StructList(container)
    if container is None:
        raise ConfigurationError("Expected object, got None")
    raise ConfigurationError(
        f"Expected dict or list, got {type(container).__name__}"
    )


def is_structure(value: Any) -> bool:
    return isinstance(value, (StructDict, StructList))


def is_erroneous(value: Any) -> bool:
    """
    Check if a single result is an error, without looking inside it.

    Everything except None and asynchronous placeholders is an error; use
    `list_errors` / `is_error` to account for structural containers.
    """
    return value is not None and not is_pending(value)


# =============================================================================
# Error objects
# =============================================================================


def is_error_object(value: Any) -> bool:
    """Check if a value can render itself with `to_primitive_error()`."""
    return callable(getattr(value, "to_primitive_error", None))


def to_primitive(value: Any) -> Any:
    """Render error objects to their primitive form, pass anything else."""
    return value.to_primitive_error() if is_error_object(value) else value


class ErrorObject:
    """
    Immutable base for composite error values.

    Subclasses declare their slots and `_fields()`; equality compares the
    concrete type and those fields.
    """

    __slots__ = ()

    @property
    def type(self) -> str:
        return type(self).__name__

    def _fields(self) -> tuple:
        raise NotImplementedError

    def to_primitive_error(self) -> Any:
        raise NotImplementedError

    def to_json(self) -> Any:
        return self.to_primitive_error()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        primitive = self.to_primitive_error()
        return primitive if isinstance(primitive, str) else f"<{self.type}>"


class LogicalOperatorError(ErrorObject):
    """
    Aggregate error produced by the logical combinators.

    Renders to "(A or b or c)" style strings when every child is primitive.
    """

    __slots__ = ("operator", "errors")

    def __init__(self, operator: str, errors: Iterable[Any]):
        errors = tuple(errors)
        if len(errors) < 1:
            raise ConfigurationError(f"Expected at least 1 error: {operator}")
        object.__setattr__(self, "operator", operator)
        object.__setattr__(self, "errors", errors)

    @property
    def type(self) -> str:
        return f"{self.operator}Error"

    def _fields(self) -> tuple:
        return (self.operator, self.errors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.operator!r}, {list(self.errors)!r})"

    def to_primitive_error(self) -> str | dict[str, Any]:
        primitives = [to_primitive(err) for err in self.errors]
        if all(is_primitive(err) for err in primitives):
            text = f" {self.operator.lower()} ".join(
                lower_first(err) if i and isinstance(err, str) else str(err)
                for i, err in enumerate(primitives)
            )
            return f"({text})" if len(primitives) > 1 else text
        return {
            "type": self.type,
            "operator": self.operator,
            "errors": list(self.errors),
        }


class ORError(LogicalOperatorError):
    __slots__ = ()

    def __init__(self, errors: Iterable[Any]):
        super().__init__("OR", errors)

    def __repr__(self) -> str:
        return f"ORError({list(self.errors)!r})"


class ANDError(LogicalOperatorError):
    __slots__ = ()

    def __init__(self, errors: Iterable[Any]):
        super().__init__("AND", errors)

    def __repr__(self) -> str:
        return f"ANDError({list(self.errors)!r})"


class XORError(LogicalOperatorError):
    __slots__ = ()

    def __init__(self, errors: Iterable[Any]):
        super().__init__("XOR", errors)

    def __repr__(self) -> str:
        return f"XORError({list(self.errors)!r})"


class PeerError(ErrorObject):
    """A child failure evaluated against the sibling field `key`."""

    __slots__ = ("key", "error")

    def __init__(self, key: str, error: Any):
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "error", error)

    def _fields(self) -> tuple:
        return (self.key, self.error)

    def __repr__(self) -> str:
        return f"PeerError({self.key!r}, {self.error!r})"

    def to_primitive_error(self) -> str | dict[str, Any]:
        primitive = to_primitive(self.error)
        if isinstance(primitive, str):
            return f'Peer "{self.key}" {lower_first(primitive)}'
        return {"type": self.type, "key": self.key, "error": self.error}


class NegateError(ErrorObject):
    """
    Failure of `Not`.

    Wraps the introspected shape of the negated validator, since a negated
    success has no real error to report.
    """

    __slots__ = ("error",)

    def __init__(self, error: Any):
        object.__setattr__(self, "error", error)

    def _fields(self) -> tuple:
        return (self.error,)

    def __repr__(self) -> str:
        return f"NegateError({self.error!r})"

    def to_primitive_error(self) -> str | dict[str, Any]:
        primitive = to_primitive(self.error)
        if isinstance(primitive, str):
            return f'not("{primitive}")'
        return {"type": self.type, "error": self.error}
