"""
Core validator classes for okcomputer.

Every validator is a callable `(value, *parents) -> error | None`. Classes
derived from `Validator` split that into two methods:

    evaluate(value, *parents)   validate real data
    describe()                  report the failure shape without any data

Plain functions can take part too: they are asked for their failure shape
by being called with the INTROSPECT sentinel.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field, replace
from typing import Any, Callable

from .errors import ConfigurationError, IntrospectionError
from .flatten import is_error
from .types import INTROSPECT, CheckFn, ValidatorFn


class Validator:
    """
    Base class for validator nodes.

    Subclasses implement `evaluate` and `describe`. Calling a validator with
    INTROSPECT returns `describe()`, which keeps plain-function validators
    and class-based ones interchangeable.

    Operators compose validators:
        a & b   And(a, b)
        a | b   Or(a, b)
        a ^ b   Xor(a, b)
        ~a      Not(a)
    """

    __slots__ = ()

    def __call__(self, value: Any, *parents: Any) -> Any:
        if value is INTROSPECT:
            return self.describe()
        return self.evaluate(value, *parents)

    def evaluate(self, value: Any, *parents: Any) -> Any:
        raise NotImplementedError

    def describe(self) -> Any:
        raise NotImplementedError

    # Import combinators here to avoid circular dependency
    def __and__(self, other: Any) -> Validator:
        from .logical import And

        return And(self, other)

    def __rand__(self, other: Any) -> Validator:
        """Support `str & Min(1)` where the type comes first."""
        from .logical import And

        return And(other, self)

    def __or__(self, other: Any) -> Validator:
        from .logical import Or

        return Or(self, other)

    def __ror__(self, other: Any) -> Validator:
        from .logical import Or

        return Or(other, self)

    def __xor__(self, other: Any) -> Validator:
        from .logical import Xor

        return Xor(self, other)

    def __rxor__(self, other: Any) -> Validator:
        from .logical import Xor

        return Xor(other, self)

    def __invert__(self) -> Validator:
        from .logical import Not

        return Not(self)


def introspect(validator: Validator | ValidatorFn) -> Any:
    """
    Return a validator's failure shape.

    Raises:
        IntrospectionError: If the validator does not report an error
    """
    if isinstance(validator, Validator):
        error = validator.describe()
    else:
        error = validator(INTROSPECT)
    if not is_error(error):
        raise IntrospectionError(f"Validator introspection failed: {validator!r}")
    return error


@dataclass(frozen=True, slots=True)
class V(Validator):
    """
    Immutable predicate validator.

    The fundamental building block. Returns `error` when `check` fails.
    `check` receives the value alone, or the value followed by the parent
    containers when `pass_parents` is set.

    Usage:
        V(lambda x: x > 0, "Must be positive")
        V(lambda x, parent=None: parent is not None, "Missing parent", pass_parents=True)
    """

    check: CheckFn
    error: Any = "Invalid"
    pass_parents: bool = False

    def evaluate(self, value: Any, *parents: Any) -> Any:
        passed = self.check(value, *parents) if self.pass_parents else self.check(value)
        return None if passed else self.error

    def describe(self) -> Any:
        return self.error

    def with_message(self, msg: Any) -> V:
        """Return new validator with a different error value."""
        return replace(self, error=msg)


def create(predicate: CheckFn, *, pass_parents: bool = False) -> Callable[[Any], V]:
    """
    Curried predicate factory: `create(predicate)(error)`.

    Usage:
        positive = create(lambda x: x > 0)
        Positive = positive("Expected positive number")
    """

    def with_error(error: Any = "Invalid") -> V:
        return V(check=predicate, error=error, pass_parents=pass_parents)

    return with_error


@dataclass(frozen=True, slots=True)
class Fn(Validator):
    """Adapter for plain `(value, *parents) -> error | None` functions."""

    fn: ValidatorFn

    def evaluate(self, value: Any, *parents: Any) -> Any:
        return self.fn(value, *parents)

    def describe(self) -> Any:
        return self.fn(INTROSPECT)


@dataclass(frozen=True, slots=True)
class WithErrV(Validator):
    """Replace whatever a validator reports with a single error value."""

    validator: Validator
    error: Any

    def __post_init__(self):
        object.__setattr__(self, "validator", to_validator(self.validator))

    def evaluate(self, value: Any, *parents: Any) -> Any:
        return self.error if is_error(self.validator(value, *parents)) else None

    def describe(self) -> Any:
        return self.error


def WithErr(validator: Any, error: Any) -> WithErrV:
    """
    Override the error a validator reports.

    Usage:
        WithErr(Or(Nullish, String), "Expected nullish or string")
    """
    return WithErrV(validator=validator, error=error)


@dataclass(frozen=True, slots=True)
class WhenV(Validator):
    """Run `validator` only when `predicate(value, *parents)` holds."""

    predicate: Callable[..., bool]
    validator: Validator
    shape: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validator", to_validator(self.validator))
        object.__setattr__(self, "shape", introspect(self.validator))

    def evaluate(self, value: Any, *parents: Any) -> Any:
        if not self.predicate(value, *parents):
            return None
        return self.validator(value, *parents)

    def describe(self) -> Any:
        return self.shape


def When(predicate: Callable[..., bool]) -> Callable[[Any], WhenV]:
    """
    Conditionally apply a validator.

    Usage:
        When(lambda value, parent=None: parent and parent.get("type") == "email")(Email)
    """

    def wrap(validator: Any) -> WhenV:
        return WhenV(predicate=predicate, validator=validator)

    return wrap


def to_validator(v: Any) -> Validator:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        type | UnionType -> IsType (isinstance check)
        dict -> Object with recursive conversion
        list -> Array with item validator from list[0]
        list of several -> Array of Or over the items
        Callable -> Fn (plain `(value, *parents) -> error` function)
    """
    # Import factories here to avoid circular dependency
    from .structural import Array, Object
    from .validators import IsType

    if isinstance(v, Validator):
        return v

    if isinstance(v, (type, types.UnionType)):
        return IsType(v)

    if isinstance(v, dict):
        return Object(v)

    if isinstance(v, list):
        if len(v) == 0:
            raise ConfigurationError("Empty list cannot be converted to validator")
        if len(v) == 1:
            return Array(v[0])
        from .logical import Or

        return Array(Or(*v))

    if callable(v):
        return Fn(v)

    raise ConfigurationError(f"Cannot convert {type(v).__name__} to validator")
