"""
Built-in validators for okcomputer.

Constants are ready-made V instances; factories return validators composed
from the core combinators.
"""

from __future__ import annotations

import math
import re
from typing import Any, get_args

from .core import V, WithErr, WithErrV
from .logical import And, Not, Or


def _type_name(t: Any) -> str:
    return getattr(t, "__name__", None) or str(t)


def _admits_bool(t: Any) -> bool:
    return any(arg in (bool, object) for arg in (get_args(t) or (t,)))


def Is(expected: Any) -> V:
    """
    Validate the value is `expected` (same type and equal).

    Usage:
        Is("active")
        Is(None)
    """

    def check(x: Any) -> bool:
        return x is expected or (type(x) is type(expected) and x == expected)

    return V(check=check, error=f"Expected {expected}")


def IsType(t: Any) -> V:
    """
    Validate that value is an instance of type.

    Booleans are rejected unless `t` names bool, so IsType(int) does not
    accept True.

    Usage:
        IsType(str)
        IsType(int | float)
    """
    admits_bool = _admits_bool(t)

    def check(x: Any) -> bool:
        return isinstance(x, t) and (admits_bool or not isinstance(x, bool))

    return V(check=check, error=f"Expected {_type_name(t)}")


def InstanceOf(cls: type) -> V:
    """Validate that value is an instance of a class (no bool special case)."""

    def check(x: Any) -> bool:
        return isinstance(x, cls)

    return V(check=check, error=f"Expected instance of {cls.__name__}")


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _is_integer(x: Any) -> bool:
    if isinstance(x, float):
        return x.is_integer()
    return _is_number(x)


String = V(check=lambda x: isinstance(x, str), error="Expected string")
Number = V(check=_is_number, error="Expected number")
Boolean = V(check=lambda x: isinstance(x, bool), error="Expected boolean")
Integer = V(check=_is_integer, error="Expected integer")
Finite = V(check=lambda x: _is_number(x) and math.isfinite(x), error="Expected finite number")
IsCallable = V(check=callable, error="Expected function")
AnyArray = V(check=lambda x: isinstance(x, (list, tuple)), error="Expected array")
Nullish = V(check=lambda x: x is None, error="Expected nullish")
# Not(Nullish) under a name that reads well in peer rules and assertions
Exists = Not(Nullish)
Truthy = V(check=bool, error="Expected truthy value")
Falsy = V(check=lambda x: not x, error="Expected falsy value")


def MinLength(n: int) -> WithErrV:
    """Validate a string or list has at least `n` items."""
    return WithErr(
        And(Or(String, AnyArray), V(check=lambda x: len(x) >= n)),
        f"Expected min length {n}",
    )


def MaxLength(n: int) -> WithErrV:
    """Validate a string or list has at most `n` items."""
    return WithErr(
        And(Or(String, AnyArray), V(check=lambda x: len(x) <= n)),
        f"Expected max length {n}",
    )


def Length(lower: int, upper: int | None = None) -> WithErrV:
    """
    Validate length is within range (inclusive).

    Usage:
        Length(3)       # exactly 3
        Length(3, 5)    # 3 to 5
    """
    if upper is None:
        upper = lower
    msg = (
        f"Expected length {lower}"
        if lower == upper
        else f"Expected length between {lower} and {upper}"
    )
    return WithErr(And(MinLength(lower), MaxLength(upper)), msg)


def Min(num: Any) -> WithErrV:
    """Validate a number is >= `num`."""
    return WithErr(And(Number, V(check=lambda x: x >= num)), f"Expected min {num}")


def Max(num: Any) -> WithErrV:
    """Validate a number is <= `num`."""
    return WithErr(And(Number, V(check=lambda x: x <= num)), f"Expected max {num}")


def Includes(item: Any) -> WithErrV:
    """
    Validate a string contains a substring, or a list contains an item.

    Usage:
        Includes("_")
        Includes(3)
    """

    def check(x: Any) -> bool:
        if isinstance(x, str):
            return isinstance(item, str) and item in x
        return item in x

    return WithErr(And(Or(AnyArray, String), V(check=check)), f"Expected to include {item}")


def Pattern(pattern: str | re.Pattern, flags: int = 0) -> WithErrV:
    """
    Validate string contains a match for a regex pattern.

    Usage:
        Pattern(r"^[a-z]+$")
        Pattern(re.compile(r"\\d{3}-\\d{4}"))
    """
    compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern

    def check(x: Any) -> bool:
        return compiled.search(x) is not None

    return WithErr(
        And(String, V(check=check)), f"Expected to match pattern {compiled.pattern}"
    )


def OneOf(*allowed: Any) -> WithErrV:
    """
    Validate value is one of the allowed values.

    Usage:
        OneOf("active", "inactive", "pending")
    """
    return WithErr(
        Or(*(Is(value) for value in allowed)),
        f"Expected one of {', '.join(str(value) for value in allowed)}",
    )


EMAIL_PATTERN = re.compile(
    r"""^(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"""
    r"""|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")"""
    r"""@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"""
    r"""|\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?"""
    r"""|[a-z0-9-]*[a-z0-9]:(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])$""",
    re.IGNORECASE,
)

Email = WithErr(Pattern(EMAIL_PATTERN), "Expected email")
