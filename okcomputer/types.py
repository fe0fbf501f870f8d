"""
Type definitions for okcomputer.

Provides the reserved sentinels, the flattened error item and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class Sentinel(Enum):
    """
    Reserved values that never collide with user data.

    INTROSPECT: passed as the value under test, forces a validator to report
        its failure shape instead of evaluating real data.
    OBJECT_ROOT: key of the object-level slot in an object error record.
    """

    INTROSPECT = "introspect"
    OBJECT_ROOT = "__root__"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.name


INTROSPECT = Sentinel.INTROSPECT
OBJECT_ROOT = Sentinel.OBJECT_ROOT


@dataclass(frozen=True, slots=True)
class ErrItem:
    """A single leaf error and the dot-joined path that leads to it."""

    path: str
    err: Any


@dataclass(frozen=True, slots=True)
class FailureDetails:
    """Passed to an `assert_valid` error factory."""

    error: Any
    error_list: list[ErrItem]


# Type aliases
CheckFn = Callable[..., bool]
ValidatorFn = Callable[..., Any]
