"""
Logical combinators: Or, And, Xor, Not, All, Each.

Or, And, Xor and Not build their failure error once, at construction, from
the introspected shape of every child. The same error object is returned
on every failing call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .core import Validator, introspect, to_validator
from .errors import ANDError, ConfigurationError, NegateError, ORError, XORError
from .flatten import is_error

logger = logging.getLogger(__name__)


def _coerce_all(name: str, validators: tuple[Any, ...]) -> tuple[Validator, ...]:
    if len(validators) < 1:
        raise ConfigurationError(f"{name} requires at least 1 validator")
    return tuple(to_validator(v) for v in validators)


@dataclass(frozen=True, slots=True)
class OrV(Validator):
    """Passes if at least one child passes. Stops at the first pass."""

    validators: tuple[Validator, ...]
    error: ORError = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validators", _coerce_all("Or", self.validators))
        object.__setattr__(self, "error", ORError(introspect(v) for v in self.validators))
        logger.debug("Precomputed ORError over %d validators", len(self.validators))

    def evaluate(self, value: Any, *parents: Any) -> Any:
        for validator in self.validators:
            if not is_error(validator(value, *parents)):
                return None
        return self.error

    def describe(self) -> ORError:
        return self.error


@dataclass(frozen=True, slots=True)
class AndV(Validator):
    """Passes if every child passes. Stops at the first failure."""

    validators: tuple[Validator, ...]
    error: ANDError = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validators", _coerce_all("And", self.validators))
        object.__setattr__(self, "error", ANDError(introspect(v) for v in self.validators))
        logger.debug("Precomputed ANDError over %d validators", len(self.validators))

    def evaluate(self, value: Any, *parents: Any) -> Any:
        for validator in self.validators:
            if is_error(validator(value, *parents)):
                return self.error
        return None

    def describe(self) -> ANDError:
        return self.error


@dataclass(frozen=True, slots=True)
class XorV(Validator):
    """Passes if exactly one child passes. Stops once a second pass is seen."""

    validators: tuple[Validator, ...]
    error: XORError = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validators", _coerce_all("Xor", self.validators))
        object.__setattr__(self, "error", XORError(introspect(v) for v in self.validators))
        logger.debug("Precomputed XORError over %d validators", len(self.validators))

    def evaluate(self, value: Any, *parents: Any) -> Any:
        passes = 0
        for validator in self.validators:
            if not is_error(validator(value, *parents)):
                passes += 1
                if passes == 2:
                    break
        return None if passes == 1 else self.error

    def describe(self) -> XORError:
        return self.error


@dataclass(frozen=True, slots=True)
class NotV(Validator):
    """Passes if the child fails."""

    validator: Validator
    error: NegateError = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validator", to_validator(self.validator))
        object.__setattr__(self, "error", NegateError(introspect(self.validator)))

    def evaluate(self, value: Any, *parents: Any) -> Any:
        return None if is_error(self.validator(value, *parents)) else self.error

    def describe(self) -> NegateError:
        return self.error


@dataclass(frozen=True, slots=True)
class AllV(Validator):
    """
    Like AndV but evaluates every child and reports only the failures.

    Useful when every broken rule should be shown at once, e.g. a password
    strength checklist.
    """

    validators: tuple[Validator, ...]
    shape: ANDError = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validators", _coerce_all("All", self.validators))
        object.__setattr__(self, "shape", ANDError(introspect(v) for v in self.validators))

    def evaluate(self, value: Any, *parents: Any) -> Any:
        errors = [
            error
            for error in (validator(value, *parents) for validator in self.validators)
            if is_error(error)
        ]
        return ANDError(errors) if errors else None

    def describe(self) -> ANDError:
        return self.shape


@dataclass(frozen=True, slots=True)
class EachV(Validator):
    """Evaluates every child and reports the first actual failure as is."""

    validators: tuple[Validator, ...]
    shape: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validators", _coerce_all("Each", self.validators))
        shapes = [introspect(v) for v in self.validators]
        object.__setattr__(self, "shape", shapes[0])

    def evaluate(self, value: Any, *parents: Any) -> Any:
        errors = [
            error
            for error in (validator(value, *parents) for validator in self.validators)
            if is_error(error)
        ]
        return errors[0] if errors else None

    def describe(self) -> Any:
        return self.shape


def Or(*validators: Any) -> OrV:
    """
    Passes if the value passes one or more validators.

    Usage:
        Or(Nullish, String)
        Or(str, int)
    """
    return OrV(validators=validators)


def And(*validators: Any) -> AndV:
    """
    Passes if the value passes every validator.

    The error always lists every clause, not only the one that failed.

    Usage:
        And(String, MinLength(1), MaxLength(255))
    """
    return AndV(validators=validators)


def Xor(*validators: Any) -> XorV:
    """
    Passes if the value passes exactly one validator.

    Usage:
        Xor(Includes("foo"), Includes("bar"))
    """
    return XorV(validators=validators)


def Not(validator: Any) -> NotV:
    """
    Passes if the value does not pass the validator.

    Usage:
        Not(Nullish)
    """
    return NotV(validator=validator)


def All(*validators: Any) -> AllV:
    """
    Passes if the value passes every validator, reporting each failure.

    Usage:
        All(Pattern(r"[A-Z]"), Includes("_"), MinLength(8))
    """
    return AllV(validators=validators)


def Each(*validators: Any) -> EachV:
    """Passes if the value passes every validator, reporting the first failure."""
    return EachV(validators=validators)
