"""
Structural combinators: Array, Tuple, Object, Merge, Lazy.

Each returns a structural container whose shape mirrors the input, one slot
per element or declared key, so that `list_errors` can build full paths.
Children are called with the current container prepended to the parents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from .core import Validator, introspect, to_validator
from .errors import ConfigurationError, StructDict, StructList
from .flatten import is_error
from .lib.helpers import is_plain_mapping
from .types import OBJECT_ROOT

logger = logging.getLogger(__name__)

EXPECTED_ARRAY = "Expected array"
EXPECTED_OBJECT = "Expected object"
EXTRANEOUS_ELEMENT = "Extraneous element"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True, slots=True)
class ListV(Validator):
    """Validator for list structures with item validation."""

    items: Validator
    error: Any = EXPECTED_ARRAY
    shape: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "items", to_validator(self.items))
        object.__setattr__(self, "shape", introspect(self.items))

    def evaluate(self, value: Any, *parents: Any) -> StructList:
        if not _is_sequence(value):
            # A single root error keeps the return type a structural list
            return StructList([self.error])
        return StructList(self.items(item, value, *parents) for item in value)

    def describe(self) -> StructList:
        return StructList([self.shape])


@dataclass(frozen=True, slots=True)
class TupleV(Validator):
    """Validator for fixed-position list structures."""

    validators: tuple[Validator, ...]
    shapes: tuple[Any, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.validators) < 1:
            raise ConfigurationError("Tuple requires at least 1 validator")
        validators = tuple(to_validator(v) for v in self.validators)
        object.__setattr__(self, "validators", validators)
        object.__setattr__(self, "shapes", tuple(introspect(v) for v in validators))

    def evaluate(self, value: Any, *parents: Any) -> StructList:
        if not _is_sequence(value):
            return self.describe()

        errors = StructList()
        for i in range(max(len(self.validators), len(value))):
            if i >= len(self.validators):
                errors.append(EXTRANEOUS_ELEMENT)
            elif i < len(value):
                errors.append(self.validators[i](value[i], value, *parents))
            else:
                errors.append(self.shapes[i])
        return errors

    def describe(self) -> StructList:
        return StructList(self.shapes)


@dataclass(frozen=True, slots=True)
class DictV(Validator):
    """
    Validator for dict structures with nested field validators.

    The result has one slot per declared key. An object-level error, for
    non-dict input or unknown keys, is reported under OBJECT_ROOT after the
    declared keys.
    """

    validators: dict[Any, Validator]
    allow_unknown: bool = False
    error: Any = EXPECTED_OBJECT
    shapes: dict[Any, Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        validators: dict[Any, Validator] = {}
        for key, v in self.validators.items():
            try:
                validators[key] = to_validator(v)
            except ConfigurationError as e:
                raise ConfigurationError(f"Expected validator for key {key!r}") from e
        object.__setattr__(self, "validators", validators)
        object.__setattr__(
            self, "shapes", {key: introspect(v) for key, v in validators.items()}
        )

    def evaluate(self, value: Any, *parents: Any) -> StructDict:
        members = value if is_plain_mapping(value) else {}
        errors = StructDict(
            (key, validator(members.get(key), value, *parents))
            for key, validator in self.validators.items()
        )
        root = self._root_error(value)
        if root is not None:
            errors[OBJECT_ROOT] = root
        return errors

    def describe(self) -> StructDict:
        shape = StructDict(self.shapes)
        shape[OBJECT_ROOT] = self.error
        return shape

    def _root_error(self, value: Any) -> Any:
        if not is_plain_mapping(value):
            return self.error
        if self.allow_unknown:
            return None
        unknown = [key for key in value if key not in self.validators]
        if unknown:
            return "Unknown properties " + ", ".join(f'"{key}"' for key in unknown)
        return None


def _merge_records(records: Iterable[Any]) -> StructDict:
    merged = StructDict()
    for record in records:
        if not isinstance(record, StructDict):
            raise ConfigurationError(
                f"Merge expected object results, got {type(record).__name__}"
            )
        for key, error in record.items():
            # A passing slot never hides an error from an earlier record
            if key not in merged or is_error(error):
                merged[key] = error
    if OBJECT_ROOT in merged:
        merged[OBJECT_ROOT] = merged.pop(OBJECT_ROOT)
    return merged


@dataclass(frozen=True, slots=True)
class MergeV(Validator):
    """Evaluates several object validators and merges their records."""

    validators: tuple[Validator, ...]
    shape: StructDict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.validators) < 1:
            raise ConfigurationError("Merge requires at least 1 validator")
        validators = tuple(to_validator(v) for v in self.validators)
        object.__setattr__(self, "validators", validators)
        object.__setattr__(
            self, "shape", _merge_records(introspect(v) for v in validators)
        )
        logger.debug("Merged %d object validators into %d slots", len(validators), len(self.shape))

    def evaluate(self, value: Any, *parents: Any) -> StructDict:
        return _merge_records(v(value, *parents) for v in self.validators)

    def describe(self) -> StructDict:
        return StructDict(self.shape)


@dataclass(frozen=True, slots=True)
class LazyV(Validator):
    """
    Forward reference to a validator, resolved at evaluation time.

    Introspection reports `error` without resolving the reference, so a
    schema can refer to itself while it is still being built.
    """

    thunk: Callable[[], Any]
    error: Any = "Invalid"

    def evaluate(self, value: Any, *parents: Any) -> Any:
        return to_validator(self.thunk())(value, *parents)

    def describe(self) -> Any:
        return self.error


def Array(validator: Any, error: Any = EXPECTED_ARRAY) -> ListV:
    """
    Passes if the value is a list and every element passes the validator.

    Usage:
        Array(String)
        Array(Object({"id": Integer}))
    """
    return ListV(items=validator, error=error)


def Tuple(*validators: Any) -> TupleV:
    """
    Passes if the value is a list and each element passes the corresponding
    validator. Elements past the last validator are extraneous.

    Usage:
        Tuple(String, Number)
    """
    return TupleV(validators=validators)


def Object(
    validators: dict[Any, Any], allow_unknown: bool = False, error: Any = EXPECTED_OBJECT
) -> DictV:
    """
    Passes if the value is a dict and every declared key passes its validator.

    Args:
        validators: Mapping of key to validator (or anything `to_validator` accepts)
        allow_unknown: If False (default), keys without a validator are an error
        error: Object-level error for non-dict input

    Usage:
        Object({"name": String, "age": Or(Nullish, Integer)})
    """
    return DictV(validators=validators, allow_unknown=allow_unknown, error=error)


def Merge(*validators: Any) -> MergeV:
    """
    Merge object validators into one.

    Meant for validators built with `allow_unknown=True`, since each one only
    knows its own keys.

    Usage:
        name = Object({"first": String}, allow_unknown=True)
        age = Object({"age": Integer}, allow_unknown=True)
        person = Merge(name, age)
    """
    return MergeV(validators=validators)


def Lazy(thunk: Callable[[], Any], error: Any = "Invalid") -> LazyV:
    """
    Refer to a validator that is defined later, e.g. for recursive schemas.

    Usage:
        node = Object({
            "value": Integer,
            "children": Or(Nullish, Array(Lazy(lambda: node))),
        })
    """
    return LazyV(thunk=thunk, error=error)
