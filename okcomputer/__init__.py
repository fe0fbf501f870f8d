"""
OK Computer - composable validators that return errors as data.

Usage:
    from okcomputer import Object, Or, Nullish, String, Email, assert_valid

    user = Object({
        "name": String,
        "email": Or(Nullish, Email),
        "tags": [str],
    })

    errors = validate(data, user)
    assert_valid(data, user)
"""

from .assertion import assert_valid, okay
from .context import validation_context
from .core import V, Fn, Validator, When, WithErr, create, introspect, to_validator
from .errors import (
    ANDError,
    ConfigurationError,
    IntrospectionError,
    NegateError,
    OkComputerError,
    ORError,
    PeerError,
    StructDict,
    StructList,
    ValidationError,
    XORError,
    as_structure,
    is_erroneous,
    is_error_object,
    is_structure,
)
from .flatten import has_error, is_error, list_errors
from .logical import All, And, Each, Not, Or, Xor
from .peers import (
    AndPeer,
    AndPeers,
    Match,
    NandPeer,
    NandPeers,
    OrPeer,
    OrPeers,
    OxorPeer,
    OxorPeers,
    Peer,
    XorPeer,
    XorPeers,
)
from .schema import dump_errors, dump_errors_json, validate
from .structural import Array, Lazy, Merge, Object, Tuple
from .types import INTROSPECT, OBJECT_ROOT, ErrItem, FailureDetails
from .validators import (
    AnyArray,
    Boolean,
    Email,
    Exists,
    Falsy,
    Finite,
    Includes,
    InstanceOf,
    Integer,
    Is,
    IsCallable,
    IsType,
    Length,
    Max,
    MaxLength,
    Min,
    MinLength,
    Nullish,
    Number,
    OneOf,
    Pattern,
    String,
    Truthy,
)

__all__ = [
    # Sentinels and result types
    "INTROSPECT",
    "OBJECT_ROOT",
    "ErrItem",
    "FailureDetails",
    "StructDict",
    "StructList",
    "as_structure",
    "is_structure",
    # Error objects
    "ORError",
    "ANDError",
    "XORError",
    "PeerError",
    "NegateError",
    "is_error_object",
    # Exceptions
    "OkComputerError",
    "ConfigurationError",
    "IntrospectionError",
    "ValidationError",
    # Core
    "Validator",
    "V",
    "Fn",
    "create",
    "introspect",
    "to_validator",
    "WithErr",
    "When",
    # Logical
    "Or",
    "And",
    "Xor",
    "Not",
    "All",
    "Each",
    # Structural
    "Array",
    "Tuple",
    "Object",
    "Merge",
    "Lazy",
    # Peers
    "Peer",
    "Match",
    "AndPeers",
    "NandPeers",
    "OrPeers",
    "XorPeers",
    "OxorPeers",
    "AndPeer",
    "NandPeer",
    "OrPeer",
    "XorPeer",
    "OxorPeer",
    # Validators
    "Is",
    "IsType",
    "InstanceOf",
    "String",
    "Number",
    "Boolean",
    "Integer",
    "Finite",
    "IsCallable",
    "AnyArray",
    "Nullish",
    "Exists",
    "Truthy",
    "Falsy",
    "MinLength",
    "MaxLength",
    "Length",
    "Min",
    "Max",
    "Includes",
    "Pattern",
    "OneOf",
    "Email",
    # Errors and assertions
    "list_errors",
    "is_error",
    "has_error",
    "is_erroneous",
    "validate",
    "dump_errors",
    "dump_errors_json",
    "assert_valid",
    "okay",
    "validation_context",
]
