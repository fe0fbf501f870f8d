"""
Cross-field ("peer") validators.

A peer is a sibling field of the value under test, read from the nearest
parent container. The relational rules are composed from Or / And / Xor /
Not over presence checks, so their truth tables follow from the algebra:

    rule        passes when (self + peers)
    AndPeers    all absent, or all present
    NandPeers   not all present
    OrPeers     at least one present
    XorPeers    exactly one present
    OxorPeers   all absent, or exactly one present
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from .core import V, Validator, introspect, to_validator
from .errors import ConfigurationError, PeerError
from .flatten import is_error
from .lib.helpers import lookup
from .logical import And, Not, Or, OrV, Xor, XorV
from .validators import Exists, Nullish


@dataclass(frozen=True, slots=True)
class PeerV(Validator):
    """Evaluates `validator` against `parents[0][key]` instead of the value."""

    key: str
    validator: Validator
    shape: PeerError = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validator", to_validator(self.validator))
        object.__setattr__(self, "shape", PeerError(self.key, introspect(self.validator)))

    def evaluate(self, value: Any, *parents: Any) -> PeerError | None:
        parent = parents[0] if parents else None
        error = self.validator(lookup(parent, self.key), *parents)
        return PeerError(self.key, error) if is_error(error) else None

    def describe(self) -> PeerError:
        return self.shape


def Peer(key: str) -> Callable[[Any], PeerV]:
    """
    Validate a sibling field instead of the value itself.

    Usage:
        Object({
            "password": String,
            "confirm": Peer("password")(String),
        })
    """

    def wrap(validator: Any) -> PeerV:
        return PeerV(key=key, validator=validator)

    return wrap


def _require_keys(name: str, keys: tuple[str, ...]) -> None:
    if len(keys) < 1:
        raise ConfigurationError(f"{name} requires at least 1 key")


def _all_absent(keys: tuple[str, ...]) -> Validator:
    return And(Nullish, *(Peer(key)(Nullish) for key in keys))


def _all_present(keys: tuple[str, ...]) -> Validator:
    return And(Exists, *(Peer(key)(Exists) for key in keys))


def AndPeers(*keys: str) -> OrV:
    """
    All-or-nothing: the value and every peer are present, or none are.

    Unlike a plain AND gate, "none present" passes; to require every field,
    mark each one required instead.
    """
    _require_keys("AndPeers", keys)
    return Or(_all_absent(keys), _all_present(keys))


def NandPeers(*keys: str) -> OrV:
    """The value and its peers may not all be present at once."""
    _require_keys("NandPeers", keys)
    return Or(_all_absent(keys), Not(_all_present(keys)))


def OrPeers(*keys: str) -> OrV:
    """At least one of the value and its peers is present."""
    _require_keys("OrPeers", keys)
    return Or(Exists, *(Peer(key)(Exists) for key in keys))


def XorPeers(*keys: str) -> XorV:
    """
    Exactly one of the value and its peers is present.

    With three or more fields, "all present" fails even though an XOR gate
    over an odd count would pass.
    """
    _require_keys("XorPeers", keys)
    return Xor(Exists, *(Peer(key)(Exists) for key in keys))


def OxorPeers(*keys: str) -> OrV:
    """Optional XOR: none present, or exactly one present."""
    _require_keys("OxorPeers", keys)
    return Or(_all_absent(keys), Xor(Exists, *(Peer(key)(Exists) for key in keys)))


def AndPeer(key: str) -> OrV:
    return AndPeers(key)


def NandPeer(key: str) -> OrV:
    return NandPeers(key)


def OrPeer(key: str) -> OrV:
    return OrPeers(key)


def XorPeer(key: str) -> XorV:
    return XorPeers(key)


def OxorPeer(key: str) -> OrV:
    return OxorPeers(key)


def Match(key: str) -> V:
    """
    Validate the value equals the sibling field `key`.

    Usage:
        Object({"password": String, "confirm": Match("password")})
    """

    def check(value: Any, parent: Any = None, *_: Any) -> bool:
        return isinstance(parent, Mapping) and parent.get(key) == value

    return V(check=check, error=f"Expected to match {key}", pass_parents=True)
