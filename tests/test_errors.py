"""
Tests for okcomputer error objects and structural containers.
"""

import pytest

from okcomputer import (
    ANDError,
    ConfigurationError,
    NegateError,
    ORError,
    PeerError,
    StructDict,
    StructList,
    XORError,
    as_structure,
    is_erroneous,
    is_error_object,
    is_structure,
)
from okcomputer.errors import to_primitive


class Pending:
    def __await__(self):
        yield


class TestLogicalOperatorError:
    def test_joins_primitive_children(self):
        error = ORError(["Expected string", "Expected number"])
        assert error.to_primitive_error() == "(Expected string or expected number)"

    def test_single_child_is_not_parenthesized(self):
        assert ANDError(["Expected string"]).to_primitive_error() == "Expected string"

    def test_nested_operators(self):
        error = ANDError([ORError(["A", "B"]), "C"])
        assert error.to_primitive_error() == "((A or b) and c)"

    def test_xor_operator(self):
        assert XORError(["A", "B"]).to_primitive_error() == "(A xor b)"

    def test_non_primitive_child_keeps_structure(self):
        error = ORError([{"x": 1}])
        assert error.to_primitive_error() == {
            "type": "ORError",
            "operator": "OR",
            "errors": [{"x": 1}],
        }
        assert str(error) == "<ORError>"

    def test_requires_a_child(self):
        with pytest.raises(ConfigurationError):
            ORError([])

    def test_type(self):
        assert ANDError(["a"]).type == "ANDError"
        assert XORError(["a"]).operator == "XOR"


class TestPeerError:
    def test_primitive(self):
        error = PeerError("B", "Expected string")
        assert error.to_primitive_error() == 'Peer "B" expected string'
        assert str(error) == 'Peer "B" expected string'

    def test_wraps_operator_error(self):
        error = PeerError("B", ORError(["Expected nullish", "Expected string"]))
        assert error.to_primitive_error() == 'Peer "B" (Expected nullish or expected string)'

    def test_structured(self):
        error = PeerError("B", StructList(["x"]))
        assert error.to_primitive_error() == {
            "type": "PeerError",
            "key": "B",
            "error": ["x"],
        }


class TestNegateError:
    def test_primitive(self):
        assert NegateError("Expected nullish").to_primitive_error() == 'not("Expected nullish")'

    def test_structured(self):
        primitive = NegateError(StructList(["x"])).to_primitive_error()
        assert primitive["type"] == "NegateError"


class TestErrorObjectBehavior:
    def test_equality(self):
        assert ORError(["a", "b"]) == ORError(["a", "b"])
        assert ORError(["a"]) != ANDError(["a"])
        assert PeerError("k", "a") != PeerError("j", "a")

    def test_immutable(self):
        error = PeerError("k", "a")
        with pytest.raises(AttributeError):
            error.key = "j"
        with pytest.raises(AttributeError):
            del error.error

    def test_to_json_matches_primitive(self):
        error = ORError(["A", "B"])
        assert error.to_json() == error.to_primitive_error()

    def test_is_error_object(self):
        assert is_error_object(ORError(["a"]))
        assert not is_error_object("a")
        assert to_primitive("a") == "a"
        assert to_primitive(NegateError("a")) == 'not("a")'


class TestStructures:
    def test_as_structure(self):
        record = as_structure({"a": None})
        assert isinstance(record, StructDict)
        assert record == {"a": None}

        items = as_structure([None, "x"])
        assert isinstance(items, StructList)
        assert isinstance(as_structure(("a",)), StructList)

    def test_as_structure_passes_structures_through(self):
        record = StructDict(a=1)
        assert as_structure(record) is record

    def test_as_structure_rejects_bad_input(self):
        with pytest.raises(ConfigurationError):
            as_structure(None)
        with pytest.raises(ConfigurationError):
            as_structure(5)

    def test_is_structure(self):
        assert is_structure(StructList())
        assert is_structure(as_structure({}))
        assert not is_structure({})
        assert not is_structure([])

    def test_is_erroneous(self):
        assert not is_erroneous(None)
        assert is_erroneous("Expected string")
        assert is_erroneous(0)
        assert not is_erroneous(Pending())
