"""
Tests for the logical combinators, including property-based checks of the
combinator laws.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from okcomputer import (
    INTROSPECT,
    All,
    And,
    ANDError,
    Boolean,
    ConfigurationError,
    Each,
    Includes,
    Integer,
    IntrospectionError,
    MinLength,
    NegateError,
    Not,
    Nullish,
    Number,
    Or,
    ORError,
    Pattern,
    String,
    Truthy,
    Xor,
    XORError,
    introspect,
    is_erroneous,
    is_error,
)


def exploding(value, *parents):
    """Reports a shape when introspected, fails the test if evaluated."""
    if value is INTROSPECT:
        return "Boom"
    raise AssertionError("should not be evaluated")


BASIC_VALIDATORS = [String, Number, Nullish, Boolean, Integer, Truthy]

values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=5),
    st.lists(st.integers(), max_size=3),
)
validator_lists = st.lists(st.sampled_from(BASIC_VALIDATORS), min_size=1, max_size=4)


class TestOr:
    def test_passes_if_any_passes(self):
        validator = Or(String, Number)
        assert validator("a") is None
        assert validator(1) is None

    def test_precomputed_error(self):
        validator = Or(String, Number)
        error = validator(None)
        assert error == ORError(["Expected string", "Expected number"])
        assert error.to_primitive_error() == "(Expected string or expected number)"
        assert validator([]) is error

    def test_short_circuits(self):
        assert Or(String, exploding)("a") is None

    def test_introspection(self):
        assert introspect(Or(Nullish, String)) == ORError(["Expected nullish", "Expected string"])


class TestAnd:
    def test_reports_every_clause(self):
        validator = And(String, MinLength(3))
        assert validator("abc") is None
        assert validator("ab") == ANDError(["Expected string", "Expected min length 3"])

    def test_short_circuits(self):
        assert And(String, exploding)(1) == ANDError(["Expected string", "Boom"])


class TestXor:
    def test_exactly_one(self):
        validator = Xor(Includes("foo"), Includes("bar"))
        assert validator("foo") is None
        assert validator("bar") is None
        assert validator("foobar") == XORError(
            ["Expected to include foo", "Expected to include bar"]
        )
        assert validator("baz") is not None

    def test_stops_at_second_pass(self):
        assert Xor(String, String, exploding)("a") is not None


class TestNot:
    def test_negates(self):
        validator = Not(Nullish)
        assert validator("a") is None
        assert validator(None) == NegateError("Expected nullish")
        assert validator(None).to_primitive_error() == 'not("Expected nullish")'

    def test_double_negation(self):
        validator = Not(Not(String))
        assert validator("a") is None
        assert validator(1) is not None


class TestAll:
    def test_reports_actual_failures(self):
        validator = All(MinLength(8), Includes("_"), Pattern("[A-Z]"))
        assert validator("Short") == ANDError(["Expected min length 8", "Expected to include _"])
        assert validator("Long_Enough") is None

    def test_introspection_lists_every_clause(self):
        validator = All(MinLength(8), Includes("_"))
        assert introspect(validator) == ANDError(
            ["Expected min length 8", "Expected to include _"]
        )


class TestEach:
    def test_first_actual_failure(self):
        validator = Each(String, MinLength(3))
        assert validator("abc") is None
        assert validator("ab") == "Expected min length 3"
        assert validator(1) == "Expected string"

    def test_introspection(self):
        assert introspect(Each(String, MinLength(3))) == "Expected string"


class TestConfiguration:
    @pytest.mark.parametrize("combinator", [Or, And, Xor, All, Each])
    def test_zero_children(self, combinator):
        with pytest.raises(ConfigurationError):
            combinator()

    def test_non_validator_child(self):
        with pytest.raises(ConfigurationError):
            Or(42)

    def test_child_without_shape(self):
        with pytest.raises(IntrospectionError):
            And(lambda value, *parents: None)


class TestLaws:
    @given(validators=validator_lists, value=values)
    def test_disjunction(self, validators, value):
        expected = all(is_error(v(value)) for v in validators)
        assert is_error(Or(*validators)(value)) == expected

    @given(validators=validator_lists, value=values)
    def test_conjunction(self, validators, value):
        expected = any(is_error(v(value)) for v in validators)
        assert is_error(And(*validators)(value)) == expected
        assert is_error(All(*validators)(value)) == expected
        assert is_error(Each(*validators)(value)) == expected

    @given(validators=validator_lists, value=values)
    def test_exclusive_or(self, validators, value):
        passes = sum(not is_error(v(value)) for v in validators)
        assert (not is_error(Xor(*validators)(value))) == (passes == 1)

    @given(validator=st.sampled_from(BASIC_VALIDATORS), value=values)
    def test_negation(self, validator, value):
        assert is_error(Not(validator)(value)) != is_error(validator(value))

    @given(validators=validator_lists)
    def test_introspection_is_erroneous(self, validators):
        for combinator in (Or, And, Xor, All, Each):
            assert is_erroneous(introspect(combinator(*validators)))
        assert is_erroneous(introspect(Not(validators[0])))
