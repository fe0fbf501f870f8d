"""
Tests for assert_valid, okay, validation_context and error serialization.
"""

import json
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from okcomputer import (
    Array,
    ErrItem,
    FailureDetails,
    NegateError,
    Nullish,
    Object,
    Or,
    ORError,
    String,
    StructDict,
    StructList,
    ValidationError,
    assert_valid,
    dump_errors,
    dump_errors_json,
    is_error,
    okay,
    validate,
    validation_context,
)


class ApiError(Exception):
    pass


@pytest.fixture
def user():
    return Object({"name": String})


class TestAssertValid:
    def test_valid(self, user):
        assert assert_valid({"name": "Ada"}, user) is None

    def test_default_message(self, user):
        with pytest.raises(ValidationError) as exc_info:
            assert_valid({"name": 1}, user)
        assert str(exc_info.value) == "Invalid: first of 1 errors: name: Expected string"
        assert exc_info.value.errors == [ErrItem("name", "Expected string")]
        assert exc_info.value.value is None

    def test_counts_every_error(self):
        with pytest.raises(ValidationError, match="first of 2 errors: a: Expected string"):
            assert_valid({}, Object({"a": String, "b": String}))

    def test_root_path_is_omitted(self):
        with pytest.raises(ValidationError) as exc_info:
            assert_valid(1, String)
        assert str(exc_info.value) == "Invalid: first of 1 errors: Expected string"

    def test_structured_error_rendered_as_json(self):
        with pytest.raises(ValidationError) as exc_info:
            assert_valid(1, Or(Nullish, Array(String)))
        message = str(exc_info.value)
        assert message.startswith("Invalid: first of 1 errors: {")
        assert "ORError" in message

    def test_log_value(self, user):
        with pytest.raises(ValidationError) as exc_info:
            assert_valid({"name": 1}, user, True)
        assert str(exc_info.value).endswith("(value: {'name': 1})")
        assert exc_info.value.value == {"name": 1}

    def test_message(self, user):
        with pytest.raises(ValidationError, match="^Bad user$") as exc_info:
            assert_valid({"name": 1}, user, "Bad user")
        assert exc_info.value.errors == [ErrItem("name", "Expected string")]

    def test_exception_instance(self, user):
        error = ApiError("bad request")
        with pytest.raises(ApiError) as exc_info:
            assert_valid({"name": 1}, user, error)
        assert exc_info.value is error

    def test_factory(self, user):
        received = []

        def factory(details: FailureDetails):
            received.append(details)
            return ApiError(details.error_list[0].path)

        with pytest.raises(ApiError, match="name"):
            assert_valid({"name": 1}, user, factory)
        assert received[0].error == {"name": "Expected string"}

    def test_factory_returning_message(self, user):
        with pytest.raises(ValidationError, match="^1 problem$"):
            assert_valid({"name": 1}, user, lambda d: f"{len(d.error_list)} problem")

    def test_accepts_schema_shorthand(self):
        assert_valid({"name": "Ada", "tags": ["a"]}, {"name": str, "tags": [str]})
        with pytest.raises(ValidationError):
            assert_valid({"name": "Ada", "tags": [1]}, {"name": str, "tags": [str]})

    def test_logs_failure(self, user, caplog):
        with caplog.at_level(logging.DEBUG, logger="okcomputer"):
            with pytest.raises(ValidationError):
                assert_valid({"name": 1}, user)
        assert "Validation failed with 1 errors" in caplog.text


class TestValidationContext:
    def test_log_value(self, user):
        with validation_context(log_value=True):
            with pytest.raises(ValidationError) as exc_info:
                assert_valid({"name": 1}, user)
        assert "(value: {'name': 1})" in str(exc_info.value)
        assert exc_info.value.value == {"name": 1}

    def test_reset_on_exit(self, user):
        with validation_context(log_value=True):
            pass
        with pytest.raises(ValidationError) as exc_info:
            assert_valid({"name": 1}, user)
        assert "value:" not in str(exc_info.value)


class TestOkay:
    def test_okay(self, user):
        assert okay({"name": "Ada"}, user)
        assert not okay({"name": 1}, user)
        assert not okay("nope", user)

    @given(value=st.one_of(st.none(), st.text(), st.integers(), st.lists(st.text())))
    def test_agrees_with_assert_valid(self, value):
        validator = Or(String, Array(String))
        raised = False
        try:
            assert_valid(value, validator)
        except ValidationError:
            raised = True
        assert okay(value, validator) == (not raised)
        assert raised == is_error(validator(value))


class TestSerialization:
    def test_validate(self):
        schema = {"name": String, "email": Or(Nullish, String), "tags": [str]}
        assert validate({"name": "Alice", "tags": ["a", 1]}, schema) == [
            ErrItem("tags.1", "Expected str")
        ]

    def test_dump_errors(self):
        error = Object({"name": String})({})
        assert dump_errors(error) == [{"path": "name", "err": "Expected string"}]

    def test_dump_errors_json(self):
        error = Object({"name": String})({})
        assert json.loads(dump_errors_json(error)) == [
            {"path": "name", "err": "Expected string"}
        ]

    def test_dump_nested_error_objects(self):
        error = StructDict(a=ORError([NegateError(StructList(["x"]))]))
        assert dump_errors(error) == [
            {
                "path": "a",
                "err": {
                    "type": "ORError",
                    "operator": "OR",
                    "errors": [{"type": "NegateError", "error": ["x"]}],
                },
            }
        ]

    def test_dump_nothing(self):
        assert dump_errors(None) == []
        assert dump_errors_json(None) == "[]"
