"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from callmemaybe.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    UnsupportedCategoryError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_the_message(self) -> None:
        err = BaseError("Invalid command format!", code="oops", detail={"k": 1})
        assert str(err) == "Invalid command format!"

    def test_to_json_is_one_line(self) -> None:
        err = BaseError("café", code="oops", detail={"when": object})
        rendered = err.to_json()
        assert "\n" not in rendered
        parsed = json.loads(rendered)
        assert parsed["message"] == "café"
        assert parsed["detail"]["when"] == str(object)


class TestValidationError:
    def test_carries_field_and_expected(self) -> None:
        err = ValidationError("bad value", field="done", expected="t or f")
        assert err.field == "done"
        assert err.expected == "t or f"
        assert err.code == "validation_error"

    def test_expected_defaults_to_message(self) -> None:
        assert ValidationError("bad value").expected == "bad value"

    def test_to_dict_includes_field(self) -> None:
        d = ValidationError("bad", field="gender").to_dict()
        assert d["field"] == "gender"
        assert d["expected"] == "bad"

    def test_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)


class TestInvalidArgumentError:
    def test_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            raise InvalidArgumentError("negative", argument="count", value=-1)

    def test_argument_doubles_as_field(self) -> None:
        err = InvalidArgumentError("negative", argument="count", value=-1)
        assert err.field == "count"
        assert err.value == -1
        assert err.code == "invalid_argument"

    def test_to_dict_includes_value(self) -> None:
        d = InvalidArgumentError("negative", argument="count", value=-1).to_dict()
        assert d["argument"] == "count"
        assert d["value"] == -1


class TestUnsupportedCategoryError:
    def test_default_message_names_category(self) -> None:
        err = UnsupportedCategoryError("interest")
        assert "interest" in err.message
        assert err.category == "interest"

    def test_is_application_error(self) -> None:
        assert isinstance(UnsupportedCategoryError("interest"), ApplicationError)
        assert not isinstance(UnsupportedCategoryError("interest"), DomainError)
