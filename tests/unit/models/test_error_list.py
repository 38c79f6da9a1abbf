"""Unit tests for fieldtree.models.error_list module."""

import pytest

from fieldtree.models.error_list import (
    ErrorList,
    ErrorType,
    StructuredFieldError,
    forbidden,
    internal_error,
    invalid,
    required,
)
from fieldtree.models.field_path import FieldPath


@pytest.mark.unit
class TestConstructors:
    """Tests for the structured error constructors."""

    def test_required(self) -> None:
        """Test required() fills type, field and an empty bad value."""
        err = required(FieldPath.new_path("spec", "name"), "missing field(s)")
        assert err.type is ErrorType.REQUIRED
        assert err.field == "spec.name"
        assert err.bad_value == ""
        assert err.detail == "missing field(s)"

    def test_invalid_keeps_bad_value(self) -> None:
        """Test invalid() stores the offending value."""
        err = invalid(FieldPath.new_path("replicas"), -1, "must be positive")
        assert err.type is ErrorType.INVALID
        assert err.bad_value == -1

    def test_forbidden(self) -> None:
        """Test forbidden() fills type and an empty bad value."""
        err = forbidden(FieldPath(), "must not set the field(s)")
        assert err.type is ErrorType.FORBIDDEN
        assert err.field == ""
        assert err.bad_value == ""

    def test_internal_error_uses_error_text(self) -> None:
        """Test internal_error() turns the error into the detail."""
        err = internal_error(FieldPath.new_path("x"), Exception("Internal Error"))
        assert err.type is ErrorType.INTERNAL
        assert err.bad_value is None
        assert err.detail == "Internal Error"


@pytest.mark.unit
class TestRendering:
    """Tests for StructuredFieldError string rendering."""

    def test_required_rendering(self) -> None:
        """Test that Required errors render label and detail."""
        err = required(FieldPath.new_path("spec"), "missing field(s)")
        assert str(err) == "spec: Required value: missing field(s)"

    def test_invalid_rendering_quotes_strings(self) -> None:
        """Test that Invalid errors render string values quoted."""
        err = invalid(FieldPath.new_path("mode"), "abc", "invalid value: abc")
        assert str(err) == 'mode: Invalid value: "abc": invalid value: abc'

    def test_invalid_rendering_of_none(self) -> None:
        """Test that a None bad value renders as null."""
        err = invalid(FieldPath.new_path("mode"), None, "")
        assert str(err) == "mode: Invalid value: null"

    def test_forbidden_rendering(self) -> None:
        """Test that Forbidden errors omit the bad value."""
        err = forbidden(FieldPath.new_path("path"), "must not set the field(s)")
        assert str(err) == "path: Forbidden: must not set the field(s)"

    def test_internal_rendering(self) -> None:
        """Test that internal errors render their label."""
        err = internal_error(FieldPath.new_path("path"), "boom")
        assert str(err) == "path: Internal error: boom"


@pytest.mark.unit
class TestSerialization:
    """Tests for protocol field names."""

    def test_dump_by_alias_uses_protocol_names(self) -> None:
        """Test that by_alias dumps use Type/Field/BadValue/Detail."""
        err = forbidden(FieldPath.new_path("path"), "detail")
        assert err.model_dump(by_alias=True, mode="json") == {
            "Type": "FieldValueForbidden",
            "Field": "path",
            "BadValue": "",
            "Detail": "detail",
        }

    def test_validate_from_protocol_names(self) -> None:
        """Test that errors can be loaded from protocol-shaped payloads."""
        err = StructuredFieldError.model_validate(
            {
                "Type": "FieldValueInvalid",
                "Field": "path.path1",
                "BadValue": "",
                "Detail": "invalid value: ",
            }
        )
        expected = invalid(FieldPath.new_path("path", "path1"), "", "invalid value: ")
        assert err == expected


@pytest.mark.unit
class TestErrorList:
    """Tests for ErrorList helpers."""

    def test_to_text_empty(self) -> None:
        """Test that an empty list renders as an empty string."""
        assert ErrorList().to_text() == ""

    def test_to_text_single(self) -> None:
        """Test that a single error renders without brackets."""
        errors = ErrorList([required(FieldPath.new_path("a"), "missing field(s)")])
        assert errors.to_text() == "a: Required value: missing field(s)"

    def test_to_text_multiple(self) -> None:
        """Test that several errors are bracketed and comma separated."""
        errors = ErrorList(
            [
                required(FieldPath.new_path("a"), "missing field(s)"),
                forbidden(FieldPath.new_path("b"), "nope"),
            ]
        )
        assert errors.to_text() == (
            "[a: Required value: missing field(s), b: Forbidden: nope]"
        )

    def test_of_type_filters_and_keeps_order(self) -> None:
        """Test that of_type keeps matching errors in order."""
        first = forbidden(FieldPath.new_path("a"), "one")
        second = required(FieldPath.new_path("b"), "two")
        third = forbidden(FieldPath.new_path("c"), "three")
        errors = ErrorList([first, second, third])

        result = errors.of_type(ErrorType.FORBIDDEN)

        assert isinstance(result, ErrorList)
        assert result == [first, third]
