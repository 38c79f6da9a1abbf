"""Structured field errors produced by the converter.

The shapes here follow the field-error protocol consumed downstream: a
``Type`` discriminator, the rendered ``Field`` path, an optional ``BadValue``
and a human readable ``Detail``. Serialize with ``model_dump(by_alias=True)``
to get the protocol field names.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fieldtree.models.field_path import FieldPath


class ErrorType(str, Enum):
    """Discriminator of a structured field error."""

    REQUIRED = "FieldValueRequired"
    INVALID = "FieldValueInvalid"
    FORBIDDEN = "FieldValueForbidden"
    INTERNAL = "InternalError"

    @property
    def label(self) -> str:
        """Human readable name used when rendering an error."""
        return _ERROR_TYPE_LABELS[self]


_ERROR_TYPE_LABELS: dict[ErrorType, str] = {
    ErrorType.REQUIRED: "Required value",
    ErrorType.INVALID: "Invalid value",
    ErrorType.FORBIDDEN: "Forbidden",
    ErrorType.INTERNAL: "Internal error",
}


def _format_bad_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, (str, bool, int, float)):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


class StructuredFieldError(BaseModel):
    """A single error located at a field path.

    Attributes:
        type: Kind of error
        field: Rendered field path the error applies to
        bad_value: Offending value (Invalid errors only)
        detail: Human readable explanation
    """

    model_config = ConfigDict(populate_by_name=True)

    type: ErrorType = Field(alias="Type")
    field: str = Field(alias="Field")
    bad_value: Any = Field(default=None, alias="BadValue")
    detail: str = Field(default="", alias="Detail")

    def error_body(self) -> str:
        """Render the error without its field path."""
        if self.type is ErrorType.INVALID:
            body = f"{self.type.label}: {_format_bad_value(self.bad_value)}"
        else:
            body = self.type.label
        if self.detail:
            body += f": {self.detail}"
        return body

    def __str__(self) -> str:
        """Render ``<field>: <body>``."""
        return f"{self.field}: {self.error_body()}"


class ErrorList(list[StructuredFieldError]):
    """Ordered collection of structured field errors."""

    def to_text(self) -> str:
        """Render all errors as one message.

        A single error renders as itself, several are bracketed and comma
        separated. An empty list renders as an empty string.
        """
        if len(self) == 1:
            return str(self[0])
        if not self:
            return ""
        return "[" + ", ".join(str(err) for err in self) + "]"

    def of_type(self, *types: ErrorType) -> ErrorList:
        """Return the errors whose type is one of ``types``, in order."""
        return ErrorList(err for err in self if err.type in types)


def required(path: FieldPath, detail: str) -> StructuredFieldError:
    """Build an error for a missing required value."""
    return StructuredFieldError(
        type=ErrorType.REQUIRED, field=str(path), bad_value="", detail=detail
    )


def invalid(path: FieldPath, value: Any, detail: str) -> StructuredFieldError:
    """Build an error for an invalid value."""
    return StructuredFieldError(
        type=ErrorType.INVALID, field=str(path), bad_value=value, detail=detail
    )


def forbidden(path: FieldPath, detail: str) -> StructuredFieldError:
    """Build an error for a value that may not be set."""
    return StructuredFieldError(
        type=ErrorType.FORBIDDEN, field=str(path), bad_value="", detail=detail
    )


def internal_error(path: FieldPath, err: BaseException | str) -> StructuredFieldError:
    """Build an error for a failure unrelated to the submitted data."""
    return StructuredFieldError(
        type=ErrorType.INTERNAL, field=str(path), bad_value=None, detail=str(err)
    )
