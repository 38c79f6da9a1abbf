"""Nested field-error tree produced by validators.

A FieldError is either a leaf carrying a message and the field paths it
concerns, or a container whose ``children`` hold further FieldErrors.
Containers are built with :meth:`FieldError.also`; intermediate nodes only
aggregate their children and their own message is not reported.

The ``err_*`` helpers build the leaf messages the converter recognizes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MISSING_FIELD_MESSAGE = "missing field(s)"
DISALLOWED_FIELDS_MESSAGE = "must not set the field(s)"
DEPRECATED_UPDATE_MESSAGE = "must not update deprecated field(s)"
MISSING_ONE_OF_MESSAGE = "expected exactly one, got neither"
MULTIPLE_ONE_OF_MESSAGE = "expected exactly one, got both"


class FieldError(BaseModel):
    """A validation error, or a container of validation errors.

    Attributes:
        message: Description of the error (leaves only)
        paths: Field paths, or candidate field names for conflict errors
        details: Free-form auxiliary text
        children: Nested errors; non-empty for containers
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = ""
    paths: list[str] = Field(default_factory=list)
    details: str = ""
    children: list[FieldError] = Field(default_factory=list, alias="errors")

    @property
    def is_leaf(self) -> bool:
        """True when this node has no children."""
        return not self.children

    def is_empty(self) -> bool:
        """True when this node carries no information at all."""
        return not (self.message or self.details or self.paths or self.children)

    def also(self, *errs: FieldError | None) -> FieldError:
        """Combine this error with others into a new container.

        Containers are spliced in one level deep, ``None`` and empty errors
        are skipped. The input nodes are not modified.
        """
        children: list[FieldError] = []
        for err in (self, *errs):
            if err is None or err.is_empty():
                continue
            if err.children:
                children.extend(err.children)
            else:
                children.append(err)
        return FieldError(children=children)

    def via_field(self, *prefix: str) -> FieldError:
        """Return a copy with ``prefix`` prepended to every leaf's paths."""
        if self.children:
            return self.model_copy(
                update={"children": [c.via_field(*prefix) for c in self.children]}
            )
        if not prefix:
            return self.model_copy(deep=True)
        joined = ".".join(prefix)
        if not self.paths:
            return self.model_copy(update={"paths": [joined]})
        paths = [f"{joined}.{p}" if p else joined for p in self.paths]
        return self.model_copy(update={"paths": paths})


def err_missing_field(*field_paths: str) -> FieldError:
    """Error for required fields that were not provided."""
    return FieldError(message=MISSING_FIELD_MESSAGE, paths=list(field_paths))


def err_disallowed_fields(*field_paths: str) -> FieldError:
    """Error for fields that must not be set."""
    return FieldError(message=DISALLOWED_FIELDS_MESSAGE, paths=list(field_paths))


def err_disallowed_update_deprecated_fields(*field_paths: str) -> FieldError:
    """Error for deprecated fields that must not be updated."""
    return FieldError(message=DEPRECATED_UPDATE_MESSAGE, paths=list(field_paths))


def err_missing_one_of(*field_paths: str) -> FieldError:
    """Error for a one-of group where no field was set."""
    return FieldError(message=MISSING_ONE_OF_MESSAGE, paths=list(field_paths))


def err_multiple_one_of(*field_paths: str) -> FieldError:
    """Error for a one-of group where more than one field was set."""
    return FieldError(message=MULTIPLE_ONE_OF_MESSAGE, paths=list(field_paths))


def err_invalid_value(value: Any, field_path: str, details: str = "") -> FieldError:
    """Error for a field holding an unacceptable value."""
    return FieldError(
        message=f"invalid value: {value}", paths=[field_path], details=details
    )


def err_invalid_key_name(key: str, field_path: str, *details: str) -> FieldError:
    """Error for a map key that is not a valid name."""
    return FieldError(
        message=f'invalid key name "{key}"',
        paths=[field_path],
        details=", ".join(details),
    )


def err_generic(message: str, *field_paths: str) -> FieldError:
    """Error with an arbitrary message."""
    return FieldError(message=message, paths=list(field_paths))
