"""Bridge from Pydantic validation errors to field-error trees.

Pydantic reports problems as a flat list of issues with a location tuple.
``pydantic_errors_to_tree`` turns them into a :class:`FieldError` container
so they go through the same conversion as any other validator output.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fieldtree.models.field_error import (
    FieldError,
    err_disallowed_fields,
    err_missing_field,
)


def _location_segments(loc: tuple[Any, ...]) -> list[str]:
    return [str(item) for item in loc]


def pydantic_errors_to_tree(exc: PydanticValidationError) -> FieldError:
    """Convert a Pydantic ValidationError into a field-error tree.

    Missing fields become ``missing field(s)`` leaves and unexpected fields
    become ``must not set the field(s)`` leaves naming the offending key.
    Other issues keep Pydantic's message, with the rejected input in
    ``details``.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        Container holding one leaf per reported issue

    Example:
        >>> from pydantic import BaseModel, ValidationError
        >>> class Model(BaseModel):
        ...     name: str
        >>> try:
        ...     Model()
        ... except ValidationError as e:
        ...     tree = pydantic_errors_to_tree(e)
        >>> tree.children[0].message
        'missing field(s)'
    """
    leaves: list[FieldError] = []

    for error in exc.errors():
        segments = _location_segments(error.get("loc", ()))
        error_type = error.get("type", "")

        if error_type == "missing":
            leaves.append(err_missing_field(".".join(segments)))
        elif error_type == "extra_forbidden":
            leaves.append(err_disallowed_fields(".".join(segments)))
        else:
            leaves.append(
                FieldError(
                    message=str(error.get("msg", "Unknown error")),
                    paths=segments,
                    details=repr(error.get("input")),
                )
            )

    return FieldError(children=leaves)
