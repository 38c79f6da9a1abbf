"""Conversion of nested field-error trees into flat structured error lists.

A validator reports problems as a tree of :class:`FieldError` nodes. The
downstream protocol wants a flat :class:`ErrorList` where every entry has a
kind, a full field path and a detail message. Conversion runs in three
stages:

1. ``flatten_tree`` collects the leaves depth-first.
2. ``resolve_and_classify`` composes each leaf's path against the base path
   (optionally keeping only leaves under an ignored prefix) and picks the
   error kind from the leaf message.
3. ``dedupe`` drops entries that render identically to an earlier one.

Classification is driven by fixed message phrases. The phrase tables and
their order decide the kind downstream consumers see, so they must not be
reordered.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from fieldtree.lib.logging_config import get_logger
from fieldtree.models.config import ConversionConfig
from fieldtree.models.error_list import (
    ErrorList,
    StructuredFieldError,
    forbidden,
    internal_error,
    invalid,
    required,
)
from fieldtree.models.field_error import (
    DEPRECATED_UPDATE_MESSAGE,
    DISALLOWED_FIELDS_MESSAGE,
    MISSING_FIELD_MESSAGE,
    MISSING_ONE_OF_MESSAGE,
    MULTIPLE_ONE_OF_MESSAGE,
    FieldError,
)
from fieldtree.models.field_path import EMPTY_PATH_STRING, FieldPath

logger = get_logger(__name__)

INVALID_VALUE_PREFIX = "invalid value: "
INVALID_KEY_NAME_PHRASE = "invalid key name "
INTERNAL_ERROR_PHRASE = "Internal Error"

# Messages whose paths list the conflicting fields rather than a location.
PATH_AGNOSTIC_PHRASES: tuple[str, ...] = (
    MISSING_ONE_OF_MESSAGE,
    MULTIPLE_ONE_OF_MESSAGE,
    DEPRECATED_UPDATE_MESSAGE,
    DISALLOWED_FIELDS_MESSAGE,
)

FORBIDDEN_PHRASES: tuple[str, ...] = (
    *PATH_AGNOSTIC_PHRASES,
    INVALID_KEY_NAME_PHRASE,
)

_PATH_SEPARATOR = "."


def _contains_any(message: str, phrases: Iterable[str]) -> bool:
    return any(phrase in message for phrase in phrases)


def _render_segments(segments: Sequence[str]) -> str:
    if not segments:
        return EMPTY_PATH_STRING
    return _PATH_SEPARATOR.join(segments)


def flatten_tree(node: FieldError | None) -> list[FieldError]:
    """Collect the leaves of an error tree in depth-first order.

    A node without children is itself the only leaf. Containers contribute
    only their descendants' leaves; their own message and paths are ignored.
    Empty nodes below the root are still reported as leaves.

    Args:
        node: Root of the tree; None or an empty node means there is no error

    Returns:
        Leaves in traversal order
    """
    if node is None or node.is_empty():
        return []
    return _collect_leaves(node)


def _collect_leaves(node: FieldError) -> list[FieldError]:
    if not node.children:
        return [node]

    leaves: list[FieldError] = []
    for child in node.children:
        leaves.extend(_collect_leaves(child))
    return leaves


def resolve_and_classify(
    leaf: FieldError,
    base_path: FieldPath | None = None,
    ignore_prefix: FieldPath | None = None,
) -> StructuredFieldError | None:
    """Turn one leaf error into a structured field error.

    Conflict messages (one-of violations, disallowed or deprecated fields)
    list the involved field names in ``paths``; those names are appended to
    the message and the error is reported at ``base_path`` itself.

    When ``ignore_prefix`` renders non-empty, leaves whose dotted path does
    not start with it are dropped and the prefix is stripped from the rest.

    The leaf is not modified.

    Args:
        leaf: Leaf error to convert
        base_path: Path the leaf's paths are appended to
        ignore_prefix: Prefix a leaf path must carry to be kept

    Returns:
        The structured error, or None if the leaf was filtered out
    """
    if base_path is None:
        base_path = FieldPath()
    message = leaf.message
    paths = list(leaf.paths)

    if _contains_any(message, PATH_AGNOSTIC_PHRASES):
        if paths:
            message = f"{message}: {', '.join(paths)}"
        paths = []

    if ignore_prefix is not None:
        prefix = str(ignore_prefix)
        if prefix != EMPTY_PATH_STRING:
            rendered = _render_segments(paths)
            if not rendered.startswith(prefix):
                logger.debug(
                    f"Dropping error at '{rendered}' outside prefix '{prefix}': "
                    f"{message}"
                )
                return None
            remainder = rendered[len(prefix) :]
            if remainder.startswith(_PATH_SEPARATOR):
                remainder = remainder[len(_PATH_SEPARATOR) :]
            paths = [remainder]

    if paths:
        if str(base_path) == EMPTY_PATH_STRING:
            field_path = FieldPath.new_path(paths[0], *paths[1:])
        else:
            field_path = base_path.child(paths[0], *paths[1:])
    else:
        field_path = base_path

    if MISSING_FIELD_MESSAGE in message:
        return required(field_path, message)
    if INVALID_VALUE_PREFIX in message:
        value = message.removeprefix(INVALID_VALUE_PREFIX)
        return invalid(field_path, value, message)
    if _contains_any(message, FORBIDDEN_PHRASES):
        return forbidden(field_path, message)
    if INTERNAL_ERROR_PHRASE in message:
        return internal_error(field_path, Exception(message))
    return invalid(field_path, leaf.details, message)


def dedupe(errors: Iterable[StructuredFieldError]) -> ErrorList:
    """Drop errors that render identically to an earlier one.

    The first occurrence keeps its position. Rendering covers the path,
    kind, bad value and detail.
    """
    seen: set[str] = set()
    unique = ErrorList()
    for err in errors:
        rendered = str(err)
        if rendered in seen:
            logger.debug(f"Suppressing duplicate field error: {rendered}")
            continue
        seen.add(rendered)
        unique.append(err)
    return unique


def convert_ignore_path_prefix(
    tree: FieldError | None,
    base_path: FieldPath | None = None,
    ignore_prefix: FieldPath | None = None,
) -> ErrorList:
    """Convert an error tree, keeping only leaves under ``ignore_prefix``.

    Args:
        tree: Root of the error tree; None or an empty node means no errors
        base_path: Path every converted error is placed under
        ignore_prefix: Dotted prefix leaf paths must start with; it is
            stripped from the paths that are kept. An empty path keeps all.

    Returns:
        Deduplicated structured errors in traversal order
    """
    converted: list[StructuredFieldError] = []
    for leaf in flatten_tree(tree):
        err = resolve_and_classify(leaf, base_path, ignore_prefix)
        if err is not None:
            converted.append(err)
    return dedupe(converted)


def convert(tree: FieldError | None, base_path: FieldPath | None = None) -> ErrorList:
    """Convert an error tree without prefix filtering."""
    return convert_ignore_path_prefix(tree, base_path, FieldPath())


def convert_with_config(tree: FieldError | None, config: ConversionConfig) -> ErrorList:
    """Convert an error tree using loaded conversion settings."""
    return convert_ignore_path_prefix(
        tree, config.base_field_path(), config.ignore_prefix_field_path()
    )
