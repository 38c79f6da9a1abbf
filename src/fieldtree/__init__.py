"""fieldtree - Flatten nested validation errors into structured field errors.

Validators often report problems as a tree of nested errors. fieldtree turns
such a tree into a flat, deduplicated list of typed field errors
(Required, Invalid, Forbidden, InternalError) located at full field paths.
"""

from fieldtree.converter import (
    convert,
    convert_ignore_path_prefix,
    convert_with_config,
    dedupe,
    flatten_tree,
    resolve_and_classify,
)
from fieldtree.lib.errors import ConfigError, FieldTreeError
from fieldtree.models.config import ConversionConfig
from fieldtree.models.error_list import ErrorList, ErrorType, StructuredFieldError
from fieldtree.models.field_error import FieldError
from fieldtree.models.field_path import EMPTY_PATH_STRING, FieldPath

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "ConversionConfig",
    "EMPTY_PATH_STRING",
    "ErrorList",
    "ErrorType",
    "FieldError",
    "FieldPath",
    "FieldTreeError",
    "StructuredFieldError",
    "convert",
    "convert_ignore_path_prefix",
    "convert_with_config",
    "dedupe",
    "flatten_tree",
    "resolve_and_classify",
]
