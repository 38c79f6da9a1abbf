"""Loading and validation of fieldtree conversion settings.

Main components:
- ConfigLoader: Load and validate settings files
- Environment variable substitution (${VAR_NAME} pattern)
- pydantic_errors_to_tree: Feed Pydantic errors through the converter
"""

from fieldtree.config.env_loader import get_env_var, substitute_env_vars
from fieldtree.config.loader import ConfigLoader
from fieldtree.config.validator import pydantic_errors_to_tree

__all__ = [
    "ConfigLoader",
    "get_env_var",
    "pydantic_errors_to_tree",
    "substitute_env_vars",
]
