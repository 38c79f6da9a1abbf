"""Configuration loader for fieldtree conversion settings.

Settings live in a small YAML document::

    base_path: spec.template
    ignore_path_prefix: []
    log_level: INFO

``${VAR}`` references are substituted from the environment before parsing,
and ``FIELDTREE_*`` environment variables override values from the file.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from fieldtree.config.env_loader import substitute_env_vars
from fieldtree.config.validator import pydantic_errors_to_tree
from fieldtree.converter import convert
from fieldtree.lib.errors import ConfigError, FileNotFoundError
from fieldtree.lib.logging_config import setup_logging
from fieldtree.models.config import ConversionConfig

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "base_path": "FIELDTREE_BASE_PATH",
    "ignore_path_prefix": "FIELDTREE_IGNORE_PATH_PREFIX",
    "log_level": "FIELDTREE_LOG_LEVEL",
}


def _env_overrides(env_vars: Mapping[str, str]) -> dict[str, Any]:
    """Collect settings overridden through environment variables."""
    overrides: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name in env_vars:
            overrides[field_name] = env_vars[env_var_name]
    return overrides


def _read_yaml_with_env_substitution(path: Path) -> dict[str, Any] | None:
    """Read a YAML file with environment variable substitution.

    Args:
        path: Path to YAML file

    Returns:
        Parsed dictionary or None if empty

    Raises:
        OSError: If file cannot be read
        yaml.YAMLError: If YAML parsing fails
        ConfigError: If env var substitution fails
    """
    raw_text = path.read_text(encoding="utf-8")
    substituted = substitute_env_vars(raw_text)
    content = yaml.safe_load(substituted)
    return content if content else None


class ConfigLoader:
    """Loads and validates conversion settings.

    This class handles:
    - Parsing YAML settings files
    - Applying ``FIELDTREE_*`` environment overrides
    - Reporting invalid settings through the field-error converter
    """

    def __init__(self, env_vars: Mapping[str, str] | None = None) -> None:
        """Create a loader.

        Args:
            env_vars: Environment mapping to read overrides from; defaults to
                ``os.environ``
        """
        self._env_vars: Mapping[str, str] = (
            os.environ if env_vars is None else env_vars
        )

    def parse(self, data: dict[str, Any] | None) -> ConversionConfig:
        """Validate a settings mapping, applying environment overrides.

        Raises:
            ConfigError: If the settings are invalid
        """
        merged: dict[str, Any] = dict(data or {})
        merged.update(_env_overrides(self._env_vars))

        try:
            return ConversionConfig(**merged)
        except PydanticValidationError as exc:
            errors = convert(pydantic_errors_to_tree(exc))
            raise ConfigError("conversion", errors.to_text()) from exc

    def load_config(
        self, path: str | Path, configure_logging: bool = False
    ) -> ConversionConfig:
        """Load settings from a YAML file.

        Args:
            path: Settings file location
            configure_logging: Apply ``log_level`` to the package logger

        Returns:
            Validated ConversionConfig

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file cannot be parsed or is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(
                str(config_path),
                "Create the settings file or pass the correct path.",
            )

        try:
            content = _read_yaml_with_env_substitution(config_path)
        except yaml.YAMLError as exc:
            raise ConfigError("yaml", f"Invalid YAML in {config_path}: {exc}") from exc

        if content is not None and not isinstance(content, dict):
            kind = type(content).__name__
            raise ConfigError(
                "root", f"Expected a mapping in {config_path}, got {kind}"
            )

        config = self.parse(content)
        logger.debug(f"Loaded conversion settings from {config_path}")

        if configure_logging:
            setup_logging(config.log_level)
        return config
