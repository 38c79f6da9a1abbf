"""Environment variable helpers for fieldtree settings files."""

import os
import re

from fieldtree.lib.errors import ConfigError

# Matches ${VAR_NAME}; names follow shell rules.
ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def get_env_var(name: str, default: str | None = None) -> str | None:
    """Return an environment variable, or ``default`` when unset."""
    return os.environ.get(name, default)


def substitute_env_vars(text: str) -> str:
    """Replace every ``${VAR}`` reference in ``text`` with its value.

    Args:
        text: Raw text, typically a YAML document

    Returns:
        Text with all references substituted

    Raises:
        ConfigError: If a referenced variable is not set
    """

    def _replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = get_env_var(var_name)
        if value is None:
            raise ConfigError(
                var_name,
                f"Environment variable '{var_name}' is referenced but not set",
            )
        return value

    return ENV_VAR_PATTERN.sub(_replace, text)
