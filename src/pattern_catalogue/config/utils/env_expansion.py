"""Environment variable expansion for configuration values.

Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Unknown variables without a
default are left untouched so a missing variable is visible in the final value.
"""
import os
import re
from typing import Any, Dict

_DEFAULTED_VAR = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    def replace(match: "re.Match[str]") -> str:
        return os.environ.get(match.group(1), match.group(2))

    return os.path.expandvars(_DEFAULTED_VAR.sub(replace, value))


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in a configuration value.

    Args:
        value: String, dict, list or scalar value

    Returns:
        The value with every string expanded; non-string scalars unchanged
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration dictionary."""
    return expand_env_vars(config)
