"""
Configuration merger for agentsmith.

Implements recursive merging of configuration dictionaries.
"""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Merge rules:
    - Scalar values and lists: override replaces base
    - Dicts: recursive deep merge
    - null/None value: remove key from result

    Args:
        base: Base configuration dictionary.
        override: Override configuration dictionary.

    Returns:
        Merged configuration dictionary.

    Examples:
        >>> deep_merge({"hooks": {"timeout": 120, "enabled": True}}, {"hooks": {"timeout": 30}})
        {'hooks': {'timeout': 30, 'enabled': True}}
    """
    result = base.copy()

    for key, value in override.items():
        if value is None:
            result.pop(key, None)

        elif isinstance(value, dict) and key in result and isinstance(result[key], dict):
            result[key] = deep_merge(result[key], value)

        else:
            result[key] = value

    return result


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Set a nested value in a configuration dictionary.

    Creates intermediate dictionaries as needed.

    Args:
        config: Configuration dictionary.
        key_path: Dot-separated key path (e.g., "hooks.timeout").
        value: Value to set.

    Returns:
        Modified configuration dictionary.
    """
    keys = key_path.split(".")
    current = config

    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
    return config
