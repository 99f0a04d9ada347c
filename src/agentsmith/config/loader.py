"""
Configuration loader for agentsmith.

Loads and merges configuration from multiple sources:
1. Default values
2. Global config (~/.agentsmith/config.yaml)
3. Project config (.agentsmith.yaml, searched upward from the cwd)
4. Explicit config file (--config)
5. Environment variables (AGENTSMITH_*)
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agentsmith.config.merger import deep_merge, set_nested_value
from agentsmith.config.schema import Config
from agentsmith.exceptions import ConfigurationError
from agentsmith.storage.paths import find_project_config, get_global_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "AGENTSMITH_"

# Environment variables that are not config overrides
_RESERVED_ENV = {"AGENTSMITH_HOME"}


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary (empty if the file does not exist).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", path) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config: {e}", path) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError("Config must be a YAML mapping", path)
    return content


def apply_env_overrides(config: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    AGENTSMITH_<SECTION>_<KEY>=<value> sets ``section.key``; the key part may
    itself contain underscores (AGENTSMITH_REGISTRY_DEFAULT_LIMIT sets
    ``registry.default_limit``).

    Args:
        config: Configuration dictionary to modify.
        environ: Environment to read (default: os.environ).

    Returns:
        Configuration with environment overrides applied.
    """
    environ = os.environ if environ is None else environ

    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV:
            continue

        section, _, option = key[len(ENV_PREFIX) :].lower().partition("_")
        if not section or not option:
            continue

        config = set_nested_value(config, f"{section}.{option}", _parse_env_value(value))

    return config


def _parse_env_value(value: str) -> Any:
    """
    Parse an environment variable value to the appropriate type.

    Returns:
        Parsed value (bool, int, float, or string).
    """
    if value.lower() in ("true", "yes", "on"):
        return True
    if value.lower() in ("false", "no", "off"):
        return False

    if re.match(r"^-?\d+$", value):
        return int(value)

    if re.match(r"^-?\d+\.\d+$", value):
        return float(value)

    return value


def load_config(
    config_path: Path | None = None,
    project_path: Path | None = None,
    skip_project: bool = False,
    skip_env: bool = False,
) -> Config:
    """
    Load and merge configuration from all sources.

    Args:
        config_path: Explicit config file, applied after global and project config.
        project_path: Starting path to search for project config. Defaults to cwd.
        skip_project: Skip loading project configuration.
        skip_env: Skip environment variable overrides.

    Returns:
        Merged and validated Config object.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict = Config().model_dump()

    global_path = get_global_config_path()
    if global_path.exists():
        config_dict = deep_merge(config_dict, load_yaml_file(global_path))
        logger.debug(f"Loaded global config from {global_path}")

    if not skip_project:
        project_config_path = find_project_config(project_path)
        if project_config_path:
            config_dict = deep_merge(config_dict, load_yaml_file(project_config_path))
            logger.debug(f"Loaded project config from {project_config_path}")

    if config_path is not None:
        if not Path(config_path).exists():
            raise ConfigurationError("Config file does not exist", Path(config_path))
        config_dict = deep_merge(config_dict, load_yaml_file(Path(config_path)))

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
