"""
agentsmith configuration.

    from agentsmith.config import load_config

    config = load_config()
    print(config.registry.filename, config.hooks.timeout)
"""

from agentsmith.config.loader import (
    apply_env_overrides,
    load_config,
    load_yaml_file,
)
from agentsmith.config.merger import deep_merge, set_nested_value
from agentsmith.config.schema import (
    Config,
    HooksConfig,
    LicenseConfig,
    LoggingConfig,
    RegistryConfig,
)
from agentsmith.exceptions import ConfigurationError

__all__ = [
    "Config",
    "ConfigurationError",
    "HooksConfig",
    "LicenseConfig",
    "LoggingConfig",
    "RegistryConfig",
    "apply_env_overrides",
    "deep_merge",
    "load_config",
    "load_yaml_file",
    "set_nested_value",
]
