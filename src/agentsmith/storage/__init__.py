"""Path resolution for agentsmith."""

from agentsmith.storage.paths import (
    PROJECT_CONFIG_FILENAME,
    find_project_config,
    get_agentsmith_home,
    get_global_config_path,
)

__all__ = [
    "PROJECT_CONFIG_FILENAME",
    "find_project_config",
    "get_agentsmith_home",
    "get_global_config_path",
]
