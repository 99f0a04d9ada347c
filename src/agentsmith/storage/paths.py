"""
Path utilities for agentsmith.

Provides consistent path resolution for configuration files.
"""

import os
from pathlib import Path

PROJECT_CONFIG_FILENAME = ".agentsmith.yaml"


def get_agentsmith_home() -> Path:
    """
    Get the agentsmith home directory.

    Resolution order:
    1. AGENTSMITH_HOME environment variable
    2. Default: ~/.agentsmith

    Returns:
        Path to the agentsmith home directory.
    """
    env_home = os.environ.get("AGENTSMITH_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".agentsmith"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.agentsmith/config.yaml
    """
    return get_agentsmith_home() / "config.yaml"


def find_project_config(start_path: Path | None = None) -> Path | None:
    """
    Find the project configuration file by traversing up the directory tree.

    Looks for .agentsmith.yaml starting from the given path (or current
    directory) and moving up to the filesystem root.

    Args:
        start_path: Starting directory to search from. Defaults to cwd.

    Returns:
        Path to the project config if found, None otherwise.
    """
    current = Path(start_path).resolve() if start_path else Path.cwd()

    while True:
        project_config = current / PROJECT_CONFIG_FILENAME
        if project_config.is_file():
            return project_config
        if current == current.parent:
            return None
        current = current.parent
