"""
Exceptions for agentsmith.

Read paths (registry, normalizer) fail soft and never raise these; write
paths and user input errors do.
"""

from pathlib import Path


class AgentSmithError(Exception):
    """Base exception for agentsmith errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (at {path})" if path else ""))


class AnalysisParseError(AgentSmithError):
    """The analysis response holds no usable JSON object."""

    pass


class ConfigurationError(AgentSmithError):
    """Raised when configuration loading or validation fails."""

    pass
