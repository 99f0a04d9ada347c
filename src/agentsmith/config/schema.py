"""
Pydantic configuration schema for agentsmith.

This module defines all configuration models with validation.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from agentsmith.hooks.runner import DEFAULT_HOOK_TIMEOUT
from agentsmith.registry.index import DEFAULT_REGISTRY_FILENAME, DEFAULT_SEARCH_LIMIT

# =============================================================================
# Registry Configuration
# =============================================================================


class RegistryConfig(BaseModel):
    """Registry file and search defaults."""

    filename: str = DEFAULT_REGISTRY_FILENAME
    default_limit: int = Field(default=DEFAULT_SEARCH_LIMIT, ge=1, le=100)


# =============================================================================
# Hooks Configuration
# =============================================================================


class HooksConfig(BaseModel):
    """Lifecycle hook execution."""

    enabled: bool = True
    timeout: int = Field(default=DEFAULT_HOOK_TIMEOUT, ge=1, le=3600)


# =============================================================================
# License Configuration
# =============================================================================


class LicenseConfig(BaseModel):
    """License gate applied before generation."""

    enforce: bool = True


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Console logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


# =============================================================================
# Root Configuration
# =============================================================================


class Config(BaseModel):
    """
    Root configuration model for agentsmith.

    Configuration can be loaded from YAML files and environment variables,
    merged in order of priority.
    """

    model_config = ConfigDict(extra="allow")

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    hooks: HooksConfig = Field(default_factory=HooksConfig)
    license: LicenseConfig = Field(default_factory=LicenseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
