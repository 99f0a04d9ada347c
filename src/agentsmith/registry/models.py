"""
Registry models for agentsmith.

A registry entry is the flat, search-ready projection of a skill or agent.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EntryType(str, Enum):
    """Kinds of registry entries."""

    SKILL = "skill"
    AGENT = "agent"


class RegistryEntry(BaseModel):
    """One line of the registry file.

    Optional fields are left out of the stored JSON when unset, and keys
    this model does not know are ignored on read.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", use_enum_values=True)

    type: EntryType = Field(..., description="Entry kind")
    name: str = Field(..., description="Skill or agent name")
    file: str = Field(..., description="Generated artifact path, relative to the repository")
    description: str = Field(default="", description="Short description")
    category: str | None = Field(default=None, description="Skill category")
    triggers: list[str] = Field(default_factory=list, description="Search keywords")
    parent_agent: str | None = Field(default=None, alias="parentAgent")
    sub_agents: list[str] | None = Field(default=None, alias="subAgents")
    is_sub_agent: bool | None = Field(default=None, alias="isSubAgent")

    @property
    def is_root_agent(self) -> bool:
        """Whether this entry is an agent at the top of its hierarchy."""
        return self.type == EntryType.AGENT.value and not self.is_sub_agent

    def to_record(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
