"""
Analysis models for agentsmith.

Defines the records produced from a repository analysis: skills, agents,
their tools, lifecycle hooks, and the combined analysis result.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SkillCategory(str, Enum):
    """Known skill categories."""

    ARCHITECTURE = "architecture"
    RELIABILITY = "reliability"
    QUALITY = "quality"
    SECURITY = "security"
    PATTERNS = "patterns"


CATEGORY_DESCRIPTIONS: dict[str, str] = {
    SkillCategory.ARCHITECTURE.value: "Structural patterns and system design",
    SkillCategory.RELIABILITY.value: "Error handling, recovery, and fault tolerance",
    SkillCategory.QUALITY.value: "Testing, validation, and code quality",
    SkillCategory.SECURITY.value: "Authentication, authorization, and data protection",
    SkillCategory.PATTERNS.value: "Common code patterns and conventions",
}

DEFAULT_CATEGORY_DESCRIPTION = "General patterns"


def get_category_description(category: str) -> str:
    """Get the human description of a skill category.

    Unknown categories fall back to a generic description.
    """
    return CATEGORY_DESCRIPTIONS.get(category, DEFAULT_CATEGORY_DESCRIPTION)


class SkillDefinition(BaseModel):
    """A skill extracted from the analysed repository.

    Created once per analysis run and never merged across runs.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Short identifier, unique within one run")
    description: str = Field(default="", description="When and how to use the skill")
    source_dir: str = Field(default="", alias="sourceDir", description="Advisory path hint")
    patterns: list[str] = Field(default_factory=list, description="Conventions the skill embodies")
    triggers: list[str] = Field(default_factory=list, description="Keywords that drive search")
    category: str = Field(default=SkillCategory.PATTERNS.value, description="Skill category label")
    examples: list[str] = Field(default_factory=list, description="Example snippets or references")


class ToolDefinition(BaseModel):
    """An externally runnable command owned by an agent."""

    name: str
    command: str
    description: str = ""


class AgentDefinition(BaseModel):
    """An agent record after normalization.

    Parent/child relationships are expressed purely by name.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Agent identifier")
    description: str = Field(default="", description="What the agent is responsible for")
    skills: list[str] = Field(default_factory=list, description="Skill names owned by the agent")
    tools: list[ToolDefinition] = Field(default_factory=list, description="Runnable commands")
    is_sub_agent: bool = Field(default=False, alias="isSubAgent")
    parent_agent: str | None = Field(default=None, alias="parentAgent")
    sub_agents: list[str] | None = Field(default=None, alias="subAgents")
    triggers: list[str] = Field(default_factory=list, description="Activation keywords")
    source_dir: str | None = Field(default=None, alias="sourceDir")

    @property
    def is_root(self) -> bool:
        """Whether this agent sits at the top of its hierarchy."""
        return not self.is_sub_agent


class HookEvent(str, Enum):
    """Lifecycle events a hook can attach to."""

    PRE_COMMIT = "pre-commit"
    POST_COMMIT = "post-commit"
    PRE_PUSH = "pre-push"
    PRE_ANALYZE = "pre-analyze"
    POST_GENERATE = "post-generate"


class HookDefinition(BaseModel):
    """A lifecycle hook: shell commands run on an event."""

    model_config = ConfigDict(use_enum_values=True)

    name: str
    event: HookEvent
    description: str = ""
    commands: list[str] = Field(default_factory=list)
    condition: str | None = None


class AnalysisResult(BaseModel):
    """Everything produced by one analysis run."""

    repo_name: str
    skills: list[SkillDefinition] = Field(default_factory=list)
    agents: list[AgentDefinition] = Field(default_factory=list)
    tools: list[ToolDefinition] = Field(default_factory=list)
    hooks: list[HookDefinition] = Field(default_factory=list)
    summary: str = ""

    @property
    def sub_agent_count(self) -> int:
        """Number of agents marked as sub-agents."""
        return sum(1 for agent in self.agents if agent.is_sub_agent)

    @property
    def root_agent_count(self) -> int:
        """Number of root-like agents."""
        return len(self.agents) - self.sub_agent_count
