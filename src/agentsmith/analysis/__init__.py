"""
agentsmith analysis records.

An analysis response is a loosely-typed JSON object produced by an external
model session. This package turns it into validated records:

    from agentsmith.analysis import parse_analysis_response

    result = parse_analysis_response(response_text, repo_name="my-repo")
    for agent in result.agents:
        print(agent.name, agent.parent_agent)
"""

# Models
from agentsmith.analysis.models import (
    AgentDefinition,
    AnalysisResult,
    HookDefinition,
    HookEvent,
    SkillCategory,
    SkillDefinition,
    ToolDefinition,
    get_category_description,
)

# Defaults
from agentsmith.analysis.defaults import default_hooks

# Normalizer
from agentsmith.analysis.normalizer import (
    AgentReference,
    NestedAgent,
    UnknownNode,
    classify_sub_agent,
    flatten_agents,
    normalize_hooks,
    normalize_skills,
    normalize_tool,
    normalize_tools,
)

# Parser
from agentsmith.analysis.parser import (
    extract_json_object,
    load_analysis_file,
    parse_analysis_response,
)

# Hierarchy
from agentsmith.analysis.hierarchy import AgentForest

__all__ = [
    # Models
    "AgentDefinition",
    "AnalysisResult",
    "HookDefinition",
    "HookEvent",
    "SkillCategory",
    "SkillDefinition",
    "ToolDefinition",
    "get_category_description",
    # Defaults
    "default_hooks",
    # Normalizer
    "AgentReference",
    "NestedAgent",
    "UnknownNode",
    "classify_sub_agent",
    "flatten_agents",
    "normalize_hooks",
    "normalize_skills",
    "normalize_tool",
    "normalize_tools",
    # Parser
    "extract_json_object",
    "load_analysis_file",
    "parse_analysis_response",
    # Hierarchy
    "AgentForest",
]
