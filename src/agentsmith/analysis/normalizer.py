"""
Response normalizer for agentsmith.

Turns the loosely-typed entity graph returned by an analysis into flat,
validated records. Agents may embed their children as full objects inside
``subAgents``; these are pulled out into the same flat list and linked back
to their parent by name.

Nothing in this module raises on malformed input. Every field degrades to a
default instead.
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

from agentsmith.analysis.models import (
    AgentDefinition,
    HookDefinition,
    HookEvent,
    SkillCategory,
    SkillDefinition,
    ToolDefinition,
)

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "unknown"


# =============================================================================
# Sub-agent node variants
# =============================================================================


@dataclass(frozen=True)
class NestedAgent:
    """A full agent object embedded in its parent's ``subAgents``."""

    raw: dict[str, Any]


@dataclass(frozen=True)
class AgentReference:
    """A bare name pointing at an agent defined elsewhere."""

    name: str


@dataclass(frozen=True)
class UnknownNode:
    """Anything else found in ``subAgents``; dropped."""

    value: Any


SubAgentNode = Union[NestedAgent, AgentReference, UnknownNode]


def classify_sub_agent(value: Any) -> SubAgentNode:
    """Classify one element of a raw ``subAgents`` list.

    Args:
        value: Raw element as parsed from JSON.

    Returns:
        NestedAgent for a mapping with a ``name`` key, AgentReference for a
        string, UnknownNode otherwise.
    """
    if isinstance(value, dict) and "name" in value:
        return NestedAgent(raw=value)
    if isinstance(value, str):
        return AgentReference(name=value)
    return UnknownNode(value=value)


# =============================================================================
# Field coercion
# =============================================================================


def _text(value: Any, default: str = "") -> str:
    """Return value if it is a non-empty string, else the default."""
    if isinstance(value, str) and value:
        return value
    return default


def _optional_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _string_list(value: Any) -> list[str]:
    """Coerce a raw value to a list of strings.

    Non-lists become an empty list; scalar items are stringified and
    nested containers or nulls are dropped.
    """
    if not isinstance(value, list):
        return []

    result = []
    for item in value:
        if isinstance(item, str):
            result.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            result.append(str(item))
        else:
            logger.debug(f"Dropping non-scalar list item: {item!r}")
    return result


def _loose_text(value: Any) -> str:
    """Stringify any truthy value, empty string otherwise."""
    return str(value) if value else ""


# =============================================================================
# Tools
# =============================================================================


def normalize_tool(tool: Any) -> ToolDefinition:
    """Normalize a single tool entry.

    A bare command string like ``"npm test"`` becomes
    ``{name: "npm", command: "npm test", description: "npm test"}``.
    """
    if isinstance(tool, str):
        parts = tool.split(None, 1)
        return ToolDefinition(
            name=parts[0] if parts else "",
            command=tool,
            description=tool,
        )

    if isinstance(tool, dict):
        name = tool.get("name")
        return ToolDefinition(
            name=_loose_text(name) or UNKNOWN_NAME,
            command=_loose_text(tool.get("command") or name),
            description=_loose_text(tool.get("description") or name),
        )

    return ToolDefinition(name=UNKNOWN_NAME, command=str(tool), description=str(tool))


def normalize_tools(tools: Any) -> list[ToolDefinition]:
    """Normalize a raw ``tools`` field into tool definitions."""
    if not isinstance(tools, list):
        return []
    return [normalize_tool(tool) for tool in tools]


# =============================================================================
# Agents
# =============================================================================


def _normalize_agent(raw: dict[str, Any], parent: str | None) -> list[AgentDefinition]:
    """Normalize one agent node and everything nested below it.

    Args:
        raw: Raw agent mapping.
        parent: Name of the enclosing agent when the node was embedded in a
            parent's ``subAgents``; None for top-level nodes.

    Returns:
        The agent followed by its descendants, depth-first pre-order.
    """
    name = _text(raw.get("name"), UNKNOWN_NAME)

    nested: list[dict[str, Any]] = []
    sub_agent_names: list[str] = []

    raw_sub_agents = raw.get("subAgents")
    if isinstance(raw_sub_agents, list):
        for element in raw_sub_agents:
            node = classify_sub_agent(element)
            if isinstance(node, NestedAgent):
                nested.append(node.raw)
                sub_agent_names.append(_text(node.raw.get("name"), UNKNOWN_NAME))
            elif isinstance(node, AgentReference):
                sub_agent_names.append(node.name)
            else:
                logger.debug(f"Ignoring sub-agent entry of agent '{name}': {node.value!r}")

    if parent is not None:
        is_sub_agent = True
        parent_agent: str | None = parent
    else:
        is_sub_agent = bool(raw.get("isSubAgent"))
        parent_agent = _loose_text(raw.get("parentAgent")) or None

    agent = AgentDefinition(
        name=name,
        description=_text(raw.get("description")),
        skills=_string_list(raw.get("skills")),
        tools=normalize_tools(raw.get("tools")),
        is_sub_agent=is_sub_agent,
        parent_agent=parent_agent,
        sub_agents=sub_agent_names or None,
        triggers=_string_list(raw.get("triggers")),
        source_dir=_loose_text(raw.get("sourceDir")) or None,
    )

    result = [agent]
    for child in nested:
        result.extend(_normalize_agent(child, parent=name))
    return result


def flatten_agents(raw_agents: Any) -> list[AgentDefinition]:
    """Flatten a possibly nested agent list into agent definitions.

    Parents precede their children and sibling order is preserved.
    Duplicate names are kept; the raw input is not modified.

    Args:
        raw_agents: The raw ``agents`` value from an analysis response.

    Returns:
        Flat list of normalized agents.
    """
    if not isinstance(raw_agents, list):
        if raw_agents is not None:
            logger.debug(f"Expected a list of agents, got {type(raw_agents).__name__}")
        return []

    result: list[AgentDefinition] = []
    for raw in raw_agents:
        if not isinstance(raw, dict):
            logger.debug(f"Skipping non-object agent entry: {raw!r}")
            continue
        result.extend(_normalize_agent(raw, parent=None))
    return result


# =============================================================================
# Skills and hooks
# =============================================================================


def normalize_skills(raw_skills: Any) -> list[SkillDefinition]:
    """Normalize the raw ``skills`` value into skill definitions."""
    if not isinstance(raw_skills, list):
        return []

    skills = []
    for raw in raw_skills:
        if not isinstance(raw, dict):
            logger.debug(f"Skipping non-object skill entry: {raw!r}")
            continue

        skills.append(
            SkillDefinition(
                name=_text(raw.get("name"), UNKNOWN_NAME),
                description=_text(raw.get("description")),
                source_dir=_text(raw.get("sourceDir")),
                patterns=_string_list(raw.get("patterns")),
                triggers=_string_list(raw.get("triggers")),
                category=_text(raw.get("category"), SkillCategory.PATTERNS.value),
                examples=_string_list(raw.get("examples")),
            )
        )
    return skills


def normalize_hooks(raw_hooks: Any) -> list[HookDefinition]:
    """Normalize the raw ``hooks`` value into hook definitions.

    Hooks bound to an unrecognized event are dropped.
    """
    if not isinstance(raw_hooks, list):
        return []

    valid_events = {event.value for event in HookEvent}
    hooks = []
    for raw in raw_hooks:
        if not isinstance(raw, dict):
            continue

        name = _text(raw.get("name"), UNKNOWN_NAME)
        event = raw.get("event")
        if not isinstance(event, str) or event not in valid_events:
            logger.warning(f"Dropping hook '{name}' with unknown event: {event!r}")
            continue

        hooks.append(
            HookDefinition(
                name=name,
                event=event,
                description=_text(raw.get("description")),
                commands=_string_list(raw.get("commands")),
                condition=_optional_text(raw.get("condition")),
            )
        )
    return hooks
