"""
Artifact generator for agentsmith.

Writes one SKILL.md per skill, one agent.yaml per agent and one hook file
per hook under the repository's .github/ directory.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from agentsmith.analysis.models import (
    AgentDefinition,
    AnalysisResult,
    HookDefinition,
    SkillDefinition,
    get_category_description,
)
from agentsmith.registry.index import agent_file, skill_file

logger = logging.getLogger(__name__)


SKILL_MD_TEMPLATE = """---
{frontmatter}---

# {title}

{description}

## When to Use

Use this skill when:

{when_to_use}

## Patterns

{patterns}

## Examples

{examples}

## Category

**{category}** - {category_description}
"""

AGENT_YAML_HEADER = """# Agent Configuration
# Generated by agentsmith

"""

HOOK_YAML_HEADER = """# Hook Configuration
# Generated by agentsmith

"""


@dataclass
class GeneratorResult:
    """Paths of generated artifacts, relative to the repository root."""

    files: list[str] = field(default_factory=list)


def hook_file(name: str) -> str:
    """Relative path of a hook's generated YAML file."""
    return f".github/hooks/{name}.yaml"


def _title(name: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def _dump_yaml(data: dict[str, Any]) -> str:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def render_skill_markdown(skill: SkillDefinition) -> str:
    """Render the SKILL.md content for a skill."""
    when_to_use = [f"- Working with code in `{skill.source_dir}/`"]
    when_to_use.extend(f'- User mentions "{trigger}"' for trigger in skill.triggers)

    if skill.patterns:
        patterns = "\n".join(f"- {pattern}" for pattern in skill.patterns)
    else:
        patterns = "- Patterns extracted from codebase analysis"

    if skill.examples:
        examples = "\n\n".join(f"```\n{example}\n```" for example in skill.examples)
    else:
        examples = "See source files in the repository for examples."

    return SKILL_MD_TEMPLATE.format(
        frontmatter=_dump_yaml({"name": skill.name, "description": skill.description}),
        title=_title(skill.name),
        description=skill.description,
        when_to_use="\n".join(when_to_use),
        patterns=patterns,
        examples=examples,
        category=skill.category,
        category_description=get_category_description(skill.category),
    )


def render_agent_yaml(agent: AgentDefinition) -> str:
    """Render the agent.yaml content for an agent."""
    data: dict[str, Any] = {
        "name": agent.name,
        "description": agent.description,
        "version": "1.0",
        "skills": agent.skills,
        "tools": [tool.model_dump() for tool in agent.tools],
        "triggers": agent.triggers,
        "isSubAgent": agent.is_sub_agent,
    }
    if agent.parent_agent:
        data["parentAgent"] = agent.parent_agent
    if agent.sub_agents:
        data["subAgents"] = agent.sub_agents
    if agent.source_dir:
        data["sourceDir"] = agent.source_dir

    return AGENT_YAML_HEADER + _dump_yaml(data)


def render_hook_yaml(hook: HookDefinition) -> str:
    """Render the YAML content for a hook."""
    data: dict[str, Any] = {
        "name": hook.name,
        "event": hook.event,
        "description": hook.description,
        "commands": hook.commands,
    }
    if hook.condition:
        data["condition"] = hook.condition

    return HOOK_YAML_HEADER + _dump_yaml(data)


class Generator:
    """Writes analysis artifacts into a repository.

    In dry-run mode paths are computed but nothing touches the filesystem.
    Write errors propagate to the caller.
    """

    def __init__(self, root_path: str | Path, dry_run: bool = False):
        self.root_path = Path(root_path)
        self.dry_run = dry_run

    def generate(self, analysis: AnalysisResult) -> GeneratorResult:
        """Generate every artifact of an analysis.

        Args:
            analysis: Normalized analysis result.

        Returns:
            GeneratorResult listing skills, then agents, then hooks.
        """
        result = GeneratorResult()

        for skill in analysis.skills:
            result.files.append(self._write(skill_file(skill.name), render_skill_markdown(skill)))

        for agent in analysis.agents:
            result.files.append(self._write(agent_file(agent.name), render_agent_yaml(agent)))

        for hook in analysis.hooks:
            result.files.append(self._write(hook_file(hook.name), render_hook_yaml(hook)))

        logger.info(f"Generated {len(result.files)} files in {self.root_path}")
        return result

    def _write(self, relative_path: str, content: str) -> str:
        if not self.dry_run:
            target = self.root_path / relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            logger.debug(f"Wrote {target}")
        return relative_path
