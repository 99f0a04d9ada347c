"""
Asset validation for agentsmith.

Checks generated skills, agents, hooks and the registry file of a
repository and collects errors and warnings.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agentsmith.analysis.hierarchy import AgentForest
from agentsmith.analysis.models import AgentDefinition, HookEvent
from agentsmith.registry.index import DEFAULT_REGISTRY_FILENAME


@dataclass
class ValidationReport:
    """Problems found in a repository's generated assets."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    checked: dict[str, int] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        """Whether no errors were found."""
        return not self.errors


def parse_frontmatter(content: str) -> dict[str, Any] | None:
    """Parse YAML frontmatter delimited by --- lines.

    Args:
        content: Full markdown content.

    Returns:
        The frontmatter mapping, or None if absent or malformed.
    """
    if not content.startswith("---"):
        return None

    lines = content.split("\n")
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == "---":
            try:
                data = yaml.safe_load("\n".join(lines[1:i]))
            except yaml.YAMLError:
                return None
            return data if isinstance(data, dict) else None

    return None


def _read(path: Path, label: str, report: ValidationReport) -> str | None:
    """Read a UTF-8 file, recording an error if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        report.errors.append(f"{label}: Cannot read file - {e}")
        return None


def _validate_skills(root: Path, report: ValidationReport) -> None:
    skills_dir = root / ".github" / "skills"
    if not skills_dir.is_dir():
        report.warnings.append("No .github/skills/ directory found")
        return

    skill_dirs = sorted(p for p in skills_dir.iterdir() if p.is_dir())
    if not skill_dirs:
        report.warnings.append("No skills found in .github/skills/")
        return

    for skill_dir in skill_dirs:
        skill_md = skill_dir / "SKILL.md"
        if not skill_md.exists():
            report.errors.append(f"{skill_dir.name}: Missing SKILL.md file")
            continue

        content = _read(skill_md, f"{skill_dir.name}/SKILL.md", report)
        if content is None:
            continue

        if not content.startswith("---"):
            report.errors.append(f"{skill_dir.name}/SKILL.md: Missing YAML frontmatter")
            continue

        meta = parse_frontmatter(content)
        if meta is None:
            report.errors.append(f"{skill_dir.name}/SKILL.md: Malformed YAML frontmatter")
            continue

        if not meta.get("name"):
            report.errors.append(f"{skill_dir.name}/SKILL.md: Missing 'name' in frontmatter")
        if not meta.get("description"):
            report.warnings.append(f"{skill_dir.name}/SKILL.md: Missing 'description' in frontmatter")

    report.checked["skills"] = len(skill_dirs)


def _validate_agents(root: Path, report: ValidationReport) -> None:
    agents_dir = root / ".github" / "agents"
    if not agents_dir.is_dir():
        report.errors.append("No .github/agents/ directory found")
        return

    agents: list[AgentDefinition] = []
    has_root_agent = False
    count = 0

    for agent_dir in sorted(p for p in agents_dir.iterdir() if p.is_dir()):
        agent_yaml = agent_dir / "agent.yaml"
        # Directories without agent.yaml are leftovers from earlier runs
        if not agent_yaml.exists():
            continue

        content = _read(agent_yaml, f"{agent_dir.name}/agent.yaml", report)
        if content is None:
            continue

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            report.errors.append(f"{agent_dir.name}/agent.yaml: Invalid YAML - {e}")
            continue

        count += 1
        if not isinstance(data, dict):
            report.errors.append(f"{agent_dir.name}/agent.yaml: Expected a YAML mapping")
            continue

        if not data.get("name"):
            report.errors.append(f"{agent_dir.name}/agent.yaml: Missing 'name' field")
        if not data.get("description"):
            report.warnings.append(f"{agent_dir.name}/agent.yaml: Missing 'description' field")

        if data.get("name") == "root" or data.get("isSubAgent") is False:
            has_root_agent = True

        skills = data.get("skills")
        if isinstance(skills, list):
            for skill_name in skills:
                if not (root / ".github" / "skills" / str(skill_name) / "SKILL.md").exists():
                    report.warnings.append(
                        f"{agent_dir.name}/agent.yaml: References non-existent skill '{skill_name}'"
                    )

        if data.get("name"):
            try:
                agents.append(AgentDefinition.model_validate(data))
            except ValidationError:
                report.warnings.append(
                    f"{agent_dir.name}/agent.yaml: Hierarchy fields could not be read"
                )

    if count == 0:
        report.errors.append("No agents found in .github/agents/")
    if not has_root_agent:
        report.errors.append("No root agent found (need an agent with isSubAgent: false)")

    forest = AgentForest.from_agents(agents)
    for name, parent in forest.orphans():
        report.warnings.append(f"Agent '{name}' references unknown parent agent '{parent}'")
    for cycle in forest.find_cycles():
        report.warnings.append(f"Agent hierarchy has a cycle: {' -> '.join(cycle + cycle[:1])}")

    report.checked["agents"] = count


def _validate_hooks(root: Path, report: ValidationReport) -> None:
    hooks_dir = root / ".github" / "hooks"
    if not hooks_dir.is_dir():
        return

    valid_events = [event.value for event in HookEvent]
    hook_files = sorted(p for p in hooks_dir.iterdir() if p.suffix in (".yaml", ".yml"))

    for hook_path in hook_files:
        content = _read(hook_path, f"hooks/{hook_path.name}", report)
        if content is None:
            continue

        try:
            hook = yaml.safe_load(content)
        except yaml.YAMLError as e:
            report.errors.append(f"hooks/{hook_path.name}: Invalid YAML - {e}")
            continue

        if not isinstance(hook, dict):
            report.errors.append(f"hooks/{hook_path.name}: Expected a YAML mapping")
            continue

        if not hook.get("name"):
            report.errors.append(f"hooks/{hook_path.name}: Missing 'name' field")

        event = hook.get("event")
        if not event:
            report.errors.append(f"hooks/{hook_path.name}: Missing 'event' field")
        elif event not in valid_events:
            report.errors.append(
                f"hooks/{hook_path.name}: Invalid event '{event}'. "
                f"Must be one of: {', '.join(valid_events)}"
            )

        commands = hook.get("commands")
        if not isinstance(commands, list) or not commands:
            report.errors.append(f"hooks/{hook_path.name}: Missing or empty 'commands' array")

    report.checked["hooks"] = len(hook_files)


def _validate_registry(root: Path, report: ValidationReport, filename: str) -> None:
    registry_path = root / filename
    if not registry_path.exists():
        report.warnings.append(f"No {filename} found")
        return

    content = _read(registry_path, filename, report)
    if content is None:
        return

    lines = [line for line in content.splitlines() if line.strip()]
    if not lines:
        report.warnings.append(f"{filename} is empty")
        return

    for number, line in enumerate(lines, start=1):
        try:
            entry = json.loads(line)
        except json.JSONDecodeError:
            report.errors.append(f"{filename} line {number}: Invalid JSON")
            continue

        if not isinstance(entry, dict) or not entry.get("name") or not entry.get("type"):
            report.errors.append(f"{filename} line {number}: Missing 'name' or 'type'")

    report.checked["registry"] = len(lines)


def validate_assets(
    root_path: str | Path,
    registry_filename: str = DEFAULT_REGISTRY_FILENAME,
) -> ValidationReport:
    """Validate the generated assets of a repository.

    Args:
        root_path: Repository root.
        registry_filename: Name of the registry file.

    Returns:
        ValidationReport with every problem found.
    """
    root = Path(root_path).resolve()
    report = ValidationReport()

    _validate_skills(root, report)
    _validate_agents(root, report)
    _validate_hooks(root, report)
    _validate_registry(root, report, registry_filename)

    return report
