"""
Registry index for agentsmith.

Builds and searches the newline-delimited JSON index of generated skills
and agents. The file is rewritten in full on every build; reads treat a
missing or damaged file as an empty registry.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from agentsmith.analysis.models import AgentDefinition, SkillDefinition
from agentsmith.registry.models import EntryType, RegistryEntry

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_FILENAME = "skills-registry.jsonl"
DEFAULT_SEARCH_LIMIT = 10

# Relevance points
EXACT_NAME_SCORE = 100
NAME_MATCH_SCORE = 50
DESCRIPTION_MATCH_SCORE = 30
TRIGGER_MATCH_SCORE = 20
TRIGGER_EXACT_BONUS = 40
CATEGORY_MATCH_SCORE = 10
ROOT_AGENT_BOOST = 5


def skill_file(name: str) -> str:
    """Relative path of a skill's generated SKILL.md."""
    return f".github/skills/{name}/SKILL.md"


def agent_file(name: str) -> str:
    """Relative path of an agent's generated agent.yaml."""
    return f".github/agents/{name}/agent.yaml"


def project_entries(
    skills: list[SkillDefinition],
    agents: list[AgentDefinition] | None = None,
) -> list[RegistryEntry]:
    """Project skills and agents into registry entries.

    Skills come first, then agents, each in input order.
    """
    entries = []

    for skill in skills:
        entries.append(
            RegistryEntry(
                type=EntryType.SKILL,
                name=skill.name,
                file=skill_file(skill.name),
                description=skill.description,
                category=skill.category,
                triggers=skill.triggers,
            )
        )

    for agent in agents or []:
        entries.append(
            RegistryEntry(
                type=EntryType.AGENT,
                name=agent.name,
                file=agent_file(agent.name),
                description=agent.description,
                triggers=agent.triggers,
                is_sub_agent=agent.is_sub_agent,
                parent_agent=agent.parent_agent,
                sub_agents=agent.sub_agents,
            )
        )

    return entries


def score_entry(entry: RegistryEntry, query: str) -> int:
    """Score an entry's relevance to a query.

    Matching is case-insensitive. Points add up:

    - name equals the query: 100
    - name contains the query: 50
    - description contains the query: 30
    - each trigger containing the query: 20, plus 40 if it equals the query
    - category contains the query: 10
    - root-level agent: 5

    Args:
        entry: Registry entry.
        query: Search query.

    Returns:
        Relevance score (0 means no match).
    """
    query_lower = query.lower()
    name_lower = entry.name.lower()
    score = 0

    if name_lower == query_lower:
        score += EXACT_NAME_SCORE

    if query_lower in name_lower:
        score += NAME_MATCH_SCORE

    if query_lower in entry.description.lower():
        score += DESCRIPTION_MATCH_SCORE

    for trigger in entry.triggers:
        trigger_lower = trigger.lower()
        if query_lower in trigger_lower:
            score += TRIGGER_MATCH_SCORE
        if trigger_lower == query_lower:
            score += TRIGGER_EXACT_BONUS

    if entry.category and query_lower in entry.category.lower():
        score += CATEGORY_MATCH_SCORE

    if entry.is_root_agent:
        score += ROOT_AGENT_BOOST

    return score


class Registry:
    """Skills and agents registry stored as JSON Lines.

    Usage:
        registry = Registry(repo_path)
        registry.build(result.skills, result.agents)
        matches = registry.search("auth", entry_type="agent", limit=3)
    """

    def __init__(
        self,
        root_path: str | Path,
        dry_run: bool = False,
        filename: str = DEFAULT_REGISTRY_FILENAME,
    ):
        """Initialize the registry.

        Args:
            root_path: Directory holding the registry file.
            dry_run: Compute builds without writing the file.
            filename: Registry file name.
        """
        self.root_path = Path(root_path)
        self.dry_run = dry_run
        self._path = self.root_path / filename

    @property
    def path(self) -> Path:
        """Path to the registry file."""
        return self._path

    def build(
        self,
        skills: list[SkillDefinition],
        agents: list[AgentDefinition] | None = None,
    ) -> None:
        """Rebuild the registry from one analysis run.

        The file is fully overwritten. Write errors propagate.

        Args:
            skills: All skills of the run.
            agents: All (flattened) agents of the run.

        Raises:
            OSError: If the registry file cannot be written.
        """
        entries = project_entries(skills, agents)
        content = "".join(json.dumps(entry.to_record()) + "\n" for entry in entries)
        if not entries:
            content = "\n"

        if self.dry_run:
            logger.info(f"Dry run: registry would hold {len(entries)} entries")
            return

        self._path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {len(entries)} entries to {self._path}")

    def list(self) -> list[RegistryEntry]:
        """List every entry in file order.

        Returns:
            All entries (empty if the file is missing, unreadable or damaged).
        """
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read registry {self._path}: {e}")
            return []

        entries = []
        for line in content.splitlines():
            if not line.strip():
                continue
            try:
                entries.append(RegistryEntry.model_validate(json.loads(line)))
            except (json.JSONDecodeError, ValidationError) as e:
                logger.warning(f"Registry {self._path} is damaged, treating as empty: {e}")
                return []

        return entries

    def search(
        self,
        query: str,
        entry_type: EntryType | str | None = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[RegistryEntry]:
        """Search entries by relevance.

        Args:
            query: Search query.
            entry_type: Only consider this kind of entry. An unknown kind
                matches nothing.
            limit: Maximum number of results.

        Returns:
            Matching entries, best first; ties keep file order.
        """
        entries = self.list()

        if entry_type:
            try:
                type_value = EntryType(entry_type).value
            except ValueError:
                logger.warning(f"Unknown registry entry type: {entry_type!r}")
                return []
            entries = [entry for entry in entries if entry.type == type_value]

        scored = [(score_entry(entry, query), entry) for entry in entries]
        matches = [(score, entry) for score, entry in scored if score > 0]
        matches.sort(key=lambda item: item[0], reverse=True)

        return [entry for _, entry in matches[:limit]]

    def get(self, name: str) -> RegistryEntry | None:
        """Get the first entry with an exact name.

        Re-reads the registry on every call.

        Returns:
            The entry, or None if not found.
        """
        for entry in self.list():
            if entry.name == name:
                return entry
        return None
