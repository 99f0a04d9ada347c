"""
agentsmith registry.

A flat JSON Lines index over generated skills and agents, with weighted
keyword search:

    from agentsmith.registry import Registry

    registry = Registry(".")
    for entry in registry.search("auth", limit=5):
        print(entry.type, entry.name, entry.file)
"""

from agentsmith.registry.index import (
    DEFAULT_REGISTRY_FILENAME,
    DEFAULT_SEARCH_LIMIT,
    Registry,
    agent_file,
    project_entries,
    score_entry,
    skill_file,
)
from agentsmith.registry.models import EntryType, RegistryEntry

__all__ = [
    "DEFAULT_REGISTRY_FILENAME",
    "DEFAULT_SEARCH_LIMIT",
    "EntryType",
    "Registry",
    "RegistryEntry",
    "agent_file",
    "project_entries",
    "score_entry",
    "skill_file",
]
