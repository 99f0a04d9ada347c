"""
Agent hierarchy for agentsmith.

Builds an explicit forest from flattened agents so that broken parent
links and cycles in analysis output can be reported. The forest is a
read-only view; it never changes the normalized agent list.
"""

from agentsmith.analysis.models import AgentDefinition


class AgentForest:
    """Agents indexed by name with parent/child links resolved.

    When several agents share a name the last one wins, matching how the
    registry and generated files treat duplicates.
    """

    def __init__(self, agents: dict[str, AgentDefinition]):
        self._agents = agents

    @classmethod
    def from_agents(cls, agents: list[AgentDefinition]) -> "AgentForest":
        """Index a flat agent list."""
        index: dict[str, AgentDefinition] = {}
        for agent in agents:
            index[agent.name] = agent
        return cls(index)

    def __contains__(self, name: object) -> bool:
        return name in self._agents

    def __len__(self) -> int:
        return len(self._agents)

    def get(self, name: str) -> AgentDefinition | None:
        """Get an agent by name."""
        return self._agents.get(name)

    def roots(self) -> list[AgentDefinition]:
        """Agents at the top of a hierarchy."""
        return [agent for agent in self._agents.values() if agent.is_root]

    def children(self, name: str) -> list[AgentDefinition]:
        """Agents whose parent is the given agent."""
        return [agent for agent in self._agents.values() if agent.parent_agent == name]

    def ancestors(self, name: str) -> list[str]:
        """Names of an agent's ancestors, nearest first.

        Stops at a missing parent or when a cycle would repeat a name.
        """
        result: list[str] = []
        seen = {name}
        agent = self._agents.get(name)

        while agent is not None and agent.parent_agent:
            parent = agent.parent_agent
            if parent in seen:
                break
            result.append(parent)
            seen.add(parent)
            agent = self._agents.get(parent)

        return result

    def orphans(self) -> list[tuple[str, str]]:
        """Agents pointing at a parent that does not exist.

        Returns:
            List of (agent name, missing parent name).
        """
        return [
            (agent.name, agent.parent_agent)
            for agent in self._agents.values()
            if agent.parent_agent and agent.parent_agent not in self._agents
        ]

    def find_cycles(self) -> list[list[str]]:
        """Find cycles in the parent links.

        Returns:
            Each cycle once, as agent names in child-to-parent order
            starting from the first member reached.
        """
        cycles: list[list[str]] = []
        visited: set[str] = set()

        for start in self._agents:
            if start in visited:
                continue

            path: list[str] = []
            position: dict[str, int] = {}
            current: str | None = start

            while current is not None and current in self._agents and current not in visited:
                if current in position:
                    cycles.append(path[position[current] :])
                    break
                position[current] = len(path)
                path.append(current)
                current = self._agents[current].parent_agent

            visited.update(path)

        return cycles
