"""CLI command modules for agentsmith."""
