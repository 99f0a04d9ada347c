"""
agentsmith - Repository assimilation toolkit

Turns a repository analysis into skills, agent descriptors and lifecycle
hooks, and indexes them in a searchable registry.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("agentsmith")
except PackageNotFoundError:
    __version__ = "0.2.0"

__all__ = [
    "__version__",
]
