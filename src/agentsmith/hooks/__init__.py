"""
Lifecycle hooks for agentsmith.

Hooks are shell commands bound to events such as pre-commit or
post-generate, stored as YAML files under .github/hooks/.
"""

from agentsmith.hooks.runner import DEFAULT_HOOK_TIMEOUT, HookResult, HookRunner

__all__ = [
    "DEFAULT_HOOK_TIMEOUT",
    "HookResult",
    "HookRunner",
]
