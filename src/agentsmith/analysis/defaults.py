"""
Default lifecycle hooks for agentsmith.

Used when an analysis response does not provide its own hooks.
"""

import logging

from agentsmith.analysis.models import HookDefinition, HookEvent

logger = logging.getLogger(__name__)

# language -> (pre-commit description, pre-commit commands, test command)
_LANGUAGE_HOOKS: dict[str, tuple[str, list[str], str]] = {
    "TypeScript": (
        "Run linting and type checking before commit",
        ["npm run lint", "npm run build"],
        "npm test",
    ),
    "JavaScript": (
        "Run linting and type checking before commit",
        ["npm run lint", "npm run build"],
        "npm test",
    ),
    "Python": (
        "Run linting and formatting before commit",
        ["ruff check .", "ruff format --check ."],
        "pytest",
    ),
    "Go": (
        "Run linting and formatting before commit",
        ["go fmt ./...", "golangci-lint run"],
        "go test ./...",
    ),
}

# Matched case-insensitively
_LANGUAGE_LOOKUP = {name.casefold(): hooks for name, hooks in _LANGUAGE_HOOKS.items()}


def default_hooks(language: str | None = None, has_tests: bool = False) -> list[HookDefinition]:
    """Build the default hooks for a repository.

    Args:
        language: Primary language of the repository, if known; matched
            case-insensitively.
        has_tests: Whether the repository has test files.

    Returns:
        Language-specific quality hooks followed by the post-generate
        validation hook.
    """
    hooks: list[HookDefinition] = []

    language_hooks = _LANGUAGE_LOOKUP.get((language or "").casefold())
    if language and not language_hooks:
        logger.warning(f"No default quality hooks for language '{language}'")
    if language_hooks:
        description, commands, test_command = language_hooks
        hooks.append(
            HookDefinition(
                name="pre-commit-quality",
                event=HookEvent.PRE_COMMIT,
                description=description,
                commands=commands,
            )
        )
        if has_tests:
            hooks.append(
                HookDefinition(
                    name="pre-push-tests",
                    event=HookEvent.PRE_PUSH,
                    description="Run tests before pushing",
                    commands=[test_command],
                )
            )

    hooks.append(
        HookDefinition(
            name="post-generate-validate",
            event=HookEvent.POST_GENERATE,
            description="Validate generated agent assets after generation",
            commands=["agentsmith validate"],
        )
    )

    return hooks
