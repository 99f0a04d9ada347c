"""
Pytest configuration and fixtures for agentsmith tests.
"""

import json
import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the user's agentsmith home and overrides."""
    for key in list(os.environ):
        if key.startswith("AGENTSMITH_"):
            monkeypatch.delenv(key)

    home = tmp_path_factory.mktemp("agentsmith-home")
    monkeypatch.setenv("AGENTSMITH_HOME", str(home))
    return home


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_analysis() -> dict[str, Any]:
    """Provide a raw analysis response with nested sub-agents."""
    return {
        "skills": [
            {
                "name": "auth-flow",
                "description": "Login and token refresh",
                "sourceDir": "src/auth",
                "patterns": ["Tokens are refreshed lazily"],
                "triggers": ["login", "token"],
                "category": "api",
                "examples": ["refreshToken()"],
            },
            {
                "name": "db-access",
                "description": "Repository pattern over the database",
                "sourceDir": "src/db",
                "patterns": [],
                "triggers": ["database", "query"],
                "category": "database",
                "examples": [],
            },
        ],
        "agents": [
            {
                "name": "root",
                "description": "Main repository agent",
                "skills": ["auth-flow", "db-access"],
                "tools": ["npm test", {"name": "lint", "command": "npm run lint"}],
                "isSubAgent": False,
                "subAgents": [
                    {
                        "name": "auth",
                        "description": "Authentication agent",
                        "skills": ["auth-flow"],
                        "triggers": ["login"],
                        "sourceDir": "src/auth",
                    },
                    "db",
                ],
                "triggers": ["repo"],
            },
            {
                "name": "db",
                "description": "Database agent",
                "skills": ["db-access"],
                "isSubAgent": True,
                "parentAgent": "root",
                "triggers": ["database"],
            },
        ],
        "summary": "A sample web service",
    }


@pytest.fixture
def sample_response(sample_analysis: dict[str, Any]) -> str:
    """Provide an analysis response wrapped in prose, as models return it."""
    return "Here is the analysis:\n\n" + json.dumps(sample_analysis, indent=2) + "\n\nLet me know!"


@pytest.fixture
def permissive_repo(temp_dir: Path) -> Path:
    """Provide a repository with an MIT license file."""
    (temp_dir / "LICENSE").write_text(
        "MIT License\n\nPermission is hereby granted, free of charge, to any person...\n",
        encoding="utf-8",
    )
    return temp_dir
