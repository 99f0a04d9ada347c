"""
Unit tests for analysis response parsing, default hooks and the agent hierarchy.
"""

import json

import pytest

from agentsmith.analysis import (
    AgentForest,
    HookEvent,
    default_hooks,
    extract_json_object,
    flatten_agents,
    get_category_description,
    load_analysis_file,
    parse_analysis_response,
)
from agentsmith.exceptions import AnalysisParseError


# =============================================================================
# JSON Extraction Tests
# =============================================================================


class TestExtractJsonObject:
    """Tests for extract_json_object."""

    def test_plain_object(self):
        """Test extraction of a bare JSON object."""
        assert extract_json_object('{"skills": []}') == {"skills": []}

    def test_object_wrapped_in_prose(self):
        """Test extraction from text around the object."""
        text = 'Sure, here it is:\n```json\n{"summary": "x"}\n```\nDone.'
        assert extract_json_object(text) == {"summary": "x"}

    def test_no_object(self):
        """Test that text without braces is rejected."""
        with pytest.raises(AnalysisParseError, match="No JSON found"):
            extract_json_object("no json here")

    def test_invalid_json(self):
        """Test that a broken object is rejected."""
        with pytest.raises(AnalysisParseError, match="Invalid JSON"):
            extract_json_object("{not: valid}")


# =============================================================================
# Response Parsing Tests
# =============================================================================


class TestParseAnalysisResponse:
    """Tests for parse_analysis_response."""

    def test_full_response(self, sample_response):
        """Test parsing a complete response."""
        result = parse_analysis_response(sample_response, repo_name="service")

        assert result.repo_name == "service"
        assert [skill.name for skill in result.skills] == ["auth-flow", "db-access"]
        assert [agent.name for agent in result.agents] == ["root", "auth", "db"]
        assert result.summary == "A sample web service"
        assert result.root_agent_count == 1
        assert result.sub_agent_count == 2

    def test_tools_are_collected_from_agents(self, sample_response):
        """Test that tools of all agents are gathered."""
        result = parse_analysis_response(sample_response, repo_name="service")
        assert [tool.name for tool in result.tools] == ["npm", "lint"]

    def test_default_hooks_when_missing(self, sample_response):
        """Test that default hooks are used when the response has none."""
        result = parse_analysis_response(sample_response, repo_name="service", language="Python", has_tests=True)
        assert [hook.name for hook in result.hooks] == [
            "pre-commit-quality",
            "pre-push-tests",
            "post-generate-validate",
        ]

    def test_response_hooks_replace_defaults(self, sample_analysis):
        """Test that hooks in the response are used instead of defaults."""
        sample_analysis["hooks"] = [{"name": "check", "event": "pre-push", "commands": ["make check"]}]
        result = parse_analysis_response(json.dumps(sample_analysis), repo_name="service")
        assert [hook.name for hook in result.hooks] == ["check"]

    def test_non_string_summary(self):
        """Test that a non-string summary becomes empty."""
        result = parse_analysis_response('{"summary": 5}', repo_name="r")
        assert result.summary == ""
        assert result.skills == []
        assert result.agents == []


class TestLoadAnalysisFile:
    """Tests for load_analysis_file."""

    def test_load(self, temp_dir, sample_response):
        """Test loading a response from disk."""
        path = temp_dir / "analysis.json"
        path.write_text(sample_response, encoding="utf-8")

        result = load_analysis_file(path, repo_name="service")
        assert len(result.agents) == 3

    def test_repo_name_defaults_to_parent_dir(self, temp_dir):
        """Test that the repository name falls back to the file's directory."""
        repo = temp_dir / "my-repo"
        repo.mkdir()
        path = repo / "analysis.json"
        path.write_text("{}", encoding="utf-8")

        assert load_analysis_file(path).repo_name == "my-repo"

    def test_missing_file(self, temp_dir):
        """Test that a missing file raises AnalysisParseError."""
        with pytest.raises(AnalysisParseError, match="Cannot read"):
            load_analysis_file(temp_dir / "missing.json")


# =============================================================================
# Default Hooks Tests
# =============================================================================


class TestDefaultHooks:
    """Tests for default_hooks."""

    def test_unknown_language(self):
        """Test that only the validation hook is produced without a language."""
        hooks = default_hooks()
        assert len(hooks) == 1
        assert hooks[0].event == HookEvent.POST_GENERATE.value
        assert hooks[0].commands == ["agentsmith validate"]

    def test_language_without_tests(self):
        """Test that the test hook needs has_tests."""
        names = [hook.name for hook in default_hooks("Go")]
        assert names == ["pre-commit-quality", "post-generate-validate"]

    def test_typescript_commands(self):
        """Test TypeScript quality commands."""
        hooks = default_hooks("TypeScript", has_tests=True)
        assert hooks[0].commands == ["npm run lint", "npm run build"]
        assert hooks[1].commands == ["npm test"]

    def test_language_is_case_insensitive(self):
        """Test that lowercase language names select the same hooks."""
        names = [hook.name for hook in default_hooks("python", has_tests=True)]
        assert names == ["pre-commit-quality", "pre-push-tests", "post-generate-validate"]
        assert default_hooks("PYTHON")[0].commands == ["ruff check .", "ruff format --check ."]

    def test_unsupported_language(self, caplog):
        """Test that an unsupported language only gets the validation hook and logs a warning."""
        with caplog.at_level("WARNING", logger="agentsmith.analysis.defaults"):
            names = [hook.name for hook in default_hooks("Cobol", has_tests=True)]

        assert names == ["post-generate-validate"]
        assert "Cobol" in caplog.text


class TestCategoryDescription:
    """Tests for get_category_description."""

    def test_known_and_unknown(self):
        """Test description lookup with fallback."""
        assert get_category_description("no-such-category") == "General patterns"
        assert get_category_description("security") != "General patterns"


# =============================================================================
# Hierarchy Tests
# =============================================================================


class TestAgentForest:
    """Tests for AgentForest."""

    def test_roots_and_children(self, sample_analysis):
        """Test root and child lookup."""
        forest = AgentForest.from_agents(flatten_agents(sample_analysis["agents"]))

        assert len(forest) == 3
        assert "auth" in forest
        assert [agent.name for agent in forest.roots()] == ["root"]
        assert [agent.name for agent in forest.children("root")] == ["auth", "db"]
        assert forest.ancestors("auth") == ["root"]
        assert forest.orphans() == []
        assert forest.find_cycles() == []

    def test_orphans(self):
        """Test detection of links to missing parents."""
        forest = AgentForest.from_agents(flatten_agents([{"name": "db", "isSubAgent": True, "parentAgent": "ghost"}]))
        assert forest.orphans() == [("db", "ghost")]

    def test_cycles(self):
        """Test detection of parent cycles."""
        agents = flatten_agents(
            [
                {"name": "a", "isSubAgent": True, "parentAgent": "b"},
                {"name": "b", "isSubAgent": True, "parentAgent": "a"},
                {"name": "c"},
            ]
        )
        forest = AgentForest.from_agents(agents)
        assert forest.find_cycles() == [["a", "b"]]
        assert forest.ancestors("a") == ["b"]

    def test_last_duplicate_wins(self):
        """Test that the last agent with a name is kept."""
        forest = AgentForest.from_agents(flatten_agents([{"name": "x", "description": "1"}, {"name": "x", "description": "2"}]))
        assert forest.get("x").description == "2"
