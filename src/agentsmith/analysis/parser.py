"""
Analysis response parser for agentsmith.

Extracts the JSON object from a model response and normalizes it into an
AnalysisResult.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from agentsmith.analysis.defaults import default_hooks
from agentsmith.analysis.models import AnalysisResult, ToolDefinition
from agentsmith.analysis.normalizer import flatten_agents, normalize_hooks, normalize_skills
from agentsmith.exceptions import AnalysisParseError

logger = logging.getLogger(__name__)

# First "{" through the last "}"; responses often wrap the JSON in prose.
_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: str) -> dict[str, Any]:
    """Extract the JSON object embedded in a response.

    Args:
        text: Full response text.

    Returns:
        The parsed object.

    Raises:
        AnalysisParseError: If no valid JSON object is found.
    """
    match = _JSON_OBJECT_PATTERN.search(text)
    if not match:
        raise AnalysisParseError("No JSON found in response")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise AnalysisParseError(f"Invalid JSON in response: {e}") from e

    if not isinstance(parsed, dict):
        raise AnalysisParseError("Response JSON is not an object")

    return parsed


def parse_analysis_response(
    text: str,
    repo_name: str,
    language: str | None = None,
    has_tests: bool = False,
) -> AnalysisResult:
    """Parse an analysis response into normalized records.

    Args:
        text: Response text containing a JSON object.
        repo_name: Name of the analysed repository.
        language: Primary language, used for default hooks.
        has_tests: Whether the repository has tests, used for default hooks.

    Returns:
        AnalysisResult with flattened agents.

    Raises:
        AnalysisParseError: If the response holds no JSON object.
    """
    parsed = extract_json_object(text)

    agents = flatten_agents(parsed.get("agents"))
    tools: list[ToolDefinition] = []
    for agent in agents:
        tools.extend(agent.tools)

    raw_hooks = parsed.get("hooks")
    if isinstance(raw_hooks, list):
        hooks = normalize_hooks(raw_hooks)
    else:
        hooks = default_hooks(language, has_tests)

    summary = parsed.get("summary")

    result = AnalysisResult(
        repo_name=repo_name,
        skills=normalize_skills(parsed.get("skills")),
        agents=agents,
        tools=tools,
        hooks=hooks,
        summary=summary if isinstance(summary, str) else "",
    )

    logger.info(
        f"Parsed analysis for {repo_name}: {len(result.skills)} skills, "
        f"{len(result.agents)} agents, {len(result.hooks)} hooks"
    )
    return result


def load_analysis_file(
    path: Path,
    repo_name: str | None = None,
    language: str | None = None,
    has_tests: bool = False,
) -> AnalysisResult:
    """Load a saved analysis response from disk.

    Args:
        path: File holding the response text.
        repo_name: Repository name (default: the file's parent directory name).
        language: Primary language, used for default hooks.
        has_tests: Whether the repository has tests.

    Returns:
        Parsed AnalysisResult.

    Raises:
        AnalysisParseError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise AnalysisParseError(f"Cannot read analysis file: {e}", path) from e

    return parse_analysis_response(
        text,
        repo_name=repo_name or path.resolve().parent.name,
        language=language,
        has_tests=has_tests,
    )
