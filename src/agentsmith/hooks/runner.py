"""
Hook runner for agentsmith.

Loads hook definitions from .github/hooks/ and executes their shell
commands for a lifecycle event.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from agentsmith.analysis.models import HookDefinition, HookEvent

logger = logging.getLogger(__name__)

DEFAULT_HOOK_TIMEOUT = 120


@dataclass
class HookResult:
    """Outcome of running one hook."""

    hook: str
    success: bool
    output: str = ""
    error: str | None = None


class HookRunner:
    """Executes lifecycle hooks for a repository.

    Commands run through the shell with the repository root as working
    directory. The first failing command stops its hook, and the first
    failing hook stops the event.
    """

    def __init__(self, root_path: str | Path, timeout: int = DEFAULT_HOOK_TIMEOUT):
        """Initialize the hook runner.

        Args:
            root_path: Repository root holding .github/hooks/.
            timeout: Per-command timeout in seconds.
        """
        self.root_path = Path(root_path)
        self.timeout = timeout

    @property
    def hooks_dir(self) -> Path:
        """Directory hook definitions are loaded from."""
        return self.root_path / ".github" / "hooks"

    def load_hooks(self, event: HookEvent | str) -> list[HookDefinition]:
        """Load the hooks bound to an event.

        Args:
            event: Lifecycle event.

        Returns:
            Hook definitions in filename order (empty if none).
        """
        event_value = HookEvent(event).value
        if not self.hooks_dir.is_dir():
            logger.debug(f"No hooks directory found at {self.hooks_dir}")
            return []

        hooks = []
        for hook_path in sorted(self.hooks_dir.iterdir()):
            if hook_path.suffix not in (".yaml", ".yml"):
                continue

            try:
                data = yaml.safe_load(hook_path.read_text(encoding="utf-8"))
                hook = HookDefinition.model_validate(data)
            except (OSError, yaml.YAMLError, ValidationError) as e:
                logger.warning(f"Skipping unreadable hook {hook_path.name}: {e}")
                continue

            if hook.event == event_value:
                hooks.append(hook)

        return hooks

    def evaluate_condition(self, condition: str) -> bool:
        """Evaluate a hook condition.

        Supported forms:
        - ``file:<path>`` - true if the path exists under the root
        - ``command:<cmd>`` - true if the command exits with status 0

        Any other condition is treated as true.
        """
        if condition.startswith("file:"):
            return (self.root_path / condition[len("file:") :]).exists()

        if condition.startswith("command:"):
            try:
                result = subprocess.run(
                    condition[len("command:") :],
                    shell=True,
                    cwd=self.root_path,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=False,
                )
            except subprocess.TimeoutExpired:
                return False
            return result.returncode == 0

        return True

    def run_hook(self, hook: HookDefinition) -> HookResult:
        """Run all commands of a hook.

        Args:
            hook: The hook to run.

        Returns:
            HookResult with the joined output, or the error of the first
            failing command.
        """
        if hook.condition and not self.evaluate_condition(hook.condition):
            return HookResult(hook=hook.name, success=True, output="Skipped: condition not met")

        outputs = []
        for command in hook.commands:
            logger.debug(f"Running hook command: {command}")
            try:
                result = subprocess.run(
                    command,
                    shell=True,
                    cwd=self.root_path,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=False,
                )
            except subprocess.TimeoutExpired:
                return HookResult(
                    hook=hook.name,
                    success=False,
                    error=f"Command timed out after {self.timeout} seconds: {command}",
                )

            if result.returncode != 0:
                return HookResult(
                    hook=hook.name,
                    success=False,
                    error=result.stderr.strip() or f"Command failed with exit code {result.returncode}",
                )

            outputs.append(result.stdout.strip())

        return HookResult(hook=hook.name, success=True, output="\n".join(outputs))

    def execute(self, event: HookEvent | str) -> list[HookResult]:
        """Execute every hook bound to an event.

        Args:
            event: Lifecycle event.

        Returns:
            Results for the hooks that ran; stops after the first failure.
        """
        results = []
        for hook in self.load_hooks(event):
            result = self.run_hook(hook)
            results.append(result)

            if not result.success:
                logger.warning(f"Hook '{hook.name}' failed: {result.error}")
                break

        return results
