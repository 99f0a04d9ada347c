"""
agentsmith assimilate - Turn a saved analysis into repository assets.

Usage:
    agentsmith assimilate analysis.json
    agentsmith assimilate analysis.json --output ./repo --language python
    agentsmith assimilate analysis.json --dry-run
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from agentsmith.analysis import AnalysisResult, load_analysis_file
from agentsmith.cli.context import get_context_config
from agentsmith.cli.output import console, print_error, print_phase, print_warning
from agentsmith.config import Config
from agentsmith.exceptions import AnalysisParseError
from agentsmith.generator import Generator
from agentsmith.hooks import HookRunner
from agentsmith.license import detect_license, format_license_status
from agentsmith.registry import Registry

SUPPORTED_LICENSES = "MIT, Apache-2.0, GPL, LGPL, BSD, ISC, MPL-2.0, Unlicense, CC0"


def _check_license(output: Path, dry_run: bool) -> bool:
    """Print the license status and return whether generation may proceed."""
    print_phase("LICENSE", "Checking repository license...")
    info = detect_license(output)

    if info.file:
        console.print(f"  [dim]└── {escape(format_license_status(info))} (from {info.file})[/dim]")

    if info.permissive:
        console.print(f"  [green]✓[/green] {escape(info.name or '')} - permissive license detected")
        return True

    if dry_run:
        print_warning("License not permissive - generation would be blocked without --dry-run")
        return True

    console.print("\n[red]\\[BLOCKED][/red] Cannot assimilate repository.")
    if not info.detected:
        console.print("[red]  No license file found.[/red]")
    else:
        console.print(f'[red]  License "{escape(info.name or "")}" is not permissive.[/red]')
    console.print("[dim]  Tip: Use --dry-run to preview without license restrictions.[/dim]")
    console.print(f"[dim]  Supported licenses: {SUPPORTED_LICENSES}[/dim]")
    return False


def _print_analysis(analysis: AnalysisResult) -> None:
    for skill in analysis.skills:
        console.print(f"  [dim]├── {escape(skill.source_dir)} → {escape(skill.name)}[/dim]")
    for agent in analysis.agents:
        if agent.is_sub_agent:
            console.print(f"  [dim]├── Sub-agent: {escape(agent.name)}[/dim]")


def _run_post_generate(output: Path, config: Config) -> None:
    runner = HookRunner(output, timeout=config.hooks.timeout)
    results = runner.execute("post-generate")

    for result in results:
        if result.success:
            console.print(f"  [green]✓[/green] hook {escape(result.hook)}")
        else:
            console.print(f"  [red]✗[/red] hook {escape(result.hook)}: {escape(result.error or '')}")

    if any(not result.success for result in results):
        print_warning("Some hooks failed. See output above.")


def assimilate(
    ctx: typer.Context,
    analysis_file: Annotated[
        Path,
        typer.Argument(
            help="File holding the analysis response (JSON, optionally wrapped in text).",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Repository to write assets into.",
        ),
    ] = Path("."),
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Preview assets without writing files.",
        ),
    ] = False,
    language: Annotated[
        str | None,
        typer.Option(
            "--language",
            help="Primary language, used for default hooks.",
        ),
    ] = None,
    has_tests: Annotated[
        bool,
        typer.Option(
            "--has-tests",
            help="Add a pre-push test hook to the default hooks.",
        ),
    ] = False,
    skip_license: Annotated[
        bool,
        typer.Option(
            "--skip-license",
            help="Do not check the repository license.",
        ),
    ] = False,
) -> None:
    """Generate skills, agents, hooks and the registry from an analysis."""
    config = get_context_config(ctx)
    output = output.resolve()

    print_phase("ANALYZE", f"Reading {escape(str(analysis_file))}...")
    try:
        analysis = load_analysis_file(
            analysis_file,
            repo_name=output.name,
            language=language,
            has_tests=has_tests,
        )
    except AnalysisParseError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    _print_analysis(analysis)

    if config.license.enforce and not skip_license:
        if not _check_license(output, dry_run):
            raise typer.Exit(1)

    print_phase("GENERATE", "Preview of assets..." if dry_run else f"Writing assets to {escape(str(output))}...")
    icon = "[yellow]○[/yellow]" if dry_run else "[green]✓[/green]"

    try:
        generated = Generator(output, dry_run=dry_run).generate(analysis)
        registry = Registry(output, dry_run=dry_run, filename=config.registry.filename)
        registry.build(analysis.skills, analysis.agents)
    except OSError as e:
        print_error(f"Failed to write assets: {escape(str(e))}")
        raise typer.Exit(1)

    for file in generated.files:
        console.print(f"  {icon} {escape(file)}")
    console.print(f"  {icon} {escape(config.registry.filename)}")

    if not dry_run and config.hooks.enabled:
        print_phase("HOOKS", "Running post-generate hooks...")
        _run_post_generate(output, config)

    print_phase(
        "COMPLETE",
        f"{len(analysis.skills)} skills, {analysis.root_agent_count} agents, "
        f"{analysis.sub_agent_count} sub-agents, {len(analysis.hooks)} hooks generated.",
    )

    if dry_run:
        console.print("\n[yellow]Dry run - no files were written.[/yellow]")
    else:
        console.print("\n[dim]Your repository has been assimilated.[/dim]")
