"""
agentsmith validate - Check generated skills, agents, hooks and registry.

Usage:
    agentsmith validate
    agentsmith validate ./path/to/repo
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from agentsmith.cli.context import get_context_config
from agentsmith.cli.output import console, print_error, print_success, print_warning
from agentsmith.validation import validate_assets


def validate(
    ctx: typer.Context,
    path: Annotated[
        Path,
        typer.Argument(
            help="Repository to validate.",
        ),
    ] = Path("."),
) -> None:
    """Validate generated assets."""
    config = get_context_config(ctx)

    if not path.is_dir():
        print_error(f"Not a directory: {escape(str(path))}")
        raise typer.Exit(1)

    report = validate_assets(path, registry_filename=config.registry.filename)

    for kind, count in report.checked.items():
        console.print(f"[dim]Checked {count} {kind}[/dim]")

    for warning in report.warnings:
        print_warning(escape(warning))

    for error in report.errors:
        print_error(escape(error))

    if not report.valid:
        console.print(f"\n[red]Validation failed with {len(report.errors)} error(s)[/red]")
        raise typer.Exit(1)

    print_success("All assets valid")
