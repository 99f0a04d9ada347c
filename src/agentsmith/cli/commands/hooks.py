"""
agentsmith hooks - Lifecycle hook commands.

Usage:
    agentsmith hooks list
    agentsmith hooks run pre-commit
    agentsmith hooks run post-generate --root ./repo
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from agentsmith.analysis import HookEvent
from agentsmith.cli.context import get_context_config
from agentsmith.cli.output import console, print_error, print_success, print_warning
from agentsmith.hooks import HookRunner

app = typer.Typer(
    name="hooks",
    help="Lifecycle hook management.",
    no_args_is_help=True,
)


@app.command("list")
def list_hooks(
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Repository holding .github/hooks/.",
        ),
    ] = Path("."),
) -> None:
    """List hooks grouped by event."""
    runner = HookRunner(root)

    table = Table(title="Hooks")
    table.add_column("Event", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Commands")
    table.add_column("Condition", style="dim")

    count = 0
    for event in HookEvent:
        for hook in runner.load_hooks(event):
            table.add_row(
                event.value,
                escape(hook.name),
                escape("; ".join(hook.commands)),
                escape(hook.condition or ""),
            )
            count += 1

    if not count:
        console.print("[yellow]No hooks found.[/yellow]")
        return

    console.print(table)


@app.command("run")
def run_hooks(
    ctx: typer.Context,
    event: Annotated[
        HookEvent,
        typer.Argument(
            help="Lifecycle event to run.",
        ),
    ],
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Repository holding .github/hooks/.",
        ),
    ] = Path("."),
) -> None:
    """Run the hooks bound to an event."""
    config = get_context_config(ctx)
    runner = HookRunner(root, timeout=config.hooks.timeout)
    results = runner.execute(event)

    if not results:
        print_warning(f"No hooks for {event.value}")
        return

    for result in results:
        if result.success:
            print_success(escape(result.hook))
            if result.output:
                console.print(f"[dim]{escape(result.output)}[/dim]")
        else:
            print_error(f"{escape(result.hook)}: {escape(result.error or 'failed')}")

    if any(not result.success for result in results):
        raise typer.Exit(1)
