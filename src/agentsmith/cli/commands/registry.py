"""
Registry commands.

Usage:
    agentsmith search auth --type agent --limit 5
    agentsmith list
    agentsmith show root
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from agentsmith.cli.context import get_context_config
from agentsmith.cli.output import console, print_error, print_panel
from agentsmith.registry import EntryType, Registry, RegistryEntry

RootOption = Annotated[
    Path,
    typer.Option(
        "--root",
        "-r",
        help="Directory holding the registry file.",
    ),
]


def _open_registry(ctx: typer.Context, root: Path) -> Registry:
    config = get_context_config(ctx)
    return Registry(root, filename=config.registry.filename)


def _entries_table(entries: list[RegistryEntry], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Type", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for entry in entries:
        type_style = "cyan" if entry.type == EntryType.AGENT.value else "magenta"
        description = entry.description
        if len(description) > 60:
            description = description[:60] + "..."
        table.add_row(
            f"[{type_style}]{entry.type}[/{type_style}]",
            escape(entry.name),
            escape(description),
        )

    return table


def search(
    ctx: typer.Context,
    query: Annotated[
        str,
        typer.Argument(
            help="Search query.",
        ),
    ],
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            min=1,
            help="Maximum number of results.",
        ),
    ] = None,
    entry_type: Annotated[
        EntryType | None,
        typer.Option(
            "--type",
            "-t",
            help="Only show skills or agents.",
        ),
    ] = None,
    root: RootOption = Path("."),
) -> None:
    """Search the skills and agents registry."""
    config = get_context_config(ctx)
    registry = Registry(root, filename=config.registry.filename)
    results = registry.search(
        query,
        entry_type=entry_type,
        limit=limit or config.registry.default_limit,
    )

    if not results:
        label = f"{entry_type.value}s" if entry_type else "entries"
        console.print(f'[yellow]No {label} found matching "{escape(query)}"[/yellow]')
        return

    console.print(_entries_table(results, title=f"Search Results for '{escape(query)}'"))


def list_entries(
    ctx: typer.Context,
    root: RootOption = Path("."),
) -> None:
    """List every registry entry."""
    entries = _open_registry(ctx, root).list()

    if not entries:
        console.print("[yellow]No entries found.[/yellow]")
        console.print("[dim]Build the registry: agentsmith assimilate analysis.json[/dim]")
        return

    console.print(_entries_table(entries, title="Registry"))
    console.print(f"\n[dim]Total: {len(entries)} entries[/dim]")


def show(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(
            help="Skill or agent name.",
        ),
    ],
    root: RootOption = Path("."),
) -> None:
    """Show one registry entry."""
    entry = _open_registry(ctx, root).get(name)

    if entry is None:
        print_error(f"Entry not found: {escape(name)}")
        raise typer.Exit(1)

    lines = [
        f"[bold]Name:[/bold] {escape(entry.name)}",
        f"[bold]Type:[/bold] {entry.type}",
        f"[bold]File:[/bold] {escape(entry.file)}",
        f"[bold]Description:[/bold] {escape(entry.description) or '(none)'}",
    ]

    if entry.category:
        lines.append(f"[bold]Category:[/bold] {escape(entry.category)}")

    lines.append(f"[bold]Triggers:[/bold] {escape(', '.join(entry.triggers)) or '(none)'}")

    if entry.type == EntryType.AGENT.value:
        lines.append("")
        lines.append(f"[bold]Sub-agent:[/bold] {bool(entry.is_sub_agent)}")
        if entry.parent_agent:
            lines.append(f"[bold]Parent:[/bold] {escape(entry.parent_agent)}")
        if entry.sub_agents:
            lines.append(f"[bold]Sub-agents:[/bold] {escape(', '.join(entry.sub_agents))}")

    print_panel("\n".join(lines), title=f"{entry.type.capitalize()}: {escape(entry.name)}")
