"""
Main Typer application for agentsmith CLI.

This module defines the root CLI application and registers all commands.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from agentsmith import __version__
from agentsmith.cli.commands import assimilate, hooks, registry, validate
from agentsmith.cli.output import print_error, print_info, setup_logging
from agentsmith.config import ConfigurationError, load_config

# Create the main Typer app
app = typer.Typer(
    name="agentsmith",
    help="Assimilate a repository into skills, agents and hooks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"agentsmith version [green]{__version__}[/green]")
        raise typer.Exit()


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Use a specific config file.",
        ),
    ] = None,
) -> None:
    """
    [bold green]agentsmith[/bold green] - repository assimilation

    Turns a repository analysis into skills, agent descriptors and
    lifecycle hooks, and keeps them searchable in a registry.
    """
    try:
        config = load_config(config_path=config_path)
    except ConfigurationError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    setup_logging(config.logging.level, verbose=verbose)
    ctx.obj = config


# Register commands
app.command("assimilate")(assimilate.assimilate)
app.command("search")(registry.search)
app.command("list")(registry.list_entries)
app.command("show")(registry.show)
app.command("validate")(validate.validate)
app.add_typer(hooks.app, name="hooks")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
