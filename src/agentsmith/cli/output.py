"""
Output formatting utilities for the CLI.

Provides consistent output formatting and logging setup across all CLI
commands.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

# Global console instance
console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_phase(label: str, message: str) -> None:
    """Print a pipeline phase header such as [GENERATE]."""
    console.print(f"\n[green]\\[{label}][/green] {message}")


def print_panel(content: str, title: str | None = None) -> None:
    """Print content in a panel."""
    console.print(Panel(content, title=title))


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Route log records to stderr through rich.

    Args:
        level: Log level name used when not verbose.
        verbose: Force DEBUG level.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
