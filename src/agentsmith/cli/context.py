"""Shared state passed from the root callback to commands."""

import typer

from agentsmith.config import Config, load_config


def get_context_config(ctx: typer.Context) -> Config:
    """Get the config loaded by the root callback."""
    if isinstance(ctx.obj, Config):
        return ctx.obj
    return load_config()
