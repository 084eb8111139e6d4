"""CLI command registration."""

import typer

from .variants import list_variants, plan_variants, resolve_variant


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="list")(list_variants)
    app.command(name="resolve")(resolve_variant)
    app.command(name="plan")(plan_variants)
