"""Subcommand modules for gradectl.

Provides register_commands() which uses deferred imports to keep
``gradectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gradectl.commands.catalog import catalog
    from gradectl.commands.evaluate import evaluate
    from gradectl.commands.scale import scale

    cli.add_command(evaluate)
    cli.add_command(scale)
    cli.add_command(catalog)
