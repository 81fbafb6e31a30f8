"""Subcommand modules for dagctl.

Provides register_commands() which uses deferred imports to keep
``dagctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from dagconfig.commands.export import export

    cli.add_command(export)

    # --- Standalone commands ---
    from dagconfig.commands.lookup import relationship, service
    from dagconfig.commands.show import show

    cli.add_command(show)
    cli.add_command(service)
    cli.add_command(relationship)
