"""Subcommand modules for wgraph.

register_commands() imports command modules lazily so ``wgraph --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    from wgraph.commands.graph import connected, edge, export, info, node, path

    # --- Groups ---
    cli.add_command(node)
    cli.add_command(edge)

    # --- Standalone commands ---
    cli.add_command(info)
    cli.add_command(connected)
    cli.add_command(path)
    cli.add_command(export)
