"""Subcommand modules for devctl.

Provides register_commands() which uses deferred imports to keep
``devctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from devctl.commands.dump_server import dump_server

    cli.add_command(dump_server)
