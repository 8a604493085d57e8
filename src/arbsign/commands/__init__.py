"""Subcommand modules for arbsign.

Provides register_commands() which uses deferred imports so
``arbsign --help`` does not load the signing stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from arbsign.commands.schema import schema
    from arbsign.commands.sign import sign
    from arbsign.commands.typed_data import typed_data
    from arbsign.commands.verify import verify

    cli.add_command(sign)
    cli.add_command(verify)
    cli.add_command(typed_data)
    cli.add_command(schema)
