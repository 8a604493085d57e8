"""Command: show the fixed Opportunity schema."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arbsign.commands._base import ArbCommand

if TYPE_CHECKING:
    from arbsign.commands._context import AppContext


@click.command(
    cls=ArbCommand,
    examples="""\
  arbsign schema
  arbsign --json schema""",
)
@click.pass_obj
def schema(app: AppContext) -> None:
    """Show the Opportunity field schema, domain identity, and config keys."""
    from arbsign.services.signing import SigningService

    app.emit(SigningService({}).schema())
