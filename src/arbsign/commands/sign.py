"""Command: sign the configured opportunity."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arbsign.commands._base import ArbCommand

if TYPE_CHECKING:
    from arbsign.commands._context import AppContext


@click.command(
    cls=ArbCommand,
    examples="""\
  arbsign sign
  arbsign --env-file opportunity.env sign
  arbsign --json sign
  arbsign -q sign""",
)
@click.pass_obj
def sign(app: AppContext) -> None:
    """Validate the configured opportunity and print signer and signature."""
    from arbsign.services.signing import SigningService

    app.emit(SigningService(app.source).sign())
