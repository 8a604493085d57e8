"""Command: print the EIP-712 document without signing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arbsign.commands._base import ArbCommand

if TYPE_CHECKING:
    from arbsign.commands._context import AppContext


@click.command(
    "typed-data",
    cls=ArbCommand,
    examples="""\
  arbsign typed-data
  arbsign --env-file opportunity.env typed-data > opportunity.json""",
)
@click.pass_obj
def typed_data(app: AppContext) -> None:
    """Print the validated opportunity as an EIP-712 typed-data document.

    No private key is required.
    """
    from arbsign.services.signing import SigningService

    app.emit(SigningService(app.source).typed_data())
