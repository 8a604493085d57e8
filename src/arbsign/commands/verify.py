"""Command: recover and check the signer of an opportunity signature."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arbsign.commands._base import ArbCommand

if TYPE_CHECKING:
    from arbsign.commands._context import AppContext


def _validate_signer(_ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    from eth_utils import to_checksum_address

    from arbsign.domain.parsing import is_valid_address

    if not is_valid_address(value):
        msg = f"not a valid address: {value!r}"
        raise click.BadParameter(msg)
    return to_checksum_address(value)


@click.command(
    cls=ArbCommand,
    examples="""\
  arbsign verify 0x5f1c...1b
  arbsign verify 0x5f1c...1b --signer 0x2c7536E3605D9C16a7a3D7b1898e529396a65c23""",
)
@click.argument("signature")
@click.option(
    "--signer",
    "expected_signer",
    default=None,
    callback=_validate_signer,
    help="Fail unless the signature was produced by this address.",
)
@click.pass_obj
def verify(app: AppContext, signature: str, expected_signer: str | None) -> None:
    """Recover the address that signed the configured opportunity."""
    from arbsign.services.signing import SigningService

    app.emit(SigningService(app.source).verify(signature, expected_signer=expected_signer))
