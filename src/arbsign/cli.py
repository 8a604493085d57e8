"""Root CLI group for arbsign with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from arbsign import __version__
from arbsign.commands import register_commands
from arbsign.commands._context import AppContext
from arbsign.config.settings import ArbSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="arbsign")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Dotenv file read under the process environment.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    env_file: Path | None,
) -> None:
    """arbsign — sign ArbSupervisor opportunities with EIP-712."""
    ctx.ensure_object(dict)
    settings = ArbSettings.from_cli(
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        env_file=env_file,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
