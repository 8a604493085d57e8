"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Resolves the configuration source lazily and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arbsign.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from arbsign.config.settings import ArbSettings
    from arbsign.domain.parsing import ConfigSource
    from arbsign.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The configuration source is read on first use so ``--help`` and
    ``schema`` never touch the environment or the env file.
    """

    def __init__(self, settings: ArbSettings) -> None:
        self.settings = settings
        self._source: ConfigSource | None = None

        from arbsign.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def source(self) -> ConfigSource:
        """Opportunity configuration: env file layered under the process environment."""
        if self._source is None:
            from arbsign.config.source import load_source

            self._source = load_source(self.settings.env_file)
        return self._source

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr only, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
