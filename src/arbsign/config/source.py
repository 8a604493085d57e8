"""Configuration source for the opportunity pipeline.

The pipeline never reads ``os.environ`` directly. The CLI resolves a plain
mapping here and injects it into the service layer, so tests can pass a
dict instead of patching the process environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import click
from dotenv import dotenv_values

from arbsign.domain.parsing import ConfigSource


def load_source(
    env_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConfigSource:
    """Merge an optional dotenv file under the process environment.

    Non-empty values in *environ* (``os.environ`` by default) win over the
    file; an exported but empty variable does not mask a file value. Keys
    the file declares without a value are ignored.

    Raises:
        click.ClickException: If *env_file* is given but does not exist.
    """
    merged: dict[str, str] = {}
    if env_file is not None:
        if not env_file.is_file():
            msg = f"Env file not found: {env_file}"
            raise click.ClickException(msg)
        merged.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    environ = os.environ if environ is None else environ
    merged.update({k: v for k, v in environ.items() if v})
    return merged
