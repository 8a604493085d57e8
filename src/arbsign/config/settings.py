"""Unified CLI settings — flags and ``ARBSIGN_*`` env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ARBSIGN_`` prefix
  3. Code defaults

These settings only shape how arbsign runs (output mode, logging, where
to read configuration from). The opportunity itself is never read from
here; see :mod:`arbsign.config.source`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings


class ArbSettings(BaseSettings):
    """Settings for the arbsign CLI, frozen after construction.

    Attributes:
        env_file: Optional dotenv file layered under the process environment.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ARBSIGN_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    env_file: Path | None = None

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ArbSettings:
        """Construct settings from a CLI invocation.

        Flags left at ``None`` are dropped so env vars and defaults apply.
        """
        return cls(**{k: v for k, v in cli_flags.items() if v is not None})
