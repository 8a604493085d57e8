"""structlog configuration for arbsign.

Logs go to stderr only; stdout carries the signer and signature lines.
Console rendering by default, JSON lines with ``--log-json``. Any
structured field that names key material is redacted before rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

REDACTED = "[redacted]"
SECRET_FIELDS = frozenset({"private_key", "SUPERVISOR_SIGNER_PRIVATE_KEY"})


def redact_secrets(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Replace the value of every field in :data:`SECRET_FIELDS`."""
    for key in SECRET_FIELDS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: DEBUG for ``arbsign`` loggers; WARNING otherwise.
        log_json: Render JSON lines instead of console output.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
    ]
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("arbsign").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("eth_account").setLevel(logging.WARNING)
