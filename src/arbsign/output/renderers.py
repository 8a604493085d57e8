"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from arbsign.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from arbsign.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "sign_opportunity":
        return str(result.data["signature"])
    if result.op == "verify_signature":
        return str(result.data["signer"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="arb.ok")
    op = Text(f"  {result.op}", style="arb.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="arb.key")
    style = "arb.address" if key in ("signer", "recovered", "expected") else ""
    console.print(k, Text(str(value), style=style), sep="", soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="arb.error")
    op = Text(f"  {result.op}", style="arb.op")
    console.print(label, op, Text(" — "), Text(msg), soft_wrap=True)

    if verbose and err:
        console.print(Text("  detail:", style="dim"))
        console.print(f"    code: {err.code}", soft_wrap=True)
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", soft_wrap=True)


# ── Operation renderers ───────────────────────────────────────────────


def _render_signature(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Exactly two lines: signer, then signature. Meta only when verbose."""
    console.print(
        Text("SIGNER:", style="arb.label"),
        Text(result.data["signer"], style="arb.address"),
        soft_wrap=True,
    )
    console.print(
        Text("OPPORTUNITY_SIGNATURE:", style="arb.label"),
        Text(result.data["signature"]),
        soft_wrap=True,
    )
    if verbose and result.meta:
        for k, v in result.meta.items():
            _field(console, k, v)


def _render_verify(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "signer", result.data["signer"])
    _field(console, "verified", result.data["verified"])


def _render_typed_data(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print the EIP-712 document as plain JSON so it can be piped to other tools."""
    console.print(Text(json.dumps(result.data, indent=2)), soft_wrap=True)


def _render_schema(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "primary_type", result.data["primary_type"])
    _field(console, "version", result.data["version"])
    domain = result.data["domain"]
    _field(console, "domain", f"{domain['name']} v{domain['version']}")

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Field")
    table.add_column("Type", style="arb.type")
    for index, field in enumerate(result.data["fields"]):
        table.add_row(str(index), field["name"], field["type"])
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "sign_opportunity": _render_signature,
    "verify_signature": _render_verify,
    "typed_data": _render_typed_data,
    "opportunity_schema": _render_schema,
}
