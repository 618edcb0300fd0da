"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cfurl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from cfurl.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    URLs are printed bare so the output can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "url" in result.data:
        return str(result.data["url"])

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["name"]) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cf.key")
    v = Text(str(value), style="cf.url" if key == "url" else "")
    console.print(k, v, sep="")


def _render_detail(console: Console, detail: dict[str, Any]) -> None:
    console.print(Text("  detail:", style="dim"))
    for k, v in detail.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cf.error")
    op = Text(f"  {result.op}", style="cf.op")
    console.print(label, op, Text(f" — {msg}"), sep="")

    if verbose and err and err.detail:
        _render_detail(console, err.detail)


# ── Operation renderers ───────────────────────────────────────────────


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Bare URL, so ``cfurl --no-open dns example.com`` is scriptable."""
    console.print(Text(result.data["url"], style="cf.url"))
    if verbose:
        _field(console, "command", result.data.get("command", ""))
        _field(console, "template", result.data.get("template", ""))


def _render_open(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(
        Text("✓ Opened", style="cf.ok"),
        Text(result.data["url"], style="cf.url"),
    )
    if verbose:
        _field(console, "command", result.data.get("command", ""))


def _render_commands(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Command", style="cf.command", no_wrap=True)
    table.add_column("Arguments", no_wrap=True)
    table.add_column("Description")
    if verbose:
        table.add_column("Aliases", style="cf.alias")
        table.add_column("Sections")

    for item in result.data.get("items", []):
        row = [item["name"], item["arguments"], item["summary"]]
        if verbose:
            row.append(", ".join(item["aliases"]))
            row.append(", ".join(item["sections"]))
        table.add_row(*(Text(cell) for cell in row))

    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    console.print(Text("OK", style="cf.ok"), Text(f"  {result.op}", style="cf.op"), sep="")
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(Text(f"    {k}: {v}"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "resolve": _render_resolve,
    "open": _render_open,
    "list_commands": _render_commands,
}
