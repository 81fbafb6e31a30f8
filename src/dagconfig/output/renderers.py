"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dagconfig.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dagconfig.services.result import ServiceResult


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

    if result.op == "show":
        ids = [str(s.get("id", "")) for s in result.data.get("services", [])]
        return "\n".join(i for i in ids if i)

    found_id = result.data.get("id")
    if found_id:
        return str(found_id)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="dag.ok")
    op = Text(f"  {result.op}", style="dag.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dag.key")
    if key in ("id", "from_id", "to_id"):
        v = Text(str(value), style="dag.id")
    elif key == "name":
        v = Text(str(value), style="dag.name")
    elif key == "output_file":
        v = Text(str(value), style="dag.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _properties_lines(properties: dict[str, Any]) -> list[str]:
    lines: list[str] = []
    for key, value in properties.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        lines.append(f"  {key}: {value}")
    return lines


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dag.error")
    op = Text(f"  {result.op}", style="dag.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Query renderers ───────────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the graph overview: header fields plus service/relationship tables."""
    d = result.data
    _status_line(console, result)
    for key in ("name", "id", "service_count", "relationship_count"):
        _field(console, key, d.get(key, ""))

    services = d.get("services", [])
    if services:
        table = Table(title="Services", show_header=True, pad_edge=False, expand=False)
        table.add_column("ID", style="dag.id", no_wrap=True)
        table.add_column("Name", style="dag.name")
        table.add_column("Type", style="dag.type")
        for svc in services:
            table.add_row(
                str(svc.get("id", "")),
                str(svc.get("name", "")),
                str(svc.get("type", "")),
            )
        console.print(table)

    relationships = d.get("relationships", [])
    if relationships:
        table = Table(title="Relationships", show_header=True, pad_edge=False, expand=False)
        table.add_column("ID", style="dag.id", no_wrap=True)
        table.add_column("Name", style="dag.name")
        table.add_column("From", style="dag.id")
        table.add_column("To", style="dag.id")
        for rel in relationships:
            table.add_row(
                str(rel.get("id", "")),
                str(rel.get("name", "")),
                str(rel.get("from", "")),
                str(rel.get("to", "")),
            )
        console.print(table)


def _render_entity(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a found service or relationship as a panel."""
    d = result.data
    lines: list[str] = []
    for key in ("id", "type", "description", "from_id", "to_id"):
        val = d.get(key)
        if val:
            lines.append(f"{key}: {val}")

    properties = d.get("properties") or {}
    if properties:
        lines.append("properties:")
        lines.extend(_properties_lines(properties))

    title = str(d.get("name") or d.get("id") or "?")
    console.print(Panel(Text("\n".join(lines)), title=title, border_style="dim", expand=False))


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render export results with output path and counts."""
    _status_line(console, result)
    d = result.data
    for key in ("output_file", "format", "node_count", "edge_count"):
        if key in d:
            _field(console, key, d[key])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "show": _render_show,
    "find_service": _render_entity,
    "find_relationship": _render_entity,
    "export_graph": _render_export,
}
