"""Command group: graph export (DOT, JSON)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dagconfig.commands._base import DagGroup
from dagconfig.services.export import ExportService
from dagconfig.services.result import ServiceResult

if TYPE_CHECKING:
    from dagconfig.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  dagctl export dot
  dagctl export dot deploy/dag.yaml --output dag.dot
  dagctl export json --output dag.json"""


@click.group(cls=DagGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Export the graph in various formats."""


def _run_export(app: AppContext, document: str | None, fmt: str, output_file: str | None) -> None:
    result = ExportService(app.load(document)).export_graph(fmt=fmt)

    if not result.ok:
        app.emit(result)
        return

    if output_file:
        Path(output_file).write_text(result.data["content"], encoding="utf-8")
        # Emit summary (without content) for the renderer
        app.emit(
            ServiceResult(
                ok=True,
                op="export_graph",
                data={
                    "format": fmt,
                    "output_file": output_file,
                    "node_count": result.data["node_count"],
                    "edge_count": result.data["edge_count"],
                },
            )
        )
    else:
        # Pipe-friendly: raw content to stdout
        click.echo(result.data["content"], nl=False)


@export.command(
    examples="""\
  dagctl export dot | dot -Tsvg > dag.svg
  dagctl export dot deploy/dag.yaml --output dag.dot"""
)
@click.argument("document", required=False)
@click.option("--output", "output_file", default=None, help="Write to file instead of stdout.")
@click.pass_obj
def dot(app: AppContext, document: str | None, output_file: str | None) -> None:
    """Export the graph as Graphviz DOT."""
    _run_export(app, document, "dot", output_file)


@export.command(
    name="json",
    examples="""\
  dagctl export json
  dagctl export json deploy/dag.yaml --output dag.json""",
)
@click.argument("document", required=False)
@click.option("--output", "output_file", default=None, help="Write to file instead of stdout.")
@click.pass_obj
def json_(app: AppContext, document: str | None, output_file: str | None) -> None:
    """Export the graph as JSON (nodes and edges)."""
    _run_export(app, document, "json", output_file)
