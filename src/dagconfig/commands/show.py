"""Command: overview of a graph document."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dagconfig.commands._base import DagCommand
from dagconfig.services.query import QueryService

if TYPE_CHECKING:
    from dagconfig.commands._context import AppContext


@click.command(
    cls=DagCommand,
    examples="""\
  dagctl show
  dagctl show deploy/dag.yaml
  dagctl --json show deploy/dag.yaml
  dagctl -q show""",
)
@click.argument("document", required=False)
@click.pass_obj
def show(app: AppContext, document: str | None) -> None:
    """Show the services and relationships of a graph document."""
    lookup = app.load(document)
    app.emit(QueryService(lookup).overview())
