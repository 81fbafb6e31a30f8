"""Commands: look up a single service or relationship."""

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
  dagctl service --name web
  dagctl service deploy/dag.yaml --id 3aa0c5c9-1f4b-4a0e-9d7c-5b5d3c1d2e10
  dagctl -i service --name WEB
  dagctl --json service --name web""",
)
@click.argument("document", required=False)
@click.option("--name", default=None, help="Service name.")
@click.option("--id", "service_id", default=None, help="Service id.")
@click.pass_obj
def service(
    app: AppContext,
    document: str | None,
    name: str | None,
    service_id: str | None,
) -> None:
    """Find a service by name or id."""
    lookup = app.load(document)
    app.emit(QueryService(lookup).find_service(name=name, service_id=service_id))


@click.command(
    cls=DagCommand,
    examples="""\
  dagctl relationship --name web-to-db
  dagctl relationship --from 3aa0c5c9-1f4b-4a0e-9d7c-5b5d3c1d2e10
  dagctl relationship deploy/dag.yaml --to db-id
  dagctl --json relationship --id rel-1""",
)
@click.argument("document", required=False)
@click.option("--name", default=None, help="Relationship name.")
@click.option("--id", "relationship_id", default=None, help="Relationship id.")
@click.option("--from", "from_id", default=None, help="Id of the source service.")
@click.option("--to", "to_id", default=None, help="Id of the target service.")
@click.pass_obj
def relationship(
    app: AppContext,
    document: str | None,
    name: str | None,
    relationship_id: str | None,
    from_id: str | None,
    to_id: str | None,
) -> None:
    """Find a relationship by name, id, source or target."""
    lookup = app.load(document)
    app.emit(
        QueryService(lookup).find_relationship(
            name=name,
            relationship_id=relationship_id,
            from_id=from_id,
            to_id=to_id,
        )
    )
