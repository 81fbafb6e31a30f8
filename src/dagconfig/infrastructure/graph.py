"""NetworkX view of a loaded DagConfig.

Built on demand from an immutable snapshot, never cached on the config.
Relationship endpoints that name no service still become (bare) nodes;
the view does not validate the graph.
"""

from __future__ import annotations

import networkx as nx

from dagconfig.domain.models import DagConfig

type _Graph = nx.DiGraph


def build_digraph(config: DagConfig) -> _Graph:
    """Build a DiGraph keyed by service id.

    Nodes carry ``name`` and ``type``; edges carry the relationship's
    ``name``, ``id`` and ``description``. When several relationships share
    the same endpoints, the last one in document order owns the edge.
    """
    g: _Graph = nx.DiGraph(name=config.name, id=config.id)
    for svc in config.services:
        # First service wins, matching lookup precedence.
        if svc.id not in g:
            g.add_node(svc.id, name=svc.name, type=svc.type)
    for rel in config.relationships:
        g.add_edge(
            rel.from_id,
            rel.to_id,
            name=rel.name,
            id=rel.id,
            description=rel.description,
        )
    return g
