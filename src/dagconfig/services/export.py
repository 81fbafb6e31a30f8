"""ExportService — render the loaded graph as Graphviz DOT or JSON.

Nodes come from the NetworkX view (so dangling relationship endpoints
appear too); edges are listed from the relationship sequence, so parallel
relationships between the same services are all kept.
"""

from __future__ import annotations

import json
from typing import Any

import networkx as nx

from dagconfig.infrastructure.graph import build_digraph
from dagconfig.services.base import BaseService
from dagconfig.services.result import ServiceError, ServiceResult

EXPORT_FORMATS = ("dot", "json")


def _quote(value: str) -> str:
    """Quote *value* as a DOT string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class ExportService(BaseService):
    """Export the loaded graph in portable formats."""

    def export_graph(self, *, fmt: str = "dot") -> ServiceResult:
        """Export the graph.

        Formats:
        - ``dot`` — Graphviz DOT language
        - ``json`` — ``{"name", "id", "nodes": [...], "edges": [...]}``

        Returns the content as a string in ``data["content"]``.
        """
        if fmt not in EXPORT_FORMATS:
            return ServiceResult(
                ok=False,
                op="export_graph",
                error=ServiceError(
                    code="INVALID_FORMAT",
                    message=f"Unknown graph format: {fmt}",
                    detail={"format": fmt, "valid": list(EXPORT_FORMATS)},
                ),
            )

        config = self._lookup.config
        g = build_digraph(config)
        content = self._to_dot(g) if fmt == "dot" else self._to_json(g)
        return ServiceResult(
            ok=True,
            op="export_graph",
            data={
                "format": fmt,
                "content": content,
                "node_count": g.number_of_nodes(),
                "edge_count": len(config.relationships),
            },
        )

    # ── Private helpers ───────────────────────────────────────────────

    @staticmethod
    def _nodes(g: nx.DiGraph) -> list[dict[str, Any]]:
        return [
            {"id": node_id, "name": attrs.get("name", ""), "type": attrs.get("type", "")}
            for node_id, attrs in g.nodes(data=True)
        ]

    def _to_dot(self, g: nx.DiGraph) -> str:
        """Generate Graphviz DOT notation."""
        config = self._lookup.config
        lines = [
            f"digraph {_quote(config.name or 'dag')} {{",
            "  rankdir=LR;",
            "  node [shape=box];",
        ]

        for node in self._nodes(g):
            label = node["name"] or node["id"]
            lines.append(
                f"  {_quote(node['id'])} [label={_quote(label)} type={_quote(node['type'])}];"
            )

        for rel in config.relationships:
            lines.append(
                f"  {_quote(rel.from_id)} -> {_quote(rel.to_id)} "
                f"[label={_quote(rel.name)} id={_quote(rel.id)}];"
            )

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _to_json(self, g: nx.DiGraph) -> str:
        config = self._lookup.config
        edges = [
            {
                "id": rel.id,
                "name": rel.name,
                "source": rel.from_id,
                "target": rel.to_id,
                "description": rel.description,
            }
            for rel in config.relationships
        ]
        payload = {"name": config.name, "id": config.id, "nodes": self._nodes(g), "edges": edges}
        return json.dumps(payload, indent=2) + "\n"
