"""QueryService — graph overview and single-entity lookups as ServiceResult.

Wraps :class:`DagConfigService` lookups for the CLI. Exactly one key is
accepted per lookup; a miss is a ``NOT_FOUND`` error result.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from dagconfig.services.base import BaseService
from dagconfig.services.result import ServiceError, ServiceResult


def _single_key(op: str, keys: dict[str, str | None]) -> tuple[str, str] | ServiceResult:
    """Return the one ``(key, value)`` pair that was given, or an error result."""
    given = [(k, v) for k, v in keys.items() if v is not None]
    if len(given) == 1:
        return given[0]
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="INVALID_ARGUMENT",
            message=f"Exactly one of {', '.join(keys)} is required",
            detail={"given": [k for k, _ in given]},
        ),
    )


# Lookup key -> DagRelationship attribute it is matched against.
_RELATIONSHIP_FIELDS = {"name": "name", "id": "id", "from": "from_id", "to": "to_id"}


def _found(op: str, found: BaseModel, field: str, query: str) -> ServiceResult:
    """Success result for *found*, warning when it only matched ignoring case."""
    warnings: list[str] = []
    matched = getattr(found, field)
    if matched != query:
        warnings.append(f"Matched {matched!r} for {query!r} ignoring case")
    return ServiceResult(ok=True, op=op, data=found.model_dump(mode="json"), warnings=warnings)


class QueryService(BaseService):
    """Read-only queries over the loaded graph."""

    def overview(self) -> ServiceResult:
        """Summarize the loaded configuration with its services and relationships."""
        config = self._lookup.config
        services = [
            {"id": s.id, "name": s.name, "type": s.type} for s in config.services
        ]
        relationships = [
            {"id": r.id, "name": r.name, "from": r.from_id, "to": r.to_id}
            for r in config.relationships
        ]
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "name": config.name,
                "id": config.id,
                "service_count": len(services),
                "relationship_count": len(relationships),
                "services": services,
                "relationships": relationships,
            },
        )

    def find_service(
        self,
        *,
        name: str | None = None,
        service_id: str | None = None,
    ) -> ServiceResult:
        """Find a service by name or by id."""
        op = "find_service"
        picked = _single_key(op, {"name": name, "id": service_id})
        if isinstance(picked, ServiceResult):
            return picked
        key, value = picked

        if key == "name":
            found = self._lookup.find_service_by_name(value)
        else:
            found = self._lookup.find_service_by_id(value)

        if found is None:
            return self._not_found(op, f"No service with {key} {value!r}", **{key: value})
        return _found(op, found, "name" if key == "name" else "id", value)

    def find_relationship(
        self,
        *,
        name: str | None = None,
        relationship_id: str | None = None,
        from_id: str | None = None,
        to_id: str | None = None,
    ) -> ServiceResult:
        """Find a relationship by name, id, source id or target id."""
        op = "find_relationship"
        picked = _single_key(
            op,
            {"name": name, "id": relationship_id, "from": from_id, "to": to_id},
        )
        if isinstance(picked, ServiceResult):
            return picked
        key, value = picked

        finders: dict[str, Any] = {
            "name": self._lookup.find_relationship_by_name,
            "id": self._lookup.find_relationship_by_id,
            "from": self._lookup.find_relationship_by_from_id,
            "to": self._lookup.find_relationship_by_to_id,
        }
        found = finders[key](value)
        if found is None:
            return self._not_found(op, f"No relationship with {key} {value!r}", **{key: value})
        return _found(op, found, _RELATIONSHIP_FIELDS[key], value)
