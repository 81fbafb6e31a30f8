"""Graph data model — DagService, DagRelationship, DagConfig.

Attributes map to document keys through aliases (``Name``, ``Id``, ...), so
the YAML keeps its capitalised spelling while Python code uses snake_case.
Documents are validated by alias only; field names are accepted for
keyword construction in Python.

Missing keys and explicit nulls fall back to zero values. The document
parser hands string fields the scalar text as written; Python callers
passing numbers for string fields get their string form.

All models are frozen and collections are tuples: a loaded configuration is
an immutable snapshot.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from dagconfig.domain.ids import Identifier

# Property values are untyped until the upstream schema is settled.
DagProperty = Any


class _DocumentModel(BaseModel):
    """Shared config for models deserialized from the graph document."""

    model_config = {
        "frozen": True,
        "validate_by_name": True,
        "validate_by_alias": True,
        "coerce_numbers_to_str": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat ``Key: null`` (and an empty record) as an absent key."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class DagService(_DocumentModel):
    """A node in the deployment graph."""

    name: str = Field(default="", alias="Name")
    id: Identifier = Field(default="", alias="Id")
    type: str = Field(default="", alias="Type")
    properties: dict[str, DagProperty] = Field(default_factory=dict, alias="Properties")


class DagRelationship(_DocumentModel):
    """A directed edge between two services, referenced by their ids.

    ``from_id`` / ``to_id`` are not checked against the service list.
    """

    name: str = Field(default="", alias="Name")
    id: Identifier = Field(default="", alias="Id")
    description: str = Field(default="", alias="Description")
    from_id: Identifier = Field(default="", alias="From")
    to_id: Identifier = Field(default="", alias="To")
    properties: dict[str, DagProperty] = Field(default_factory=dict, alias="Properties")


class DagConfig(_DocumentModel):
    """Root aggregate: a deployment's services and the relationships between them.

    Sequence order is the document order and decides lookup precedence.
    """

    name: str = Field(default="", alias="Name")
    id: Identifier = Field(default="", alias="Id")
    services: tuple[DagService, ...] = Field(default=(), alias="Services")
    relationships: tuple[DagRelationship, ...] = Field(default=(), alias="Relationships")
