"""DagConfigService — load a graph document, look up services and relationships.

Every lookup is a single ordered scan of one collection. Each element is
tested for an exact key match and, only if that fails and the service was
built with ``tolerate_miscased_keys=True``, for a case-insensitive match.
The first element passing either test wins; there is no separate
"exact pass" before the fallback.

Lookups return the entity itself or ``None``. The entity belongs to the
snapshot that was current when the lookup ran: a later reload swaps in a
new snapshot and leaves previously returned entities untouched.

Usage::

    svc = DagConfigService.from_file("dag.yaml", tolerate_miscased_keys=True)
    web = svc.find_service_by_name("web")
    if web is not None:
        outbound = svc.find_relationships_from(web.id)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Self

from dagconfig.domain.ids import Identifier, keys_match
from dagconfig.domain.models import DagConfig, DagRelationship, DagService
from dagconfig.infrastructure.document import parse_document, read_document

logger = logging.getLogger(__name__)


class DagConfigService:
    """Read-only query facade over one loaded :class:`DagConfig` snapshot."""

    def __init__(
        self,
        config: DagConfig | None = None,
        *,
        tolerate_miscased_keys: bool = False,
    ) -> None:
        self._config = config if config is not None else DagConfig()
        self._tolerate_miscased_keys = tolerate_miscased_keys

    @property
    def config(self) -> DagConfig:
        """The current snapshot."""
        return self._config

    @property
    def tolerate_miscased_keys(self) -> bool:
        return self._tolerate_miscased_keys

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: str | Path, *, tolerate_miscased_keys: bool = False) -> Self:
        """Build a service and load the document at *path* into it."""
        service = cls(tolerate_miscased_keys=tolerate_miscased_keys)
        service.load_from_file(path)
        return service

    @classmethod
    def from_string(cls, document: str, *, tolerate_miscased_keys: bool = False) -> Self:
        """Build a service and load *document* into it."""
        service = cls(tolerate_miscased_keys=tolerate_miscased_keys)
        service.load_from_string(document)
        return service

    def load_from_file(self, path: str | Path) -> DagConfig:
        """Read the file at *path* and load it as the current snapshot.

        Raises:
            DocumentReadError: If the file cannot be read. Parsing is skipped.
            DocumentParseError: If the content is not a valid graph document.
        """
        text = read_document(Path(path))
        return self.load_from_string(text)

    def load_from_string(self, document: str) -> DagConfig:
        """Parse *document* and load it as the current snapshot.

        The snapshot is replaced only when parsing succeeds; on failure the
        previous snapshot stays current.

        Raises:
            DocumentParseError: If the text is not a valid graph document.
        """
        config = parse_document(document)
        self._config = config
        logger.debug(
            "Loaded graph config %r (%d services, %d relationships)",
            config.id,
            len(config.services),
            len(config.relationships),
        )
        return config

    # ------------------------------------------------------------------
    # Scan helpers
    # ------------------------------------------------------------------

    def _first[T](self, items: Iterable[T], key: Callable[[T], str], query: str) -> T | None:
        """Return the first item whose *key* matches *query*, else None."""
        for item in items:
            if keys_match(key(item), query, tolerate_miscased=self._tolerate_miscased_keys):
                return item
        logger.debug("No match for key %r", query)
        return None

    def _all[T](self, items: Iterable[T], key: Callable[[T], str], query: str) -> tuple[T, ...]:
        """Return every item whose *key* matches *query*, in scan order."""
        return tuple(
            item
            for item in items
            if keys_match(key(item), query, tolerate_miscased=self._tolerate_miscased_keys)
        )

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------

    def find_service_by_name(self, name: str) -> DagService | None:
        """Find the first service called *name*."""
        return self._first(self._config.services, lambda s: s.name, name)

    def find_service_by_id(self, service_id: Identifier) -> DagService | None:
        """Find the first service with id *service_id*."""
        return self._first(self._config.services, lambda s: s.id, service_id)

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------

    def find_relationship_by_name(self, name: str) -> DagRelationship | None:
        """Find the first relationship called *name*."""
        return self._first(self._config.relationships, lambda r: r.name, name)

    def find_relationship_by_id(self, relationship_id: Identifier) -> DagRelationship | None:
        """Find the first relationship with id *relationship_id*."""
        return self._first(self._config.relationships, lambda r: r.id, relationship_id)

    def find_relationship_by_from_id(self, service_id: Identifier) -> DagRelationship | None:
        """Find the first relationship whose source is *service_id*."""
        return self._first(self._config.relationships, lambda r: r.from_id, service_id)

    def find_relationship_by_to_id(self, service_id: Identifier) -> DagRelationship | None:
        """Find the first relationship whose target is *service_id*."""
        return self._first(self._config.relationships, lambda r: r.to_id, service_id)

    def find_relationships_from(self, service_id: Identifier) -> tuple[DagRelationship, ...]:
        """All relationships leaving *service_id*, in document order."""
        return self._all(self._config.relationships, lambda r: r.from_id, service_id)

    def find_relationships_to(self, service_id: Identifier) -> tuple[DagRelationship, ...]:
        """All relationships arriving at *service_id*, in document order."""
        return self._all(self._config.relationships, lambda r: r.to_id, service_id)
