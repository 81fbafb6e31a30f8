"""BaseService — shared foundation for result-returning services.

Every service receives a loaded :class:`DagConfigService` at construction
time and reads the graph only through it.
"""

from __future__ import annotations

from typing import Any

from dagconfig.infrastructure.document import (
    DocumentError,
    DocumentParseError,
    DocumentReadError,
)
from dagconfig.services.lookup import DagConfigService
from dagconfig.services.result import ServiceError, ServiceResult


class BaseService:
    """Base for service-layer classes operating on one loaded graph.

    Usage::

        class QueryService(BaseService):
            def find_service(self, *, name: str) -> ServiceResult:
                svc = self._lookup.find_service_by_name(name)
                ...
    """

    def __init__(self, lookup: DagConfigService) -> None:
        self._lookup = lookup

    @staticmethod
    def _not_found(op: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code="NOT_FOUND", message=message, detail=detail),
        )


def load_error_result(exc: DocumentError, *, op: str = "load") -> ServiceResult:
    """Convert a document load failure into an ``ok=False`` result."""
    if isinstance(exc, DocumentReadError):
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="IO_ERROR",
                message=str(exc),
                detail={"path": str(exc.path), "reason": exc.reason},
            ),
        )
    detail: dict[str, Any] = {}
    if isinstance(exc, DocumentParseError):
        detail["errors"] = exc.errors
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="PARSE_ERROR", message=str(exc), detail=detail),
    )
