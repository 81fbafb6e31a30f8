"""Graph document I/O — read a YAML file, parse it into a DagConfig.

Two failure kinds, both subclasses of :class:`DocumentError`:

- :class:`DocumentReadError`: the file could not be opened or decoded.
- :class:`DocumentParseError`: the text is not valid YAML, or its
  structure does not fit the data model (e.g. ``Services: 5``).

Reading and parsing are separate steps so a read failure never reaches
the parser.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError
from ruamel.yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from dagconfig.domain.models import DagConfig

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Base class for graph document load failures."""


class DocumentReadError(DocumentError):
    """The document file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class DocumentParseError(DocumentError):
    """The document text could not be deserialized into a DagConfig."""

    def __init__(self, errors: list[str]) -> None:
        summary = errors[0] if errors else "unknown error"
        if len(errors) > 1:
            summary += f" (+{len(errors) - 1} more)"
        super().__init__(f"Invalid graph document: {summary}")
        self.errors = errors


def _format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors to ``"Services.0.Name: message"`` strings."""
    lines: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        lines.append(f"{loc}: {err['msg']}" if loc else str(err["msg"]))
    return lines


def read_document(path: Path) -> str:
    """Return the full text of the document at *path*.

    Raises:
        DocumentReadError: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        logger.debug("Failed to read graph document %s", path, exc_info=True)
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise DocumentReadError(path, reason) from exc


# Keys whose scalar value is kept as written, e.g. ``Id: 0123`` stays "0123".
_TEXT_KEYS = frozenset({"Name", "Id", "Type", "Description", "From", "To"})
_NULL_TAG = "tag:yaml.org,2002:null"


def _build(node: Node, constructor: SafeConstructor) -> Any:
    """Turn a composed node into plain data.

    Scalars under the text keys keep their source text instead of the type
    the YAML resolver would give them (int, float, bool, date). ``Properties``
    and everything else is constructed with the safe constructor as usual.
    Merge keys (``<<: *anchor``) are honoured; explicit keys override merged ones.
    """
    if isinstance(node, MappingNode):
        constructor.flatten_mapping(node)
        inherited = len(node.merge or ())
        data: dict[Any, Any] = {}
        explicit: set[Any] = set()
        for index, (key_node, value_node) in enumerate(node.value):
            line = key_node.start_mark.line + 1
            if not isinstance(key_node, ScalarNode):
                raise DocumentParseError([f"line {line}: mapping keys must be scalars"])
            key = constructor.construct_document(key_node)
            if index >= inherited:
                if key in explicit:
                    raise DocumentParseError([f"line {line}: duplicate key {key!r}"])
                explicit.add(key)
            if key in _TEXT_KEYS and isinstance(value_node, ScalarNode):
                data[key] = None if value_node.tag == _NULL_TAG else value_node.value
            elif key == "Properties":
                data[key] = constructor.construct_document(value_node)
            else:
                data[key] = _build(value_node, constructor)
        return data
    if isinstance(node, SequenceNode):
        return [_build(item, constructor) for item in node.value]
    return constructor.construct_document(node)


def parse_document(text: str) -> DagConfig:
    """Deserialize YAML *text* into a :class:`DagConfig`.

    An empty document yields an empty configuration.

    Raises:
        DocumentParseError: On YAML syntax errors or structural mismatches.
    """
    # compose() needs the pure-Python composer.
    yaml = YAML(typ="safe", pure=True)
    try:
        node = yaml.compose(text)
        data: Any = None if node is None else _build(node, yaml.constructor)
    except YAMLError as exc:
        logger.debug("Graph document is not valid YAML", exc_info=True)
        raise DocumentParseError([str(exc)]) from exc

    try:
        config = DagConfig.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as exc:
        errors = _format_validation_errors(exc)
        logger.debug("Graph document failed validation: %s", errors)
        raise DocumentParseError(errors) from exc

    logger.debug(
        "Parsed graph document %r: %d services, %d relationships",
        config.name,
        len(config.services),
        len(config.relationships),
    )
    return config
