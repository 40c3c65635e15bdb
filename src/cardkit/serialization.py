#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/serialization.py
"""JSON serialization and deserialization of documents.

Documents are stored as a ``{"root": {...}}`` object whose root record
nests every node record through ``children`` lists:

    {"root": {"children": [
        {"children": [{"text": "Hello", "format": 1, "type": "extended-text", ...}],
         "type": "paragraph", "version": 1, ...},
        {"type": "image", "version": 1, "src": "...", ...}
    ], "type": "root", "version": 1, ...}}

Each record is built by the node's own ``export_json()`` and read back by
its class's ``import_json()``; this module only resolves type tags and
recurses through ``children``.

Examples
--------
    >>> root = load_document('{"root": {"children": [{"type": "horizontalrule", "version": 1}]}}')
    >>> root.children[0].node_type
    'horizontalrule'
    >>> dump_document(root)
    '{"root": {"children": [{"type": "horizontalrule", "version": 1}], ...}}'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping, Optional, Union

from cardkit.exceptions import SerializationError, UnknownNodeTypeError
from cardkit.nodes import build_node_map
from cardkit.nodes.elements import ElementNode, RootNode

logger = logging.getLogger(__name__)


def node_from_record(record: Mapping[str, Any], node_map: Mapping[str, type], strict_mode: bool = True) -> Any:
    """Create a node (and its children) from a record.

    Parameters
    ----------
    record : Mapping
        A ``{type, version, ...}`` node record
    node_map : Mapping
        Type tag to node class
    strict_mode : bool, default True
        If True, raise on unknown node types. If False, log a warning and
        return None so the record is skipped.

    Returns
    -------
    node or None
        The created node, or None for a skipped record

    Raises
    ------
    SerializationError
        If ``record`` is not a mapping or has no ``type``
    UnknownNodeTypeError
        If the type tag is not registered and ``strict_mode`` is True

    """
    if not isinstance(record, Mapping):
        raise SerializationError(f"Node record must be an object, got {type(record).__name__}")

    node_type = record.get("type")
    if not node_type:
        raise SerializationError("Node record must contain a 'type' field")

    node_class = node_map.get(node_type)
    if node_class is None:
        if strict_mode:
            raise UnknownNodeTypeError(node_type)
        logger.warning("Unknown node type '%s', skipping", node_type)
        return None

    node = node_class.import_json(record)
    if isinstance(node, ElementNode):
        for child_record in record.get("children") or []:
            child = node_from_record(child_record, node_map, strict_mode=strict_mode)
            if child is not None:
                node.append(child)
    return node


def dict_to_document(
    data: Mapping[str, Any], nodes: Optional[Iterable[type]] = None, strict_mode: bool = True
) -> RootNode:
    """Load a document from its ``{"root": {...}}`` mapping.

    Raises
    ------
    SerializationError
        If the mapping has no root record
    UnknownNodeTypeError
        If a record's type is not registered and ``strict_mode`` is True

    """
    root_record = data.get("root") if isinstance(data, Mapping) else None
    if not isinstance(root_record, Mapping):
        raise SerializationError("Document must contain a 'root' object")
    root = node_from_record({**root_record, "type": "root"}, build_node_map(nodes), strict_mode=strict_mode)
    return root


def document_to_dict(root: RootNode) -> dict[str, Any]:
    """Return the ``{"root": {...}}`` mapping for a document."""
    return {"root": root.export_json()}


def load_document(
    data: Union[str, bytes, Mapping[str, Any]], nodes: Optional[Iterable[type]] = None, strict_mode: bool = True
) -> RootNode:
    """Load a document from a JSON string or an already-decoded mapping.

    Parameters
    ----------
    data : str, bytes or Mapping
        Serialized document
    nodes : iterable of type, optional
        Node classes to resolve type tags against; defaults to ``DEFAULT_NODES``
    strict_mode : bool, default True
        If False, records of unknown types are skipped with a warning

    Returns
    -------
    RootNode
        The document root

    Raises
    ------
    SerializationError
        If the JSON is malformed or the document shape is invalid
    UnknownNodeTypeError
        If a record's type is not registered and ``strict_mode`` is True

    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid document JSON: {e}", original_error=e) from e
    return dict_to_document(data, nodes, strict_mode=strict_mode)


def dump_document(root: RootNode, indent: Optional[int] = None) -> str:
    """Serialize a document to a JSON string.

    Raises
    ------
    SerializationError
        If a node holds a value that cannot be encoded as JSON

    """
    try:
        return json.dumps(document_to_dict(root), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Document cannot be encoded as JSON: {e}", original_error=e) from e
