"""Serialization: JSON round-trip for Tinta nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Shipping segmented lesson content to a browser-side renderer
- Caching parsed chat messages
- Debugging and inspection

All JSON output is deterministic (sorted keys).

Example:
    from tinta import parse
    from tinta.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from tinta.errors import SerializationError
from tinta.location import SourceLocation
from tinta.nodes import BLOCK_TYPES, INLINE_TYPES, Document, Node

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls for cls in (*BLOCK_TYPES, *INLINE_TYPES, Document)
}

# Fields holding tuples of tuples of strings (table rows)
_ROW_FIELDS = {"rows"}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes and SourceLocation objects.

    Args:
        node: Any Tinta node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "end_lineno": value.end_lineno,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If ``data`` is not a dict, ``_type`` is
            missing or unknown, or the fields do not fit the node type.

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg, type_name=type_name)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for {type_name}: {e}"
        raise SerializationError(msg, type_name=type_name) from e


def _deserialize_value(value: Any, field_name: str = "") -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        if value.get("_type") == "SourceLocation":
            if "lineno" not in value:
                msg = "Missing 'lineno' field in serialized SourceLocation"
                raise SerializationError(msg, type_name="SourceLocation")
            return SourceLocation(
                lineno=value["lineno"],
                end_lineno=value.get("end_lineno", value["lineno"]),
                source_file=value.get("source_file"),
            )
        return from_dict(value)
    if isinstance(value, list):
        if field_name in _ROW_FIELDS:
            return tuple(tuple(row) for row in value)
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string (sorted keys)."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(text: str) -> Node:
    """Rebuild a node from a JSON string produced by ``to_json``.

    Raises:
        SerializationError: If text is not valid JSON or does not describe
            a node.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    return from_dict(data)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
