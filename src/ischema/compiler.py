"""Compile parsed interfaces into JSON Schema (draft-07) documents."""

from __future__ import annotations

from typing import Any, Literal

import ujson as json

from .model import IndexEntry, Interface, Leaf

SCHEMA_URI = "http://json-schema.org/draft-07/schema#"
INDEX_TAG = "indexSignatures"

IndexEncoding = Literal["legacy", "comment"]
"""Where index-signature metadata goes.

``legacy`` writes ``$comment`` on the root and ``description`` on nested
objects. ``comment`` writes ``$comment`` at every level.
"""


def encode_indices(indices: list[IndexEntry]) -> str:
    """Serialize index signatures as ``{"indexSignatures": [...]}``."""
    payload = {INDEX_TAG: [entry.to_dict() for entry in indices]}
    return json.dumps(payload, escape_forward_slashes=False, ensure_ascii=False)


def decode_indices(text: str) -> list[dict[str, Any]]:
    """Inverse of :func:`encode_indices`, for consumers of compiled schemas."""
    data = json.loads(text)
    if not isinstance(data, dict) or INDEX_TAG not in data:
        raise ValueError(f"Not an index signature payload: {text!r}")
    return list(data[INDEX_TAG])


def schema_template(title: str) -> dict[str, Any]:
    return {
        "$schema": SCHEMA_URI,
        "title": title,
        "type": "object",
        "properties": {},
        "required": [],
    }


def _fill_properties(
    inter: Interface, node: dict[str, Any], encoding: IndexEncoding
) -> None:
    """Populate ``node["properties"]`` for every level below ``inter``.

    Walks with an explicit work list; ``node`` and the nested nodes it gains
    are filled in place.
    """
    pending: list[tuple[Interface, dict[str, Any]]] = [(inter, node)]
    while pending:
        current, target = pending.pop()
        for key, prop in current.props.items():
            if isinstance(prop, Leaf):
                target["properties"][key] = {"description": "", "type": prop.type}
                continue
            child: dict[str, Any] = {"description": "", "type": "object", "properties": {}}
            if prop.interface.indices:
                field = "$comment" if encoding == "comment" else "description"
                child[field] = encode_indices(prop.interface.indices)
            target["properties"][key] = child
            pending.append((prop.interface, child))


def compile_interface(inter: Interface, encoding: IndexEncoding = "legacy") -> dict[str, Any]:
    """Compile ``inter`` into a draft-07 schema.

    The result mirrors the interface tree level for level, and every
    top-level property is listed in ``required``.
    """
    if encoding not in ("legacy", "comment"):
        raise ValueError(f"Unknown index encoding: {encoding}")
    schema = schema_template(inter.name)
    _fill_properties(inter, schema, encoding)
    schema["required"] = list(inter.props)
    if inter.indices:
        schema["$comment"] = encode_indices(inter.indices)
    return schema


def compile_all(
    interfaces: list[Interface], encoding: IndexEncoding = "legacy"
) -> list[dict[str, Any]]:
    return [compile_interface(inter, encoding) for inter in interfaces]
