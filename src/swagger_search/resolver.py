"""Inline expansion of internal ``$ref`` pointers in schema fragments."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

MAX_RESOLVE_DEPTH = 5


def resolve_schema(schema: Any, doc: dict | None, depth: int = 0) -> Any:
    """Return ``schema`` with reachable internal references expanded inline.

    Past MAX_RESOLVE_DEPTH the fragment is returned as-is, which is what
    keeps reference cycles finite. Pointers that cannot be followed are
    left in place. Only ``allOf`` compositions are walked; ``anyOf`` and
    ``oneOf`` pass through untouched.
    """
    if not schema or depth > MAX_RESOLVE_DEPTH or not isinstance(schema, dict):
        return schema

    if "$ref" in schema:
        target = _follow_pointer(schema["$ref"], doc)
        if target is None:
            logger.debug("Leaving unresolved reference %s", schema["$ref"])
            return schema
        return resolve_schema(target, doc, depth + 1)

    if schema.get("type") == "array" and schema.get("items"):
        return {**schema, "items": resolve_schema(schema["items"], doc, depth + 1)}

    if schema.get("type") == "object" and schema.get("properties"):
        properties = {
            name: resolve_schema(prop, doc, depth + 1)
            for name, prop in schema["properties"].items()
        }
        return {**schema, "properties": properties}

    if schema.get("allOf"):
        return {**schema, "allOf": [resolve_schema(s, doc, depth + 1) for s in schema["allOf"]]}

    return schema


def _follow_pointer(ref: Any, doc: dict | None) -> Any:
    """Walk a ``#/a/b/c`` pointer from the document root, or return None."""
    if not isinstance(ref, str):
        return None

    node: Any = doc
    for part in ref.replace("#/", "", 1).split("/"):
        if isinstance(node, dict) and node.get(part) is not None:
            node = node[part]
        else:
            return None
    return node
