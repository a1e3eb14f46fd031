#!/usr/bin/env python3
"""
Formatting helpers for objectschema.

- Stable one-line `path: message` formatting of a validation error tree.
- Conversion of an error tree to plain data (for JSON/YAML output).
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List

from objectschema.core.validation.result import FieldError


# --- Public API --- #

def format_errors_simple(errors: Mapping[str, Any], prefix: str = "") -> List[str]:
    """
    Flatten a `{name: FieldError}` map into one line per failure message.

    Example:
        {"child": FieldError(related={"name": FieldError(messages=["is required"])})}
        -> ["child.name: is required"]

    Array elements are addressed by index: "tags[1]: has invalid length".
    """
    msgs: List[str] = []
    for name, node in errors.items():
        path = f"{prefix}.{name}" if prefix else str(name)
        msgs.extend(_format_node(node, path))
    return msgs


def errors_to_dict(errors: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert an error map to plain dicts/lists (FieldError -> dict)."""
    return {name: _node_to_data(node) for name, node in errors.items()}


# --- Internals --- #

def _format_node(node: Any, path: str) -> List[str]:
    if node is None:
        return []
    if isinstance(node, Mapping):
        return format_errors_simple(node, path)

    msgs = [f"{path}: {m}" for m in node.messages]
    related = node.related
    if isinstance(related, Mapping):
        msgs.extend(format_errors_simple(related, path))
    elif isinstance(related, list):
        for i, item in enumerate(related):
            msgs.extend(_format_node(item, f"{path}[{i}]"))
    return msgs


def _node_to_data(node: Any) -> Any:
    if isinstance(node, FieldError):
        return {
            "is_valid": node.is_valid,
            "messages": list(node.messages),
            "related": _node_to_data(node.related),
        }
    if isinstance(node, Mapping):
        return {k: _node_to_data(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_node_to_data(v) for v in node]
    return node
