"""Structural merge of ESLint configuration documents.

Values are classified by shape rather than by origin, since an existing
configuration file may hold anything. Two sequences are unioned, two mappings
are merged key by key, and every other pairing lets the incoming value win.
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, List, Sequence

from .models import NodeKind


def node_kind(value: Any) -> NodeKind:
    """Classify a configuration value by its shape."""

    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def union(base: Sequence[Any], incoming: Sequence[Any]) -> List[Any]:
    """Base items first, then incoming items not seen yet.

    Items are compared by equality so override objects (dicts) take part too.
    """

    ordered: List[Any] = []
    for item in list(base) + list(incoming):
        if item not in ordered:
            ordered.append(deepcopy(item))
    return ordered


def merge(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated with ``incoming``; neither input is modified."""

    result: Dict[str, Any] = deepcopy(dict(base))
    for key, value in incoming.items():
        if key not in result:
            result[key] = deepcopy(value)
            continue
        kinds = (node_kind(result[key]), node_kind(value))
        if kinds == (NodeKind.SEQUENCE, NodeKind.SEQUENCE):
            result[key] = union(result[key], value)
        elif kinds == (NodeKind.MAPPING, NodeKind.MAPPING):
            result[key] = merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


__all__ = ["merge", "node_kind", "union"]
