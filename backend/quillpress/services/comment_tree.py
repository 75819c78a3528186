"""Nest a flat comment thread into a forest of replies."""
from __future__ import annotations

from typing import Any, Iterable, Mapping


def nest(flat_comments: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Build a reply tree from comments sorted by creation time.

    Each comment becomes a dict with an added ``children`` list. A comment is
    attached to its parent when ``parent_id`` names a comment in the input;
    otherwise it is a root. Orphans whose parent is missing are kept as roots.
    Roots and children keep their input order.
    """
    nodes: dict[Any, dict[str, Any]] = {}
    ordered: list[dict[str, Any]] = []
    for comment in flat_comments:
        node = {**comment, "children": []}
        nodes[node["id"]] = node
        ordered.append(node)

    roots: list[dict[str, Any]] = []
    for node in ordered:
        parent_id = node.get("parent_id")
        parent = nodes.get(parent_id) if parent_id is not None else None
        if parent is not None and parent is not node:
            parent["children"].append(node)
        else:
            roots.append(node)
    return roots
