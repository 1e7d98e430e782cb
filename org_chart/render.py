"""
Org Chart — Rendering

Read-only views of the tree for printing and JSON responses.
"""

from __future__ import annotations

from typing import List

from .domain_types import Employee


def tree_to_dict(root: Employee) -> dict:
    """Nested dict of the subtree under *root*, subordinates in list order."""
    return {
        "id": root.id,
        "name": root.name,
        "supervisor_id": root.supervisor_id,
        "subordinates": [tree_to_dict(child) for child in root.subordinates],
    }


def render_tree(root: Employee) -> str:
    """
    Box-drawing text tree, one employee per line::

        Mark Zuckerberg (1)
        ├── Sarah Donald (2)
        │   └── Cassandra Reynolds (6)
    """
    lines: List[str] = [f"{root.name} ({root.id})"]
    _render_children(root, "", lines)
    return "\n".join(lines)


def _render_children(node: Employee, prefix: str, lines: List[str]) -> None:
    last = len(node.subordinates) - 1
    for idx, child in enumerate(node.subordinates):
        branch = "└── " if idx == last else "├── "
        lines.append(f"{prefix}{branch}{child.name} ({child.id})")
        _render_children(child, prefix + ("    " if idx == last else "│   "), lines)
