"""
Org Chart — Diagnostics

Compute a diagnostic snapshot of the current tree and history.
"""

from __future__ import annotations

from typing import Dict, List

from .constants import DEPTH_WARNING, SPAN_OF_CONTROL_WARNING
from .engine import OrgTreeEngine


def compute_depths(engine: OrgTreeEngine) -> Dict[int, int]:
    """Depth of every employee reachable from the CEO (CEO = 0)."""
    depths: Dict[int, int] = {engine.ceo.id: 0}
    stack = [engine.ceo]
    while stack:
        node = stack.pop()
        for child in node.subordinates:
            depths[child.id] = depths[node.id] + 1
            stack.append(child)
    return depths


def compute_diagnostics(engine: OrgTreeEngine) -> dict:
    """Return a diagnostic dict summarising the tree shape and history."""
    depths = compute_depths(engine)
    registry = engine.registry

    detached = sorted(
        e.id for e in registry
        if e is not engine.ceo and e.supervisor_id is None
    )
    attached = [registry.get(eid) for eid in sorted(depths)]
    leaves = [e.id for e in attached if not e.subordinates]
    widest = max(attached, key=lambda e: len(e.subordinates))
    depth = max(depths.values())

    warnings: List[str] = []

    if len(widest.subordinates) > SPAN_OF_CONTROL_WARNING:
        warnings.append(
            f"{widest.name} ({widest.id}) has {len(widest.subordinates)} "
            f"direct reports"
        )
    if depth > DEPTH_WARNING:
        warnings.append(f"Hierarchy depth {depth} exceeds {DEPTH_WARNING}")
    if detached:
        warnings.append(
            f"{len(detached)} detached employee(s): "
            f"{', '.join(str(eid) for eid in detached)}"
        )

    return {
        "employee_count": len(registry),
        "attached_count": len(attached),
        "detached_employees": detached,
        "depth": depth,
        "leaf_count": len(leaves),
        "max_span_of_control": len(widest.subordinates),
        "undo_depth": len(engine.undo_stack),
        "redo_available": engine.can_redo,
        "warnings": warnings,
    }
