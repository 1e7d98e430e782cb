"""
Org Chart — Canonical Hashing

Deterministic canonical serialization + SHA-256 hashing of the tree.

Rules:
  - Employees sorted by id
  - Subordinate ids kept in list order (order is part of the state)
  - UTF-8 JSON, no whitespace
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, List, Union

from .engine import OrgTreeEngine
from .registry import EmployeeRegistry


def canonical_serialize(source: Union[OrgTreeEngine, EmployeeRegistry]) -> bytes:
    """Canonical UTF-8 JSON bytes of every employee record."""
    obj = _build_canonical_dict(source)
    return json.dumps(obj, ensure_ascii=True, separators=(",", ":"), sort_keys=False).encode("utf-8")


def canonical_hash(source: Union[OrgTreeEngine, EmployeeRegistry]) -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    return hashlib.sha256(canonical_serialize(source)).hexdigest()


def _build_canonical_dict(
    source: Union[OrgTreeEngine, EmployeeRegistry],
) -> Dict[str, Any]:
    if isinstance(source, OrgTreeEngine):
        registry = source.registry
        root_id = source.ceo.id
    else:
        registry = source
        root_id = None

    employees: List[Dict[str, Any]] = []
    for employee in sorted(registry, key=lambda e: e.id):
        employees.append({
            "id": employee.id,
            "name": employee.name,
            "supervisor_id": employee.supervisor_id,
            "subordinates": employee.subordinate_ids,
        })

    return {
        "root_id": root_id,
        "last_id": registry.last_id,
        "employees": employees,
    }
