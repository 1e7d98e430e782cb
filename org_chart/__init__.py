"""
Org Chart Engine
In-memory organization tree with reparenting and single-slot undo/redo.
"""

from .domain_types import Employee, EngineSettings, MoveRecord, MoveResult
from .registry import EmployeeNotFoundError, EmployeeRegistry
from .engine import InvalidMoveTargetError, OrgTreeEngine
from .invariants import InvariantViolationError, validate_tree
from .bootstrap import build_sample_org, wire_reporting_lines
from .hashing import canonical_hash, canonical_serialize
from .diagnostics import compute_diagnostics
from .render import render_tree, tree_to_dict
from .constants import CEO_NAME, EMPLOYEE_NAMES, REPORTING_LINES

__all__ = [
    "Employee",
    "EngineSettings",
    "MoveRecord",
    "MoveResult",
    "EmployeeNotFoundError",
    "EmployeeRegistry",
    "InvalidMoveTargetError",
    "OrgTreeEngine",
    "InvariantViolationError",
    "validate_tree",
    "build_sample_org",
    "wire_reporting_lines",
    "canonical_hash",
    "canonical_serialize",
    "compute_diagnostics",
    "render_tree",
    "tree_to_dict",
    "CEO_NAME",
    "EMPLOYEE_NAMES",
    "REPORTING_LINES",
]
