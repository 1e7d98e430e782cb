"""
Org Chart — Sample Organization Bootstrap

Builds the canonical org chart by creating every employee and wiring the
reporting lines directly (not through ``move``, which expects an existing
tree).
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple

from .constants import CEO_NAME, EMPLOYEE_NAMES, REPORTING_LINES
from .domain_types import EngineSettings
from .engine import OrgTreeEngine
from .invariants import validate_tree
from .registry import EmployeeRegistry
from .transitions import attach

logger = logging.getLogger(__name__)


def wire_reporting_lines(
    registry: EmployeeRegistry,
    lines: Iterable[Tuple[str, Sequence[str]]],
) -> int:
    """
    Attach subordinates to supervisors by name. Unknown names are skipped.
    Returns the number of links created.
    """
    linked = 0
    for supervisor_name, subordinate_names in lines:
        supervisor = registry.find_by_name(supervisor_name)
        if supervisor is None:
            logger.warning("Unknown supervisor %r, skipping its line", supervisor_name)
            continue
        for name in subordinate_names:
            employee = registry.find_by_name(name)
            if employee is None:
                logger.warning(
                    "Unknown subordinate %r of %r, skipping", name, supervisor_name,
                )
                continue
            attach(supervisor, employee)
            linked += 1
    return linked


def build_sample_org(
    ceo_name: str = CEO_NAME,
    names: Sequence[str] = EMPLOYEE_NAMES,
    lines: Iterable[Tuple[str, Sequence[str]]] = REPORTING_LINES,
    settings: EngineSettings | None = None,
) -> OrgTreeEngine:
    """Create the CEO, then every named employee, then the reporting lines."""
    registry = EmployeeRegistry()
    ceo = registry.create_employee(ceo_name)
    for name in names:
        registry.create_employee(name)
    linked = wire_reporting_lines(registry, lines)

    engine = OrgTreeEngine(registry, ceo, settings)
    if engine.settings.validate_invariants:
        validate_tree(ceo, registry)
    logger.debug("Bootstrapped %d employees, %d links", len(registry), linked)
    return engine
