"""
Employee Registry — Tests

Covers:
  - Monotonic identity allocation starting at 1
  - Independent counters per registry
  - Lookup by id / by name (first match in registration order)
  - Immutable id and name
  - Bootstrap identities and reporting lines

Run:  py -3 -m org_chart.test_registry
"""

from __future__ import annotations

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_chart.bootstrap import build_sample_org, wire_reporting_lines
from org_chart.constants import CEO_NAME, EMPLOYEE_NAMES
from org_chart.registry import EmployeeNotFoundError, EmployeeRegistry


_pass = 0
_fail = 0


def _test(name, fn):
    global _pass, _fail
    try:
        fn()
        print(f"  [PASS] {name}")
        _pass += 1
    except Exception as exc:
        print(f"  [FAIL] {name}: {exc}")
        _fail += 1


# ---------------------------------------------------------------------------
# Identity allocation
# ---------------------------------------------------------------------------

def test_ids_start_at_one_and_increase():
    registry = EmployeeRegistry()
    ids = [registry.create_employee(f"e{i}").id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert registry.last_id == 5
    assert len(registry) == 5


def test_registries_do_not_share_counters():
    first = EmployeeRegistry()
    first.create_employee("a")
    first.create_employee("b")
    second = EmployeeRegistry()
    assert second.create_employee("c").id == 1


def test_new_employee_is_detached():
    employee = EmployeeRegistry().create_employee("Solo")
    assert employee.supervisor_id is None
    assert employee.subordinates == []


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def test_find_by_id():
    registry = EmployeeRegistry()
    a = registry.create_employee("A")
    assert registry.find_by_id(a.id) is a
    assert registry.find_by_id(42) is None
    assert registry.find_by_id(None) is None
    assert a.id in registry
    assert 42 not in registry


def test_get_raises_for_unknown_id():
    registry = EmployeeRegistry()
    try:
        registry.get(7)
    except EmployeeNotFoundError as exc:
        assert exc.employee_id == 7
        assert isinstance(exc, KeyError)
        assert "7" in str(exc)
    else:
        raise AssertionError("get() should raise for an unknown id")


def test_find_by_name_returns_first_registered():
    registry = EmployeeRegistry()
    first = registry.create_employee("Alex")
    registry.create_employee("Sam")
    registry.create_employee("Alex")
    assert registry.find_by_name("Alex") is first
    assert registry.find_by_name("Nobody") is None


def test_iteration_follows_registration_order():
    registry = EmployeeRegistry()
    for name in ("c", "a", "b"):
        registry.create_employee(name)
    assert [e.name for e in registry] == ["c", "a", "b"]


def test_id_and_name_are_immutable():
    employee = EmployeeRegistry().create_employee("Fixed")
    for attr, value in (("name", "Changed"), ("id", 99)):
        try:
            setattr(employee, attr, value)
        except AttributeError:
            pass
        else:
            raise AssertionError(f"{attr} should be immutable")
    assert employee.name == "Fixed"
    assert employee.id == 1
    employee.supervisor_id = 3
    assert employee.supervisor_id == 3


# ---------------------------------------------------------------------------
# Bootstrap
# ---------------------------------------------------------------------------

def test_sample_org_identities():
    engine = build_sample_org()
    registry = engine.registry
    assert engine.ceo.id == 1
    assert engine.ceo.name == CEO_NAME
    assert len(registry) == 1 + len(EMPLOYEE_NAMES)
    for offset, name in enumerate(EMPLOYEE_NAMES, start=2):
        assert registry.find_by_name(name).id == offset
    assert registry.get(5).name == "Georgina Flangy"
    assert registry.get(6).name == "Cassandra Reynolds"


def test_sample_org_reporting_lines():
    engine = build_sample_org()
    registry = engine.registry
    assert engine.ceo.subordinate_ids == [2, 3, 4, 5]
    assert registry.get(3).subordinate_ids == [10, 12, 13]
    assert registry.get(6).subordinate_ids == [7, 15]
    assert registry.get(15).subordinate_ids == [8]
    assert registry.get(8).subordinate_ids == [9]
    assert registry.get(9).supervisor_id == 8
    assert engine.ceo.supervisor_id is None


def test_find_by_name_is_idempotent():
    engine = build_sample_org()
    for name in (CEO_NAME,) + EMPLOYEE_NAMES:
        first = engine.registry.find_by_name(name)
        second = engine.registry.find_by_name(name)
        assert first is second
        assert first.id == second.id


def test_wiring_skips_unknown_names():
    registry = EmployeeRegistry()
    registry.create_employee("Boss")
    registry.create_employee("Worker")
    linked = wire_reporting_lines(registry, [
        ("Boss", ("Worker", "Ghost")),
        ("Phantom", ("Worker",)),
    ])
    assert linked == 1
    assert registry.find_by_name("Worker").supervisor_id == 1


def test_wiring_twice_is_rejected():
    registry = EmployeeRegistry()
    registry.create_employee("Boss")
    registry.create_employee("Worker")
    try:
        wire_reporting_lines(registry, [("Boss", ("Worker", "Worker"))])
    except ValueError:
        pass
    else:
        raise AssertionError("an employee can only be wired once")


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def main():
    tests = [
        ("Ids: start at one", test_ids_start_at_one_and_increase),
        ("Ids: independent registries", test_registries_do_not_share_counters),
        ("Create: detached record", test_new_employee_is_detached),
        ("Lookup: by id", test_find_by_id),
        ("Lookup: get raises", test_get_raises_for_unknown_id),
        ("Lookup: first name match", test_find_by_name_returns_first_registered),
        ("Lookup: registration order", test_iteration_follows_registration_order),
        ("Employee: immutable fields", test_id_and_name_are_immutable),
        ("Bootstrap: identities", test_sample_org_identities),
        ("Bootstrap: reporting lines", test_sample_org_reporting_lines),
        ("Bootstrap: idempotent name lookup", test_find_by_name_is_idempotent),
        ("Bootstrap: unknown names skipped", test_wiring_skips_unknown_names),
        ("Bootstrap: double wiring rejected", test_wiring_twice_is_rejected),
    ]

    print(f"\nRunning {len(tests)} tests...\n")
    for name, fn in tests:
        _test(name, fn)

    print(f"\n{'='*60}")
    print(f"  {_pass} passed, {_fail} failed out of {_pass + _fail}")
    print(f"{'='*60}")

    if _fail > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
