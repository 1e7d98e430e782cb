"""
Tree Invariants — Tests

Each scenario corrupts a freshly bootstrapped tree by hand and expects
the matching InvariantViolationError rule.

Run:  py -3 -m org_chart.test_invariants
"""

from __future__ import annotations

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_chart.bootstrap import build_sample_org
from org_chart.invariants import InvariantViolationError, validate_tree


def _header(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def _expect_rule(engine, rule: str) -> None:
    try:
        validate_tree(engine.ceo, engine.registry)
    except InvariantViolationError as exc:
        assert exc.rule == rule, f"expected {rule!r}, got {exc.rule!r}"
        assert str(exc).startswith(f"[INVARIANT:{rule}]")
    else:
        raise AssertionError(f"expected InvariantViolationError({rule!r})")


def test_01_bootstrap_is_valid() -> None:
    _header("Test 01 — Bootstrapped tree is valid")
    engine = build_sample_org()
    validate_tree(engine.ceo, engine.registry)
    print("\n[PASS] Test 01 PASSED")


def test_02_root_with_supervisor() -> None:
    _header("Test 02 — Root with a supervisor")
    engine = build_sample_org()
    engine.ceo.supervisor_id = 2
    _expect_rule(engine, "root_supervisor")
    print("\n[PASS] Test 02 PASSED")


def test_03_listed_under_two_supervisors() -> None:
    _header("Test 03 — Employee listed twice")
    engine = build_sample_org()
    bruce = engine.registry.get(4)
    engine.registry.get(2).subordinates.append(bruce)
    _expect_rule(engine, "single_supervisor")
    print("\n[PASS] Test 03 PASSED")


def test_04_stale_supervisor_id() -> None:
    _header("Test 04 — supervisor_id disagrees with list owner")
    engine = build_sample_org()
    engine.registry.get(7).supervisor_id = 4
    _expect_rule(engine, "supervisor_backref")
    print("\n[PASS] Test 04 PASSED")


def test_05_missing_from_supervisor_list() -> None:
    _header("Test 05 — Employee missing from its supervisor's list")
    engine = build_sample_org()
    cassandra = engine.registry.get(6)
    cassandra.subordinates.remove(engine.registry.get(7))
    _expect_rule(engine, "supervisor_backref")
    print("\n[PASS] Test 05 PASSED")


def test_06_unknown_supervisor() -> None:
    _header("Test 06 — Unknown supervisor id")
    engine = build_sample_org()
    bruce = engine.registry.get(4)
    engine.ceo.subordinates.remove(bruce)
    bruce.supervisor_id = 404
    _expect_rule(engine, "supervisor_refs")
    print("\n[PASS] Test 06 PASSED")


def test_07_cycle() -> None:
    _header("Test 07 — Supervisor cycle")
    engine = build_sample_org()
    sarah = engine.registry.get(2)
    cassandra = engine.registry.get(6)
    engine.ceo.subordinates.remove(sarah)
    cassandra.subordinates.append(sarah)
    sarah.supervisor_id = cassandra.id
    _expect_rule(engine, "no_cycles")
    print("\n[PASS] Test 07 PASSED")


def test_08_detached_with_subordinates() -> None:
    _header("Test 08 — Detached employee with subordinates")
    engine = build_sample_org()
    lead = engine.create_employee("Lead")
    member = engine.create_employee("Member")
    lead.subordinates.append(member)
    member.supervisor_id = lead.id
    _expect_rule(engine, "detached_employee")
    print("\n[PASS] Test 08 PASSED")


def test_09_detached_leaf_is_tolerated() -> None:
    _header("Test 09 — Detached leaf is tolerated")
    engine = build_sample_org()
    engine.create_employee("Pending")
    validate_tree(engine.ceo, engine.registry)
    print("\n[PASS] Test 09 PASSED")


def main() -> None:
    tests = [
        test_01_bootstrap_is_valid,
        test_02_root_with_supervisor,
        test_03_listed_under_two_supervisors,
        test_04_stale_supervisor_id,
        test_05_missing_from_supervisor_list,
        test_06_unknown_supervisor,
        test_07_cycle,
        test_08_detached_with_subordinates,
        test_09_detached_leaf_is_tolerated,
    ]
    passed = 0
    for fn in tests:
        try:
            fn()
            passed += 1
        except AssertionError as exc:
            print(f"\n[FAIL] {fn.__name__}: {exc}")

    print(f"\n{'='*60}")
    print(f"  {passed}/{len(tests)} invariant tests passed")
    print(f"{'='*60}")
    sys.exit(0 if passed == len(tests) else 1)


if __name__ == "__main__":
    main()
