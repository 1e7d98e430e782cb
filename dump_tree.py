"""Print the sample org chart before and after move(5, 6), undo and redo."""
import json
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from org_chart.bootstrap import build_sample_org
from org_chart.hashing import canonical_hash
from org_chart.render import render_tree

STEPS = [
    ("move(5, 6)", lambda engine: engine.move(5, 6)),
    ("undo()", lambda engine: engine.undo()),
    ("redo()", lambda engine: engine.redo()),
]


def _print_state(label, engine):
    print(f"\n{'='*60}")
    print(f"  {label}  hash={canonical_hash(engine)[:12]}")
    print(f"{'='*60}")
    print(render_tree(engine.ceo))


engine = build_sample_org()
_print_state("initial", engine)

for label, step in STEPS:
    result = step(engine)
    _print_state(label, engine)
    print(json.dumps(result.to_dict()))

print(f"\nUndo stack: {[r.to_dict() for r in engine.undo_stack]}")
