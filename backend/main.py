"""
FastAPI Backend — Org Chart API v1.

Stateful: one in-memory OrgTreeEngine per process.
Every engine call runs under a single lock, since a move is a multi-step
mutation and FastAPI serves sync endpoints from a thread pool.

Endpoints:
  GET  /tree          — current tree + hash + diagnostics
  POST /move          — move an employee under a new supervisor
  POST /undo          — undo the last move
  POST /redo          — redo the last undone move
  POST /employees     — hire a new employee under a supervisor
  POST /reset         — rebuild the initial org chart
"""
from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Optional

from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(__file__), ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add project root to path for org_chart imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_chart.bootstrap import build_sample_org
from org_chart.diagnostics import compute_diagnostics
from org_chart.domain_types import EngineSettings, MoveResult
from org_chart.engine import InvalidMoveTargetError, OrgTreeEngine
from org_chart.hashing import canonical_hash
from org_chart.registry import EmployeeNotFoundError
from org_chart.render import tree_to_dict

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


STRICT_MODE = _env_flag("ORGCHART_STRICT", False)
VALIDATE_INVARIANTS = _env_flag("ORGCHART_VALIDATE", True)
SEED_SAMPLE = _env_flag("ORGCHART_SAMPLE", True)
CEO_NAME = os.environ.get("ORGCHART_CEO_NAME", "Mark Zuckerberg")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="OrgChart API",
    version="1.0.0",
    description="In-memory organization tree with move / undo / redo",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        FRONTEND_URL,
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

_lock = threading.Lock()


def _build_engine() -> OrgTreeEngine:
    settings = EngineSettings(
        strict=STRICT_MODE,
        validate_invariants=VALIDATE_INVARIANTS,
    )
    if SEED_SAMPLE:
        return build_sample_org(ceo_name=CEO_NAME, settings=settings)
    return OrgTreeEngine.with_ceo(CEO_NAME, settings=settings)


_engine = _build_engine()
logger.info(
    "Org chart ready: %d employees (strict=%s, sample=%s)",
    len(_engine.registry), STRICT_MODE, SEED_SAMPLE,
)

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    employee_id: int
    supervisor_id: int
    strict: Optional[bool] = None


class HireRequest(BaseModel):
    name: str = Field(..., min_length=1)
    supervisor_id: int


# ---------------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------------


def _employee_view(employee) -> dict:
    return {
        "id": employee.id,
        "name": employee.name,
        "supervisor_id": employee.supervisor_id,
        "subordinates": employee.subordinate_ids,
    }


def _project(result: MoveResult | None = None) -> dict:
    """Serialize the current tree. Caller must hold ``_lock``."""
    return {
        "tree": tree_to_dict(_engine.ceo),
        "state_hash": canonical_hash(_engine),
        "diagnostics": compute_diagnostics(_engine),
        "can_undo": _engine.can_undo,
        "can_redo": _engine.can_redo,
        "result": result.to_dict() if result else None,
    }


def reset_engine() -> OrgTreeEngine:
    """Replace the process engine with a freshly built one."""
    global _engine
    with _lock:
        _engine = _build_engine()
        return _engine


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/tree")
def get_tree():
    with _lock:
        return _project()


@app.get("/diagnostics")
def get_diagnostics():
    with _lock:
        return compute_diagnostics(_engine)


@app.get("/employees")
def list_employees(name: str = Query(None, description="Exact name to look up")):
    """All employees in registration order, or the first one with *name*."""
    with _lock:
        if name is not None:
            employee = _engine.registry.find_by_name(name)
            if employee is None:
                raise HTTPException(status_code=404, detail=f"No employee named {name!r}")
            return [_employee_view(employee)]
        return [_employee_view(e) for e in _engine.registry]


@app.get("/employees/{employee_id}")
def get_employee(employee_id: int):
    with _lock:
        try:
            return _employee_view(_engine.registry.get(employee_id))
        except EmployeeNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc))


@app.post("/employees", status_code=201)
def hire_employee(req: HireRequest):
    with _lock:
        try:
            employee = _engine.hire(req.name, req.supervisor_id)
        except EmployeeNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc))
        except InvalidMoveTargetError as exc:
            raise HTTPException(status_code=422, detail=str(exc))
        return {"employee": _employee_view(employee), **_project()}


@app.post("/move")
def move_employee(req: MoveRequest):
    """
    Move an employee under a new supervisor.

    Invalid requests are ignored (``result.applied`` is false) unless
    strict mode is on, in which case they map to 404 / 422.
    """
    with _lock:
        try:
            result = _engine.move(req.employee_id, req.supervisor_id, strict=req.strict)
        except EmployeeNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc))
        except InvalidMoveTargetError as exc:
            raise HTTPException(status_code=422, detail=str(exc))
        return _project(result)


@app.post("/undo")
def undo_move():
    with _lock:
        return _project(_engine.undo())


@app.post("/redo")
def redo_move():
    with _lock:
        return _project(_engine.redo())


@app.post("/reset")
def reset():
    reset_engine()
    with _lock:
        return _project()


@app.get("/health")
def health():
    return {"status": "ok", "version": "1.0.0"}
