"""
fastapi_wrapper_v1.py

FastAPI wrapper for the AtomLab formula / mole engine.
The lesson page is the only client; it renders whatever `result` holds.
"""

from __future__ import annotations
import logging
import time
import uuid
from typing import Any, Callable, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from atomlab.display_format_v1 import ion_label
from atomlab.engine_entrypoint_v1 import solve as default_solve
from atomlab.formula_balancer_v1 import example_compounds
from atomlab.ion_registry_v1 import list_anions, list_cations, list_substances
from config import ALLOWED_ORIGINS, ENGINE_NAME
from schemas import BalanceRequest, EngineResponse, FormatParticlesRequest, MolesRequest

logger = logging.getLogger("atomlab-engine-api")


def _now_ms() -> int:
    return int(time.time() * 1000)


def _ion_rows(ions) -> List[Dict[str, Any]]:
    return [{**ion.to_dict(), "label": ion_label(ion)} for ion in ions]


def create_app(solver_callable: Optional[Callable] = None) -> FastAPI:
    app = FastAPI(title="AtomLab Engine API", version=ENGINE_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if solver_callable is None:
        solver_callable = default_solve

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request.state.request_id = str(uuid.uuid4())
        start = _now_ms()
        response = await call_next(request)
        response.headers["x-request-id"] = request.state.request_id
        response.headers["x-elapsed-ms"] = str(_now_ms() - start)
        return response

    def _run(operation: str, payload: Dict[str, Any], request: Request) -> EngineResponse:
        start = _now_ms()
        packet = solver_callable(operation, payload)
        return EngineResponse(
            request_id=request.state.request_id,
            ok=packet["ok"],
            engine=ENGINE_NAME,
            elapsed_ms=_now_ms() - start,
            result=packet["result"],
            error=packet["error"],
        )

    @app.get("/health")
    async def health():
        return {"ok": True, "engine": ENGINE_NAME, "ts_ms": _now_ms()}

    # -------------------------
    # Reference data
    # -------------------------

    @app.get("/ions/cations")
    async def cations():
        return {"ok": True, "items": _ion_rows(list_cations())}

    @app.get("/ions/anions")
    async def anions():
        return {"ok": True, "items": _ion_rows(list_anions())}

    @app.get("/substances")
    async def substances():
        return {"ok": True, "items": [s.to_dict() for s in list_substances()]}

    @app.get("/compounds/examples")
    async def compound_examples():
        return {"ok": True, "items": [ex.to_dict() for ex in example_compounds()]}

    # -------------------------
    # Calculators
    # -------------------------

    @app.post("/formula/balance", response_model=EngineResponse)
    async def formula_balance(req: BalanceRequest, request: Request):
        return _run("balance", req.model_dump(), request)

    @app.post("/moles", response_model=EngineResponse)
    async def moles(req: MolesRequest, request: Request):
        return _run("moles", req.model_dump(), request)

    @app.post("/format/particles", response_model=EngineResponse)
    async def format_particles(req: FormatParticlesRequest, request: Request):
        return _run("format_particles", req.model_dump(), request)

    logger.info("AtomLab engine app created (%s), origins=%s", ENGINE_NAME, ALLOWED_ORIGINS)
    return app
