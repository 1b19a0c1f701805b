# atomlab/engine_entrypoint_v1.py

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from atomlab.display_format_v1 import ion_label, pair_label
from atomlab.errors_v1 import ChemEngineError, error_to_dict
from atomlab.formula_balancer_v1 import balance, compound_name, explain_charge_balance
from atomlab.ion_registry_v1 import find_ion, find_substance
from atomlab.molar_quantity_v1 import compute_moles, format_particle_count, validate_particle_count

logger = logging.getLogger("atomlab-engine-api")


def _balance(payload: Dict[str, Any]) -> Dict[str, Any]:
    cation = find_ion(payload.get("cation", ""))
    anion = find_ion(payload.get("anion", ""))
    compound = balance(cation, anion)
    return {
        "compound": compound.to_dict(),
        "formula": compound.formula_text,
        "name": compound_name(cation, anion),
        "ions": pair_label(cation, anion),
        "cation_label": ion_label(cation),
        "anion_label": ion_label(anion),
        "explanation": explain_charge_balance(cation, anion, compound),
    }


def _moles(payload: Dict[str, Any]) -> Dict[str, Any]:
    substance = find_substance(payload.get("substance", ""))
    result = compute_moles(substance, payload.get("mass_grams"))
    return {**result.to_dict(), "formula": substance.formula}


def _format_particles(payload: Dict[str, Any]) -> Dict[str, Any]:
    n = validate_particle_count(payload.get("n"))
    return {"n": n, "display": format_particle_count(n)}


OPERATIONS: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    "balance": _balance,
    "moles": _moles,
    "format_particles": _format_particles,
}


def solve(operation: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Single entry point for the presentation layer.

    Engine failures (bad pairing, bad mass, unknown key) come back as a
    typed packet with ok=False; the caller keeps the learner on the
    current screen. An unknown operation is a caller bug and raises.
    """
    fn = OPERATIONS.get(operation)
    if fn is None:
        raise ValueError(f"Unknown operation: {operation!r}")

    payload = payload or {}
    try:
        result = fn(payload)
    except ChemEngineError as e:
        logger.warning("engine %s rejected input (%s): %s", operation, e.code, e)
        return {"ok": False, "operation": operation, "result": {}, "error": error_to_dict(e)}

    logger.debug("engine %s ok: %s", operation, result)
    return {"ok": True, "operation": operation, "result": result, "error": None}
