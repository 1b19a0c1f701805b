# atomlab/errors_v1.py
"""
AtomLab Engine — Error Kinds v1 (LOCKED)

Purpose:
- One small, stable set of typed failures for the formula/mole engine
- Every failure is recoverable: the caller keeps the learner on the
  current screen and asks for corrected input
- NO chemistry logic here

Codes are part of the API contract. Later versions may add codes,
never rename them.
"""

from __future__ import annotations
from typing import Dict, Tuple


ERROR_CODES_V1: Tuple[str, ...] = (
    "invalid_ion_pairing",
    "invalid_mass",
    "invalid_particle_count",
    "registry_error",
    "unknown_ion",
    "unknown_substance",
)


class ChemEngineError(ValueError):
    """Base class for every failure the engine reports to its caller."""

    code = "engine_error"


class InvalidIonPairing(ChemEngineError):
    """A cation must be paired with an anion."""

    code = "invalid_ion_pairing"


class InvalidMass(ChemEngineError):
    """Mass must be a finite number of grams greater than zero."""

    code = "invalid_mass"


class InvalidParticleCount(ChemEngineError):
    """Particle counts are finite and never negative."""

    code = "invalid_particle_count"


class IonRegistryError(ChemEngineError):
    """Reference data that breaks the ion / substance invariants."""

    code = "registry_error"


class UnknownIon(ChemEngineError):
    code = "unknown_ion"


class UnknownSubstance(ChemEngineError):
    code = "unknown_substance"


def error_to_dict(exc: ChemEngineError) -> Dict[str, str]:
    return {"type": exc.code, "detail": str(exc)}
