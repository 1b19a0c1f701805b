"""
Inorganic Chemistry v1 — Ion & Substance Registry (Deterministic)

Scope (LOCKED):
- Static catalogue of the common ions used by the formula builder
- Static catalogue of the substances used by the mole calculator
- Worked-example ion pairs shown beside the formula builder

Tables are tuples of frozen dataclasses, built once at import time and
never mutated. Query order is always registry (insertion) order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Literal, Tuple

from atomlab.errors_v1 import IonRegistryError, UnknownIon, UnknownSubstance


Polarity = Literal["cation", "anion"]

CATION: Polarity = "cation"
ANION: Polarity = "anion"


@dataclass(frozen=True)
class Ion:
    element_name: str
    symbol: str
    charge: int
    polarity: Polarity

    def __post_init__(self) -> None:
        if isinstance(self.charge, bool) or not isinstance(self.charge, int):
            raise IonRegistryError(f"{self.symbol}: charge must be an integer")
        if self.charge == 0:
            raise IonRegistryError(f"{self.symbol}: charge must be nonzero")
        expected = CATION if self.charge > 0 else ANION
        if self.polarity != expected:
            raise IonRegistryError(
                f"{self.symbol}: charge {self.charge:+d} requires polarity {expected!r}"
            )

    @property
    def is_cation(self) -> bool:
        return self.polarity == CATION

    @property
    def is_anion(self) -> bool:
        return self.polarity == ANION

    def to_dict(self) -> Dict[str, object]:
        return {
            "element_name": self.element_name,
            "symbol": self.symbol,
            "charge": self.charge,
            "polarity": self.polarity,
        }


@dataclass(frozen=True)
class Substance:
    name: str
    formula: str
    molar_mass: float  # g/mol

    def __post_init__(self) -> None:
        if not math.isfinite(self.molar_mass) or self.molar_mass <= 0:
            raise IonRegistryError(f"{self.formula}: molar mass must be > 0")

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "formula": self.formula,
            "molar_mass": self.molar_mass,
        }


# -------------------------
# Reference tables
# -------------------------

_IONS: Tuple[Ion, ...] = (
    Ion("Sodium", "Na", 1, CATION),
    Ion("Calcium", "Ca", 2, CATION),
    Ion("Aluminum", "Al", 3, CATION),
    Ion("Chloride", "Cl", -1, ANION),
    Ion("Oxide", "O", -2, ANION),
    Ion("Nitride", "N", -3, ANION),
)

_SUBSTANCES: Tuple[Substance, ...] = (
    Substance("Water (H₂O)", "H₂O", 18),
    Substance("Carbon Dioxide (CO₂)", "CO₂", 44),
    Substance("Methane (CH₄)", "CH₄", 16),
    Substance("Oxygen (O₂)", "O₂", 32),
    Substance("Sodium Chloride (NaCl)", "NaCl", 58.5),
)

# (cation symbol, anion symbol)
_EXAMPLE_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("Na", "Cl"),
    ("Ca", "Cl"),
    ("Al", "O"),
)

_CATIONS: Tuple[Ion, ...] = tuple(ion for ion in _IONS if ion.is_cation)
_ANIONS: Tuple[Ion, ...] = tuple(ion for ion in _IONS if ion.is_anion)
_IONS_BY_SYMBOL: Dict[str, Ion] = {ion.symbol: ion for ion in _IONS}


# -------------------------
# Queries
# -------------------------

def list_cations() -> Tuple[Ion, ...]:
    return _CATIONS


def list_anions() -> Tuple[Ion, ...]:
    return _ANIONS


def list_substances() -> Tuple[Substance, ...]:
    return _SUBSTANCES


def find_ion(symbol: str) -> Ion:
    """
    Exact, case-sensitive symbol lookup ("Co" and "CO" are different things).
    """
    key = (symbol or "").strip()
    ion = _IONS_BY_SYMBOL.get(key)
    if ion is None:
        raise UnknownIon(f"Unknown ion symbol: {symbol!r}")
    return ion


def find_substance(key: str) -> Substance:
    """
    Lookup by formula ("H₂O") first, then by display name, case-insensitive.
    """
    k = (key or "").strip()
    for substance in _SUBSTANCES:
        if substance.formula == k:
            return substance
    lowered = k.lower()
    for substance in _SUBSTANCES:
        if substance.name.lower() == lowered:
            return substance
    raise UnknownSubstance(f"Unknown substance: {key!r}")


def example_pairs() -> Tuple[Tuple[Ion, Ion], ...]:
    return tuple((find_ion(c), find_ion(a)) for c, a in _EXAMPLE_PAIRS)
