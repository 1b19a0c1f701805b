"""
Inorganic Chemistry v1 — Ionic Formula Builder (Deterministic)

Scope (LOCKED):
- Binary ionic compounds from ONE cation and ONE anion
- Charge balance by least common multiple:
    total positive charge == total negative charge
- Smallest whole-number subscripts (counts are coprime)
- Display formula with subscript digits: NaCl, CaCl₂, Al₂O₃

This module does NOT judge whether a pair is chemically plausible.
Only charge arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from atomlab.display_format_v1 import ion_label, ion_text_label, symbol_with_count
from atomlab.errors_v1 import InvalidIonPairing
from atomlab.ion_registry_v1 import Ion, example_pairs


@dataclass(frozen=True)
class Compound:
    cation_symbol: str
    cation_count: int
    anion_symbol: str
    anion_count: int
    formula_text: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "cation_symbol": self.cation_symbol,
            "cation_count": self.cation_count,
            "anion_symbol": self.anion_symbol,
            "anion_count": self.anion_count,
            "formula_text": self.formula_text,
        }


@dataclass(frozen=True)
class ExampleCompound:
    name: str
    compound: Compound
    cation: Ion
    anion: Ion
    explanation: str = field(default="")

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "formula": self.compound.formula_text,
            "compound": self.compound.to_dict(),
            "cation": {**self.cation.to_dict(), "label": ion_label(self.cation)},
            "anion": {**self.anion.to_dict(), "label": ion_label(self.anion)},
            "explanation": self.explanation,
        }


def _check_pairing(cation: Ion, anion: Ion) -> None:
    if cation.charge <= 0 or anion.charge >= 0:
        raise InvalidIonPairing(
            f"A cation must be paired with an anion "
            f"(got {cation.symbol} {cation.charge:+d}, {anion.symbol} {anion.charge:+d})"
        )


# -------------------------
# Charge balancing
# -------------------------

def balance(cation: Ion, anion: Ion) -> Compound:
    """
    a = |cation charge|, b = |anion charge|
    lcm = a*b / gcd(a, b)
    cation_count = lcm / a, anion_count = lcm / b

    Ca²⁺ + Cl⁻  -> lcm 2 -> CaCl₂
    Al³⁺ + O²⁻  -> lcm 6 -> Al₂O₃
    """
    _check_pairing(cation, anion)

    a = abs(cation.charge)
    b = abs(anion.charge)
    lcm = (a * b) // math.gcd(a, b)

    cation_count = lcm // a
    anion_count = lcm // b

    formula = symbol_with_count(cation.symbol, cation_count) + symbol_with_count(anion.symbol, anion_count)

    return Compound(
        cation_symbol=cation.symbol,
        cation_count=cation_count,
        anion_symbol=anion.symbol,
        anion_count=anion_count,
        formula_text=formula,
    )


# -------------------------
# Worked-example helpers
# -------------------------

def compound_name(cation: Ion, anion: Ion) -> str:
    _check_pairing(cation, anion)
    return f"{cation.element_name} {anion.element_name}"


def _electrons(n: int) -> str:
    return "1 electron" if n == 1 else f"{n} electrons"


def _charge_term(count: int, charge: int) -> str:
    prefix = "" if count == 1 else str(count)
    return f"{prefix}({charge:+d})"


def explain_charge_balance(cation: Ion, anion: Ion, compound: Optional[Compound] = None) -> str:
    """
    Electron-transfer narrative used on the worked examples, e.g.

      "Ca²⁺ loses 2 electrons, 2 Cl⁻ each gain 1 electron.
       Charges balance: (+2) + 2(-1) = 0"
    """
    if compound is None:
        compound = balance(cation, anion)
    else:
        _check_pairing(cation, anion)

    a = abs(cation.charge)
    b = abs(anion.charge)
    c_count = compound.cation_count
    a_count = compound.anion_count

    if c_count == 1:
        lost = f"{ion_text_label(cation)} loses {_electrons(a)}"
    else:
        lost = f"{c_count} {ion_text_label(cation)} lose {_electrons(c_count * a)} total"

    if a_count == 1:
        gained = f"{ion_text_label(anion)} gains {_electrons(b)}"
    elif b == 1:
        gained = f"{a_count} {ion_text_label(anion)} each gain 1 electron"
    else:
        gained = f"{a_count} {ion_text_label(anion)} gain {_electrons(a_count * b)} total"

    check = f"{_charge_term(c_count, cation.charge)} + {_charge_term(a_count, anion.charge)} = 0"
    return f"{lost}, {gained}. Charges balance: {check}"


def example_compounds() -> Tuple[ExampleCompound, ...]:
    out = []
    for cation, anion in example_pairs():
        compound = balance(cation, anion)
        out.append(
            ExampleCompound(
                name=compound_name(cation, anion),
                compound=compound,
                cation=cation,
                anion=anion,
                explanation=explain_charge_balance(cation, anion, compound),
            )
        )
    return tuple(out)
