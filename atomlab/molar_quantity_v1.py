# atomlab/molar_quantity_v1.py
# Physical Chemistry v1 – Mole Concept (mass -> moles -> particles)
# LOCKED MODE: additive only, no shared logic changes

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict

from atomlab.errors_v1 import InvalidMass, InvalidParticleCount
from atomlab.ion_registry_v1 import Substance

AVOGADRO_NUMBER = 6.022e23

# Classroom display: counts near one mole are always shown against 10²³.
_PARTICLE_DISPLAY_SCALE = 1e23
_PARTICLE_DISPLAY_SUFFIX = " × 10²³"

# Enough digits for any finite float (max ~1.8e308) plus the decimals.
_DISPLAY_PRECISION = 400


@dataclass(frozen=True)
class MoleResult:
    substance: str
    molar_mass: float
    given_mass_grams: float
    moles: float
    particle_count: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "substance": self.substance,
            "molar_mass": self.molar_mass,
            "given_mass_grams": self.given_mass_grams,
            "moles": self.moles,
            "particle_count": self.particle_count,
            "moles_display": format_moles(self.moles),
            "particle_count_display": format_particle_count(self.particle_count),
            "working": working_line(self),
        }


def mass_to_moles(mass, molar_mass):
    if molar_mass <= 0:
        raise ValueError("Molar mass must be positive")
    return mass / molar_mass


def moles_to_particles(moles):
    return moles * AVOGADRO_NUMBER


def _validate_mass(mass_grams) -> float:
    if isinstance(mass_grams, bool) or not isinstance(mass_grams, numbers.Real):
        raise InvalidMass(f"Mass must be a number of grams, got {mass_grams!r}")
    try:
        mass = float(mass_grams)
    except OverflowError as e:
        raise InvalidMass("Mass is too large to calculate with") from e
    if not math.isfinite(mass):
        raise InvalidMass("Mass must be a finite number of grams")
    if mass <= 0:
        raise InvalidMass(f"Mass must be > 0 g, got {mass_grams!r}")
    return mass


def compute_moles(substance: Substance, mass_grams: float) -> MoleResult:
    """
    n = m / M
    N = n × N_A

    No rounding here; rounding is a display concern (see format_* below).
    """
    mass = _validate_mass(mass_grams)
    moles = mass_to_moles(mass, substance.molar_mass)
    return MoleResult(
        substance=substance.name,
        molar_mass=substance.molar_mass,
        given_mass_grams=mass,
        moles=moles,
        particle_count=moles_to_particles(moles),
    )


# -------------------------
# Display
# -------------------------

def _fixed(x: float, places: int) -> str:
    """
    Fixed-point text from the exact binary value of x, ties rounded away
    from zero: 0.03125 -> "0.0313", 1.125 -> "1.13" (not banker's rounding).
    """
    step = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = _DISPLAY_PRECISION
        return str(Decimal(x).quantize(step, rounding=ROUND_HALF_UP))


def validate_particle_count(n) -> float:
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise InvalidParticleCount(f"Particle count must be a number, got {n!r}")
    try:
        count = float(n)
    except OverflowError as e:
        raise InvalidParticleCount("Particle count is too large to display") from e
    if not math.isfinite(count) or count < 0:
        raise InvalidParticleCount(f"Particle count must be finite and >= 0, got {n!r}")
    return count


def format_particle_count(n: float) -> str:
    """
    n >= 1e23 -> "6.02 × 10²³" (value always scaled by 10²³, even for 10²⁵)
    otherwise -> 4 decimal places
    """
    if n >= _PARTICLE_DISPLAY_SCALE:
        return f"{_fixed(n / _PARTICLE_DISPLAY_SCALE, 2)}{_PARTICLE_DISPLAY_SUFFIX}"
    return _fixed(n, 4)


def format_moles(moles: float) -> str:
    return _fixed(moles, 4)


def _plain_number(x: float) -> str:
    x = float(x)
    return str(int(x)) if x.is_integer() else repr(x)


def working_line(result: MoleResult) -> str:
    """
    "18g ÷ 18g/mol = 1.0000 mol"
    """
    return (
        f"{_plain_number(result.given_mass_grams)}g ÷ "
        f"{_plain_number(result.molar_mass)}g/mol = "
        f"{format_moles(result.moles)} mol"
    )
