import math

import pytest

from atomlab.errors_v1 import InvalidMass, InvalidParticleCount
from atomlab.ion_registry_v1 import Substance, find_substance
from atomlab.molar_quantity_v1 import (
    AVOGADRO_NUMBER,
    compute_moles,
    format_moles,
    format_particle_count,
    mass_to_moles,
    moles_to_particles,
    validate_particle_count,
    working_line,
)


def test_one_mole_of_water():
    r = compute_moles(find_substance("H₂O"), 18)
    assert r.moles == pytest.approx(1.0)
    assert format_moles(r.moles) == "1.0000"
    assert format_particle_count(r.particle_count) == "6.02 × 10²³"
    assert r.substance == "Water (H₂O)"
    assert r.molar_mass == 18
    assert r.given_mass_grams == 18


def test_half_mole_of_carbon_dioxide():
    r = compute_moles(find_substance("CO₂"), 22)
    assert format_moles(r.moles) == "0.5000"
    assert r.particle_count == pytest.approx(3.011e23)
    assert format_particle_count(r.particle_count) == "3.01 × 10²³"


@pytest.mark.parametrize("mass", [0.1, 1, 7.25, 58.5, 1000])
def test_mole_identities(mass):
    sodium_chloride = find_substance("NaCl")
    r = compute_moles(sodium_chloride, mass)
    assert r.moles == pytest.approx(mass / 58.5)
    assert r.particle_count == pytest.approx(r.moles * AVOGADRO_NUMBER)


def test_compute_moles_is_deterministic():
    methane = find_substance("CH₄")
    assert compute_moles(methane, 8) == compute_moles(methane, 8)


@pytest.mark.parametrize("mass", [-5, 0, -0.0, math.nan, math.inf, -math.inf, "18", None, True])
def test_invalid_mass(mass):
    with pytest.raises(InvalidMass):
        compute_moles(find_substance("O₂"), mass)


def test_small_counts_use_four_decimals():
    assert format_particle_count(0) == "0.0000"
    assert format_particle_count(12.345678) == "12.3457"
    assert format_particle_count(0.5) == "0.5000"


def test_large_counts_stay_on_ten_to_the_23():
    assert format_particle_count(1e23) == "1.00 × 10²³"
    assert format_particle_count(6.022e25) == "602.20 × 10²³"


def test_formatting_is_monotonic_above_threshold():
    values = [1e23, 2.5e23, 3.011e23, 6.022e23, 1.2044e24, 6.022e25]
    prefixes = [float(format_particle_count(v).split(" ")[0]) for v in values]
    assert prefixes == sorted(prefixes)


def test_working_line():
    r = compute_moles(find_substance("H₂O"), 18)
    assert working_line(r) == "18g ÷ 18g/mol = 1.0000 mol"

    r = compute_moles(find_substance("NaCl"), 29.25)
    assert working_line(r) == "29.25g ÷ 58.5g/mol = 0.5000 mol"


def test_to_dict_carries_display_strings():
    row = compute_moles(Substance("Oxygen (O₂)", "O₂", 32), 16).to_dict()
    assert row["moles_display"] == "0.5000"
    assert row["particle_count_display"] == "3.01 × 10²³"
    assert row["working"] == "16g ÷ 32g/mol = 0.5000 mol"


def test_low_level_helpers():
    assert mass_to_moles(36, 18) == 2
    assert moles_to_particles(2) == pytest.approx(1.2044e24)
    with pytest.raises(ValueError):
        mass_to_moles(1, 0)


def test_one_gram_of_oxygen_rounds_half_up():
    r = compute_moles(find_substance("O₂"), 1)
    assert r.moles == 0.03125
    assert format_moles(r.moles) == "0.0313"


@pytest.mark.parametrize(
    "n, expected",
    [
        (0.03125, "0.0313"),
        (0.15625, "0.1563"),
        (1.28125, "1.2813"),
        (1.125e23, "1.13 × 10²³"),
    ],
)
def test_exact_ties_round_half_up(n, expected):
    assert format_particle_count(n) == expected


def test_rounding_uses_the_stored_float():
    # 0.00015 is stored just below 0.00015, so it does not round up
    assert format_moles(0.00015) == "0.0001"
    assert format_moles(1.00005) == "1.0001"


def test_mass_too_large_for_float():
    with pytest.raises(InvalidMass):
        compute_moles(find_substance("H₂O"), 10**400)


@pytest.mark.parametrize("n", [None, "6e23", True, -1, math.nan, math.inf, 10**400])
def test_validate_particle_count_rejects(n):
    with pytest.raises(InvalidParticleCount):
        validate_particle_count(n)


def test_validate_particle_count_accepts_ints():
    assert validate_particle_count(0) == 0.0
    assert validate_particle_count(602) == 602.0
