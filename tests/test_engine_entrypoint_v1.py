import logging

import pytest

from atomlab.engine_entrypoint_v1 import solve


def test_balance_packet():
    out = solve("balance", {"cation": "Al", "anion": "O"})
    assert out["ok"] is True
    assert out["error"] is None
    result = out["result"]
    assert result["formula"] == "Al₂O₃"
    assert result["name"] == "Aluminum Oxide"
    assert result["ions"] == "Al3⁺ + O2⁻"
    assert result["compound"]["cation_count"] == 2
    assert result["compound"]["anion_count"] == 3


def test_balance_two_cations_is_typed_failure(caplog):
    with caplog.at_level(logging.WARNING, logger="atomlab-engine-api"):
        out = solve("balance", {"cation": "Na", "anion": "Ca"})
    assert out["ok"] is False
    assert out["result"] == {}
    assert out["error"]["type"] == "invalid_ion_pairing"
    assert "invalid_ion_pairing" in caplog.text


def test_unknown_ion_is_typed_failure():
    out = solve("balance", {"cation": "Zz", "anion": "Cl"})
    assert out["ok"] is False
    assert out["error"]["type"] == "unknown_ion"


def test_moles_packet():
    out = solve("moles", {"substance": "H₂O", "mass_grams": 18})
    assert out["ok"] is True
    assert out["result"]["moles_display"] == "1.0000"
    assert out["result"]["particle_count_display"] == "6.02 × 10²³"
    assert out["result"]["formula"] == "H₂O"


def test_negative_mass_is_typed_failure():
    out = solve("moles", {"substance": "H₂O", "mass_grams": -5})
    assert out["ok"] is False
    assert out["error"]["type"] == "invalid_mass"


def test_missing_mass_is_typed_failure():
    out = solve("moles", {"substance": "H₂O"})
    assert out["error"]["type"] == "invalid_mass"


def test_unknown_substance_is_typed_failure():
    out = solve("moles", {"substance": "Gold", "mass_grams": 10})
    assert out["error"]["type"] == "unknown_substance"


def test_format_particles_packet():
    out = solve("format_particles", {"n": 3.011e23})
    assert out["result"]["display"] == "3.01 × 10²³"


def test_unknown_operation_raises():
    with pytest.raises(ValueError):
        solve("balance_equation", {})


def test_mass_too_large_is_typed_failure():
    out = solve("moles", {"substance": "H₂O", "mass_grams": 10**400})
    assert out["ok"] is False
    assert out["error"]["type"] == "invalid_mass"


@pytest.mark.parametrize("payload", [{}, {"n": None}, {"n": "lots"}, {"n": -3.0}])
def test_bad_particle_count_is_typed_failure(payload):
    out = solve("format_particles", payload)
    assert out["ok"] is False
    assert out["error"]["type"] == "invalid_particle_count"
