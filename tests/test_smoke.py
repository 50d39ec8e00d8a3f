# tests/test_smoke.py
# ------------------------------------------------------------
# Minimal smoke tests for the bolt calculation engine.
# Run:  pytest -q
#
from __future__ import annotations

import math

import pytest

from boltcalc.models import BoltInput, UnknownGradeError
from boltcalc.design import check_bolt, diameter_sweep
from boltcalc.capacities import compute_shear_capacity, compute_tensile_capacity


def _default_input(
    grade: str = "8.8",
    diameter: float = 20.0,
    threaded_length: float = 0.0,
    threaded_planes: int = 1,
    unthreaded_planes: int = 0,
) -> BoltInput:
    return BoltInput(
        grade=grade,
        diameter=diameter,
        threaded_length=threaded_length,
        threaded_planes=threaded_planes,
        unthreaded_planes=unthreaded_planes,
        notes="test",
    )


def test_check_bolt_runs_and_fills_result():
    """Basic: engine returns positive capacities and the intermediate values."""
    res = check_bolt(_default_input())
    assert res.capacity.shear_kN > 0.0
    assert res.capacity.tensile_kN > 0.0
    assert res.fuf == 830.0
    assert res.kr == 1.0
    assert res.limits.min_pitch == 50.0
    assert "Vf_N" in res.derived and "Ntf_N" in res.derived


def test_m20_grade_8_8_worked_example():
    """M20 8.8, one threaded plane, L = 0: Ac = π·19²/4."""
    res = check_bolt(_default_input())
    Ac = math.pi * 19.0 ** 2 / 4.0
    assert res.areas.Ac == pytest.approx(Ac, rel=1e-12)
    assert res.capacity.shear_kN == pytest.approx(0.8 * 0.62 * 830.0 * Ac / 1000.0, rel=1e-12)
    assert res.capacity.shear_kN == pytest.approx(116.72, abs=0.01)
    assert res.capacity.tensile_kN == pytest.approx(0.8 * Ac * 830.0 / 1000.0, rel=1e-12)
    assert res.capacity.tensile_kN == pytest.approx(188.26, abs=0.01)


def test_check_bolt_matches_standalone_functions_exactly():
    """Orchestrator and the standalone capacity functions give identical floats."""
    inp = _default_input(grade="4.6", diameter=24.0, threaded_length=750.0,
                         threaded_planes=1, unthreaded_planes=2)
    res = check_bolt(inp)
    assert res.capacity.shear_kN == compute_shear_capacity("4.6", 24.0, 750.0, 1, 2)
    assert res.capacity.tensile_kN == compute_tensile_capacity("4.6", 24.0)


def test_unknown_grade_propagates():
    with pytest.raises(UnknownGradeError):
        check_bolt(_default_input(grade="10.9"))


def test_repeated_calls_are_identical():
    inp = _default_input(threaded_length=640.0, unthreaded_planes=1)
    a = check_bolt(inp)
    b = check_bolt(inp)
    assert a.capacity == b.capacity
    assert a.areas == b.areas
    assert a.limits == b.limits


def test_diameter_sweep_is_increasing():
    """Both capacities grow with diameter."""
    d_vals = [12.0, 16.0, 20.0, 24.0, 30.0]
    shear, tensile = diameter_sweep(_default_input(), d_vals)
    assert len(shear) == len(tensile) == len(d_vals)
    assert all(b > a for a, b in zip(shear, shear[1:]))
    assert all(b > a for a, b in zip(tensile, tensile[1:]))
    assert shear[2] == check_bolt(_default_input(diameter=20.0)).capacity.shear_kN
