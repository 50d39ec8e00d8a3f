# tests/test_capacities.py
# ------------------------------------------------------------
# Property table, areas, kr, capacities and detailing limits.
#
from __future__ import annotations

import math

import pytest

from boltcalc.models import BoltGrade, UnknownGradeError
from boltcalc.properties import (
    BOLT_PROPERTIES,
    PHI,
    lookup_grade_properties,
    parse_grade,
    supported_grades,
)
from boltcalc.geometry import compute_areas, compute_length_reduction_factor
from boltcalc.capacities import compute_shear_capacity, compute_tensile_capacity
from boltcalc.detailing import compute_detailing_limits


# -----------------------------
# Property lookup
# -----------------------------
def test_grade_table_values():
    assert lookup_grade_properties("4.6").fuf == 400.0
    assert lookup_grade_properties("8.8").fuf == 830.0
    assert lookup_grade_properties(BoltGrade.GRADE_8_8).fuf == 830.0
    assert supported_grades() == ("4.6", "8.8")


@pytest.mark.parametrize("bad", ["10.9", "", "8,8", None, 8.8])
def test_unknown_grade_lookup_fails(bad):
    with pytest.raises(UnknownGradeError):
        lookup_grade_properties(bad)


def test_unknown_grade_is_a_value_error_and_keeps_the_grade():
    with pytest.raises(ValueError) as excinfo:
        parse_grade("10.9")
    assert excinfo.value.grade == "10.9"
    assert "10.9" in str(excinfo.value)


def test_grade_table_is_read_only():
    with pytest.raises(TypeError):
        BOLT_PROPERTIES[BoltGrade.GRADE_4_6] = None  # type: ignore[index]
    with pytest.raises(AttributeError):
        BOLT_PROPERTIES[BoltGrade.GRADE_4_6].fuf = 1.0  # type: ignore[misc]


# -----------------------------
# Areas
# -----------------------------
@pytest.mark.parametrize("d", [1.5, 6.0, 12.0, 16.0, 20.0, 36.0, 64.0])
def test_areas_formula_and_ordering(d):
    areas = compute_areas(d)
    assert areas.Ac == pytest.approx(math.pi * (d - 1.0) ** 2 / 4.0, rel=1e-9)
    assert areas.Ao == pytest.approx(math.pi * d ** 2 / 4.0, rel=1e-9)
    assert 0.0 < areas.Ac < areas.Ao
    assert areas.minor_diameter == d - 1.0


def test_areas_not_rejected_for_small_diameter():
    """d <= 1 is physically invalid but still returns numbers."""
    assert compute_areas(1.0).Ac == 0.0
    assert compute_areas(0.5).Ac > 0.0  # (d - 1)^2 is positive again below 1
    assert compute_areas(0.0).Ao == 0.0


# -----------------------------
# Length reduction factor
# -----------------------------
@pytest.mark.parametrize("L, expected", [
    (-50.0, 1.0),
    (0.0, 1.0),
    (299.0, 1.0),
    (300.0, 1.0),
    (800.0, 0.875),
    (1300.0, 0.75),
    (1301.0, 0.75),
    (5000.0, 0.75),
])
def test_kr_values(L, expected):
    assert compute_length_reduction_factor(L) == pytest.approx(expected, abs=1e-12)


def test_kr_continuous_at_breakpoints():
    eps = 1e-9
    for L in (300.0, 1300.0):
        left = compute_length_reduction_factor(L - eps)
        mid = compute_length_reduction_factor(L)
        right = compute_length_reduction_factor(L + eps)
        assert left == pytest.approx(mid, abs=1e-8)
        assert right == pytest.approx(mid, abs=1e-8)


def test_kr_monotone_and_in_range():
    values = [compute_length_reduction_factor(float(L)) for L in range(0, 1601, 5)]
    assert all(0.75 <= v <= 1.0 for v in values)
    assert all(b <= a for a, b in zip(values, values[1:]))


# -----------------------------
# Capacities
# -----------------------------
def test_shear_linear_in_threaded_planes():
    """Adding one threaded plane adds φ·0.62·fuf·kr·Ac/1000."""
    fuf, d, L = 830.0, 20.0, 800.0
    kr = compute_length_reduction_factor(L)
    step = PHI * 0.62 * fuf * kr * compute_areas(d).Ac / 1000.0
    for n_t, n_u in [(0, 0), (1, 0), (1, 1), (2, 3)]:
        lower = compute_shear_capacity("8.8", d, L, n_t, n_u)
        upper = compute_shear_capacity("8.8", d, L, n_t + 1, n_u)
        assert lower == pytest.approx(upper - step, rel=1e-12, abs=1e-12)


def test_shear_unthreaded_plane_uses_shank_area():
    d = 16.0
    expected = PHI * 0.62 * 400.0 * compute_areas(d).Ao / 1000.0
    assert compute_shear_capacity("4.6", d, 0.0, 0, 1) == pytest.approx(expected, rel=1e-12)


def test_shear_zero_without_planes():
    assert compute_shear_capacity("8.8", 20.0, 0.0, 0, 0) == 0.0


def test_shear_reduced_for_long_connection():
    short = compute_shear_capacity("8.8", 20.0, 200.0, 1, 0)
    long_ = compute_shear_capacity("8.8", 20.0, 1500.0, 1, 0)
    assert long_ == pytest.approx(0.75 * short, rel=1e-12)


def test_tensile_independent_of_length_and_planes():
    base = compute_tensile_capacity("8.8", 20.0)
    for L in (0.0, 300.0, 800.0, 2000.0):
        for planes in ((0, 0), (1, 0), (2, 2)):
            compute_shear_capacity("8.8", 20.0, L, *planes)
            assert compute_tensile_capacity("8.8", 20.0) == base


def test_capacities_raise_for_unknown_grade():
    with pytest.raises(UnknownGradeError):
        compute_shear_capacity("10.9", 20.0, 0.0, 1, 0)
    with pytest.raises(UnknownGradeError):
        compute_tensile_capacity("10.9", 20.0)


def test_grade_ratio_follows_fuf():
    ratio = compute_tensile_capacity("8.8", 24.0) / compute_tensile_capacity("4.6", 24.0)
    assert ratio == pytest.approx(830.0 / 400.0, rel=1e-12)


# -----------------------------
# Detailing limits
# -----------------------------
def test_detailing_limits_m20():
    lim = compute_detailing_limits(20.0)
    assert lim.min_pitch == 50.0
    assert lim.max_pitch == 200.0
    assert lim.min_edge_sheared == 35.0
    assert lim.min_edge_rolled == 30.0
    assert lim.min_edge_rolled_section == 25.0


def test_max_pitch_governed_by_32d_for_small_bolts():
    assert compute_detailing_limits(6.0).max_pitch == pytest.approx(192.0)
    assert compute_detailing_limits(6.25).max_pitch == 200.0
