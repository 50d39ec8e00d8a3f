# boltcalc/capacities.py
# ------------------------------------------------------------
# Design capacities of a single bolt (AS/NZS 5100.6:2017, Clause 12.5.3):
#  1) Shear, Equation 12.5.3.1(2)
#  2) Tension, Equation 12.5.3.2(2)
#
# Units convention
# ----------------
# - fuf: MPa, areas: mm^2  ->  nominal capacities in N
# - Returned design capacities (φ applied): kN
#
# Both functions look the grade up first, so an unsupported grade raises
# UnknownGradeError before any arithmetic is done.
#
from __future__ import annotations

from .geometry import compute_areas, compute_length_reduction_factor
from .properties import PHI, GradeLike, lookup_grade_properties

N_PER_KN = 1000.0
SHEAR_STRESS_RATIO = 0.62  # shear strength of bolt material / fuf


# ------------------------------------------------------------
# Nominal capacities [N]
# ------------------------------------------------------------
def nominal_shear_capacity(
    fuf: float,
    kr: float,
    Ac: float,
    Ao: float,
    threaded_planes: int,
    unthreaded_planes: int,
) -> float:
    """
    Nominal shear capacity Vf [N].

      Vf = 0.62 * fuf * kr * (n_n * Ac + n_x * Ao)

    n_n : shear planes with threads intercepting the plane
    n_x : shear planes through the plain shank
    """
    return SHEAR_STRESS_RATIO * fuf * kr * (threaded_planes * Ac + unthreaded_planes * Ao)


def nominal_tensile_capacity(fuf: float, Ac: float) -> float:
    """Nominal tensile capacity Ntf = Ac * fuf [N]."""
    return Ac * fuf


# ------------------------------------------------------------
# 1) SHEAR
# ------------------------------------------------------------
def compute_shear_capacity(
    grade: GradeLike,
    diameter: float,
    threaded_length: float,
    threaded_planes: int,
    unthreaded_planes: int,
) -> float:
    """
    Design shear capacity φVf of one bolt [kN].

    Parameters
    ----------
    grade             : "4.6" or "8.8" (or BoltGrade)
    diameter          : nominal diameter d [mm]
    threaded_length   : connection length used for kr [mm]
    threaded_planes   : number of threaded shear planes (>= 0)
    unthreaded_planes : number of unthreaded shear planes (>= 0)

    Returns
    -------
    float
        φ * Vf / 1000, zero when both plane counts are zero.

    Raises
    ------
    UnknownGradeError
        Grade outside the property table.
    """
    fuf = lookup_grade_properties(grade).fuf
    areas = compute_areas(diameter)
    kr = compute_length_reduction_factor(threaded_length)
    Vf = nominal_shear_capacity(fuf, kr, areas.Ac, areas.Ao, threaded_planes, unthreaded_planes)
    return PHI * Vf / N_PER_KN


# ------------------------------------------------------------
# 2) TENSION
# ------------------------------------------------------------
def compute_tensile_capacity(grade: GradeLike, diameter: float) -> float:
    """
    Design tensile capacity φNtf of one bolt [kN].

    Independent of connection length and shear planes. Uses the same
    minor diameter area and φ as the shear check.
    """
    fuf = lookup_grade_properties(grade).fuf
    areas = compute_areas(diameter)
    Ntf = nominal_tensile_capacity(fuf, areas.Ac)
    return PHI * Ntf / N_PER_KN


__all__ = [
    "nominal_shear_capacity",
    "nominal_tensile_capacity",
    "compute_shear_capacity",
    "compute_tensile_capacity",
]
