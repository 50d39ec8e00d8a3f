# boltcalc/geometry.py
# ------------------------------------------------------------
# Geometric quantities for a single bolt:
#  1) Minor diameter and plain shank areas from the nominal diameter
#  2) Length reduction factor kr for long threaded connections
#
# Units convention
# ----------------
# - Diameters and lengths: mm
# - Areas: mm^2
# - kr: dimensionless, always within [0.75, 1.0]
#
# Notes on simplifications
# ------------------------
# - The minor diameter is taken as d - 1 mm for every bolt size rather than
#   read from the AS 1275 thread tables. This keeps Ac a closed-form
#   function of d. Values of d <= 1 give a non-positive minor diameter and
#   are physically meaningless; they are not rejected here (see
#   validation.py for the form-level checks).
#
from __future__ import annotations
from math import pi

from .models import BoltAreas

THREAD_ROOT_ALLOWANCE = 1.0  # mm, d - 1 approximates the minor diameter

KR_LENGTH_FULL = 300.0      # mm, below this kr = 1.0
KR_LENGTH_REDUCED = 1300.0  # mm, above this kr = 0.75
KR_MAX = 1.0
KR_MIN = 0.75


# ------------------------------------------------------------
# 1) AREAS
# ------------------------------------------------------------
def compute_areas(diameter: float) -> BoltAreas:
    """
    Minor diameter area and nominal shank area [mm^2].

    Model
    -----
      d_c = d - 1
      Ac  = π * d_c^2 / 4      (threaded portion)
      Ao  = π * d^2 / 4        (plain shank)

    No rounding is applied; full precision is carried to the capacities.

    Parameters
    ----------
    diameter : nominal bolt diameter d [mm]

    Returns
    -------
    BoltAreas
    """
    d_c = diameter - THREAD_ROOT_ALLOWANCE
    Ac = pi * d_c ** 2 / 4.0
    Ao = pi * diameter ** 2 / 4.0
    return BoltAreas(Ac=Ac, Ao=Ao, minor_diameter=d_c)


# ------------------------------------------------------------
# 2) LENGTH REDUCTION FACTOR
# ------------------------------------------------------------
def compute_length_reduction_factor(length: float) -> float:
    """
    Reduction factor kr for the bolted lap connection length [mm].

      L < 300          -> kr = 1.0
      300 <= L <= 1300 -> kr = 1.075 - L / 4000
      L > 1300         -> kr = 0.75

    The linear segment meets both plateaus exactly, so kr is continuous and
    non-increasing in L. The result of the linear segment is clamped to
    [0.75, 1.0] so floating-point noise at the breakpoints cannot leave
    that range.

    Any finite L is accepted, including negative values.
    """
    if length < KR_LENGTH_FULL:
        return KR_MAX
    if length > KR_LENGTH_REDUCED:
        return KR_MIN
    kr = 1.075 - length / 4000.0
    return min(KR_MAX, max(KR_MIN, kr))


__all__ = [
    "THREAD_ROOT_ALLOWANCE",
    "compute_areas",
    "compute_length_reduction_factor",
]
