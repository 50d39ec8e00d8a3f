# boltcalc/design.py
# ------------------------------------------------------------
# Orchestration of a bolt evaluation:
# - Looks up the grade properties
# - Derives areas and the length reduction factor
# - Evaluates design shear and tensile capacity
# - Attaches the detailing limits for the diameter
# - Returns a BoltResult with the intermediate values used
#
# Dependencies
# ------------
# - imports ONLY from boltcalc.* modules that do NOT import this file, to
#   avoid circular imports.
#
from __future__ import annotations
import logging
from dataclasses import asdict
from typing import Iterable, List, Tuple

from .models import BoltInput, BoltResult, CapacityResult
from .properties import PHI, lookup_grade_properties
from .geometry import compute_areas, compute_length_reduction_factor
from .capacities import nominal_shear_capacity, nominal_tensile_capacity
from .detailing import compute_detailing_limits

logger = logging.getLogger(__name__)


# -----------------------------
# Public API: main evaluation
# -----------------------------
def check_bolt(inp: BoltInput) -> BoltResult:
    """
    Master entry point. Runs the full single-pass calculation for one bolt.

    Per-step conventions:
    - Property lookup: grade -> fuf [MPa]; UnknownGradeError propagates.
    - Areas:           d -> Ac, Ao [mm^2]
    - kr:              threaded_length -> kr [-]
    - Shear:           φ * 0.62 * fuf * kr * (n_n*Ac + n_x*Ao) / 1000 [kN]
    - Tension:         φ * Ac * fuf / 1000 [kN]
    - Detailing:       d -> pitch and edge distances [mm]

    The same formulas as capacities.compute_shear_capacity /
    compute_tensile_capacity are used, so results agree bit for bit.

    Returns
    -------
    BoltResult
    """
    props = lookup_grade_properties(inp.grade)
    areas = compute_areas(inp.diameter)
    kr = compute_length_reduction_factor(inp.threaded_length)

    Vf = nominal_shear_capacity(
        fuf=props.fuf,
        kr=kr,
        Ac=areas.Ac,
        Ao=areas.Ao,
        threaded_planes=inp.threaded_planes,
        unthreaded_planes=inp.unthreaded_planes,
    )
    Ntf = nominal_tensile_capacity(fuf=props.fuf, Ac=areas.Ac)
    logger.debug("grade=%s d=%s Ac=%.3f Ao=%.3f kr=%.4f Vf=%.1f N Ntf=%.1f N",
                 props.grade.value, inp.diameter, areas.Ac, areas.Ao, kr, Vf, Ntf)

    capacity = CapacityResult(
        shear_kN=PHI * Vf / 1000.0,
        tensile_kN=PHI * Ntf / 1000.0,
    )
    result = BoltResult(
        capacity=capacity,
        areas=areas,
        kr=kr,
        fuf=props.fuf,
        limits=compute_detailing_limits(inp.diameter),
        derived={"Vf_N": Vf, "Ntf_N": Ntf, "phi": PHI},
    )
    logger.info("Bolt %s M%g: %s", props.grade.value, inp.diameter, result.summary())
    return result


def diameter_sweep(
    inp: BoltInput,
    diameters: Iterable[float],
) -> Tuple[List[float], List[float]]:
    """
    Re-evaluate ``inp`` for each diameter, everything else fixed.

    Returns
    -------
    (shear_kN, tensile_kN)
        Lists aligned with ``diameters``.
    """
    shear: List[float] = []
    tensile: List[float] = []
    for d in diameters:
        res = check_bolt(BoltInput(**{**asdict(inp), "diameter": float(d)}))
        shear.append(res.capacity.shear_kN)
        tensile.append(res.capacity.tensile_kN)
    return shear, tensile


__all__ = ["check_bolt", "diameter_sweep"]
