# boltcalc/models.py
# ------------------------------------------------------------
# Core data models for the bolt strength calculator.
# This file contains NO imports from other local modules
# to avoid circular-import issues.
#
# Units convention (consistent across the codebase):
# - Lengths / diameters: millimetres (mm)
# - Areas: mm^2
# - Stresses/Strengths: MPa (i.e., N/mm^2)
# - Intermediate forces: N
# - Reported capacities: kN
#
# Notes:
# - fuf is the minimum tensile strength of the bolt (AS/NZS 1252 grades).
# - Ac is the minor diameter area, approximated from (d - 1 mm).
# - Ao is the plain shank area from the nominal diameter d.
#
# This file is purely data containers + tiny helpers.
# All calculations live in properties.py / geometry.py /
# capacities.py / detailing.py / design.py.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


# -----------------------------
# Errors
# -----------------------------
class UnknownGradeError(ValueError):
    """Raised when a bolt grade is not in the property table."""

    def __init__(self, grade: object):
        self.grade = grade
        super().__init__(f"Unsupported bolt grade: {grade!r}")


# -----------------------------
# Enumerations
# -----------------------------
class BoltGrade(str, Enum):
    GRADE_4_6 = "4.6"  # commercial bolt, fuf = 400 MPa
    GRADE_8_8 = "8.8"  # high strength structural bolt, fuf = 830 MPa


# -----------------------------
# Properties & derived geometry
# -----------------------------
@dataclass(frozen=True)
class BoltGradeProperties:
    """
    Characteristic properties of a bolt grade.

    Attributes
    ----------
    grade : BoltGrade
    fuf   : float
        Minimum tensile strength of the bolt (MPa).
    """
    grade: BoltGrade
    fuf: float


@dataclass(frozen=True)
class BoltAreas:
    """
    Cross-sectional areas derived from the nominal diameter.

    Ac             : minor diameter area at the thread root (mm^2)
    Ao             : nominal plain shank area (mm^2)
    minor_diameter : d minus the thread-root allowance (mm)
    """
    Ac: float
    Ao: float
    minor_diameter: float


@dataclass(frozen=True)
class DetailingLimits:
    """Pitch and edge-distance limits in mm, derived from d only."""
    min_pitch: float
    max_pitch: float
    min_edge_sheared: float
    min_edge_rolled: float
    min_edge_rolled_section: float


@dataclass(frozen=True)
class CapacityResult:
    """Design shear and tensile capacity of one bolt (kN)."""
    shear_kN: float
    tensile_kN: float


# -----------------------------
# Calculation input
# -----------------------------
@dataclass
class BoltInput:
    """
    All user-selectable inputs needed to evaluate one bolt.

    Attributes
    ----------
    grade             : Bolt grade identifier ("4.6" or "8.8"). Plain strings
                        are accepted and validated at the property lookup.
    diameter          : Nominal diameter d (mm).
    threaded_length   : Length of the threaded portion within the grip (mm),
                        drives the length reduction factor kr.
    threaded_planes   : Number of shear planes with threads intercepting them.
    unthreaded_planes : Number of shear planes through the plain shank.
    notes             : Free-form string captured into exports for traceability.
    """
    grade: str = BoltGrade.GRADE_8_8.value
    diameter: float = 20.0
    threaded_length: float = 0.0
    threaded_planes: int = 1
    unthreaded_planes: int = 0
    notes: str = ""


# -----------------------------
# Overall result
# -----------------------------
@dataclass
class BoltResult:
    """
    Container for everything one evaluation produces.

    capacity : design shear / tensile capacity (kN)
    areas    : Ac, Ao and minor diameter used in the formulas
    kr       : length reduction factor applied to shear
    fuf      : tensile strength of the selected grade (MPa)
    limits   : pitch and edge-distance limits for the diameter
    derived  : convenience numbers (nominal Vf and Ntf in N)
    """
    capacity: CapacityResult
    areas: BoltAreas
    kr: float
    fuf: float
    limits: DetailingLimits
    derived: Dict[str, float] = field(default_factory=dict)

    def summary(self) -> str:
        """One-line human-readable summary."""
        return (
            f"φVf = {self.capacity.shear_kN:.2f} kN, "
            f"φNtf = {self.capacity.tensile_kN:.2f} kN (kr = {self.kr:.3f})"
        )


# Friendly export list
__all__ = [
    "UnknownGradeError",
    "BoltGrade",
    "BoltGradeProperties",
    "BoltAreas",
    "DetailingLimits",
    "CapacityResult",
    "BoltInput",
    "BoltResult",
]
