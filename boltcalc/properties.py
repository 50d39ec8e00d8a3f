# boltcalc/properties.py
# ------------------------------------------------------------
# Bolt grade property table and code constants (AS/NZS 5100.6:2017).
#
# What this file provides
# -----------------------
# - BOLT_PROPERTIES : read-only mapping BoltGrade -> BoltGradeProperties
# - PHI             : capacity reduction factor for bolts (Table 3.2)
# - parse_grade()   : validate a free-form grade identifier
# - lookup_grade_properties() : grade -> fuf, fails with UnknownGradeError
#
# The table is fixed for the lifetime of the process. It is wrapped in a
# MappingProxyType so callers cannot add or replace grades.
#
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Union

from .models import BoltGrade, BoltGradeProperties, UnknownGradeError

PHI = 0.8  # capacity reduction factor, bolts in shear or tension

BOLT_PROPERTIES: Mapping[BoltGrade, BoltGradeProperties] = MappingProxyType({
    BoltGrade.GRADE_4_6: BoltGradeProperties(grade=BoltGrade.GRADE_4_6, fuf=400.0),
    BoltGrade.GRADE_8_8: BoltGradeProperties(grade=BoltGrade.GRADE_8_8, fuf=830.0),
})

GradeLike = Union[BoltGrade, str]


def supported_grades() -> tuple:
    """Grade identifiers in table order, e.g. ("4.6", "8.8")."""
    return tuple(g.value for g in BOLT_PROPERTIES)


def parse_grade(grade: GradeLike) -> BoltGrade:
    """
    Turn a grade identifier into a BoltGrade.

    Raises
    ------
    UnknownGradeError
        If the identifier is not one of the supported grades. No default
        grade is ever substituted.
    """
    if isinstance(grade, BoltGrade):
        return grade
    try:
        return BoltGrade(grade)
    except ValueError as err:
        raise UnknownGradeError(grade) from err


def lookup_grade_properties(grade: GradeLike) -> BoltGradeProperties:
    """
    Property lookup for a bolt grade.

    Parameters
    ----------
    grade : BoltGrade or str ("4.6", "8.8")

    Returns
    -------
    BoltGradeProperties
        Frozen record carrying fuf [MPa].
    """
    return BOLT_PROPERTIES[parse_grade(grade)]


__all__ = [
    "PHI",
    "BOLT_PROPERTIES",
    "supported_grades",
    "parse_grade",
    "lookup_grade_properties",
]
