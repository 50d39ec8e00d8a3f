# boltcalc/validation.py
# ------------------------------------------------------------
# Form-level input checks. The calculation functions accept any finite
# number; this module is what the UI calls before it shows results.
#
from __future__ import annotations
from typing import Dict, List

from .models import BoltInput, UnknownGradeError
from .properties import parse_grade


def validate_input(inp: BoltInput) -> Dict[str, str]:
    """
    Check a form input.

    Returns
    -------
    dict
        Field name -> error message. Empty when the input can be evaluated.
    """
    errors: Dict[str, str] = {}
    try:
        parse_grade(inp.grade)
    except UnknownGradeError as err:
        errors["grade"] = str(err)
    if inp.diameter <= 0:
        errors["diameter"] = "Diameter must be positive"
    if inp.threaded_length < 0:
        errors["threaded_length"] = "Length must be non-negative"
    if inp.threaded_planes < 0:
        errors["threaded_planes"] = "Number of shear planes must be non-negative"
    if inp.unthreaded_planes < 0:
        errors["unthreaded_planes"] = "Number of unthreaded shear planes must be non-negative"
    return errors


def is_valid(inp: BoltInput) -> bool:
    return not validate_input(inp)


def physical_warnings(inp: BoltInput) -> List[str]:
    """Inputs that pass validation but give meaningless geometry."""
    warnings: List[str] = []
    if 0 < inp.diameter <= 1:
        warnings.append(
            f"d = {inp.diameter:g} mm leaves no minor diameter (d - 1 <= 0); Ac is not meaningful"
        )
    if inp.threaded_planes == 0 and inp.unthreaded_planes == 0:
        warnings.append("No shear planes selected; shear capacity is zero")
    return warnings


__all__ = ["validate_input", "is_valid", "physical_warnings"]
