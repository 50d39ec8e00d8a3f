# export/formatters.py
# ------------------------------------------------------------
# Display rounding. Calculations never round; UI labels, CSV and
# workbook summaries go through format_number().
#
from __future__ import annotations

import math
from typing import Union

Number = Union[int, float]


def format_number(value: Number, decimals: int = 2) -> str:
    """Fixed-point string, e.g. 116.7231 -> "116.72". NaN/inf pass through as text."""
    if value is None:
        return ""
    if not math.isfinite(value):
        return str(value)
    return f"{value:.{decimals}f}"


__all__ = ["format_number"]
