# export/excel.py
# ------------------------------------------------------------
# Excel export utilities for the bolt strength calculator.
#
# What this file provides
# -----------------------
# - build_input_table(inp)           → pandas.DataFrame of inputs
# - build_results_table(result)      → pandas.DataFrame of capacities
# - build_detailing_table(result)    → pandas.DataFrame of pitch/edge limits
# - export_to_excel_bytes(inp, res)  → bytes of an .xlsx workbook with:
#       * "Summary"   sheet (capacities + parameters used)
#       * "Inputs"    sheet
#       * "Results"   sheet (areas, kr, Vf, Ntf, φ, capacities)
#       * "Detailing" sheet (pitch, edge distances)
#   Optional: "History" (saved calculations) and "DiameterSweep" sheets.
#
# Dependencies: pandas, numpy, xlsxwriter (pandas uses it as engine)
#
from __future__ import annotations

from io import BytesIO
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from boltcalc.history import CalculationHistory
from boltcalc.models import BoltInput, BoltResult
from export.csv_export import build_history_table


# -----------------------------
# Table builders (pandas)
# -----------------------------
def build_input_table(inp: BoltInput) -> pd.DataFrame:
    """
    Flatten BoltInput into a tidy one-column table for Excel.
    """
    data = {
        "Parameter": [
            "Bolt grade",
            "Nominal diameter d (mm)",
            "Threaded length L (mm)",
            "Threaded shear planes n_n",
            "Unthreaded shear planes n_x",
            "Notes",
        ],
        "Value": [
            str(getattr(inp.grade, "value", inp.grade)),
            inp.diameter,
            inp.threaded_length,
            inp.threaded_planes,
            inp.unthreaded_planes,
            inp.notes,
        ],
    }
    return pd.DataFrame(data)


def build_results_table(result: BoltResult) -> pd.DataFrame:
    """
    Intermediate values and capacities, unrounded.
    """
    rows = [
        ("Tensile strength fuf", result.fuf, "MPa"),
        ("Minor diameter d - 1", result.areas.minor_diameter, "mm"),
        ("Minor diameter area Ac", result.areas.Ac, "mm²"),
        ("Shank area Ao", result.areas.Ao, "mm²"),
        ("Length reduction factor kr", result.kr, "-"),
        ("Capacity reduction factor φ", result.derived.get("phi", np.nan), "-"),
        ("Nominal shear capacity Vf", result.derived.get("Vf_N", np.nan), "N"),
        ("Nominal tensile capacity Ntf", result.derived.get("Ntf_N", np.nan), "N"),
        ("Design shear capacity φVf", result.capacity.shear_kN, "kN"),
        ("Design tensile capacity φNtf", result.capacity.tensile_kN, "kN"),
    ]
    return pd.DataFrame(rows, columns=["Quantity", "Value", "Unit"])


def build_detailing_table(result: BoltResult) -> pd.DataFrame:
    """
    Pitch and edge-distance limits for the diameter.
    """
    lim = result.limits
    d = {
        "Requirement": [
            "Minimum pitch",
            "Maximum pitch",
            "Minimum edge distance, sheared edge",
            "Minimum edge distance, rolled plate / machine cut",
            "Minimum edge distance, rolled section edge",
        ],
        "Value": [
            lim.min_pitch,
            lim.max_pitch,
            lim.min_edge_sheared,
            lim.min_edge_rolled,
            lim.min_edge_rolled_section,
        ],
        "Unit": ["mm"] * 5,
    }
    return pd.DataFrame(d)


# -----------------------------
# Excel writer
# -----------------------------
def export_to_excel_bytes(
    inp: BoltInput,
    result: BoltResult,
    *,
    history: Optional[CalculationHistory] = None,
    diameter_sweep: Optional[Tuple[Sequence[float], Sequence[float], Sequence[float]]] = None,
) -> bytes:
    """
    Create an in-memory .xlsx workbook with summary, inputs, results and
    detailing limits.

    Parameters
    ----------
    inp            : BoltInput
    result         : BoltResult
    history        : optional saved calculations → "History" sheet
    diameter_sweep : optional tuple (d_vals, shear_kN, tensile_kN)
                     → "DiameterSweep" sheet with a line chart

    Returns
    -------
    bytes
        The content of the .xlsx file, ready for download or saving.
    """
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
        # 1) Summary
        _write_summary_sheet(writer, inp, result)

        # 2) Inputs
        build_input_table(inp).to_excel(writer, sheet_name="Inputs", index=False)

        # 3) Results
        build_results_table(result).to_excel(writer, sheet_name="Results", index=False)

        # 4) Detailing
        build_detailing_table(result).to_excel(writer, sheet_name="Detailing", index=False)

        # 5) Optional saved calculations
        if history is not None and len(history) > 0:
            build_history_table(history).to_excel(writer, sheet_name="History", index=False)

        # 6) Optional diameter sweep
        if diameter_sweep is not None:
            d_vals, shear, tensile = diameter_sweep
            _write_diameter_sweep_sheet(writer, d_vals, shear, tensile)

        for name in ("Inputs", "Results", "Detailing", "History"):
            _autofit_columns(writer, name)

    return bio.getvalue()


# -----------------------------
# Helpers (xlsxwriter formatting)
# -----------------------------
def _write_summary_sheet(
    writer: pd.ExcelWriter,
    inp: BoltInput,
    result: BoltResult,
) -> None:
    ws = writer.book.add_worksheet("Summary")
    writer.sheets["Summary"] = ws

    h1 = writer.book.add_format({"bold": True, "font_size": 14})
    h2 = writer.book.add_format({"bold": True, "font_size": 12})
    lab = writer.book.add_format({"bold": True})
    num = writer.book.add_format({"num_format": "0.00"})

    ws.write(0, 0, "Bolt Strength Summary (AS/NZS 5100.6:2017)", h1)

    ws.write(2, 0, "Design shear capacity φVf (kN):", lab)
    ws.write_number(2, 1, float(result.capacity.shear_kN), num)
    ws.write(3, 0, "Design tensile capacity φNtf (kN):", lab)
    ws.write_number(3, 1, float(result.capacity.tensile_kN), num)

    ws.write(5, 0, "Parameters used", h2)
    params = [
        ("Bolt grade", str(getattr(inp.grade, "value", inp.grade))),
        ("Nominal diameter d (mm)", inp.diameter),
        ("Tensile strength fuf (MPa)", result.fuf),
        ("Minor diameter (mm)", result.areas.minor_diameter),
        ("Length reduction factor kr", result.kr),
    ]
    row = 6
    for label, val in params:
        ws.write(row, 0, label)
        if isinstance(val, (int, float)):
            ws.write_number(row, 1, float(val), num)
        else:
            ws.write(row, 1, str(val))
        row += 1

    ws.write(row + 1, 0, "Design requirements", h2)
    row += 2
    lim = result.limits
    for label, val in [
        ("Minimum pitch (mm)", lim.min_pitch),
        ("Maximum pitch (mm)", lim.max_pitch),
        ("Min. edge, sheared (mm)", lim.min_edge_sheared),
        ("Min. edge, rolled/machine cut (mm)", lim.min_edge_rolled),
        ("Min. edge, rolled section (mm)", lim.min_edge_rolled_section),
    ]:
        ws.write(row, 0, label)
        ws.write_number(row, 1, float(val), num)
        row += 1

    if inp.notes:
        ws.write(row + 1, 0, "Notes:", lab)
        ws.write(row + 1, 1, inp.notes)

    ws.set_column(0, 0, 36)
    ws.set_column(1, 1, 16)


def _write_diameter_sweep_sheet(
    writer: pd.ExcelWriter,
    d_vals: Sequence[float],
    shear: Sequence[float],
    tensile: Sequence[float],
) -> None:
    """
    Writes a sheet "DiameterSweep" with columns (d, φVf, φNtf) and a line chart.
    """
    df = pd.DataFrame({
        "d (mm)": list(d_vals),
        "φVf (kN)": list(shear),
        "φNtf (kN)": list(tensile),
    })
    df.to_excel(writer, sheet_name="DiameterSweep", index=False)
    ws = writer.sheets["DiameterSweep"]

    chart = writer.book.add_chart({"type": "line"})
    n = len(df)
    for col in (1, 2):
        chart.add_series({
            "name":       ["DiameterSweep", 0, col],
            "categories": ["DiameterSweep", 1, 0, n, 0],
            "values":     ["DiameterSweep", 1, col, n, col],
            "line":       {"width": 2.25},
        })
    chart.set_title({"name": "Design capacity vs diameter"})
    chart.set_x_axis({"name": "Nominal diameter d (mm)"})
    chart.set_y_axis({"name": "Capacity (kN)"})
    chart.set_legend({"position": "bottom"})
    ws.insert_chart("E2", chart, {"x_scale": 1.3, "y_scale": 1.2})


def _autofit_columns(writer: pd.ExcelWriter, sheet_name: str) -> None:
    """
    Fixed column widths per sheet; skips sheets that were not written.
    """
    ws = writer.sheets.get(sheet_name)
    if ws is None:
        return
    if sheet_name == "Inputs":
        ws.set_column(0, 0, 30)
        ws.set_column(1, 1, 30)
    elif sheet_name == "Results":
        ws.set_column(0, 0, 32)
        ws.set_column(1, 1, 18)
        ws.set_column(2, 2, 8)
    elif sheet_name == "Detailing":
        ws.set_column(0, 0, 48)
        ws.set_column(1, 2, 12)
    elif sheet_name == "History":
        ws.set_column(0, 0, 20)
        ws.set_column(1, 7, 16)
