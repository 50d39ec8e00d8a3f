# export/csv_export.py
# ------------------------------------------------------------
# CSV export of saved calculations.
#
# - build_history_table(history) → pandas.DataFrame, one row per saved run
# - history_to_csv(history)      → CSV text
# - history_to_csv_bytes(history)→ UTF-8 bytes for a download button
#
# Capacities are written with two decimals, everything else as entered.
#
from __future__ import annotations

import pandas as pd

from boltcalc.history import CalculationHistory
from export.formatters import format_number

CSV_FILENAME = "bolt-calculations.csv"

CSV_COLUMNS = [
    "Timestamp",
    "Bolt Grade",
    "Diameter (mm)",
    "Threaded Length (mm)",
    "Threaded Shear Planes",
    "Unthreaded Shear Planes",
    "Shear Capacity (kN)",
    "Tensile Capacity (kN)",
]


def build_history_table(history: CalculationHistory) -> pd.DataFrame:
    rows = []
    for rec in history.to_records():
        rows.append([
            rec["timestamp"],
            rec["grade"],
            rec["diameter"],
            rec["threaded_length"],
            rec["threaded_planes"],
            rec["unthreaded_planes"],
            format_number(rec["shear_kN"]),
            format_number(rec["tensile_kN"]),
        ])
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def history_to_csv(history: CalculationHistory) -> str:
    return build_history_table(history).to_csv(index=False, lineterminator="\n")


def history_to_csv_bytes(history: CalculationHistory) -> bytes:
    return history_to_csv(history).encode("utf-8")


__all__ = [
    "CSV_FILENAME",
    "CSV_COLUMNS",
    "build_history_table",
    "history_to_csv",
    "history_to_csv_bytes",
]
