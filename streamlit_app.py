# streamlit_app.py
# ------------------------------------------------------------
# Streamlit UI for the bolt strength calculator.
# - Collects inputs
# - Calls boltcalc.design.check_bolt()
# - Shows capacities + calculation details + detailing limits
# - Save results into a session history, export CSV / Excel
# - Optional: diameter sweep chart
#
# Run:
#   streamlit run streamlit_app.py
#
from __future__ import annotations

import logging

import streamlit as st
import pandas as pd
import numpy as np

# Local imports (no circular refs; boltcalc/* never imports streamlit_app)
from boltcalc.models import BoltInput, UnknownGradeError
from boltcalc.properties import supported_grades
from boltcalc.design import check_bolt, diameter_sweep
from boltcalc.geometry import compute_length_reduction_factor
from boltcalc.history import CalculationHistory
from boltcalc.validation import validate_input, physical_warnings
from charts.plots import plot_capacity_vs_diameter, plot_kr_vs_length
from export.csv_export import CSV_FILENAME, history_to_csv_bytes
from export.excel import export_to_excel_bytes
from export.formatters import format_number

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

STANDARD_DIAMETERS = [12.0, 16.0, 20.0, 24.0, 30.0, 36.0]


# -----------------------------
# UI Helpers
# -----------------------------
def _history() -> CalculationHistory:
    if "history" not in st.session_state:
        st.session_state["history"] = CalculationHistory()
    return st.session_state["history"]


def _field_error(errors: dict, key: str) -> None:
    if key in errors:
        st.error(errors[key])


# -----------------------------
# Sidebar inputs
# -----------------------------
st.set_page_config(page_title="Bolt Strength Calculator", layout="wide")
st.title("Bolt Strength Calculator")
st.caption("Bolt shear and tensile capacities according to AS/NZS 5100.6:2017")

defaults = BoltInput()
grades = list(supported_grades())

with st.sidebar:
    st.header("Bolt")
    grade = st.selectbox(
        "Bolt grade (fuf)", grades, index=grades.index(defaults.grade),
        help="Bolt grade according to AS/NZS 1252",
    )
    diameter = st.number_input(
        "Nominal diameter d (mm)", value=defaults.diameter, step=1.0,
        help="Nominal bolt diameter in millimetres according to AS/NZS 1252",
    )
    threaded_length = st.number_input(
        "Threaded length L (mm)", value=defaults.threaded_length, step=10.0,
        help="Length of the threaded portion in millimetres",
    )

    st.divider()
    st.header("Shear planes")
    threaded_planes = st.number_input(
        "Threaded shear planes n_n", value=defaults.threaded_planes, step=1,
        help="Number of shear planes with threads intercepting the shear plane",
    )
    unthreaded_planes = st.number_input(
        "Unthreaded shear planes n_x", value=defaults.unthreaded_planes, step=1,
        help="Number of shear planes without threads intercepting the shear plane",
    )
    notes = st.text_input("Notes", value="")


# -----------------------------
# Build input object & run
# -----------------------------
inp = BoltInput(
    grade=grade,
    diameter=float(diameter),
    threaded_length=float(threaded_length),
    threaded_planes=int(threaded_planes),
    unthreaded_planes=int(unthreaded_planes),
    notes=notes,
)

errors = validate_input(inp)
if errors:
    for key in ("grade", "diameter", "threaded_length", "threaded_planes", "unthreaded_planes"):
        _field_error(errors, key)
    st.stop()

for w in physical_warnings(inp):
    st.warning(w)

try:
    result = check_bolt(inp)
except UnknownGradeError as err:
    st.error(str(err))
    st.stop()

col1, col2 = st.columns((1, 1), gap="large")
with col1:
    st.metric("Nominal Shear Capacity φVf", f"{format_number(result.capacity.shear_kN)} kN")
with col2:
    st.metric("Nominal Tensile Capacity φNtf", f"{format_number(result.capacity.tensile_kN)} kN")

st.subheader("Calculation Details")
c1, c2 = st.columns((1, 1), gap="large")
with c1:
    st.markdown("**Parameters Used**")
    st.markdown(
        f"- Tensile Strength (f_uf): {result.fuf:g} MPa\n"
        f"- Minor Diameter: {format_number(result.areas.minor_diameter)} mm\n"
        f"- Length Reduction Factor (k_r): {format_number(result.kr)}"
    )
with c2:
    lim = result.limits
    st.markdown("**Design Requirements**")
    st.markdown(
        f"- Minimum Pitch: {format_number(lim.min_pitch)} mm\n"
        f"- Maximum Pitch: {format_number(lim.max_pitch)} mm\n"
        f"- Minimum Edge Distances:\n"
        f"    - Sheared Edge: {format_number(lim.min_edge_sheared)} mm\n"
        f"    - Rolled/Machine Cut: {format_number(lim.min_edge_rolled)} mm\n"
        f"    - Rolled Section: {format_number(lim.min_edge_rolled_section)} mm"
    )

if st.button("Save Results", type="primary"):
    _history().add(inp, result)

# -----------------------------
# Optional diameter sweep
# -----------------------------
sweep = None
with st.expander("Diameter sweep"):
    picked = st.multiselect("Diameters (mm)", STANDARD_DIAMETERS, default=STANDARD_DIAMETERS)
    if len(picked) >= 2:
        d_vals = sorted(float(d) for d in picked)
        shear, tensile = diameter_sweep(inp, d_vals)
        sweep = (d_vals, shear, tensile)
        st.pyplot(plot_capacity_vs_diameter(d_vals, shear, tensile, current_diameter=inp.diameter),
                  clear_figure=True)
    else:
        st.info("Pick at least two diameters.")

    L_vals = np.linspace(0.0, 1600.0, 81)
    kr_vals = [compute_length_reduction_factor(L) for L in L_vals]
    st.pyplot(plot_kr_vs_length(L_vals, kr_vals, current_length=inp.threaded_length), clear_figure=True)

history = _history()
st.download_button(
    "Export to Excel",
    data=export_to_excel_bytes(inp, result, history=history, diameter_sweep=sweep),
    file_name="bolt-calculation.xlsx",
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)

# -----------------------------
# Saved calculations
# -----------------------------
if len(history) > 0:
    st.divider()
    with st.expander(f"Saved Calculations ({len(history)})", expanded=True):
        st.download_button(
            "Export to CSV",
            data=history_to_csv_bytes(history),
            file_name=CSV_FILENAME,
            mime="text/csv",
        )
        rows = [{
            "Time": rec["timestamp"],
            "Grade": rec["grade"],
            "Diameter": f"{rec['diameter']:g} mm",
            "Shear Cap.": f"{format_number(rec['shear_kN'])} kN",
            "Tensile Cap.": f"{format_number(rec['tensile_kN'])} kN",
        } for rec in history.to_records()]
        st.dataframe(pd.DataFrame(rows), use_container_width=True)
        if st.button("Clear saved calculations"):
            history.clear()
            st.rerun()
