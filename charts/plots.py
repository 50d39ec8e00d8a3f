# charts/plots.py
# ------------------------------------------------------------
# Minimal plotting utilities for bolt capacity charts.
#
# Design principles
# -----------------
# - No imports from boltcalc → no circular deps.
# - Pure matplotlib; caller supplies data (diameters, capacities, kr).
# - Functions return a matplotlib Figure for UI layers to render
#   (e.g., Streamlit st.pyplot(fig)).
#
# Usage (example in Streamlit)
# ----------------------------
#   from charts.plots import plot_capacity_vs_diameter
#   fig = plot_capacity_vs_diameter(d_vals, shear_kN, tensile_kN)
#   st.pyplot(fig)
#
from __future__ import annotations

from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt


Number = Union[int, float]


def _validate_xy(x: Sequence[Number], y: Sequence[Number], name: str = "") -> None:
    if x is None or y is None:
        raise ValueError(f"{name}: x and y must be provided.")
    if len(x) != len(y):
        raise ValueError(f"{name}: x and y must be the same length (got {len(x)} vs {len(y)}).")
    if len(x) < 2:
        raise ValueError(f"{name}: need at least 2 points to plot (got {len(x)}).")


def plot_capacity_vs_diameter(
    diameters_mm: Sequence[Number],
    shear_kN: Sequence[Number],
    tensile_kN: Sequence[Number],
    *,
    current_diameter: Optional[Number] = None,
    title: str = "Design capacity vs nominal diameter",
) -> plt.Figure:
    """
    Plot φVf and φNtf against nominal diameter.

    Parameters
    ----------
    diameters_mm     : list/array of d values [mm]
    shear_kN         : design shear capacity at each d [kN]
    tensile_kN       : design tensile capacity at each d [kN]
    current_diameter : optional d to mark with a vertical line
    title            : figure title

    Returns
    -------
    matplotlib.figure.Figure
    """
    _validate_xy(diameters_mm, shear_kN, "plot_capacity_vs_diameter[shear]")
    _validate_xy(diameters_mm, tensile_kN, "plot_capacity_vs_diameter[tensile]")

    fig, ax = plt.subplots()
    ax.plot(diameters_mm, shear_kN, linewidth=2, marker="o", label="φVf (shear)")
    ax.plot(diameters_mm, tensile_kN, linewidth=2, marker="s", label="φNtf (tension)")
    if current_diameter is not None:
        ax.axvline(current_diameter, linestyle="--", linewidth=1, color="grey")

    ax.set_xlabel("Nominal diameter d (mm)")
    ax.set_ylabel("Design capacity (kN)")
    ax.grid(True, which="both", alpha=0.35)
    ax.legend()
    ax.set_title(title)
    fig.tight_layout()
    return fig


def plot_kr_vs_length(
    lengths_mm: Sequence[Number],
    kr_values: Sequence[Number],
    *,
    current_length: Optional[Number] = None,
    title: str = "Length reduction factor kr",
) -> plt.Figure:
    """
    Plot kr against connection length, with the 300 / 1300 mm breakpoints.
    """
    _validate_xy(lengths_mm, kr_values, "plot_kr_vs_length")

    fig, ax = plt.subplots()
    ax.plot(lengths_mm, kr_values, linewidth=2)
    for x in (300.0, 1300.0):
        ax.axvline(x, linestyle=":", linewidth=1, color="grey")
    if current_length is not None:
        ax.axvline(current_length, linestyle="--", linewidth=1)

    ax.set_xlabel("Threaded length L (mm)")
    ax.set_ylabel("kr")
    ax.set_ylim(0.7, 1.05)
    ax.grid(True, which="both", alpha=0.35)
    ax.set_title(title)
    fig.tight_layout()
    return fig


__all__ = [
    "plot_capacity_vs_diameter",
    "plot_kr_vs_length",
]
