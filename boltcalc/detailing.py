# boltcalc/detailing.py
# ------------------------------------------------------------
# Connection detailing limits that depend on the bolt diameter only.
# These are reported next to the capacities; nothing here checks an
# actual layout against them.
#
# - Pitch: 2.5 d minimum, lesser of 32 d and 200 mm maximum
# - Edge distance: 1.75 d sheared edge, 1.5 d rolled plate / machine
#   cut / sawn / planed edge, 1.25 d rolled edge of a rolled section
#
# All values in mm. Non-positive d is not handled specially.
#
from __future__ import annotations

from .models import DetailingLimits

MAX_PITCH_CAP = 200.0  # mm


def compute_detailing_limits(diameter: float) -> DetailingLimits:
    """Minimum/maximum pitch and minimum edge distances [mm] for diameter d."""
    return DetailingLimits(
        min_pitch=2.5 * diameter,
        max_pitch=min(MAX_PITCH_CAP, 32.0 * diameter),
        min_edge_sheared=1.75 * diameter,
        min_edge_rolled=1.5 * diameter,
        min_edge_rolled_section=1.25 * diameter,
    )


__all__ = ["compute_detailing_limits"]
