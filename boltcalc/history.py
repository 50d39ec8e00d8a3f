# boltcalc/history.py
# ------------------------------------------------------------
# Saved calculations.
#
# What this file provides
# -----------------------
# - SavedCalculation   : one saved run (id, timestamp, inputs, capacities)
# - CalculationHistory : newest-first list with JSON save/load so a set of
#                        runs can be kept between sessions
#
# Records hold the unrounded capacities; rounding happens only in
# export/formatters.py.
#
from __future__ import annotations
import json
import logging
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from .models import BoltInput, BoltResult

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class SavedCalculation:
    """
    One saved evaluation.

    id         : uuid4 hex string
    timestamp  : local time the run was saved
    inputs     : the BoltInput evaluated
    shear_kN   : design shear capacity [kN]
    tensile_kN : design tensile capacity [kN]
    """
    id: str
    timestamp: str
    inputs: BoltInput
    shear_kN: float
    tensile_kN: float

    def to_record(self) -> Dict[str, Any]:
        """Flat dict, one key per column."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "grade": str(getattr(self.inputs.grade, "value", self.inputs.grade)),
            "diameter": self.inputs.diameter,
            "threaded_length": self.inputs.threaded_length,
            "threaded_planes": self.inputs.threaded_planes,
            "unthreaded_planes": self.inputs.unthreaded_planes,
            "notes": self.inputs.notes,
            "shear_kN": self.shear_kN,
            "tensile_kN": self.tensile_kN,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "SavedCalculation":
        try:
            inputs = BoltInput(
                grade=str(record["grade"]),
                diameter=float(record["diameter"]),
                threaded_length=float(record["threaded_length"]),
                threaded_planes=int(record["threaded_planes"]),
                unthreaded_planes=int(record["unthreaded_planes"]),
                notes=str(record.get("notes", "")),
            )
            return cls(
                id=str(record["id"]),
                timestamp=str(record["timestamp"]),
                inputs=inputs,
                shear_kN=float(record["shear_kN"]),
                tensile_kN=float(record["tensile_kN"]),
            )
        except (KeyError, TypeError, ValueError) as err:
            raise ValueError(f"Malformed saved calculation record: {record!r}") from err


class CalculationHistory:
    """Saved calculations, newest first."""

    def __init__(self, items: Union[List[SavedCalculation], None] = None):
        self._items: List[SavedCalculation] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SavedCalculation]:
        return iter(self._items)

    def add(self, inp: BoltInput, result: BoltResult) -> SavedCalculation:
        """Save a run at the top of the list and return the new record."""
        saved = SavedCalculation(
            id=uuid.uuid4().hex,
            timestamp=datetime.now().strftime(TIMESTAMP_FORMAT),
            inputs=BoltInput(**asdict(inp)),
            shear_kN=result.capacity.shear_kN,
            tensile_kN=result.capacity.tensile_kN,
        )
        self._items.insert(0, saved)
        logger.info("Saved calculation %s (%d in history)", saved.id, len(self._items))
        return saved

    def clear(self) -> None:
        self._items.clear()

    def to_records(self) -> List[Dict[str, Any]]:
        return [item.to_record() for item in self._items]

    # -----------------------------
    # Local persistence (JSON)
    # -----------------------------
    def save_json(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_records(), indent=2), encoding="utf-8")
        logger.info("Wrote %d saved calculations to %s", len(self._items), path)
        return path

    @classmethod
    def load_json(cls, path: Union[str, Path]) -> "CalculationHistory":
        """Read a history file; a missing file gives an empty history."""
        path = Path(path)
        if not path.exists():
            logger.debug("No history file at %s", path)
            return cls()
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as err:
            raise ValueError(f"History file {path} is not valid JSON") from err
        if not isinstance(records, list):
            raise ValueError(f"History file {path} must contain a list of records")
        history = cls([SavedCalculation.from_record(r) for r in records])
        logger.info("Loaded %d saved calculations from %s", len(history), path)
        return history


__all__ = ["SavedCalculation", "CalculationHistory"]
