"""Pitch and unit-system models."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel


class Units(str, Enum):
    IMPERIAL = "imperial"   # feet, pitch in inches per foot
    METRIC = "metric"       # meters, pitch in cm per meter


# Small units per large unit (inches per foot, cm per meter)
SMALL_UNITS_PER_LARGE: dict[Units, float] = {
    Units.IMPERIAL: 12.0,
    Units.METRIC: 100.0,
}

# Conventional pitch denominator for each system
CANONICAL_RUN: dict[Units, float] = {
    Units.IMPERIAL: 12.0,
    Units.METRIC: 100.0,
}


class Pitch(BaseModel):
    """Rise over run, independent of the building's size."""
    rise: float
    run: float = 12.0

    @property
    def ratio(self) -> float:
        return self.rise / self.run

    @property
    def angle(self) -> float:
        """Nominal slope angle in degrees."""
        return math.degrees(math.atan(self.rise / self.run))

    @property
    def label(self) -> str:
        return f"{_trim(self.rise)}/{_trim(self.run)}"


def default_pitch(units: Units) -> Pitch:
    """6/12 in imperial, the same slope (50/100) in metric."""
    run = CANONICAL_RUN[units]
    return Pitch(rise=run / 2, run=run)


def _trim(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
