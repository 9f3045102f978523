"""Solver parameters and unit-toggle payloads."""

from __future__ import annotations
from pydantic import BaseModel

from .building import Wall
from .pitch import Pitch, Units


class RoofParams(BaseModel):
    """User-adjustable options for a roof solve."""
    units: Units = Units.IMPERIAL
    ridge_offset: float = 0.0           # Positive = toward the back wall
    span: float | None = None           # Overrides the gable wall lengths


class RoofInput(BaseModel):
    """Everything the solver needs, expressed in one unit system."""
    walls: list[Wall]
    pitch: Pitch
    units: Units
    ridge_offset: float = 0.0
