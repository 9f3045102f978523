"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from roofcalc.models import Wall, Pitch, Units, RoofParams


class SolveRequest(BaseModel):
    """Request body for the /solve endpoint."""
    walls: list[Wall]
    pitch: Pitch | None = None
    params: RoofParams = RoofParams()


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint (unit toggle)."""
    walls: list[Wall]
    pitch: Pitch
    ridge_offset: float = 0.0
    from_units: Units
    to_units: Units


class DefaultsResponse(BaseModel):
    walls: list[Wall]
    pitch: Pitch
    units: Units


class ValidationErrorResponse(BaseModel):
    field: str
    detail: str
