"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from roofcalc.models import Units, RoofInput, RoofSolution, default_pitch
from roofcalc.services.roof_service import RoofService
from roofcalc.api.schemas import (
    SolveRequest, ConvertRequest, DefaultsResponse, ValidationErrorResponse,
)

router = APIRouter()

# Shared service instance
_service = RoofService()


@router.post(
    "/solve",
    response_model=RoofSolution,
    responses={422: {"model": ValidationErrorResponse}},
)
async def solve_roof(request: SolveRequest) -> RoofSolution:
    """Solve the roof for the given walls, pitch and options."""
    return _service.solve(request.walls, request.pitch, request.params)


@router.post("/convert", response_model=RoofInput)
async def convert_units(request: ConvertRequest) -> RoofInput:
    """Convert stored inputs to another unit system."""
    return _service.convert(
        request.walls,
        request.pitch,
        request.ridge_offset,
        request.from_units,
        request.to_units,
    )


@router.get("/defaults", response_model=DefaultsResponse)
async def defaults(units: Units = Units.IMPERIAL) -> DefaultsResponse:
    """Starter walls and pitch for a new design."""
    return DefaultsResponse(
        walls=_service.default_walls(units),
        pitch=default_pitch(units),
        units=units,
    )


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
