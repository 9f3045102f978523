"""Roof solution output models."""

from __future__ import annotations
from pydantic import BaseModel

from .building import Wall
from .geometry import Point3D
from .pitch import Pitch, Units


class RoofSide(BaseModel):
    """One roof plane, rising from a ridge-bearing wall to the ridge."""
    id: str
    name: str
    attached_wall_id: str
    horizontal_run: float
    vertical_rise: float    # Signed; negative when the ridge sits below the wall top
    rafter_length: float
    angle: float            # Degrees from horizontal
    area: float = 0.0


class RidgeConfig(BaseModel):
    offset: float   # From the footprint centerline, positive = toward back
    height: float   # Above the wall-base datum
    length: float = 0.0


class SurfaceArea(BaseModel):
    id: str
    name: str
    area: float


class RoofOutline(BaseModel):
    """Wall-top corners and ridge ends for a 3D renderer."""
    front_left: Point3D
    front_right: Point3D
    back_left: Point3D
    back_right: Point3D
    ridge_left: Point3D
    ridge_right: Point3D


class RoofSolution(BaseModel):
    """The complete, display-ready result of a roof solve."""
    walls: list[Wall]
    roof_sides: list[RoofSide]
    ridge: RidgeConfig
    units: Units
    pitch: Pitch
    span: float
    width: float
    base_run: float
    base_rise: float
    pitch_angle: float
    pitch_ratio: str
    common_rafter_length: float
    wall_areas: list[SurfaceArea] = []
    total_wall_area: float = 0.0
    total_roof_area: float = 0.0
    outline: RoofOutline | None = None

    def get_side(self, wall_id: str) -> RoofSide | None:
        for side in self.roof_sides:
            if side.attached_wall_id == wall_id:
                return side
        return None
