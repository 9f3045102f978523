from .geometry import Point2D, Point3D, polygon_area
from .building import Wall, WallPosition
from .pitch import Pitch, Units, CANONICAL_RUN, SMALL_UNITS_PER_LARGE, default_pitch
from .parameters import RoofParams, RoofInput
from .roof import RoofSide, RidgeConfig, SurfaceArea, RoofOutline, RoofSolution
from .context import RoofContext

__all__ = [
    "Point2D", "Point3D", "polygon_area",
    "Wall", "WallPosition",
    "Pitch", "Units", "CANONICAL_RUN", "SMALL_UNITS_PER_LARGE", "default_pitch",
    "RoofParams", "RoofInput",
    "RoofSide", "RidgeConfig", "SurfaceArea", "RoofOutline", "RoofSolution",
    "RoofContext",
]
