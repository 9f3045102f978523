"""Geometric primitives for outline output."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point in a vertical section plane (x across the span, y up)."""
    x: float
    y: float


class Point3D(BaseModel):
    """Point in 3D space (x across the span, y up, z along the ridge)."""
    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )


def polygon_area(points: list[Point2D]) -> float:
    """Area of a simple polygon (shoelace formula)."""
    if len(points) < 3:
        return 0.0
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p.x * q.y - q.x * p.y
    return abs(total) / 2
