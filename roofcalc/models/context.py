"""Roof context: the resolved footprint for a single solve."""

from __future__ import annotations
from pydantic import BaseModel

from .building import Wall, WallPosition
from .parameters import RoofParams
from .pitch import Pitch


class RoofContext(BaseModel):
    """
    Holds the inputs of one solve plus what the analyzer derives from them.

    The analyzer fills in the ridge-bearing walls, the gable walls,
    the span and the width. The solver only reads.
    """
    # Input
    walls: list[Wall]
    pitch: Pitch
    params: RoofParams

    # Analysis results (populated by the analyzer)
    front: Wall | None = None
    back: Wall | None = None
    gables: list[Wall] = []
    span: float = 0.0
    width: float = 0.0

    def get_wall(self, wall_id: str) -> Wall | None:
        for w in self.walls:
            if w.id == wall_id:
                return w
        return None

    def walls_at(self, position: WallPosition) -> list[Wall]:
        return [w for w in self.walls if w.position == position]
