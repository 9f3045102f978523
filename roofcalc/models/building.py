"""Building element models: walls and their roles in the footprint."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class WallPosition(str, Enum):
    """
    Role of a wall in the rectangular footprint.

    FRONT (wall A) and BACK (wall B) carry the roof and run parallel to
    the ridge. LEFT and RIGHT are the gable walls; their length is the
    span. A positive ridge offset moves the ridge toward BACK.
    """
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_ridge_bearing(self) -> bool:
        return self in (WallPosition.FRONT, WallPosition.BACK)


class Wall(BaseModel):
    """A straight wall segment (heights and lengths in the large unit)."""
    id: str
    name: str = ""
    height: float = 8.0
    length: float
    position: WallPosition

    @property
    def area(self) -> float:
        """Rectangular face area, ignoring any gable triangle above it."""
        return self.height * self.length
