"""High-level roof service: facade for the API layer."""

from __future__ import annotations
import logging

from roofcalc.errors import ValidationError
from roofcalc.models import (
    Wall, WallPosition, Pitch, Units, RoofParams, RoofInput, RoofSolution,
    default_pitch,
)
from roofcalc.core.solver import RoofSolver
from roofcalc.core.units import convert_inputs, convert_length


logger = logging.getLogger(__name__)

# Starter house, imperial (feet)
DEFAULT_SPAN = 24.0
DEFAULT_WIDTH = 30.0
DEFAULT_WALL_HEIGHT = 8.0


class RoofService:
    """Fills in defaults, delegates to the solver, logs failures."""

    def __init__(self, solver: RoofSolver | None = None) -> None:
        self.solver = solver or RoofSolver()

    def solve(
        self,
        walls: list[Wall],
        pitch: Pitch | None = None,
        params: RoofParams | None = None,
    ) -> RoofSolution:
        if params is None:
            params = RoofParams()
        if pitch is None:
            pitch = default_pitch(params.units)

        logger.debug(
            "Solving %d walls, pitch %s, %s, offset %s",
            len(walls), pitch.label, Units(params.units).value, params.ridge_offset,
        )
        try:
            return self.solver.solve(walls, pitch, params)
        except ValidationError as exc:
            logger.warning("Roof input rejected (%s): %s", exc.field, exc.message)
            raise

    def convert(
        self,
        walls: list[Wall],
        pitch: Pitch,
        ridge_offset: float,
        from_units: Units,
        to_units: Units,
    ) -> RoofInput:
        converted = convert_inputs(walls, pitch, ridge_offset, from_units, to_units)
        logger.info(
            "Converted %d walls from %s to %s (pitch %s -> %s)",
            len(walls), Units(from_units).value, Units(to_units).value,
            pitch.label, converted.pitch.label,
        )
        return converted

    def default_walls(self, units: Units = Units.IMPERIAL) -> list[Wall]:
        """Four-wall starter house in the requested units."""
        span = convert_length(DEFAULT_SPAN, Units.IMPERIAL, units)
        width = convert_length(DEFAULT_WIDTH, Units.IMPERIAL, units)
        height = convert_length(DEFAULT_WALL_HEIGHT, Units.IMPERIAL, units)
        return [
            Wall(id="wall-front", name="Front", height=height, length=width,
                 position=WallPosition.FRONT),
            Wall(id="wall-back", name="Back", height=height, length=width,
                 position=WallPosition.BACK),
            Wall(id="wall-left", name="Left", height=height, length=span,
                 position=WallPosition.LEFT),
            Wall(id="wall-right", name="Right", height=height, length=span,
                 position=WallPosition.RIGHT),
        ]
