"""Roof solver: ridge height and per-side rafter geometry.

One general model covers every gable variant: the symmetric roof is
simply ridge_offset=0 with equal wall heights.
"""

from __future__ import annotations
import logging
import math

from roofcalc.errors import ValidationError
from roofcalc.models import (
    Wall, Pitch, Units, RoofParams, RoofContext, RoofSide, RoofSolution,
)
from roofcalc.core.analyzer import WallAnalyzer
from roofcalc.core.assembly import SolverOutput, assemble_solution
from roofcalc.core.units import to_small_unit, to_large_unit


logger = logging.getLogger(__name__)


class RoofSolver:
    """
    Stateless roof solver.

    Takes walls + pitch + params, resolves the footprint, checks
    preconditions, computes the ridge and both roof sides, and returns
    a complete RoofSolution.
    """

    def __init__(self) -> None:
        self.analyzer = WallAnalyzer()

    def solve(
        self,
        walls: list[Wall],
        pitch: Pitch,
        params: RoofParams | None = None,
    ) -> RoofSolution:
        if params is None:
            params = RoofParams()

        context = RoofContext(walls=walls, pitch=pitch, params=params)

        # Analysis phase: wall roles, span, width
        self.analyzer.analyze(context)
        self._validate(context)

        output = self._compute(context)
        return assemble_solution(context, output)

    def _validate(self, context: RoofContext) -> None:
        pitch = context.pitch
        if pitch.rise < 0:
            raise ValidationError("pitchRise", "Pitch rise must be non-negative")
        if pitch.run <= 0:
            raise ValidationError("pitchRun", "Pitch run must be greater than 0")
        for wall in context.walls:
            if wall.height < 0:
                raise ValidationError(
                    "wallHeight", f"Wall '{wall.id}' height must be non-negative"
                )

    def _compute(self, context: RoofContext) -> SolverOutput:
        pitch = context.pitch
        units = context.params.units
        offset = context.params.ridge_offset
        front, back = context.front, context.back

        base_run = context.span / 2

        # Pitch is quoted in small units per large unit
        rise_small = to_small_unit(base_run, units) * pitch.rise / pitch.run
        base_rise = to_large_unit(rise_small, units)

        # Ridge anchors to the average wall height
        ridge_height = (front.height + back.height) / 2 + base_rise

        # Positive offset moves the ridge toward the back wall
        front_run = base_run + offset
        back_run = base_run - offset

        sides = [
            _roof_side(front, front_run, ridge_height - front.height),
            _roof_side(back, back_run, ridge_height - back.height),
        ]

        logger.debug(
            "Solved %s roof: base_run=%.4f base_rise=%.4f ridge=%.4f offset=%.4f",
            Units(units).value, base_run, base_rise, ridge_height, offset,
        )

        return SolverOutput(
            base_run=base_run,
            base_rise=base_rise,
            ridge_height=ridge_height,
            sides=sides,
        )


def _roof_side(wall: Wall, run: float, rise: float) -> RoofSide:
    return RoofSide(
        id=f"roof-{wall.id}",
        name=f"{wall.name or wall.position.value.title()} roof",
        attached_wall_id=wall.id,
        horizontal_run=run,
        vertical_rise=rise,
        rafter_length=math.hypot(run, rise),
        angle=slope_angle(run, rise),
    )


def slope_angle(run: float, rise: float) -> float:
    """Slope in degrees; a side with no horizontal run is vertical."""
    if run <= 0:
        return 90.0
    return math.degrees(math.atan2(rise, run))


def solve(
    walls: list[Wall],
    pitch: Pitch,
    units: Units = Units.IMPERIAL,
    ridge_offset: float = 0.0,
    span: float | None = None,
) -> RoofSolution:
    """Solve a gable roof over the given walls."""
    params = RoofParams(units=units, ridge_offset=ridge_offset, span=span)
    return RoofSolver().solve(walls, pitch, params)
