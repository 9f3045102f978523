"""Result assembly: packages solver output into a RoofSolution."""

from __future__ import annotations
import math
from pydantic import BaseModel

from roofcalc.models import (
    Wall, RoofContext, RoofSide, RoofSolution, RidgeConfig, SurfaceArea,
    RoofOutline, Point2D, Point3D, polygon_area,
)


class SolverOutput(BaseModel):
    """Raw solver numbers before assembly."""
    base_run: float
    base_rise: float
    ridge_height: float
    sides: list[RoofSide]


def assemble_solution(context: RoofContext, output: SolverOutput) -> RoofSolution:
    """
    Build the externally consumed result.

    Echoes the inputs a display needs (units, pitch, span, width) and
    adds the symmetric common rafter, surface areas and a 3D outline.
    """
    pitch = context.pitch
    width = context.width

    sides = [
        side.model_copy(update={"area": side.rafter_length * width})
        for side in output.sides
    ]
    wall_areas = [
        SurfaceArea(id=w.id, name=w.name, area=_wall_area(w, context, output))
        for w in context.walls
    ]

    return RoofSolution(
        walls=context.walls,
        roof_sides=sides,
        ridge=RidgeConfig(
            offset=context.params.ridge_offset,
            height=output.ridge_height,
            length=width,
        ),
        units=context.params.units,
        pitch=pitch,
        span=context.span,
        width=width,
        base_run=output.base_run,
        base_rise=output.base_rise,
        pitch_angle=pitch.angle,
        pitch_ratio=pitch.label,
        common_rafter_length=math.hypot(output.base_run, output.base_rise),
        wall_areas=wall_areas,
        total_wall_area=sum(a.area for a in wall_areas),
        total_roof_area=sum(s.area for s in sides),
        outline=_outline(context, output),
    )


def _wall_area(wall: Wall, context: RoofContext, output: SolverOutput) -> float:
    if wall.position.is_ridge_bearing:
        return wall.area
    return _gable_area(wall, context, output)


def _gable_area(wall: Wall, context: RoofContext, output: SolverOutput) -> float:
    """
    Gable end face: wall below the eaves plus the triangle up to the ridge.

    The outline follows the front and back eave heights; the gable
    wall's own height is not used.
    """
    span = context.span
    scale = wall.length / span
    front_h = context.front.height
    back_h = context.back.height
    # Ridge kept within the footprint for an out-of-range offset
    ridge_x = min(max(output.sides[0].horizontal_run, 0.0), span)

    section = [
        Point2D(x=0.0, y=0.0),
        Point2D(x=span * scale, y=0.0),
        Point2D(x=span * scale, y=back_h),
        Point2D(x=ridge_x * scale, y=output.ridge_height),
        Point2D(x=0.0, y=front_h),
    ]
    return polygon_area(section)


def _outline(context: RoofContext, output: SolverOutput) -> RoofOutline:
    half_span = context.span / 2
    half_width = context.width / 2
    front_h = context.front.height
    back_h = context.back.height
    ridge_x = -half_span + output.sides[0].horizontal_run

    return RoofOutline(
        front_left=Point3D(x=-half_span, y=front_h, z=-half_width),
        front_right=Point3D(x=-half_span, y=front_h, z=half_width),
        back_left=Point3D(x=half_span, y=back_h, z=-half_width),
        back_right=Point3D(x=half_span, y=back_h, z=half_width),
        ridge_left=Point3D(x=ridge_x, y=output.ridge_height, z=-half_width),
        ridge_right=Point3D(x=ridge_x, y=output.ridge_height, z=half_width),
    )
