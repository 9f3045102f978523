"""Unit conversion between imperial and metric systems.

Large units (feet, meters) carry spans and wall heights. Small units
(inches, cm) carry the pitch numerator. Nothing here rounds; rounding
is a display concern.
"""

from __future__ import annotations

from roofcalc.errors import ValidationError
from roofcalc.models import (
    Wall, Pitch, Units, RoofInput, CANONICAL_RUN, SMALL_UNITS_PER_LARGE,
)


METERS_PER_FOOT = 0.3048


def to_small_unit(value: float, units: Units) -> float:
    """Feet to inches, or meters to cm."""
    return value * SMALL_UNITS_PER_LARGE[Units(units)]


def to_large_unit(value: float, units: Units) -> float:
    """Inches to feet, or cm to meters."""
    return value / SMALL_UNITS_PER_LARGE[Units(units)]


def length_factor(from_units: Units, to_units: Units) -> float:
    from_units, to_units = Units(from_units), Units(to_units)
    if from_units == to_units:
        return 1.0
    if to_units == Units.METRIC:
        return METERS_PER_FOOT
    return 1 / METERS_PER_FOOT


def convert_length(value: float, from_units: Units, to_units: Units) -> float:
    """Feet <-> meters; identity when both systems match."""
    return value * length_factor(from_units, to_units)


def convert_area(value: float, from_units: Units, to_units: Units) -> float:
    return value * length_factor(from_units, to_units) ** 2


def convert_pitch(pitch: Pitch, from_units: Units, to_units: Units) -> Pitch:
    """
    Re-express a pitch over the target system's canonical run.

    The run becomes 12 (imperial) or 100 (metric) and the rise is
    rescaled so rise/run is unchanged.
    """
    if pitch.rise < 0:
        raise ValidationError("pitchRise", "Pitch rise must be non-negative")
    if pitch.run <= 0:
        raise ValidationError("pitchRun", "Pitch run must be greater than 0")
    if Units(from_units) == Units(to_units):
        return pitch
    run = CANONICAL_RUN[Units(to_units)]
    return Pitch(rise=pitch.rise / pitch.run * run, run=run)


def convert_wall(wall: Wall, from_units: Units, to_units: Units) -> Wall:
    return wall.model_copy(update={
        "height": convert_length(wall.height, from_units, to_units),
        "length": convert_length(wall.length, from_units, to_units),
    })


def convert_inputs(
    walls: list[Wall],
    pitch: Pitch,
    ridge_offset: float,
    from_units: Units,
    to_units: Units,
) -> RoofInput:
    """Convert every stored input when the user toggles unit systems."""
    return RoofInput(
        walls=[convert_wall(w, from_units, to_units) for w in walls],
        pitch=convert_pitch(pitch, from_units, to_units),
        units=Units(to_units),
        ridge_offset=convert_length(ridge_offset, from_units, to_units),
    )
