"""Shared fixtures for roof engine tests."""

import pytest

from roofcalc.models import Wall, WallPosition


def make_walls(
    span: float = 24.0,
    width: float = 30.0,
    front_height: float = 8.0,
    back_height: float = 8.0,
    gable_height: float = 8.0,
) -> list[Wall]:
    return [
        Wall(id="front", name="Front", height=front_height, length=width,
             position=WallPosition.FRONT),
        Wall(id="back", name="Back", height=back_height, length=width,
             position=WallPosition.BACK),
        Wall(id="left", name="Left", height=gable_height, length=span,
             position=WallPosition.LEFT),
        Wall(id="right", name="Right", height=gable_height, length=span,
             position=WallPosition.RIGHT),
    ]


@pytest.fixture
def house() -> list[Wall]:
    """24 ft span, 30 ft ridge, 8 ft walls."""
    return make_walls()
