"""Tests for result assembly: areas, outline and echoed inputs."""

import math

import pytest

from conftest import make_walls
from roofcalc.core.solver import solve
from roofcalc.models import Pitch, Point2D, Units, polygon_area


class TestEchoedInputs:
    def test_inputs_echoed_for_display(self, house):
        pitch = Pitch(rise=6, run=12)
        result = solve(house, pitch, Units.IMPERIAL, ridge_offset=1.5)
        assert result.units == Units.IMPERIAL
        assert result.pitch == pitch
        assert result.walls == house
        assert result.span == 24
        assert result.width == 30
        assert result.ridge.length == 30
        assert result.ridge.offset == 1.5

    def test_roof_sides_reference_their_walls(self, house):
        result = solve(house, Pitch(rise=6, run=12))
        assert [s.attached_wall_id for s in result.roof_sides] == ["front", "back"]
        assert result.roof_sides[0].name == "Front roof"
        assert result.get_side("left") is None

    def test_serializes_to_plain_json(self, house):
        data = solve(house, Pitch(rise=6, run=12)).model_dump(mode="json")
        assert data["units"] == "imperial"
        assert data["walls"][0]["position"] == "front"
        assert data["ridge"]["height"] == 14


class TestAreas:
    def test_wall_areas(self, house):
        result = solve(house, Pitch(rise=6, run=12))
        areas = {a.id: a.area for a in result.wall_areas}

        assert areas["front"] == 240
        assert areas["back"] == 240
        # 24 x 8 below the eaves plus a 24 x 6 triangle
        assert areas["left"] == pytest.approx(264)
        assert areas["right"] == pytest.approx(264)
        assert result.total_wall_area == pytest.approx(1008)

    def test_roof_areas(self, house):
        result = solve(house, Pitch(rise=6, run=12))
        rafter = math.hypot(12, 6)
        for side in result.roof_sides:
            assert side.area == pytest.approx(rafter * 30)
        assert result.total_roof_area == pytest.approx(2 * rafter * 30)

    def test_gable_area_with_offset_ridge_is_unchanged(self, house):
        # Triangle area depends on base and height only
        centered = solve(house, Pitch(rise=6, run=12))
        shifted = solve(house, Pitch(rise=6, run=12), ridge_offset=4)
        assert shifted.wall_areas[2].area == pytest.approx(centered.wall_areas[2].area)

    def test_gable_area_with_unequal_walls(self):
        result = solve(make_walls(span=20, front_height=8, back_height=10), Pitch(rise=6, run=12))
        gable = {a.id: a.area for a in result.wall_areas}["left"]
        # Trapezoid 8..10 over 20 plus a triangle rising 5 above the eave chord
        assert gable == pytest.approx(180 + 50)

    def test_gable_area_follows_eaves_not_gable_height(self):
        result = solve(make_walls(gable_height=3), Pitch(rise=6, run=12))
        assert {a.id: a.area for a in result.wall_areas}["left"] == pytest.approx(264)

    def test_polygon_area(self):
        square = [Point2D(x=0, y=0), Point2D(x=2, y=0), Point2D(x=2, y=2), Point2D(x=0, y=2)]
        assert polygon_area(square) == 4
        assert polygon_area(square[:2]) == 0


class TestOutline:
    def test_centered_ridge(self, house):
        outline = solve(house, Pitch(rise=6, run=12)).outline
        assert outline.front_left.x == -12
        assert outline.back_right.x == 12
        assert outline.front_left.y == 8
        assert outline.front_left.z == -15
        assert outline.ridge_left.x == 0
        assert outline.ridge_left.y == 14
        assert outline.ridge_left.distance_to(outline.ridge_right) == 30

    def test_positive_offset_moves_ridge_toward_back(self, house):
        outline = solve(house, Pitch(rise=6, run=12), ridge_offset=3).outline
        assert outline.ridge_left.x == 3
        assert outline.ridge_left.distance_to(outline.front_left) == pytest.approx(
            math.hypot(15, 6)
        )
