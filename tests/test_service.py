"""Tests for the roof service facade."""

import logging

import pytest

from roofcalc.core.units import METERS_PER_FOOT
from roofcalc.errors import ValidationError
from roofcalc.models import Pitch, RoofParams, Units
from roofcalc.services.roof_service import RoofService


@pytest.fixture
def service():
    return RoofService()


class TestSolve:
    def test_default_house(self, service):
        result = service.solve(service.default_walls())
        assert result.pitch_ratio == "6/12"
        assert result.ridge.height == 14
        assert result.span == 24

    def test_metric_defaults(self, service):
        walls = service.default_walls(Units.METRIC)
        result = service.solve(walls, params=RoofParams(units=Units.METRIC))
        assert result.pitch_ratio == "50/100"
        assert result.span == pytest.approx(24 * METERS_PER_FOOT)
        assert result.ridge.height == pytest.approx(14 * METERS_PER_FOOT)

    def test_failure_is_logged_and_raised(self, service, caplog):
        with caplog.at_level(logging.WARNING, logger="roofcalc.services.roof_service"):
            with pytest.raises(ValidationError):
                service.solve(service.default_walls(), Pitch(rise=6, run=0))
        assert "pitchRun" in caplog.text


class TestConvert:
    def test_toggle_to_metric_and_back(self, service):
        walls = service.default_walls()
        metric = service.convert(walls, Pitch(rise=6, run=12), 1.0, Units.IMPERIAL, Units.METRIC)
        assert metric.pitch.label == "50/100"

        imperial = service.convert(
            metric.walls, metric.pitch, metric.ridge_offset, Units.METRIC, Units.IMPERIAL
        )
        assert imperial.pitch.run == 12
        assert imperial.pitch.rise == pytest.approx(6)
        assert imperial.ridge_offset == pytest.approx(1.0)
        for before, after in zip(walls, imperial.walls):
            assert after.height == pytest.approx(before.height)
            assert after.length == pytest.approx(before.length)
