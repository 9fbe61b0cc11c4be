import pytest

from windward.environment.base import Environment, OceanData
from windward.performance import BoatPerformance

from .fakes import AllWater, ConstantOcean, ConstantWind


@pytest.fixture
def test_table():
    """One category with round numbers: 10 deg/s turns, 10 s inertia."""
    return {
        7: BoatPerformance(
            name="test_boat",
            course_change_rate=10.0,
            speed_change_response=10.0,
            hull_efficiency=0.5,
            max_speed=100.0,
        )
    }


@pytest.fixture
def calm_sea():
    return Environment(
        water=AllWater(),
        wind=ConstantWind(),
        ocean=ConstantOcean(OceanData.unavailable()),
    )
