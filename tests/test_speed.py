import pytest

from windward.environment.base import OceanData
from windward.geo import GeoVec
from windward.performance import BoatPerformance
from windward.vessel.speed import SpeedModel, ice_speed_factor


@pytest.fixture
def boat():
    return BoatPerformance(
        name="boat",
        course_change_rate=5.0,
        speed_change_response=10.0,
        hull_efficiency=0.5,
        max_speed=100.0,
    )


NO_DATA = OceanData.unavailable()


def test_ice_factor_without_data_is_one():
    assert ice_speed_factor(OceanData(valid=False, ice=80.0)) == 1.0


def test_ice_factor_scales_with_cover():
    assert ice_speed_factor(OceanData(valid=True, ice=0.0)) == 1.0
    assert ice_speed_factor(OceanData(valid=True, ice=25.0)) == pytest.approx(0.75)
    assert ice_speed_factor(OceanData(valid=True, ice=100.0)) == 0.0


def test_target_uses_angle_from_wind_source(boat):
    model = SpeedModel()
    # wind from north, sailing east is a beam reach
    assert model.target_speed(GeoVec(0.0, 10.0), 90.0, boat, NO_DATA) == pytest.approx(5.0)
    # sailing straight into the wind
    assert model.target_speed(GeoVec(0.0, 10.0), 0.0, boat, NO_DATA) == 0.0


def test_target_reduced_by_ice(boat):
    model = SpeedModel()
    icy = OceanData(valid=True, ice=50.0)
    assert model.target_speed(GeoVec(0.0, 10.0), 90.0, boat, icy) == pytest.approx(2.5)


def test_inertia_smoothing(boat):
    model = SpeedModel()
    # (10 * 0 + 10 * 5) / (10 + 10)
    assert model.update(0.0, 90.0, GeoVec(0.0, 10.0), 10.0, boat, NO_DATA) == pytest.approx(2.5)


def test_decelerates_toward_target(boat):
    model = SpeedModel()
    speed = model.update(8.0, 0.0, GeoVec(0.0, 10.0), 10.0, boat, NO_DATA)
    assert speed == pytest.approx(4.0)


def test_larger_inertia_accelerates_slower(boat):
    heavy = BoatPerformance(
        name="heavy",
        course_change_rate=5.0,
        speed_change_response=100.0,
        hull_efficiency=0.5,
        max_speed=100.0,
    )
    model = SpeedModel()
    wind = GeoVec(0.0, 10.0)
    light_speed = model.update(0.0, 90.0, wind, 1.0, boat, NO_DATA)
    heavy_speed = model.update(0.0, 90.0, wind, 1.0, heavy, NO_DATA)
    assert 0.0 < heavy_speed < light_speed


def test_long_step_converges_on_target(boat):
    speed = SpeedModel().update(0.0, 90.0, GeoVec(0.0, 10.0), 1e9, boat, NO_DATA)
    assert speed == pytest.approx(5.0)
