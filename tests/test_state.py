import pytest

from windward.performance import UnknownCategoryError
from windward.vessel.state import VesselMode, create_vessel


def test_create_vessel_defaults():
    vessel = create_vessel(45.0, -10.0, 0)

    assert (vessel.position.lat, vessel.position.lon) == (45.0, -10.0)
    assert vessel.heading == 0.0
    assert vessel.speed == 0.0
    assert vessel.desired_course == 0.0
    assert vessel.distance_travelled == 0.0
    assert vessel.category == 0
    assert vessel.stopped
    assert not vessel.sails_down
    assert vessel.snap_heading_on_first_move


def test_create_active_vessel():
    vessel = create_vessel(45.0, -10.0, 0, stopped=False)
    assert vessel.mode is VesselMode.SAILING
    assert vessel.sailing and not vessel.stopped and not vessel.approaching_water


def test_create_rejects_bad_latitude():
    with pytest.raises(ValueError):
        create_vessel(91.0, 0.0, 0)


def test_create_rejects_unknown_category():
    with pytest.raises(UnknownCategoryError):
        create_vessel(0.0, 0.0, 1000)


def test_category_is_immutable():
    vessel = create_vessel(0.0, 0.0, 1)
    with pytest.raises(AttributeError):
        vessel.category = 2
    assert vessel.category == 1


def test_stop_zeroes_speed_but_keeps_heading():
    vessel = create_vessel(0.0, 0.0, 0, stopped=False)
    vessel.velocity.angle = 33.0
    vessel.velocity.magnitude = 4.0

    vessel.stop()

    assert vessel.stopped
    assert vessel.speed == 0.0
    assert vessel.heading == 33.0


def test_launch_starts_approaching_water():
    vessel = create_vessel(0.0, 0.0, 0)
    vessel.launch()
    assert vessel.approaching_water
    assert not vessel.stopped


def test_desired_course_normalized():
    vessel = create_vessel(0.0, 0.0, 0)
    vessel.set_desired_course(-90.0)
    assert vessel.desired_course == 270.0
    vessel.set_desired_course(360.0)
    assert vessel.desired_course == 0.0


def test_vessels_do_not_share_velocity():
    a = create_vessel(0.0, 0.0, 0)
    b = create_vessel(0.0, 0.0, 0)
    a.velocity.magnitude = 5.0
    assert b.speed == 0.0
