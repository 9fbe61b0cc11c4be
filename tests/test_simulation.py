import math
from datetime import datetime, timedelta

import pytest

from windward.environment.base import Environment, OceanData
from windward.geo import EARTH_RADIUS_M
from windward.simulation import VoyageSimulation
from windward.vessel.engine import MotionUpdateEngine
from windward.vessel.state import create_vessel

from tests.fakes import AllWater, ConstantOcean, ConstantWind, LandBelowLatitude


class ClockedWind(ConstantWind):
    def __init__(self, *args):
        super().__init__(*args)
        self.current_time = None
        self.seen_times = []

    def get_wind(self, pos):
        self.seen_times.append(self.current_time)
        return super().get_wind(pos)


def make_sim(test_table, water=None, wind=None, stopped=False, start_time=None):
    environment = Environment(
        water=water or AllWater(),
        wind=wind or ConstantWind(0.0, 10.0),
        ocean=ConstantOcean(OceanData.unavailable()),
    )
    vessel = create_vessel(10.0, 10.0, 7, stopped=stopped, table=test_table)
    engine = MotionUpdateEngine(environment, table=test_table, rng=0)
    return VoyageSimulation(vessel, environment, engine, start_time=start_time)


def test_step_records_history(test_table):
    sim = make_sim(test_table)

    state = sim.step(desired_course=90.0, time_step=1.0)

    assert state["heading"] == pytest.approx(10.0)
    assert state["desired_course"] == 90.0
    assert state["mode"] == "sailing"
    assert len(sim.position_history) == 2
    assert sim.heading_history == [0.0, pytest.approx(10.0)]


def test_run_simulation_steps_for_duration(test_table):
    sim = make_sim(test_table)

    states = sim.run_simulation(duration=60.0, get_course_func=lambda s: 90.0, time_step=10.0)

    assert len(states) == 6
    assert states[-1]["heading"] == 90.0
    assert states[-1]["distance_travelled"] > 0.0
    distances = sim.distance_history
    assert distances == sorted(distances)


def test_run_stops_early_when_grounded(test_table):
    coast = LandBelowLatitude(10.0 - math.degrees(15.0 / EARTH_RADIUS_M))
    sim = make_sim(test_table, water=coast, wind=ConstantWind(0.0, 20.0))
    sim.vessel.set_sails_down(True)

    states = sim.run_simulation(duration=100.0, get_course_func=lambda s: 0.0, time_step=10.0)

    assert len(states) == 1
    assert states[-1]["mode"] == "stopped"
    assert states[-1]["speed"] == 0.0


def test_clock_advances_environment_time(test_table):
    start = datetime(2024, 1, 1)
    wind = ClockedWind(0.0, 10.0)
    sim = make_sim(test_table, wind=wind, start_time=start)

    sim.run_simulation(duration=30.0, get_course_func=lambda s: 90.0, time_step=10.0)

    assert wind.seen_times == [start + timedelta(seconds=10 * i) for i in range(3)]
    assert sim.current_time == start + timedelta(seconds=30)


def test_stopped_vessel_stays_put(test_table):
    sim = make_sim(test_table, stopped=True)

    states = sim.run_simulation(duration=50.0, get_course_func=lambda s: 45.0, time_step=10.0)

    assert len(states) == 1
    assert states[0]["position"] == (10.0, 10.0)


def test_rejects_non_positive_time_step(test_table):
    with pytest.raises(ValueError):
        make_sim(test_table).run_simulation(10.0, lambda s: 0.0, time_step=0.0)
