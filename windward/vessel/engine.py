import logging
import math
from typing import Mapping, Optional

import numpy as np

from ..config import MotionConfig
from ..environment.base import Environment
from ..geo import normalize_angle
from ..performance import PERFORMANCE_TABLE, BoatPerformance, get_performance
from .heading import HeadingController
from .probe import LandApproachProbe
from .speed import SpeedModel, ice_speed_factor
from .state import VesselMode, VesselState

logger = logging.getLogger(__name__)


class MotionUpdateEngine:
    """Advances a single vessel by one tick.

    Parameters:
        environment: Land/water, wind and ocean services
        config: Motion constants (defaults to ``MotionConfig()``)
        table: Vessel category performance table
        rng: Random generator for near-opposite turn decisions, or a seed
    """

    def __init__(
        self,
        environment: Environment,
        config: Optional[MotionConfig] = None,
        table: Mapping[int, BoatPerformance] = PERFORMANCE_TABLE,
        rng=None,
    ):
        self.environment = environment
        self.config = config if config is not None else MotionConfig()
        self.table = table

        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)

        self.heading_controller = HeadingController(rng)
        self.speed_model = SpeedModel()
        self.probe = LandApproachProbe(
            environment.water,
            max_distance=self.config.move_to_water_distance,
            step=self.config.probe_step,
        )

    def _near_pole(self, state: VesselState) -> bool:
        limit = 90.0 - self.config.polar_guard_deg
        return state.position.lat >= limit or state.position.lat <= -limit

    def advance(self, state: VesselState, time_step: float) -> None:
        """
        Move a vessel forward by one tick, mutating it in place

        Args:
            state: Vessel to advance
            time_step: Elapsed time in seconds, must be positive and finite
        """
        if not (math.isfinite(time_step) and time_step > 0):
            raise ValueError(f"Time step must be positive and finite: {time_step}")

        if state.stopped:
            return

        if self._near_pole(state):
            # Position advance is undefined at the poles
            logger.info(f"Stopping vessel near pole at latitude {state.position.lat}")
            state.stop()
            return

        env = self.environment

        if state.approaching_water:
            if env.water.is_water(state.position):
                logger.debug("Vessel reached water, sailing")
                state.mode = VesselMode.SAILING

                if state.snap_heading_on_first_move:
                    state.velocity.angle = normalize_angle(state.desired_course)
                    state.snap_heading_on_first_move = False
            else:
                if self.probe.is_heading_toward_water(state.position, state.desired_course):
                    state.velocity.angle = normalize_angle(state.desired_course)
                    # Magnitude holds this tick's displacement while crossing land
                    state.velocity.magnitude = self.config.move_to_water_speed * time_step
                    state.position.advance(state.velocity)
                else:
                    logger.info("No water ahead of vessel on land, stopping")
                    state.stop()
                return

        ocean = env.ocean.get_ocean_data(state.position)

        if state.sails_down:
            # Drift downwind at a fraction of the wind speed
            wind = env.wind.get_wind(state.position)
            state.velocity.angle = normalize_angle(wind.angle + 180.0)
            state.velocity.magnitude = (
                wind.magnitude
                * self.config.sails_down_wind_fraction
                * ice_speed_factor(ocean)
            )
        else:
            performance = get_performance(state.category, self.table)
            state.velocity.angle = self.heading_controller.update(
                state.velocity.angle,
                state.desired_course,
                time_step,
                performance.course_change_rate,
            )
            wind = env.wind.get_wind(state.position)
            state.velocity.magnitude = self.speed_model.update(
                state.velocity.magnitude,
                state.velocity.angle,
                wind,
                time_step,
                performance,
                ocean,
            )

        displacement = state.velocity.scaled(time_step)
        state.position.advance(displacement)

        if ocean.valid:
            drift = ocean.current.scaled(time_step)
            state.position.advance(drift)
            state.distance_travelled += (drift + displacement).magnitude
        else:
            state.distance_travelled += abs(displacement.magnitude)

        if not env.water.is_water(state.position):
            logger.info(
                f"Vessel ran aground at ({state.position.lat:.5f}, {state.position.lon:.5f})"
            )
            state.stop()
