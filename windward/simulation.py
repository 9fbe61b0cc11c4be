import logging
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from .environment.base import Environment
from .vessel.engine import MotionUpdateEngine
from .vessel.state import VesselState

logger = logging.getLogger(__name__)


class VoyageSimulation:
    """Simulates one vessel's voyage through an environment over time.

    Tracks the vessel's position, heading, speed and distance history. Any
    environment service with a ``current_time`` attribute follows the
    simulation clock.
    """

    def __init__(
        self,
        vessel: VesselState,
        environment: Environment,
        engine: Optional[MotionUpdateEngine] = None,
        start_time: Optional[datetime] = None,
    ):
        """Initialize the voyage.

        Args:
            vessel: Vessel to simulate
            environment: Land/water, wind and ocean services
            engine: Motion engine (created from ``environment`` if omitted)
            start_time: Simulation clock start, if the environment is time dependent
        """
        self.vessel = vessel
        self.environment = environment
        self.engine = engine if engine is not None else MotionUpdateEngine(environment)
        self.current_time = start_time

        self.position_history: List[Tuple[float, float]] = [self.position]
        self.heading_history: List[float] = [vessel.heading]
        self.speed_history: List[float] = [vessel.speed]
        self.distance_history: List[float] = [vessel.distance_travelled]
        self.time_history: List[Optional[datetime]] = [start_time]

    @property
    def position(self) -> Tuple[float, float]:
        return self.vessel.position.lat, self.vessel.position.lon

    def _sync_clock(self) -> None:
        for service in (self.environment.wind, self.environment.ocean):
            if hasattr(service, "current_time"):
                service.current_time = self.current_time

    def step(
        self,
        desired_course: float,
        time_step: float = 60.0,
        current_time: Optional[datetime] = None,
    ) -> Dict:
        """Advance the vessel one tick toward a pilot-selected course.

        Args:
            desired_course: Desired course in degrees (0=North, 90=East)
            time_step: Time step in seconds
            current_time: Simulation time for this tick (keeps the running clock if None)

        Returns:
            Dict containing current simulation state
        """
        if current_time is not None:
            self.current_time = current_time
        self._sync_clock()

        self.vessel.set_desired_course(desired_course)
        self.engine.advance(self.vessel, time_step)

        self.position_history.append(self.position)
        self.heading_history.append(self.vessel.heading)
        self.speed_history.append(self.vessel.speed)
        self.distance_history.append(self.vessel.distance_travelled)
        self.time_history.append(self.current_time)

        return self.current_state

    def run_simulation(
        self,
        duration: float,
        get_course_func: Callable[[Dict], float],
        time_step: float = 60.0,
        start_time: Optional[datetime] = None,
    ) -> List[Dict]:
        """Run the voyage for a duration, ending early if the vessel stops.

        Args:
            duration: Duration to simulate in seconds
            get_course_func: Function that takes current state and returns desired course
            time_step: Time step in seconds
            start_time: Start time for the simulation clock

        Returns:
            List of state dictionaries for each completed step
        """
        if time_step <= 0:
            raise ValueError(f"Time step must be positive: {time_step}")
        if start_time is not None:
            self.current_time = start_time

        states = []
        steps = int(duration / time_step)

        for step in range(steps):
            state = self.step(
                desired_course=get_course_func(self.current_state),
                time_step=time_step,
            )
            states.append(state)

            if self.vessel.stopped:
                logger.info(f"Vessel stopped after {step + 1} of {steps} steps")
                break

            if self.current_time is not None:
                self.current_time = self.current_time + timedelta(seconds=time_step)

        return states

    @property
    def current_state(self) -> Dict:
        """Get the current state of the simulation."""
        return {
            "position": self.position,
            "heading": self.vessel.heading,
            "speed": self.vessel.speed,
            "desired_course": self.vessel.desired_course,
            "distance_travelled": self.vessel.distance_travelled,
            "mode": self.vessel.mode.value,
            "sails_down": self.vessel.sails_down,
            "time": self.current_time,
        }
