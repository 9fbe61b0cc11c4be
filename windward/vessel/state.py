from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from ..geo import GeoPos, GeoVec, normalize_angle
from ..performance import PERFORMANCE_TABLE, BoatPerformance, get_performance


class VesselMode(Enum):
    STOPPED = "stopped"
    APPROACHING_WATER = "approaching_water"
    SAILING = "sailing"


@dataclass
class VesselState:
    """Represents the current state of a vessel

    ``sails_down`` only matters while sailing. ``category`` selects the
    performance table entry and cannot be reassigned.
    """

    position: GeoPos
    category: int
    velocity: GeoVec = field(default_factory=lambda: GeoVec(0.0, 0.0))
    desired_course: float = 0.0  # in degrees, 0 = North, 90 = East
    distance_travelled: float = 0.0  # in metres
    mode: VesselMode = VesselMode.STOPPED
    sails_down: bool = False
    snap_heading_on_first_move: bool = True

    def __setattr__(self, name, value):
        if name == "category" and "category" in self.__dict__:
            raise AttributeError("Vessel category is immutable")
        super().__setattr__(name, value)

    @property
    def stopped(self) -> bool:
        return self.mode is VesselMode.STOPPED

    @property
    def approaching_water(self) -> bool:
        return self.mode is VesselMode.APPROACHING_WATER

    @property
    def sailing(self) -> bool:
        return self.mode is VesselMode.SAILING

    @property
    def heading(self) -> float:
        return self.velocity.angle

    @property
    def speed(self) -> float:
        return self.velocity.magnitude

    def stop(self) -> None:
        self.mode = VesselMode.STOPPED
        self.velocity.magnitude = 0.0

    def launch(self) -> None:
        """Activate a vessel; it first makes its way to open water."""
        self.mode = VesselMode.APPROACHING_WATER

    def set_desired_course(self, course: float) -> None:
        self.desired_course = normalize_angle(course)

    def set_sails_down(self, sails_down: bool) -> None:
        self.sails_down = bool(sails_down)


def create_vessel(
    lat: float,
    lon: float,
    category: int,
    stopped: bool = True,
    table: Mapping[int, BoatPerformance] = PERFORMANCE_TABLE,
) -> VesselState:
    """
    Create a vessel at rest

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees
        category: Performance table key
        stopped: Initial activation state; an active vessel starts sailing
        table: Table the category must exist in

    Returns:
        New vessel state with zero velocity
    """
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude must be between -90 and 90 degrees: {lat}")
    get_performance(category, table)

    return VesselState(
        position=GeoPos(lat, lon),
        category=category,
        mode=VesselMode.STOPPED if stopped else VesselMode.SAILING,
    )
