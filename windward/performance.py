"""Per-category sailing performance: turn rate, speed inertia and polar curve."""

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

import numpy as np


class UnknownCategoryError(ValueError):
    """Raised when a vessel category has no performance entry."""


@dataclass(frozen=True)
class BoatPerformance:
    """Performance characteristics of one vessel category

    Parameters:
        name: Human readable category name
        course_change_rate: Maximum turn rate in degrees per second
        speed_change_response: Inertia time constant in seconds
        hull_efficiency: Fraction of wind speed achieved at the best point of sail
        max_speed: Hull speed cap in m/s
        no_go_angle: Relative wind angles below this produce no drive (degrees)
        efficiency_angles: Relative wind angles (degrees) of the efficiency curve
        efficiency_values: Drive efficiency (0-1) at each of ``efficiency_angles``
    """

    name: str
    course_change_rate: float
    speed_change_response: float
    hull_efficiency: float
    max_speed: float
    no_go_angle: float = 45.0
    efficiency_angles: Tuple[float, ...] = (45.0, 60.0, 90.0, 120.0, 150.0, 180.0)
    efficiency_values: Tuple[float, ...] = (0.55, 0.8, 1.0, 0.95, 0.8, 0.65)

    def __post_init__(self):
        if len(self.efficiency_angles) != len(self.efficiency_values):
            raise ValueError("Efficiency curve angles and values must have equal length")
        if self.speed_change_response < 0:
            raise ValueError("Speed change response must be non-negative")

    def polar_speed(self, wind_speed: float, angle_from_wind: float) -> float:
        """
        Attainable boat speed for a wind speed and relative wind angle

        Args:
            wind_speed: True wind speed in m/s
            angle_from_wind: Heading relative to the wind source, degrees (either sign)

        Returns:
            Boat speed through the water in m/s
        """
        relative_angle = abs((angle_from_wind + 180.0) % 360.0 - 180.0)

        if relative_angle < self.no_go_angle:  # In irons
            return 0.0

        efficiency = np.interp(
            relative_angle, self.efficiency_angles, self.efficiency_values
        )
        speed = max(wind_speed, 0.0) * self.hull_efficiency * efficiency
        return float(min(speed, self.max_speed))


PERFORMANCE_TABLE: Dict[int, BoatPerformance] = {
    0: BoatPerformance(
        name="sailing_vessel",
        course_change_rate=3.0,
        speed_change_response=60.0,
        hull_efficiency=0.4,
        max_speed=8.0,
    ),
    1: BoatPerformance(
        name="racing_sloop",
        course_change_rate=5.0,
        speed_change_response=30.0,
        hull_efficiency=0.55,
        max_speed=12.0,
        no_go_angle=38.0,
        efficiency_angles=(38.0, 50.0, 90.0, 120.0, 150.0, 180.0),
        efficiency_values=(0.5, 0.8, 1.0, 1.0, 0.85, 0.7),
    ),
    2: BoatPerformance(
        name="cruising_ketch",
        course_change_rate=2.0,
        speed_change_response=120.0,
        hull_efficiency=0.35,
        max_speed=6.5,
        no_go_angle=50.0,
        efficiency_angles=(50.0, 70.0, 100.0, 130.0, 160.0, 180.0),
        efficiency_values=(0.5, 0.8, 1.0, 0.95, 0.8, 0.7),
    ),
    3: BoatPerformance(
        name="dinghy",
        course_change_rate=10.0,
        speed_change_response=10.0,
        hull_efficiency=0.5,
        max_speed=5.0,
    ),
}


def get_performance(
    category: int, table: Mapping[int, BoatPerformance] = PERFORMANCE_TABLE
) -> BoatPerformance:
    """Look up the performance entry for a vessel category."""
    try:
        return table[category]
    except (KeyError, TypeError):
        raise UnknownCategoryError(f"Unknown vessel category: {category!r}") from None


def turn_rate(category: int) -> float:
    return get_performance(category).course_change_rate


def inertia_constant(category: int) -> float:
    return get_performance(category).speed_change_response


def polar_speed(wind_speed: float, angle_from_wind: float, category: int) -> float:
    return get_performance(category).polar_speed(wind_speed, angle_from_wind)
