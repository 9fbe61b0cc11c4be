from ..environment.base import OceanData
from ..geo import GeoVec, compass_diff
from ..performance import BoatPerformance


def ice_speed_factor(ocean: OceanData) -> float:
    """Speed multiplier for the local sea-ice cover; 1 when there is no data."""
    return (1.0 - ocean.ice / 100.0) if ocean.valid else 1.0


class SpeedModel:
    """Wind-driven target speed approached through a first-order lag.

    ``new = (tau * old + dt * target) / (tau + dt)``, so a larger inertia
    constant ``tau`` means slower acceleration and long steps converge on the
    target regardless of ``tau``.
    """

    def target_speed(
        self,
        wind: GeoVec,
        heading: float,
        performance: BoatPerformance,
        ocean: OceanData,
    ) -> float:
        angle_from_wind = compass_diff(wind.angle, heading)
        return performance.polar_speed(wind.magnitude, angle_from_wind) * ice_speed_factor(ocean)

    def update(
        self,
        speed: float,
        heading: float,
        wind: GeoVec,
        time_step: float,
        performance: BoatPerformance,
        ocean: OceanData,
    ) -> float:
        target = self.target_speed(wind, heading, performance, ocean)
        tau = performance.speed_change_response
        return (tau * speed + time_step * target) / (tau + time_step)
