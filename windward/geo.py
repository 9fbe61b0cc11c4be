"""Geographic positions, heading vectors and compass arithmetic."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

EARTH_RADIUS_M = 6371000.0


def normalize_angle(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    angle = float(angle) % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


def compass_diff(a: float, b: float) -> float:
    """Signed minimal rotation from heading ``a`` to heading ``b``.

    Positive values turn right (clockwise), negative values turn left.

    Returns:
        Angle in degrees in the range (-180, 180]
    """
    diff = (b - a) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff


@dataclass
class GeoVec:
    """A heading and a magnitude (speed or distance)."""

    angle: float  # degrees, 0 = North, 90 = East
    magnitude: float

    def scaled(self, factor: float) -> "GeoVec":
        return GeoVec(self.angle, self.magnitude * factor)

    def components(self) -> Tuple[float, float]:
        """Return (east, north) components"""
        angle_rad = np.radians(self.angle)
        return (
            float(self.magnitude * np.sin(angle_rad)),
            float(self.magnitude * np.cos(angle_rad)),
        )

    def __add__(self, other: "GeoVec") -> "GeoVec":
        east_a, north_a = self.components()
        east_b, north_b = other.components()
        east = east_a + east_b
        north = north_a + north_b
        return GeoVec(
            angle=normalize_angle(np.degrees(np.arctan2(east, north))),
            magnitude=float(np.hypot(east, north)),
        )


@dataclass
class GeoPos:
    """A latitude/longitude pair in degrees."""

    lat: float
    lon: float

    def copy(self) -> "GeoPos":
        return GeoPos(self.lat, self.lon)

    def advance(self, vec: GeoVec) -> None:
        """
        Move this position along a great circle

        Args:
            vec: Heading in degrees and distance in metres
        """
        if vec.magnitude == 0.0:
            return

        delta = vec.magnitude / EARTH_RADIUS_M
        theta = np.radians(vec.angle)
        lat1 = np.radians(self.lat)
        lon1 = np.radians(self.lon)

        lat2 = np.arcsin(
            np.sin(lat1) * np.cos(delta) + np.cos(lat1) * np.sin(delta) * np.cos(theta)
        )
        lon2 = lon1 + np.arctan2(
            np.sin(theta) * np.sin(delta) * np.cos(lat1),
            np.cos(delta) - np.sin(lat1) * np.sin(lat2),
        )

        self.lat = float(np.degrees(lat2))
        self.lon = float((np.degrees(lon2) + 180.0) % 360.0 - 180.0)
