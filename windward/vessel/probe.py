from ..environment.base import WaterClassifier
from ..geo import GeoPos, GeoVec


class LandApproachProbe:
    """Look ahead along a course for water while a vessel is still on land.

    Args:
        water: Land/water classification service
        max_distance: Look-ahead range in metres
        step: Distance between sampled points in metres
    """

    def __init__(self, water: WaterClassifier, max_distance: float = 100.0, step: float = 10.0):
        self.water = water
        self.max_distance = max_distance
        self.step = step

    def is_heading_toward_water(self, pos: GeoPos, course: float) -> bool:
        """True if any point from ``pos`` out to one step past the range is water."""
        sample = pos.copy()
        step = GeoVec(angle=course, magnitude=self.step)

        distance = 0.0
        while distance <= self.max_distance + self.step:
            if self.water.is_water(sample):
                return True
            sample.advance(step)
            distance += self.step

        return False
