from typing import Optional

import numpy as np

from ..geo import compass_diff, normalize_angle

# Courses this close to opposite have no meaningful shortest turn
OPPOSITE_COURSE_TOLERANCE = 179.0


class HeadingController:
    """Bounded-rate turn toward the desired course

    Args:
        rng: Random generator for the turn direction when the desired course is
            (nearly) opposite the current heading. Not safe to share across threads.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def update(
        self, heading: float, desired_course: float, time_step: float, turn_rate: float
    ) -> float:
        """
        Compute the heading after one tick

        Args:
            heading: Current heading in degrees
            desired_course: Target heading in degrees
            time_step: Elapsed time in seconds
            turn_rate: Maximum turn rate in degrees per second

        Returns:
            New heading in degrees, in [0, 360)
        """
        course_diff = compass_diff(heading, desired_course)
        max_turn = turn_rate * time_step

        if abs(course_diff) <= max_turn:
            return normalize_angle(desired_course)

        if -OPPOSITE_COURSE_TOLERANCE <= course_diff < 0.0:
            heading -= max_turn
        elif 0.0 < course_diff <= OPPOSITE_COURSE_TOLERANCE:
            heading += max_turn
        elif self.rng.integers(2) == 0:
            heading -= max_turn
        else:
            heading += max_turn

        return normalize_angle(heading)
