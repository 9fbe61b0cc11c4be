"""Per-tick motion of a sailing vessel driven by wind, currents and sea-ice."""

from .config import MotionConfig, load_config
from .environment import Environment, OceanData
from .geo import GeoPos, GeoVec, compass_diff, normalize_angle
from .performance import PERFORMANCE_TABLE, BoatPerformance, UnknownCategoryError
from .simulation import VoyageSimulation
from .vessel import MotionUpdateEngine, VesselMode, VesselState, create_vessel

__all__ = [
    "MotionConfig",
    "load_config",
    "Environment",
    "OceanData",
    "GeoPos",
    "GeoVec",
    "compass_diff",
    "normalize_angle",
    "PERFORMANCE_TABLE",
    "BoatPerformance",
    "UnknownCategoryError",
    "VoyageSimulation",
    "MotionUpdateEngine",
    "VesselMode",
    "VesselState",
    "create_vessel",
]
