"""Vessel state and per-tick motion."""

from .engine import MotionUpdateEngine
from .heading import HeadingController
from .probe import LandApproachProbe
from .speed import SpeedModel, ice_speed_factor
from .state import VesselMode, VesselState, create_vessel

__all__ = [
    "MotionUpdateEngine",
    "HeadingController",
    "LandApproachProbe",
    "SpeedModel",
    "ice_speed_factor",
    "VesselMode",
    "VesselState",
    "create_vessel",
]
