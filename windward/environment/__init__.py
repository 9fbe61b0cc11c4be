"""External data services: land/water, wind, ocean currents and sea-ice."""

from .base import Environment, OceanData, OceanProvider, WaterClassifier, WindProvider
from .land import LandChecker
from .ocean import OceanDataProcessor
from .wind import ERA5DataCollector, WindDataProcessor

__all__ = [
    "Environment",
    "OceanData",
    "OceanProvider",
    "WaterClassifier",
    "WindProvider",
    "LandChecker",
    "OceanDataProcessor",
    "ERA5DataCollector",
    "WindDataProcessor",
]
