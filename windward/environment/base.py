"""Interfaces to the external data services consulted by the motion engine."""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..geo import GeoPos, GeoVec


@dataclass
class OceanData:
    """Ocean surface conditions at a position

    Attributes:
        valid: False when no data is available for the location
        current: Surface current, heading the water flows toward and speed in m/s
        ice: Sea-ice cover in percent (0-100)
    """

    valid: bool
    current: GeoVec = field(default_factory=lambda: GeoVec(0.0, 0.0))
    ice: float = 0.0

    @classmethod
    def unavailable(cls) -> "OceanData":
        return cls(valid=False)


@runtime_checkable
class WaterClassifier(Protocol):
    def is_water(self, pos: GeoPos) -> bool: ...


@runtime_checkable
class WindProvider(Protocol):
    def get_wind(self, pos: GeoPos) -> GeoVec: ...


@runtime_checkable
class OceanProvider(Protocol):
    def get_ocean_data(self, pos: GeoPos) -> OceanData: ...


@dataclass
class Environment:
    """The services a vessel needs to advance one tick."""

    water: WaterClassifier
    wind: WindProvider
    ocean: OceanProvider
