import logging
import os
from typing import Iterable, Optional

import cartopy.feature as cfeature
import geopandas as gpd
from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry

from ..geo import GeoPos

logger = logging.getLogger(__name__)


class LandChecker:
    """Land/water classification from Natural Earth land polygons.

    Attributes:
        land_geometries (list): List of land geometries
        scale (str): The scale of the land feature. Options: '10m', '50m', '110m'
        data_dir (str): Directory to store/load the Natural Earth data
    """

    def __init__(
        self,
        scale: str = "110m",
        data_dir: str = "geo_data",
        land_geometries: Optional[Iterable[BaseGeometry]] = None,
    ):
        """Initialize the LandChecker with a specific scale.

        Args:
            scale (str): The scale of the land feature. Options: '10m', '50m', '110m'
            data_dir (str): Directory to store/load the Natural Earth data
            land_geometries: Use these polygons instead of Natural Earth data
        """
        self.scale = scale
        self.data_dir = data_dir

        if land_geometries is not None:
            self.shapefile_path = None
            self.land_geometries = list(land_geometries)
            return

        os.makedirs(data_dir, exist_ok=True)
        self.shapefile_path = os.path.join(data_dir, f"ne_{scale}_land.shp")

        if not os.path.exists(self.shapefile_path):
            self._download_data(scale)

        land = gpd.read_file(self.shapefile_path)
        self.land_geometries = list(land.geometry)
        logger.info(
            f"Loaded {len(self.land_geometries)} land polygons from {self.shapefile_path}"
        )

    @classmethod
    def from_geometries(cls, geometries: Iterable[BaseGeometry]) -> "LandChecker":
        """Build a checker from in-memory polygons in (lon, lat) coordinates."""
        return cls(land_geometries=geometries)

    def _download_data(self, scale):
        """Download the Natural Earth data and save locally."""
        logger.info(f"Downloading Natural Earth {scale} land polygons")
        land = cfeature.NaturalEarthFeature(
            category="physical", name="land", scale=scale
        )
        gpd.GeoDataFrame(crs="WGS84", geometry=list(land.geometries())).to_file(
            self.shapefile_path
        )

    def is_land(self, lon: float, lat: float) -> bool:
        """Check if a point is on land.

        Args:
            lon (float): Longitude
            lat (float): Latitude

        Returns:
            bool: True if the point is on land, False otherwise
        """
        point = Point(lon, lat)
        return any(point.within(geom) for geom in self.land_geometries)

    def is_water(self, pos: GeoPos) -> bool:
        return not self.is_land(pos.lon, pos.lat)
