import calendar
import logging
import os
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple, Union

import cdsapi
import numpy as np
import xarray as xr

from ..geo import GeoPos, GeoVec, normalize_angle

logger = logging.getLogger(__name__)

ERA5_WIND_VARIABLES = ["10m_u_component_of_wind", "10m_v_component_of_wind"]
ERA5_SEA_ICE_VARIABLE = "sea_ice_cover"


class ERA5DataCollector:
    """Collect wind and sea-ice fields from the ERA5 reanalysis."""

    def __init__(self):
        try:
            self.c = cdsapi.Client()
        except Exception as e:
            logger.error(f"Failed to initialize CDS API client: {str(e)}")
            raise ConnectionError(
                "Could not connect to ERA5 database. Check ~/.cdsapirc"
            ) from e

    def _generate_date_lists(
        self, start_date: str, end_date: str
    ) -> Tuple[List[str], List[str], List[str]]:
        """Generate lists of years, months, and days for the date range.

        Parameters:
            start_date: Start date in the format YYYY-MM-DD
            end_date: End date in the format YYYY-MM-DD

        Returns:
            Tuple[List[str], List[str], List[str]]: Lists of years, months, and days
        """
        start = datetime.strptime(start_date, "%Y-%m-%d")
        end = datetime.strptime(end_date, "%Y-%m-%d")

        years = [str(year) for year in range(start.year, end.year + 1)]

        months = set()
        current = start.replace(day=1)
        while current <= end:
            months.add(f"{current.month:02d}")
            current = (current + timedelta(days=32)).replace(day=1)
        months = sorted(months)

        # ERA5 requests are a cartesian product, so ask for every day any month has
        max_day = max(calendar.monthrange(end.year, int(m))[1] for m in months)
        days = [f"{day:02d}" for day in range(1, max_day + 1)]

        return years, months, days

    def fetch_environment_data(
        self,
        north: float,
        south: float,
        east: float,
        west: float,
        start_date: str,
        end_date: str,
        include_sea_ice: bool = True,
        output_dir: str = "wind_data",
    ) -> Tuple[bool, Union[xr.Dataset, None], Union[str, None]]:
        """Fetch marine wind (and sea-ice cover) from ERA5 for a rectangular region.

        Parameters:
            north: Northern boundary latitude in degrees
            south: Southern boundary latitude in degrees
            east: Eastern boundary longitude in degrees
            west: Western boundary longitude in degrees
            start_date: Start date in the format YYYY-MM-DD
            end_date: End date in the format YYYY-MM-DD
            include_sea_ice: Also request the sea-ice cover fraction
            output_dir: Directory to save the fetched data

        Returns:
            Success status, fetched dataset and the GRIB file path
        """
        try:
            self._validate_area(north, south, east, west)
            self._validate_dates(start_date, end_date)
        except ValueError as e:
            logger.error(f"Input validation failed: {str(e)}")
            return False, None, None

        os.makedirs(output_dir, exist_ok=True)
        output_path = os.path.join(
            output_dir,
            f"{start_date}_{end_date}_{north}_{south}_{east}_{west}_ERA5_data.grib",
        )

        variables = list(ERA5_WIND_VARIABLES)
        if include_sea_ice:
            variables.append(ERA5_SEA_ICE_VARIABLE)

        years, months, days = self._generate_date_lists(start_date, end_date)
        request_params = {
            "format": "grib",
            "product_type": "reanalysis",
            "variable": variables,
            "year": years,
            "month": months,
            "day": days,
            "time": [f"{hour:02d}:00" for hour in range(24)],
            "area": [north, west, south, east],
        }

        try:
            logger.info(
                f"Requesting ERA5 marine data for area: "
                f"N:{north}, S:{south}, E:{east}, W:{west}"
            )
            self.c.retrieve(
                "reanalysis-era5-single-levels", request_params, output_path
            )
            dataset = xr.open_dataset(output_path, engine="cfgrib")
        except Exception:
            logger.exception("Error retrieving ERA5 data")
            return False, None, None

        logger.info("Successfully retrieved and loaded ERA5 marine data")
        return True, dataset, output_path

    def _validate_area(
        self, north: float, south: float, east: float, west: float
    ) -> None:
        """Validate bounding box edges for an ERA5 area request."""
        edges = [
            ("north", north, 90.0),
            ("south", south, 90.0),
            ("east", east, 180.0),
            ("west", west, 180.0),
        ]
        for name, value, limit in edges:
            if abs(value) > limit:
                raise ValueError(
                    f"{name.capitalize()} edge {value} is outside +/-{limit:g} degrees"
                )

        if north <= south:
            raise ValueError("North latitude must be greater than south latitude")

    def _validate_dates(self, start_date: str, end_date: str) -> None:
        """Validate date formats and ranges."""
        parsed = []
        for date in [start_date, end_date]:
            try:
                parsed.append(datetime.strptime(date, "%Y-%m-%d"))
            except ValueError as e:
                raise ValueError(f"Invalid date format. Use YYYY-MM-DD: {str(e)}")

        start, end = parsed
        for value in parsed:
            if not (1940 <= value.year <= datetime.now().year):
                raise ValueError(f"Year must be between 1940 and present: {value.year}")
        if end < start:
            raise ValueError("End date must not be before start date")


class WindDataProcessor:
    """Wind field lookup from gridded u/v components.

    Space is interpolated linearly; time uses the nearest record.
    Directions are returned as the compass bearing the wind blows from.
    """

    def __init__(
        self,
        file_path: Optional[str] = None,
        dataset: Optional[xr.Dataset] = None,
        u_var: Optional[str] = None,
        v_var: Optional[str] = None,
    ):
        """Initialize wind data processor.

        Args:
            file_path: Path to the GRIB file containing wind data
            dataset: Already opened dataset (used instead of ``file_path``)
            u_var: Name of the eastward wind variable (default "u10" or first variable)
            v_var: Name of the northward wind variable (default "v10" or second variable)
        """
        if dataset is None:
            if file_path is None:
                raise ValueError("Either file_path or dataset is required")
            dataset = xr.open_dataset(file_path, engine="cfgrib")

        self.file_path = file_path
        self.ds = dataset

        data_vars = list(self.ds.data_vars)
        self.u10 = u_var or ("u10" if "u10" in data_vars else data_vars[0])
        self.v10 = v_var or ("v10" if "v10" in data_vars else data_vars[1])

        self.times = self.ds.time.values if "time" in self.ds.dims else None
        self.latitudes = self.ds.latitude.values
        self.longitudes = self.ds.longitude.values

        # Simulation clock, advanced by the voyage driver
        self.current_time = None

    @classmethod
    def from_dataset(cls, dataset: xr.Dataset, **kwargs) -> "WindDataProcessor":
        return cls(dataset=dataset, **kwargs)

    def _select_time(self, data: xr.DataArray, time) -> xr.DataArray:
        if self.times is None:
            return data
        if time is None:
            time_idx = 0
        else:
            if isinstance(time, datetime):
                time = np.datetime64(time)
            time_idx = np.abs(self.times - time).argmin()
        return data.isel(time=time_idx)

    def get_wind_at_position(
        self, latitude: float, longitude: float, time: datetime = None
    ) -> Tuple[float, float]:
        """Get interpolated wind speed (m/s) and source direction at a position and time."""
        u_wind = float(
            self._select_time(self.ds[self.u10], time).interp(
                latitude=latitude, longitude=longitude, method="linear"
            )
        )
        v_wind = float(
            self._select_time(self.ds[self.v10], time).interp(
                latitude=latitude, longitude=longitude, method="linear"
            )
        )

        if not (np.isfinite(u_wind) and np.isfinite(v_wind)):
            logger.debug(f"No wind data at ({latitude}, {longitude}), assuming calm")
            return 0.0, 0.0

        speed = float(np.hypot(u_wind, v_wind))
        # (u, v) points downwind, the source bearing is the reciprocal
        direction = normalize_angle(np.degrees(np.arctan2(-u_wind, -v_wind)))

        return speed, direction

    def get_wind(self, pos: GeoPos) -> GeoVec:
        speed, direction = self.get_wind_at_position(
            pos.lat, pos.lon, self.current_time
        )
        return GeoVec(angle=direction, magnitude=speed)

    def get_metadata(self) -> Dict[str, Any]:
        """Get metadata about the wind dataset."""
        return {
            "shape": self.ds[self.u10].shape,
            "times": [] if self.times is None else self.times.tolist(),
            "latitudes": self.latitudes.tolist(),
            "longitudes": self.longitudes.tolist(),
        }


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    file_path = "wind_data/2024-01-01_2024-01-31_50.0_40.0_-5.0_-15.0_ERA5_data.grib"
    wind_data = WindDataProcessor(file_path)
    print(wind_data.get_metadata())
    print(wind_data.get_wind(GeoPos(45.0, -10.0)))
