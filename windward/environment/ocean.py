import logging
from datetime import datetime
from typing import Optional

import numpy as np
import xarray as xr

from ..geo import GeoPos, GeoVec, normalize_angle
from .base import OceanData

logger = logging.getLogger(__name__)


class OceanDataProcessor:
    """Surface current and sea-ice lookup from a gridded dataset.

    Parameters:
        file_path: Path to a NetCDF (or GRIB) file with the ocean fields
        dataset: Already opened dataset (used instead of ``file_path``)
        u_var: Eastward current variable in m/s
        v_var: Northward current variable in m/s
        ice_var: Sea-ice concentration variable, or None when the data has none
        ice_scale: Multiplier converting ``ice_var`` to percent (100 for fractions)
    """

    def __init__(
        self,
        file_path: Optional[str] = None,
        dataset: Optional[xr.Dataset] = None,
        u_var: str = "uo",
        v_var: str = "vo",
        ice_var: Optional[str] = "siconc",
        ice_scale: float = 100.0,
    ):
        if dataset is None:
            if file_path is None:
                raise ValueError("Either file_path or dataset is required")
            engine = "cfgrib" if file_path.endswith((".grib", ".grb", ".grib2")) else None
            dataset = xr.open_dataset(file_path, engine=engine)

        missing = [name for name in (u_var, v_var) if name not in dataset.data_vars]
        if missing:
            raise ValueError(f"Ocean dataset is missing variables: {missing}")
        if ice_var is not None and ice_var not in dataset.data_vars:
            logger.warning(f"Ice variable {ice_var!r} not found, assuming open water")
            ice_var = None

        self.file_path = file_path
        self.ds = dataset
        self.u_var = u_var
        self.v_var = v_var
        self.ice_var = ice_var
        self.ice_scale = ice_scale
        self.times = self.ds.time.values if "time" in self.ds.dims else None

        self.current_time = None

    @classmethod
    def from_dataset(cls, dataset: xr.Dataset, **kwargs) -> "OceanDataProcessor":
        return cls(dataset=dataset, **kwargs)

    def _sample(self, name: str, latitude: float, longitude: float) -> float:
        data = self.ds[name]
        if self.times is not None:
            time = self.current_time
            if time is None:
                time_idx = 0
            else:
                if isinstance(time, datetime):
                    time = np.datetime64(time)
                time_idx = np.abs(self.times - time).argmin()
            data = data.isel(time=time_idx)
        return float(data.interp(latitude=latitude, longitude=longitude, method="linear"))

    def get_ocean_data(self, pos: GeoPos) -> OceanData:
        u = self._sample(self.u_var, pos.lat, pos.lon)
        v = self._sample(self.v_var, pos.lat, pos.lon)
        if not (np.isfinite(u) and np.isfinite(v)):
            return OceanData.unavailable()

        ice = 0.0
        if self.ice_var is not None:
            ice = self._sample(self.ice_var, pos.lat, pos.lon) * self.ice_scale
            # Ice fields are usually masked (NaN) over open water
            ice = float(np.clip(ice, 0.0, 100.0)) if np.isfinite(ice) else 0.0

        current = GeoVec(
            angle=normalize_angle(np.degrees(np.arctan2(u, v))),
            magnitude=float(np.hypot(u, v)),
        )
        return OceanData(valid=True, current=current, ice=ice)
