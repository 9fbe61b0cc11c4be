"""Configuration model for vessel motion."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class MotionConfig:
    polar_guard_deg: float = 0.0001
    move_to_water_distance: float = 100.0
    probe_step: float = 10.0
    move_to_water_speed: float = 0.5
    sails_down_wind_fraction: float = 0.1

    def __post_init__(self) -> None:
        if self.probe_step <= 0:
            raise ValueError("probe_step must be positive")
        if self.move_to_water_distance < 0:
            raise ValueError("move_to_water_distance must be non-negative")
        if not 0 < self.polar_guard_deg < 90:
            raise ValueError("polar_guard_deg must be between 0 and 90 degrees")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MotionConfig":
        return cls(**data.get("motion", data))

    def to_dict(self) -> dict[str, Any]:
        return {"motion": asdict(self)}


def load_config(path: str | Path | None) -> MotionConfig:
    if path is None:
        return MotionConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path.suffix.lower() != ".json":
        raise ValueError("Only JSON config files are supported")

    with config_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a JSON object")
    return MotionConfig.from_dict(raw)
