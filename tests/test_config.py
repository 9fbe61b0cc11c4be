import json

import pytest

from windward.config import MotionConfig, load_config


def test_defaults():
    config = load_config(None)
    assert config.polar_guard_deg == 0.0001
    assert config.move_to_water_distance == 100.0
    assert config.probe_step == 10.0
    assert config.move_to_water_speed == 0.5
    assert config.sails_down_wind_fraction == 0.1


def test_load_json(tmp_path):
    path = tmp_path / "motion.json"
    path.write_text(json.dumps({"motion": {"probe_step": 25.0, "move_to_water_speed": 1.0}}))

    config = load_config(path)

    assert config.probe_step == 25.0
    assert config.move_to_water_speed == 1.0
    assert config.move_to_water_distance == 100.0


def test_round_trip_dict():
    config = MotionConfig(sails_down_wind_fraction=0.2)
    assert MotionConfig.from_dict(config.to_dict()) == config


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_rejects_non_json_suffix(tmp_path):
    path = tmp_path / "motion.yaml"
    path.write_text("motion: {}")
    with pytest.raises(ValueError):
        load_config(path)


def test_rejects_non_object_root(tmp_path):
    path = tmp_path / "motion.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        load_config(path)


def test_rejects_unknown_keys():
    with pytest.raises(TypeError):
        MotionConfig.from_dict({"motion": {"warp_speed": 9}})


@pytest.mark.parametrize(
    "kwargs",
    [{"probe_step": 0.0}, {"move_to_water_distance": -1.0}, {"polar_guard_deg": 0.0}],
)
def test_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        MotionConfig(**kwargs)
