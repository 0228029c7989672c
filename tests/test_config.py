# tests/test_config.py

import json
import logging
import math

import pytest

from rfid_sim.config import RfidSensorConfig, ScenarioLoader
from rfid_sim.utils.errors import ValidationError


SCENARIO_YAML = """
name: Test room
dt: 0.05
map: {width: 100, height: 80, resolution: 0.05}
robot:
  namespace: robot3
  pose: {x: 1.0, y: 1.0, theta: 0.5}
  linear_velocity: 0.2
  rfid_sensors:
    - frame_id: rfid_reader_1
      maxRange: 3.0
      angleSpan: 2.0
      frequency: 4
      pose: {x: 0.2, y: 0.0, theta: 0.0}
tags:
  - tag_id: a
    message: hello
    pose: {x: 2.0, y: 1.0}
  - tag_id: b
    pose: {x: 0.0, y: 0.0}
"""


def test_sensor_config_accepts_description_keys():
    cfg = RfidSensorConfig.from_dict(
        {"frame_id": "rfid_reader_2", "maxRange": 4, "angleSpan": 1.5, "frequency": 2}
    )
    assert cfg.frame_id == "rfid_reader_2"
    assert cfg.max_range == 4.0
    assert cfg.angle_span == 1.5
    assert cfg.frequency == 2.0
    assert not cfg.full_circle


@pytest.mark.parametrize("data", [
    {"max_range": 0},
    {"max_range": -1.0},
    {"frequency": 0},
    {"angle_span": 0},
    {"angle_span": -0.5},
    {"max_range": "far"},
    {"max_range": float("nan")},
])
def test_sensor_config_rejects_bad_values(data):
    with pytest.raises(ValidationError):
        RfidSensorConfig.from_dict(data)


def test_oversized_span_is_clamped_to_full_turn(caplog):
    with caplog.at_level(logging.WARNING, logger="rfid_sim.config"):
        cfg = RfidSensorConfig.from_dict({"angle_span": 10.0})
    assert cfg.angle_span == 2 * math.pi
    assert cfg.full_circle
    assert "clamping" in caplog.text


def test_load_yaml_scenario(tmp_path):
    path = tmp_path / "room.yaml"
    path.write_text(SCENARIO_YAML)

    scenario = ScenarioLoader.load(str(path))

    assert scenario.name == "Test room"
    assert scenario.dt == 0.05
    assert not scenario.map_info.is_empty()
    assert scenario.robot.namespace == "robot3"
    assert scenario.robot.pose.theta == 0.5
    assert scenario.robot.linear_velocity == 0.2
    [sensor] = scenario.robot.rfid_sensors
    assert sensor.frame_id == "rfid_reader_1"
    assert sensor.pose.x == 0.2
    assert [t.tag_id for t in scenario.tags] == ["a", "b"]
    assert scenario.tags[0].message == "hello"
    assert (scenario.tags[0].x, scenario.tags[0].y) == (2.0, 1.0)


def test_load_json_scenario(tmp_path):
    path = tmp_path / "room.json"
    path.write_text(json.dumps({"name": "json room", "tags": [{"tag_id": 7, "x": 1, "y": 2}]}))

    scenario = ScenarioLoader.load(str(path))

    assert scenario.name == "json room"
    assert scenario.map_info.is_empty()
    assert scenario.tags[0].tag_id == "7"
    assert (scenario.tags[0].x, scenario.tags[0].y) == (1.0, 2.0)


def test_unsupported_extension(tmp_path):
    path = tmp_path / "room.txt"
    path.write_text("name: x")
    with pytest.raises(ValueError):
        ScenarioLoader.load(str(path))


def test_tag_without_id_rejected():
    with pytest.raises(ValidationError):
        ScenarioLoader.from_dict({"tags": [{"message": "orphan"}]})
