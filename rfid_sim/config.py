# rfid_sim/config.py
"""Sensor descriptions and scenario loading from YAML or JSON files."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List

import yaml

from rfid_sim.core.constants import (
    DEFAULT_NAMESPACE, DEFAULT_RFID_ANGLE_SPAN, DEFAULT_RFID_FREQUENCY,
    DEFAULT_RFID_MAX_RANGE, DEFAULT_SCHEDULER_DT
)
from rfid_sim.core.environment import MapInfo
from rfid_sim.core.transforms import Pose2D
from rfid_sim.sensors.tag import RfidTag
from rfid_sim.utils.errors import ValidationError
from rfid_sim.utils.math_utils import TWO_PI, is_valid_number

logger = logging.getLogger(__name__)


def _number(data, *keys, default):
    for key in keys:
        if key in data:
            value = data[key]
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ValidationError(f"{key} must be a number (got {value!r})")
            if not is_valid_number(value):
                raise ValidationError(f"{key} must be finite (got {value})")
            return value
    return default


@dataclass(frozen=True)
class RfidSensorConfig:
    """Description of one RFID reader, fixed for the reader's lifetime."""
    frame_id: str = "rfid_reader_0"
    max_range: float = DEFAULT_RFID_MAX_RANGE   # meters
    angle_span: float = DEFAULT_RFID_ANGLE_SPAN  # radians, total field of view
    frequency: float = DEFAULT_RFID_FREQUENCY   # Hz
    pose: Pose2D = field(default_factory=Pose2D)  # offset from the robot frame

    @property
    def full_circle(self) -> bool:
        return self.angle_span >= TWO_PI

    @classmethod
    def from_dict(cls, data: Dict) -> "RfidSensorConfig":
        """Build and validate a sensor description.

        Accepts both snake_case keys and the ``maxRange``/``angleSpan``
        spelling used by robot description files.

        Raises:
            ValidationError: For a non-positive range, frequency or span
        """
        data = data or {}
        max_range = _number(data, "max_range", "maxRange", default=DEFAULT_RFID_MAX_RANGE)
        angle_span = _number(data, "angle_span", "angleSpan", default=DEFAULT_RFID_ANGLE_SPAN)
        frequency = _number(data, "frequency", default=DEFAULT_RFID_FREQUENCY)

        if max_range <= 0:
            raise ValidationError(f"max_range must be positive (got {max_range})")
        if frequency <= 0:
            raise ValidationError(f"frequency must be positive (got {frequency})")
        if angle_span <= 0:
            raise ValidationError(f"angle_span must be positive (got {angle_span})")
        if angle_span > TWO_PI:
            logger.warning(
                f"angle_span {angle_span:.3f} exceeds a full turn, clamping to {TWO_PI:.3f}"
            )
            angle_span = TWO_PI

        return cls(
            frame_id=str(data.get("frame_id", "rfid_reader_0")),
            max_range=max_range,
            angle_span=angle_span,
            frequency=frequency,
            pose=Pose2D.from_dict(data.get("pose")),
        )


@dataclass
class RobotConfig:
    namespace: str = DEFAULT_NAMESPACE
    pose: Pose2D = field(default_factory=Pose2D)
    linear_velocity: float = 0.0   # m/s along the heading
    angular_velocity: float = 0.0  # rad/s
    rfid_sensors: List[RfidSensorConfig] = field(default_factory=list)


@dataclass
class Scenario:
    name: str = "Untitled Scenario"
    description: str = ""
    dt: float = DEFAULT_SCHEDULER_DT
    map_info: MapInfo = field(default_factory=MapInfo)
    robot: RobotConfig = field(default_factory=RobotConfig)
    tags: List[RfidTag] = field(default_factory=list)


class ScenarioLoader:
    """Loads scenarios from YAML or JSON files."""

    @staticmethod
    def load(filepath: str) -> Scenario:
        """Load a scenario from file.

        Args:
            filepath: Path to scenario file (.yaml, .yml or .json)

        Returns:
            Scenario: Map, robot with its RFID readers, and tags
        """
        _, ext = os.path.splitext(filepath)

        with open(filepath, 'r', encoding='utf-8') as f:
            if ext in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif ext == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {ext}")

        scenario = ScenarioLoader.from_dict(data or {})
        logger.info(
            f"Loaded scenario: {scenario.name} "
            f"({len(scenario.tags)} tags, {len(scenario.robot.rfid_sensors)} readers)"
        )
        return scenario

    @staticmethod
    def from_dict(data: Dict) -> Scenario:
        dt = _number(data, "dt", default=DEFAULT_SCHEDULER_DT)
        if dt <= 0:
            raise ValidationError(f"dt must be positive (got {dt})")
        return Scenario(
            name=data.get("name", "Untitled Scenario"),
            description=data.get("description", ""),
            dt=dt,
            map_info=MapInfo.from_dict(data.get("map")),
            robot=ScenarioLoader._parse_robot(data.get("robot", {})),
            tags=ScenarioLoader._parse_tags(data.get("tags", [])),
        )

    @staticmethod
    def _parse_robot(robot_data: Dict) -> RobotConfig:
        robot_data = robot_data or {}
        return RobotConfig(
            namespace=robot_data.get("namespace", DEFAULT_NAMESPACE),
            pose=Pose2D.from_dict(robot_data.get("pose")),
            linear_velocity=_number(robot_data, "linear_velocity", default=0.0),
            angular_velocity=_number(robot_data, "angular_velocity", default=0.0),
            rfid_sensors=[
                RfidSensorConfig.from_dict(sensor)
                for sensor in robot_data.get("rfid_sensors", [])
            ],
        )

    @staticmethod
    def _parse_tags(tags_data: List[Dict]) -> List[RfidTag]:
        tags = []
        for tag_data in tags_data:
            if "tag_id" not in tag_data:
                raise ValidationError(f"Tag definition without tag_id: {tag_data}")
            tags.append(RfidTag.from_dict(tag_data))
        return tags
