# rfid_sim/world.py
"""
Stand-in for the simulator server: owns the tag registry and the robot,
and keeps the frame tree up to date for the sensors mounted on it.
"""

import logging
import math

from rfid_sim.core.constants import RFID_LIST_TOPIC, WORLD_FRAME
from rfid_sim.core.transforms import Pose2D
from rfid_sim.utils.errors import ValidationError
from rfid_sim.utils.math_utils import normalize_angle

logger = logging.getLogger(__name__)


class Robot:
    """Unicycle robot driven at constant linear and angular velocity."""

    def __init__(self, namespace, pose=None, linear_velocity=0.0, angular_velocity=0.0):
        self.namespace = namespace
        self.pose = pose or Pose2D()
        self.linear_velocity = linear_velocity
        self.angular_velocity = angular_velocity

    def step(self, dt):
        theta = self.pose.theta
        self.pose = Pose2D(
            x=self.pose.x + self.linear_velocity * math.cos(theta) * dt,
            y=self.pose.y + self.linear_velocity * math.sin(theta) * dt,
            theta=normalize_angle(theta + self.angular_velocity * dt),
        )
        return self.pose


class World:
    """
    Tag registry plus robots, publishing into an event bus and a frame tree.

    Args:
        event_bus (EventBus): Bus the tag list is published on
        transforms (TransformBuffer): Frame tree receiving robot poses
    """

    def __init__(self, event_bus, transforms):
        self.event_bus = event_bus
        self.transforms = transforms
        self.tags = {}
        self.robots = {}
        self.time = 0.0

    # ----- Tag registry -----
    def add_tag(self, tag):
        """
        Add a tag and publish the complete list

        Raises:
            ValidationError: If a tag with the same id already exists
        """
        if tag.tag_id in self.tags:
            raise ValidationError(f"Tag '{tag.tag_id}' already exists")
        self.tags[tag.tag_id] = tag
        self.publish_tags()
        return tag

    def delete_tag(self, tag_id):
        """
        Remove a tag and publish the complete list

        Returns:
            bool: True if the tag existed
        """
        if tag_id not in self.tags:
            return False
        del self.tags[tag_id]
        self.publish_tags()
        return True

    def publish_tags(self):
        self.event_bus.publish(RFID_LIST_TOPIC, list(self.tags.values()), source="world")

    # ----- Robots and frames -----
    def add_robot(self, robot, sensors=()):
        """
        Add a robot and mount sensors on it

        The sensor offsets are published once as static transforms under the
        robot frame; the robot frame itself is published on every step.
        """
        self.robots[robot.namespace] = robot
        for sensor in sensors:
            self.transforms.set_transform(
                robot.namespace, sensor.frame_id, sensor.get_sensor_pose(), static=True
            )
        self._broadcast(robot)
        logger.info(f"Robot {robot.namespace} added with {len(sensors)} sensors")
        return robot

    def step(self, dt):
        """Advance every robot by ``dt`` seconds and publish their poses."""
        self.time += dt
        for robot in self.robots.values():
            robot.step(dt)
            self._broadcast(robot)

    def _broadcast(self, robot):
        self.transforms.set_transform(WORLD_FRAME, robot.namespace, robot.pose, stamp=self.time)
