# tests/test_world.py

import math

import pytest

from rfid_sim.core.constants import RFID_LIST_TOPIC, WORLD_FRAME
from rfid_sim.core.event_bus import EventBus
from rfid_sim.core.transforms import Pose2D, TransformBuffer
from rfid_sim.sensors.tag import RfidTag
from rfid_sim.utils.errors import ValidationError
from rfid_sim.world import Robot, World


def make_world():
    bus = EventBus()
    tf = TransformBuffer()
    snapshots = []
    bus.subscribe(RFID_LIST_TOPIC, snapshots.append)
    return World(bus, tf), tf, snapshots


def test_tag_changes_publish_complete_list():
    world, _, snapshots = make_world()
    a, b = RfidTag("a", x=1.0), RfidTag("b", x=2.0)

    world.add_tag(a)
    world.add_tag(b)
    assert world.delete_tag("a")
    assert not world.delete_tag("a")

    assert snapshots == [[a], [a, b], [b]]


def test_duplicate_tag_rejected():
    world, _, _ = make_world()
    world.add_tag(RfidTag("a"))
    with pytest.raises(ValidationError):
        world.add_tag(RfidTag("a", x=5.0))


def test_robot_step_integrates_unicycle():
    robot = Robot("robot0", Pose2D(0.0, 0.0, math.pi / 2), linear_velocity=1.0, angular_velocity=0.5)
    robot.step(0.5)
    assert robot.pose.x == pytest.approx(0.0, abs=1e-12)
    assert robot.pose.y == pytest.approx(0.5)
    assert robot.pose.theta == pytest.approx(math.pi / 2 + 0.25)


def test_world_broadcasts_robot_and_sensor_frames():
    world, tf, _ = make_world()

    class FakeSensor:
        frame_id = "robot0_rfid_reader_0"

        def get_sensor_pose(self):
            return Pose2D(0.5, 0.0, 0.0)

    world.add_robot(Robot("robot0", Pose2D(1.0, 0.0, 0.0), linear_velocity=2.0), [FakeSensor()])
    world.step(0.5)

    pose, stamp = tf.lookup_transform(WORLD_FRAME, "robot0_rfid_reader_0")
    assert pose.x == pytest.approx(2.5)
    assert stamp == pytest.approx(0.5)
