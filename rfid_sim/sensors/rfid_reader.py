# rfid_sim/sensors/rfid_reader.py
"""RFID reader: reports the tags inside its range and field of view."""

import logging
import time
from typing import Iterable, List

from rfid_sim.core.base_sensor import BaseSensor
from rfid_sim.core.constants import (
    DEFAULT_NAMESPACE, RFID_LIST_TOPIC, TRANSFORM_TIMEOUT, WORLD_FRAME
)
from rfid_sim.sensors.pose_cache import PoseCache
from rfid_sim.sensors.report import DetectionReport
from rfid_sim.sensors.tag import RfidTag, TagCache
from rfid_sim.utils.errors import LogAndContinue, TransformError
from rfid_sim.utils.math_utils import (
    TWO_PI, angle_in_arc, calculate_bearing, calculate_distance
)

logger = logging.getLogger(__name__)


def detect_tags(pose, tags: Iterable[RfidTag], max_range: float, angle_span: float) -> List[RfidTag]:
    """Select the tags a reader at ``pose`` can see.

    A tag is seen when its distance is at most ``max_range`` and its bearing
    lies strictly inside the cone of ``angle_span`` centered on the heading.
    A span of a full turn or more sees every tag in range.

    Args:
        pose: Reader world pose (x, y, theta)
        tags: Candidate tags, in registry order
        max_range: Maximum detection distance in meters
        angle_span: Total field of view in radians

    Returns:
        list: Detected tags in the order given, unmodified
    """
    min_angle = pose.theta - angle_span / 2.0
    max_angle = pose.theta + angle_span / 2.0
    full_circle = angle_span >= TWO_PI

    detected = []
    for tag in tags:
        # Range gate
        if calculate_distance(pose, tag) > max_range:
            continue

        # Angular gate
        if not full_circle:
            bearing = calculate_bearing(pose, tag)
            if not angle_in_arc(bearing, min_angle, max_angle):
                continue

        detected.append(tag)

    return detected


class RfidReader(BaseSensor):
    """Simulated RFID reader mounted on a robot.

    The reader keeps two caches: its last known world pose and the last tag
    snapshot received from the registry. ``update_transform`` refreshes the
    pose, ``receive_tags`` replaces the snapshot, and ``update_sensor`` runs
    one detection cycle against both and hands the report to the sink.

    Args:
        map_info: Environment map metadata; an empty map suspends detection
        config: ``RfidSensorConfig`` describing the reader
        transforms: Frame tree providing the reader's world pose
        namespace: Robot namespace
        event_bus: Optional bus; used for tag updates and default publishing
        sink: Optional callable receiving each report, overrides publishing
        clock: Callable returning the time used to stamp reports
        error_policy: What to do with failed pose lookups
    """

    def __init__(self, map_info, config, transforms, namespace=DEFAULT_NAMESPACE,
                 event_bus=None, sink=None, clock=None, error_policy=None):
        super().__init__(map_info, config.frame_id, namespace)
        self.config = config
        self.transforms = transforms
        self.event_bus = event_bus
        self.clock = clock or time.time
        self.error_policy = error_policy or LogAndContinue(logging.DEBUG, logger)

        self.pose_cache = PoseCache()
        self.tag_cache = TagCache()
        self.last_report = None
        self.reports_published = 0

        if sink is not None:
            self.sink = sink
        elif event_bus is not None:
            self.sink = self._publish
        else:
            self.sink = None

        if event_bus is not None:
            event_bus.subscribe(RFID_LIST_TOPIC, self.receive_tags)

    @property
    def ready(self):
        return self.pose_cache.ready

    def get_sensor_pose(self):
        return self.config.pose

    def register(self, scheduler):
        """Attach the reader's timers to a scheduler.

        The pose is refreshed at twice the detection rate so the pose used by
        a cycle is at most half a period old.
        """
        period = 1.0 / self.config.frequency
        scheduler.add_periodic(f"{self.frame_id}/transform", period / 2.0, self.update_transform)
        scheduler.add_periodic(f"{self.frame_id}/measure", period, self.update_sensor)

    def update_transform(self, now=None):
        """Refresh the cached world pose from the frame tree.

        Returns:
            bool: True if the pose was refreshed
        """
        try:
            pose, stamp = self.transforms.lookup_transform(
                WORLD_FRAME, self.frame_id, TRANSFORM_TIMEOUT
            )
        except TransformError as e:
            self.error_policy.handle(e, f"{self.frame_id} transform lookup failed")
            return False

        self.pose_cache.update(pose, stamp)
        return True

    def receive_tags(self, tags):
        """Replace the tag snapshot with the registry's complete list."""
        self.tag_cache.replace(tags)

    def update_sensor(self, now=None):
        """Run one detection cycle.

        Args:
            now: Report timestamp, defaults to the reader's clock

        Returns:
            DetectionReport or None when the reader is not ready
        """
        if not self.pose_cache.ready:
            return None

        if self.map_info.is_empty():
            logger.debug(f"{self.frame_id}: map has no extent, skipping cycle")
            return None

        detected = detect_tags(
            self.pose_cache.pose,
            self.tag_cache.tags,
            self.config.max_range,
            self.config.angle_span,
        )

        report = DetectionReport(
            frame_id=self.frame_id,
            sensor_frame=self.config.frame_id,
            stamp=self.clock() if now is None else now,
            tags=tuple(detected),
        )
        self.last_report = report
        self.reports_published += 1
        if self.sink is not None:
            self.sink(report)
        return report

    def _publish(self, report):
        self.event_bus.publish(self.topic, report, source=self.frame_id)

    def get_state(self):
        state = super().get_state()
        pose = self.pose_cache.pose
        state.update({
            "ready": self.ready,
            "pose": pose.to_dict() if pose else None,
            "pose_stamp": self.pose_cache.stamp,
            "tags_known": len(self.tag_cache),
            "reports_published": self.reports_published,
            "max_range": self.config.max_range,
            "angle_span": self.config.angle_span,
            "frequency": self.config.frequency,
        })
        return state
