# rfid_sim/sensors/pose_cache.py

from typing import Optional

from rfid_sim.core.transforms import Pose2D


class PoseCache:
    """Most recent world pose of a sensor and whether one was ever received."""

    def __init__(self):
        self._pose: Optional[Pose2D] = None
        self.stamp = 0.0

    @property
    def ready(self) -> bool:
        return self._pose is not None

    @property
    def pose(self) -> Optional[Pose2D]:
        return self._pose

    def update(self, pose: Pose2D, stamp: float = 0.0):
        self._pose = pose
        self.stamp = stamp
