# rfid_sim/core/transforms.py
"""Planar poses and a small frame tree for looking up sensor world poses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from rfid_sim.utils.errors import TransformError
from rfid_sim.utils.math_utils import normalize_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pose2D:
    """Position and heading in some parent frame (meters, radians)."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "Pose2D":
        data = data or {}
        return cls(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            theta=float(data.get("theta", data.get("yaw", 0.0))),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "theta": self.theta}

    def rotation(self) -> np.ndarray:
        c, s = np.cos(self.theta), np.sin(self.theta)
        return np.array([[c, -s], [s, c]])

    def compose(self, child: "Pose2D") -> "Pose2D":
        """Express ``child`` (given in this pose's frame) in the parent frame."""
        offset = self.rotation() @ np.array([child.x, child.y])
        return Pose2D(
            x=float(self.x + offset[0]),
            y=float(self.y + offset[1]),
            theta=normalize_angle(self.theta + child.theta),
        )


@dataclass(frozen=True)
class StampedTransform:
    parent: str
    child: str
    pose: Pose2D
    stamp: float
    static: bool = False


class TransformBuffer:
    """Latest parent->child transform for every frame.

    Each child frame has exactly one parent. Lookups walk from the source
    frame up the parent chain until the target frame is reached. The buffer
    is fed from the same cooperative loop that reads it, so a lookup never
    waits: it succeeds from what is stored or raises ``TransformError``.
    """

    def __init__(self):
        self._transforms: Dict[str, StampedTransform] = {}

    def set_transform(self, parent: str, child: str, pose: Pose2D,
                      stamp: float = 0.0, static: bool = False):
        if parent == child:
            raise TransformError(f"Frame '{child}' cannot be its own parent")
        self._transforms[child] = StampedTransform(parent, child, pose, stamp, static)

    def can_transform(self, target_frame: str, source_frame: str) -> bool:
        try:
            self._chain(target_frame, source_frame)
        except TransformError:
            return False
        return True

    def lookup_transform(self, target_frame: str, source_frame: str,
                         timeout: float = 0.0) -> Tuple[Pose2D, float]:
        """Pose of ``source_frame`` expressed in ``target_frame``.

        Args:
            target_frame: Frame the result is expressed in
            source_frame: Frame whose pose is wanted
            timeout: Upper bound on waiting; the buffer never blocks so this
                only documents the caller's budget

        Returns:
            tuple: (Pose2D, stamp) where stamp is the oldest non-static link

        Raises:
            TransformError: If either frame is unknown or not connected
        """
        chain = self._chain(target_frame, source_frame)
        pose = Pose2D()
        stamps = []
        # chain runs source -> target; compose from the target end down
        for link in reversed(chain):
            pose = pose.compose(link.pose)
            if not link.static:
                stamps.append(link.stamp)
        return pose, (min(stamps) if stamps else 0.0)

    def _chain(self, target_frame, source_frame):
        chain = []
        frame = source_frame
        seen = set()
        while frame != target_frame:
            link = self._transforms.get(frame)
            if link is None:
                raise TransformError(
                    f"No transform path from '{source_frame}' to '{target_frame}'"
                )
            if frame in seen:
                raise TransformError(f"Frame tree has a loop at '{frame}'")
            seen.add(frame)
            chain.append(link)
            frame = link.parent
        return chain
