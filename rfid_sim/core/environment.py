# rfid_sim/core/environment.py
"""Occupancy map metadata used as the sensors' readiness gate."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from rfid_sim.core.transforms import Pose2D


@dataclass(frozen=True)
class MapInfo:
    """Extent of the environment map.

    Only the size matters to sensors: a map with zero width or height means
    the environment has not been loaded yet.
    """
    width: int = 0       # cells
    height: int = 0      # cells
    resolution: float = 0.05  # meters per cell
    origin: Pose2D = field(default_factory=Pose2D)

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "MapInfo":
        data = data or {}
        return cls(
            width=int(data.get("width", 0)),
            height=int(data.get("height", 0)),
            resolution=float(data.get("resolution", 0.05)),
            origin=Pose2D.from_dict(data.get("origin")),
        )

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0
