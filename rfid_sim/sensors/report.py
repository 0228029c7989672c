# rfid_sim/sensors/report.py
"""Per-cycle detection output of an RFID reader."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from rfid_sim.sensors.tag import RfidTag


@dataclass(frozen=True)
class DetectionReport:
    """Tags seen by one reader on one cycle, in registry order."""
    frame_id: str       # namespaced frame, e.g. "robot0_rfid_reader_0"
    sensor_frame: str   # configured frame name, e.g. "rfid_reader_0"
    stamp: float
    tags: Tuple[RfidTag, ...] = field(default_factory=tuple)

    def tag_ids(self):
        return [tag.tag_id for tag in self.tags]

    def to_dict(self) -> Dict:
        return {
            "header": {"frame_id": self.frame_id, "stamp": self.stamp},
            "frame_id": self.sensor_frame,
            "rfid_tags": [tag.to_dict() for tag in self.tags],
        }
