# rfid_sim/sensors/tag.py
"""RFID tag records and the reader-side tag cache."""

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class RfidTag:
    """A passive tag fixed in the world frame."""
    tag_id: str
    message: str = ""  # payload, passed through untouched
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict) -> "RfidTag":
        pose = data.get("pose", data)
        return cls(
            tag_id=str(data["tag_id"]),
            message=str(data.get("message", "")),
            x=float(pose.get("x", 0.0)),
            y=float(pose.get("y", 0.0)),
        )

    def to_dict(self) -> Dict:
        return {
            "tag_id": self.tag_id,
            "message": self.message,
            "pose": {"x": self.x, "y": self.y},
        }


class TagCache:
    """Latest complete tag snapshot received from the registry.

    Every update replaces the whole snapshot; tags missing from an update
    are gone, there is no merging.
    """

    def __init__(self):
        self._tags: Tuple[RfidTag, ...] = ()

    def replace(self, tags: Iterable[RfidTag]):
        self._tags = tuple(tags)

    @property
    def tags(self) -> Tuple[RfidTag, ...]:
        return self._tags

    def __len__(self):
        return len(self._tags)

    def __iter__(self):
        return iter(self._tags)
