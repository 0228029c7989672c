# rfid_sim/core/base_sensor.py

"""Common interface for all simulated sensors."""

from rfid_sim.core.constants import DEFAULT_NAMESPACE


class BaseSensor:
    """Base class holding the map and naming shared by every sensor.

    Args:
        map_info: Environment map metadata, used as readiness gate
        name: Sensor frame id without the robot namespace
        namespace: Robot namespace, e.g. ``robot0``
    """

    def __init__(self, map_info, name, namespace=DEFAULT_NAMESPACE):
        self.map_info = map_info
        self.name = name
        self.namespace = namespace

    @property
    def frame_id(self):
        """Namespaced frame id, e.g. ``robot0_rfid_reader_0``."""
        return f"{self.namespace}_{self.name}"

    @property
    def topic(self):
        return f"{self.namespace}/{self.name}"

    def get_sensor_pose(self):
        """Fixed pose of the sensor relative to the robot."""
        raise NotImplementedError("get_sensor_pose must be implemented by subclasses")

    def update_sensor(self, now=None):
        """Run one measurement cycle."""
        raise NotImplementedError("update_sensor must be implemented by subclasses")

    def get_state(self):
        return {
            "frame_id": self.frame_id,
            "topic": self.topic,
            "map_ready": not self.map_info.is_empty(),
        }
