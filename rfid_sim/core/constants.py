# rfid_sim/core/constants.py

WORLD_FRAME = "map_static"
DEFAULT_NAMESPACE = "robot0"
RFID_LIST_TOPIC = "stdr_server/rfid_list"
TRANSFORM_TIMEOUT = 0.2          # seconds a pose refresh may wait
DEFAULT_RFID_FREQUENCY = 10.0    # detection cycles per second
DEFAULT_RFID_MAX_RANGE = 2.0     # meters
DEFAULT_RFID_ANGLE_SPAN = 1.0    # radians, total field of view
DEFAULT_SCHEDULER_DT = 0.01      # seconds per scheduler tick
