# rfid_sim/utils/math_utils.py
"""Planar math helpers: angle wrapping, arc membership, range and bearing."""

import math
import logging

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

def is_valid_number(value):
    """Check if a number is finite and not NaN.

    Args:
        value: Number to check

    Returns:
        bool: True if value is a valid finite number
    """
    return not (math.isnan(value) or math.isinf(value))

def normalize_angle(angle):
    """Normalize an angle to the (-pi, pi] range.

    Works for any magnitude; fmod is exact so repeated calls return the
    same value.

    Args:
        angle: Angle in radians

    Returns:
        float: Normalized angle
    """
    angle = math.fmod(angle, TWO_PI)
    if angle > math.pi:
        angle -= TWO_PI
    elif angle <= -math.pi:
        angle += TWO_PI
    return angle

def angle_in_arc(target, min_angle, max_angle):
    """Check whether an angle lies strictly inside an arc.

    The arc is walked counter-clockwise from ``min_angle`` to ``max_angle``.
    Neither bound has to be normalized. When the normalized arc crosses the
    +-pi discontinuity the upper bound is moved up one full turn and the
    target is tried both as-is and shifted by a full turn.

    Args:
        target: Angle to test in radians
        min_angle: Lower (clockwise) edge of the arc
        max_angle: Upper (counter-clockwise) edge of the arc

    Returns:
        bool: True if ``min_angle < target < max_angle`` around the circle.
        Targets exactly on an edge are outside.
    """
    target = normalize_angle(target)
    low = normalize_angle(min_angle)
    high = normalize_angle(max_angle)

    if low <= high:
        return low < target < high

    # Arc straddles +-pi
    high += TWO_PI
    if low < target < high:
        return True
    target += TWO_PI
    return low < target < high

def calculate_distance(pos1, pos2):
    """Calculate planar distance between two positions.

    Args:
        pos1: First position, any object with ``x`` and ``y``
        pos2: Second position, any object with ``x`` and ``y``

    Returns:
        float: Euclidean distance
    """
    return math.hypot(pos2.x - pos1.x, pos2.y - pos1.y)

def calculate_bearing(from_pos, to_pos):
    """Calculate the world-frame bearing from one position to another.

    Args:
        from_pos: Observer position with ``x`` and ``y``
        to_pos: Target position with ``x`` and ``y``

    Returns:
        float: Angle of the vector ``to_pos - from_pos`` in radians, (-pi, pi]
    """
    return math.atan2(to_pos.y - from_pos.y, to_pos.x - from_pos.x)
