# tests/utils/test_math_utils.py

import math

import pytest

from rfid_sim.utils.math_utils import (
    TWO_PI, angle_in_arc, calculate_bearing, calculate_distance,
    normalize_angle
)
from rfid_sim.core.transforms import Pose2D


SAMPLE_ANGLES = [
    0.0, 0.5, -0.5, math.pi, -math.pi, 3.0, -3.0, 3.2, -3.2,
    TWO_PI, -TWO_PI, 7.0, -7.0, 100.0, -100.0, 1e6, -1e6,
    math.pi + 1e-12, -math.pi - 1e-12, 25 * math.pi, -25 * math.pi,
]


@pytest.mark.parametrize("angle", SAMPLE_ANGLES)
def test_normalize_angle_range_and_idempotence(angle):
    once = normalize_angle(angle)
    assert -math.pi < once <= math.pi
    assert normalize_angle(once) == once


def test_normalize_angle_keeps_direction():
    assert normalize_angle(math.pi) == math.pi
    assert normalize_angle(-math.pi) == math.pi
    assert normalize_angle(3 * math.pi / 2) == pytest.approx(-math.pi / 2)
    assert normalize_angle(-7.0) == pytest.approx(-7.0 + TWO_PI)
    assert math.cos(normalize_angle(1e6)) == pytest.approx(math.cos(1e6))


def test_arc_not_straddling():
    assert angle_in_arc(0.0, -0.5, 0.5)
    assert angle_in_arc(0.49, -0.5, 0.5)
    assert not angle_in_arc(0.5, -0.5, 0.5)
    assert not angle_in_arc(-0.5, -0.5, 0.5)
    assert not angle_in_arc(math.pi, -0.5, 0.5)


def test_arc_straddling_discontinuity():
    assert angle_in_arc(3.14, 3.0, -3.0)
    assert angle_in_arc(-3.14, 3.0, -3.0)
    assert angle_in_arc(math.pi, 3.0, -3.0)
    assert not angle_in_arc(0.0, 3.0, -3.0)
    assert not angle_in_arc(3.0, 3.0, -3.0)
    assert not angle_in_arc(-3.0, 3.0, -3.0)


def test_arc_with_unnormalized_bounds():
    # heading pi with a 1 rad cone, as a reader would compute it
    heading = math.pi
    low, high = heading - 0.5, heading + 0.5
    assert angle_in_arc(-math.pi + 0.1, low, high)
    assert angle_in_arc(math.pi - 0.1, low, high)
    assert not angle_in_arc(0.0, low, high)
    # many turns away from the canonical range
    assert angle_in_arc(0.1 + 10 * TWO_PI, -0.5 - 4 * TWO_PI, 0.5 + 3 * TWO_PI)


def test_arc_wider_than_half_turn():
    assert angle_in_arc(math.pi / 2, -2.0, 2.0)
    assert not angle_in_arc(math.pi, -2.0, 2.0)
    # 4 rad cone centered on pi covers everything but a band around 0
    assert angle_in_arc(1.5, math.pi - 2.0, math.pi + 2.0)
    assert angle_in_arc(-1.5, math.pi - 2.0, math.pi + 2.0)
    assert not angle_in_arc(0.0, math.pi - 2.0, math.pi + 2.0)


def test_distance_and_bearing():
    origin = Pose2D(0.0, 0.0, 0.0)
    target = Pose2D(3.0, 4.0)
    assert calculate_distance(origin, target) == pytest.approx(5.0)
    assert calculate_bearing(origin, Pose2D(5.0, 5.0)) == pytest.approx(math.pi / 4)
    assert calculate_bearing(origin, Pose2D(-1.0, 0.0)) == pytest.approx(math.pi)
