from __future__ import annotations

import pytest

from conqr.models import GPSPoint

from ..conftest import make_point, square_path
from .path_metrics import calculate_area, calculate_average_speed, calculate_distance


def test_area_of_empty_path_is_zero() -> None:
    assert calculate_area([]) == 0


def test_area_needs_three_points() -> None:
    assert calculate_area([make_point(37.7749, -122.4194), make_point(37.7750, -122.4193)]) == 0


def test_area_of_square_loop() -> None:
    # 0.001 deg square: ~111 m tall, ~88 m wide at this latitude
    area = calculate_area(square_path(37.7749, -122.4194, 0.001))
    assert 5000 < area < 20000


def test_area_skips_invalid_points() -> None:
    path = [
        make_point(37.7749, -122.4194),
        GPSPoint(lat=float("nan"), lng=-122.4194),
        make_point(37.7750, -122.4193),
        make_point(37.7749, -122.4192),
        make_point(37.7748, -122.4193),
    ]
    assert calculate_area(path) > 0


def test_distance_of_short_path_is_zero() -> None:
    assert calculate_distance([make_point(37.7749, -122.4194)]) == 0


def test_distance_along_meridian() -> None:
    # 10 steps of 0.001 deg latitude, ~111 m each
    path = [make_point(37.7749 + i * 0.001, -122.4194) for i in range(11)]
    assert calculate_distance(path) == pytest.approx(1110, rel=0.01)


def test_distance_drops_gps_jumps_and_invalid_points() -> None:
    path = [
        make_point(37.7749, -122.4194),
        make_point(37.7759, -122.4194),          # ~111 m
        make_point(37.8759, -122.4194),          # ~11 km jump, dropped
        GPSPoint(lat=float("nan"), lng=-122.4194),
        make_point(37.8769, -122.4194),
    ]
    assert calculate_distance(path) == pytest.approx(111, rel=0.02)


def test_average_speed_ignores_missing_and_implausible() -> None:
    path = [
        make_point(37.7749, -122.4194, speed=2.0),
        make_point(37.7750, -122.4194, speed=None),
        make_point(37.7751, -122.4194, speed=4.0),
        make_point(37.7752, -122.4194, speed=150.0),
        make_point(37.7753, -122.4194, speed=-1.0),
    ]
    assert calculate_average_speed(path) == pytest.approx(3.0)


def test_average_speed_without_samples_is_zero() -> None:
    assert calculate_average_speed([make_point(0, 0, None), make_point(0, 0, None)]) == 0
