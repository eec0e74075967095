from __future__ import annotations

import math

from conqr.models import GPSPoint

from ..conftest import make_point, square_path
from .loop_detector import LoopDetector, check_loop_closure


def test_empty_path_is_not_closed() -> None:
    closure = check_loop_closure([])
    assert closure.is_closed is False
    assert closure.distance == math.inf


def test_short_path_is_not_closed() -> None:
    path = [make_point(37.7749, -122.4194), make_point(37.7750, -122.4193), make_point(37.7751, -122.4192)]
    assert check_loop_closure(path).is_closed is False


def test_square_loop_is_closed() -> None:
    closure = check_loop_closure(square_path(37.7749, -122.4194, 0.001))
    assert closure.is_closed is True
    assert closure.distance < 200


def test_open_line_is_not_closed() -> None:
    path = [make_point(37.7749 + i * 0.001, -122.4194) for i in range(15)]
    closure = check_loop_closure(path)
    assert closure.is_closed is False
    assert closure.distance > 200


def test_gap_just_inside_threshold_is_closed() -> None:
    # ~0.0015 deg of latitude is roughly 167 m
    path = [make_point(37.7749, -122.4194 + i * 0.0001) for i in range(10)]
    path.append(make_point(37.7749 + 0.0015, -122.4194))
    closure = check_loop_closure(path)
    assert closure.is_closed is True
    assert 150 < closure.distance < 200


def test_nan_endpoint_is_not_closed() -> None:
    path = [GPSPoint(lat=float("nan"), lng=-122.4194)]
    path += [make_point(37.7749, -122.4194) for _ in range(10)]
    closure = check_loop_closure(path)
    assert closure.is_closed is False
    assert closure.distance == math.inf


def test_non_numeric_endpoint_is_not_closed() -> None:
    path = [make_point(37.7749, -122.4194) for _ in range(10)]
    path.append(GPSPoint(lat="37.7749", lng=-122.4194))
    assert check_loop_closure(path).is_closed is False


def test_custom_threshold() -> None:
    detector = LoopDetector(max_gap_meters=10.0)
    path = [make_point(37.7749, -122.4194) for _ in range(10)]
    path.append(make_point(37.7751, -122.4194))  # ~22 m away
    assert detector.check(path).is_closed is False
