"""
Loop Detector
Decides whether a recorded path closes on itself and can be claimed
"""
import logging
import math
from typing import Optional, Sequence

from ...config import settings
from ...models import GPSPoint, LoopClosure
from ...utils.coordinates import has_valid_coordinates
from ..calculators import GeodesicCalculator

logger = logging.getLogger(__name__)

_NOT_CLOSED = LoopClosure(is_closed=False, distance=math.inf)


class LoopDetector:
    """
    Loop closure check: enough points, and the last point within
    ``LOOP_CLOSURE_METERS`` of the first.
    """

    def __init__(
        self,
        calculator: Optional[GeodesicCalculator] = None,
        min_points: int = settings.MIN_LOOP_POINTS,
        max_gap_meters: float = settings.LOOP_CLOSURE_METERS,
    ):
        self.calculator = calculator or GeodesicCalculator()
        self.min_points = min_points
        self.max_gap_meters = max_gap_meters

    def check(self, path: Sequence[GPSPoint]) -> LoopClosure:
        try:
            if path is None or len(path) < self.min_points:
                return _NOT_CLOSED

            start, end = path[0], path[-1]
            if not (has_valid_coordinates(start) and has_valid_coordinates(end)):
                return _NOT_CLOSED

            inverse = self.calculator.calculate_inverse(start.lat, start.lng, end.lat, end.lng)
            if not inverse["success"]:
                return _NOT_CLOSED

            distance = inverse["distance_meters"]
            return LoopClosure(is_closed=distance <= self.max_gap_meters, distance=distance)

        except Exception as e:
            logger.error(f"🔁 Loop closure check failed: {str(e)}")
            return _NOT_CLOSED


_default_detector = LoopDetector()


def check_loop_closure(path: Sequence[GPSPoint]) -> LoopClosure:
    return _default_detector.check(path)
