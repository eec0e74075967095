"""
Path Metrics
Distance, average speed and enclosed area of a recorded GPS path
"""
import logging
from typing import Optional, Sequence

from shapely.geometry import Polygon

from ...config import settings
from ...models import GPSPoint
from ...utils.coordinates import has_valid_coordinates, is_valid_number, path_to_ring
from ..calculators import GeodesicCalculator

logger = logging.getLogger(__name__)


class PathMetrics:
    """
    Summary measurements over a raw path. Invalid samples are skipped, never
    raised on.
    """

    def __init__(self, calculator: Optional[GeodesicCalculator] = None):
        self.calculator = calculator or GeodesicCalculator()

    def calculate_distance(self, path: Sequence[GPSPoint]) -> float:
        """
        Total distance in meters along consecutive valid points.

        Segments of zero length or longer than ``MAX_SEGMENT_METERS`` are
        dropped; a jump that large between two samples is a GPS glitch.
        """
        if not path or len(path) < 2:
            return 0.0

        total = 0.0
        for prev, curr in zip(path, path[1:]):
            if not (has_valid_coordinates(prev) and has_valid_coordinates(curr)):
                continue

            inverse = self.calculator.calculate_inverse(prev.lat, prev.lng, curr.lat, curr.lng)
            if not inverse["success"]:
                continue

            distance = inverse["distance_meters"]
            if 0 < distance < settings.MAX_SEGMENT_METERS:
                total += distance

        return total

    def calculate_average_speed(self, path: Sequence[GPSPoint]) -> float:
        """Mean reported speed (m/s), ignoring missing and implausible values."""
        if not path or len(path) < 2:
            return 0.0

        speeds = [
            p.speed for p in path
            if p is not None and is_valid_number(p.speed) and 0 <= p.speed < settings.MAX_PLAUSIBLE_SPEED_MS
        ]
        if not speeds:
            return 0.0
        return sum(speeds) / len(speeds)

    def calculate_area(self, path: Sequence[GPSPoint]) -> float:
        """
        Geodesic area (m²) enclosed by the raw path, closed if needed.

        No self-intersection cleanup happens here; use the polygon builder for
        claimable territory.
        """
        ring = path_to_ring(path or [])
        if len(ring) < 4:
            return 0.0

        try:
            return self.calculator.polygon_area(Polygon(ring))
        except Exception as e:
            logger.warning(f"📐 Path area calculation failed: {str(e)}")
            return 0.0


_default_metrics = PathMetrics()


def calculate_distance(path: Sequence[GPSPoint]) -> float:
    return _default_metrics.calculate_distance(path)


def calculate_average_speed(path: Sequence[GPSPoint]) -> float:
    return _default_metrics.calculate_average_speed(path)


def calculate_area(path: Sequence[GPSPoint]) -> float:
    return _default_metrics.calculate_area(path)
