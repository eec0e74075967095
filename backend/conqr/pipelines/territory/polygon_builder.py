"""
Polygon Builder
Converts a closed GPS loop into a clean polygon and a new Territory
"""
import logging
from typing import Callable, Optional, Sequence

from ...config import settings
from ...models import ClaimEvent, GPSPoint, Territory
from ...utils.coordinates import has_valid_coordinates, path_to_ring
from ...utils.ids import new_id, now_ms
from ..calculators import GeodesicCalculator
from ..tracking.loop_detector import LoopDetector
from .geometry import build_polygon, largest_fragment, measure, normalize_winding, unkink

logger = logging.getLogger(__name__)


class PolygonBuilder:
    """
    Builds claimable territory from a recorded path.

    Returns None for anything that does not enclose a valid area: open
    loops, too few usable points, polygons under the noise floor, and any
    geometry failure. Callers should surface that as "no territory claimed".
    """

    def __init__(
        self,
        loop_detector: Optional[LoopDetector] = None,
        calculator: Optional[GeodesicCalculator] = None,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = new_id,
    ):
        self.calculator = calculator or GeodesicCalculator()
        self.loop_detector = loop_detector or LoopDetector(calculator=self.calculator)
        self.clock = clock
        self.id_factory = id_factory

    def process(self, path: Sequence[GPSPoint], owner_id: str, activity_id: str) -> Optional[Territory]:
        """
        Process a recorded path into a Territory

        Args:
            path: Ordered GPS samples of the activity
            owner_id: User claiming the territory
            activity_id: Activity the path was recorded in

        Returns:
            Territory or None when the path does not enclose a valid area
        """
        closure = self.loop_detector.check(path)
        if not closure.is_closed:
            logger.debug(f"🗺️ Path not closed (gap {closure.distance:.1f} m), no territory")
            return None

        valid_points = [p for p in path if has_valid_coordinates(p)]
        if len(valid_points) < settings.MIN_LOOP_POINTS:
            logger.info(f"🗺️ Only {len(valid_points)} usable points after filtering, no territory")
            return None

        try:
            polygon = build_polygon(path_to_ring(valid_points))

            fragments = unkink(polygon)
            polygon, _ = largest_fragment(fragments, self.calculator.polygon_area)
            polygon = normalize_winding(polygon)

            measured = measure(polygon, self.calculator)
            if measured["area"] < settings.MIN_TERRITORY_AREA_M2:
                logger.info(f"🗺️ Claim rejected: area {measured['area']:.2f} m² below noise floor")
                return None

        except Exception as e:
            logger.error(f"🗺️ Invalid polygon for activity {activity_id}: {str(e)}")
            return None

        now = self.clock()
        territory = Territory(
            id=self.id_factory(),
            owner_id=owner_id,
            activity_id=activity_id,
            claimed_at=now,
            area=measured["area"],
            perimeter=measured["perimeter"],
            center=measured["center"],
            polygon=measured["polygon"],
            holes=measured["holes"],
            history=[ClaimEvent(claimed_by=owner_id, claimed_at=now, activity_id=activity_id)],
        )
        logger.info(f"🗺️ Territory {territory.id} claimed by {owner_id}: {territory.area:.1f} m²")
        return territory


_default_builder = PolygonBuilder()


def process_territory(path: Sequence[GPSPoint], owner_id: str, activity_id: str) -> Optional[Territory]:
    return _default_builder.process(path, owner_id, activity_id)
