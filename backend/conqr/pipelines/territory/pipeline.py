"""
Conquer Pipeline
Recorded path -> new territory -> overlap resolution
"""
import logging
from typing import Callable, Iterable, Optional, Sequence

from ...models import ConquerResult, GPSPoint, Territory
from ...utils.ids import new_id, now_ms
from ..calculators import GeodesicCalculator
from .overlap_resolver import OverlapResolver
from .polygon_builder import PolygonBuilder

logger = logging.getLogger(__name__)


class ConquerPipeline:
    """
    Runs a finished activity through claim building and conquering.

    Both stages share one calculator, clock and id factory so a single run
    stamps every record with consistent values.
    """

    def __init__(
        self,
        calculator: Optional[GeodesicCalculator] = None,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = new_id,
    ):
        self.calculator = calculator or GeodesicCalculator()
        self.builder = PolygonBuilder(calculator=self.calculator, clock=clock, id_factory=id_factory)
        self.resolver = OverlapResolver(calculator=self.calculator, clock=clock, id_factory=id_factory)

    def claim(
        self,
        path: Sequence[GPSPoint],
        owner_id: str,
        activity_id: str,
        existing_territories: Iterable[Territory],
        invader_username: Optional[str] = None,
    ) -> Optional[ConquerResult]:
        """
        Claim the area enclosed by ``path`` against a snapshot of the map

        Returns:
            ConquerResult, or None when the activity did not enclose a valid area
        """
        territory = self.builder.process(path, owner_id, activity_id)
        if territory is None:
            logger.info(f"🏁 Activity {activity_id} did not enclose a claimable area")
            return None

        if invader_username:
            territory.owner_name = invader_username

        return self.resolver.resolve(territory, existing_territories, invader_username)
