"""
Overlap Resolver
Adjudicates a new claim against existing territories of other players
"""
import logging
from dataclasses import replace
from typing import Callable, Iterable, Optional

from ...config import settings
from ...models import ClaimEvent, ConquerResult, Territory, TerritoryInvasion
from ...utils.ids import new_id, now_ms
from ..calculators import GeodesicCalculator
from .geometry import build_polygon, largest_fragment, measure, normalize_winding, polygon_parts

logger = logging.getLogger(__name__)


class OverlapResolver:
    """
    Computes what a new territory takes from everyone else's.

    Each existing territory is compared independently against the original
    new polygon; conquering is not chained through earlier results. A
    territory that is entirely covered is deleted. A partially covered one
    shrinks to its largest remaining fragment but keeps its owner: the
    invader is only recorded in the claim history.

    The caller's territories are never mutated; modified territories are
    returned as copies.
    """

    def __init__(
        self,
        calculator: Optional[GeodesicCalculator] = None,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = new_id,
    ):
        self.calculator = calculator or GeodesicCalculator()
        self.clock = clock
        self.id_factory = id_factory

    def resolve(
        self,
        new_territory: Territory,
        existing_territories: Iterable[Territory],
        invader_username: Optional[str] = None,
    ) -> ConquerResult:
        """
        Resolve overlaps between a new territory and a snapshot of existing ones

        Args:
            new_territory: Freshly built territory; returned unchanged
            existing_territories: Territories currently on the map
            invader_username: Display name stored on invasion records

        Returns:
            ConquerResult with modified copies, deleted ids and invasions
        """
        result = ConquerResult(new_territory=new_territory)

        if not new_territory.polygon or len(new_territory.polygon) < 3:
            return result

        try:
            new_polygon = build_polygon(new_territory.polygon, new_territory.holes)
        except Exception as e:
            logger.error(f"⚔️ Cannot build polygon for new territory {new_territory.id}: {str(e)}")
            return result

        now = self.clock()
        rivals = [t for t in existing_territories if t.owner_id != new_territory.owner_id]

        for existing in rivals:
            if not existing.polygon or len(existing.polygon) < 3:
                continue

            try:
                self._resolve_one(new_territory, new_polygon, existing, invader_username, now, result)
            except Exception as e:
                logger.error(f"⚔️ Overlap check failed for territory {existing.id}: {str(e)}")
                continue

        result.total_conquered_area = sum(invasion.overlap_area for invasion in result.invasions)

        if result.invasions:
            logger.info(
                f"⚔️ Territory {new_territory.id} invaded {len(result.invasions)} territories "
                f"({len(result.deleted_territory_ids)} destroyed, {result.total_conquered_area:.1f} m² taken)"
            )
        return result

    def _resolve_one(self, new_territory, new_polygon, existing, invader_username, now, result):
        existing_polygon = build_polygon(existing.polygon, existing.holes)

        intersection = new_polygon.intersection(existing_polygon)
        if intersection.is_empty:
            return
        overlap_area = self.calculator.geometry_area(intersection)
        if overlap_area < settings.OVERLAP_NOISE_FLOOR_M2:
            logger.debug(f"⚔️ Ignoring {overlap_area:.3f} m² overlap with {existing.id}")
            return

        remnants = polygon_parts(existing_polygon.difference(new_polygon))

        if not remnants:
            result.deleted_territory_ids.append(existing.id)
            result.invasions.append(
                self._invasion(new_territory, existing, invader_username, existing.area, True, now)
            )
            return

        remnant, _ = largest_fragment(remnants, self.calculator.polygon_area)
        measured = measure(normalize_winding(remnant), self.calculator)

        modified = replace(
            existing,
            area=measured["area"],
            perimeter=measured["perimeter"],
            center=measured["center"],
            polygon=measured["polygon"],
            holes=measured["holes"],
            history=list(existing.history) + [
                ClaimEvent(
                    claimed_by=new_territory.owner_id,
                    claimed_at=now,
                    activity_id=new_territory.activity_id,
                    previous_owner_id=existing.owner_id,
                )
            ],
        )
        result.modified_territories.append(modified)
        result.invasions.append(
            self._invasion(new_territory, existing, invader_username, overlap_area, False, now)
        )

    def _invasion(self, new_territory, existing, invader_username, overlap_area, destroyed, now):
        return TerritoryInvasion(
            id=self.id_factory(),
            invaded_user_id=existing.owner_id,
            invader_user_id=new_territory.owner_id,
            invader_username=invader_username,
            invaded_territory_id=existing.id,
            new_territory_id=new_territory.id,
            overlap_area=overlap_area,
            territory_was_destroyed=destroyed,
            created_at=now,
        )


_default_resolver = OverlapResolver()


def resolve_overlaps(
    new_territory: Territory,
    existing_territories: Iterable[Territory],
    invader_username: Optional[str] = None,
) -> ConquerResult:
    return _default_resolver.resolve(new_territory, existing_territories, invader_username)
