"""
Territory Geometry
Shapely helpers for turning rings into clean polygons and measuring them
"""
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from shapely.geometry import LineString, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient
from shapely.ops import polygonize, unary_union

from ...models import Coordinate, LngLat
from ...utils.coordinates import close_ring
from ..calculators import GeodesicCalculator

logger = logging.getLogger(__name__)


class TerritoryGeometryError(ValueError):
    """Raised when a ring cannot be turned into a usable polygon"""
    pass


def build_polygon(ring: Sequence[Sequence[float]], holes: Optional[Sequence[Sequence[Sequence[float]]]] = None) -> Polygon:
    """Close the exterior (and any holes) and build a shapely polygon."""
    exterior = close_ring(ring)
    if len(exterior) < 4:
        raise TerritoryGeometryError(f"Ring needs at least 3 vertices, got {max(len(exterior) - 1, 0)}")
    interiors = [close_ring(h) for h in (holes or []) if len(h) >= 3]
    return Polygon(exterior, interiors)


def unkink(polygon: Polygon) -> List[Polygon]:
    """
    Split a self-intersecting polygon into simple fragments.

    A valid polygon comes back as the only fragment. Otherwise the exterior
    is noded at every crossing and polygonized; fragment order is the order
    GEOS emits the faces, which is stable for a given input.
    """
    if polygon.is_valid:
        return [polygon]

    noded = unary_union(LineString(polygon.exterior.coords))
    fragments = [p for p in polygonize(noded) if not p.is_empty and p.area > 0]
    logger.debug(f"✂️ Unkinked self-intersecting ring into {len(fragments)} fragments")
    return fragments


def polygon_parts(geometry: BaseGeometry) -> List[Polygon]:
    """Polygons contained in a boolean-op result, in order, ignoring lines/points."""
    if geometry is None or geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        return [geometry]
    parts: List[Polygon] = []
    for part in getattr(geometry, "geoms", ()):
        parts.extend(polygon_parts(part))
    return parts


def largest_fragment(fragments: Sequence[Polygon], area_of: Callable[[Polygon], float]) -> Tuple[Polygon, float]:
    """
    Fragment with the maximum area; on ties the first one encountered wins.

    Returns the fragment and its area.
    """
    if not fragments:
        raise TerritoryGeometryError("No polygonal fragment to choose from")

    best = fragments[0]
    best_area = area_of(best)
    for fragment in fragments[1:]:
        fragment_area = area_of(fragment)
        if fragment_area > best_area:
            best, best_area = fragment, fragment_area
    return best, best_area


def normalize_winding(polygon: Polygon) -> Polygon:
    """Exterior counter-clockwise, holes clockwise."""
    return orient(polygon, sign=1.0)


def ring_coords(ring) -> List[LngLat]:
    return [(float(x), float(y)) for x, y in ring.coords]


def measure(polygon: Polygon, calculator: GeodesicCalculator) -> dict:
    """
    Area, perimeter, centroid and rings of an already-normalized polygon.

    The centroid is shapely's area-weighted centroid in (lng, lat); the
    perimeter is the geodesic length of the exterior ring only.
    """
    exterior = ring_coords(polygon.exterior)
    centroid = polygon.centroid
    return {
        "area": calculator.polygon_area(polygon),
        "perimeter": calculator.ring_length(exterior),
        "center": Coordinate(lat=centroid.y, lng=centroid.x),
        "polygon": exterior,
        "holes": [ring_coords(hole) for hole in polygon.interiors],
    }
