"""
Geodesic Calculator Module
Ellipsoidal distances, lengths and areas on WGS84
"""
import logging
from typing import Any, Dict, Sequence, Tuple

from geographiclib.geodesic import Geodesic
from pyproj import Geod
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient

logger = logging.getLogger(__name__)


class GeodesicCalculator:
    """
    Geodesic measurements for GPS-scale geometry.

    Point-to-point distance uses GeographicLib's inverse solution (Karney);
    polygon area and ring length use pyproj's Geod, which runs the same
    algorithm over whole shapely geometries. Coordinates are (lng, lat).
    """

    def __init__(self):
        """Initialize calculators with the WGS84 ellipsoid (same as GPS)"""
        self.geod = Geodesic.WGS84
        self.ellipsoid = Geod(ellps="WGS84")

    def calculate_inverse(
        self,
        start_lat: float,
        start_lng: float,
        end_lat: float,
        end_lng: float
    ) -> Dict[str, Any]:
        """
        Calculate distance and bearing between two points using inverse geodesic

        Args:
            start_lat, start_lng: Starting point coordinates
            end_lat, end_lng: Ending point coordinates

        Returns:
            dict: Distance, bearing and status; ``success`` is False when the
            solver rejects the input
        """
        try:
            result = self.geod.Inverse(
                lat1=start_lat,
                lon1=start_lng,
                lat2=end_lat,
                lon2=end_lng
            )

            return {
                "success": True,
                "distance_meters": result['s12'],
                "initial_bearing_degrees": result['azi1'],
                "final_bearing_degrees": result['azi2'],
                "method": "geographiclib_inverse",
            }

        except Exception as e:
            logger.error(f"🧭 Inverse geodesic calculation error: {str(e)}")
            return {
                "success": False,
                "error": f"Inverse calculation failed: {str(e)}",
                "method": "inverse_error"
            }

    def polygon_area(self, polygon: Polygon) -> float:
        """Geodesic area in square meters, holes subtracted."""
        area, _ = self.ellipsoid.geometry_area_perimeter(orient(polygon, sign=1.0))
        return abs(area)

    def geometry_area(self, geometry: BaseGeometry) -> float:
        """
        Geodesic area of any polygonal geometry (Polygon, MultiPolygon or a
        collection); non-polygonal parts contribute nothing.
        """
        if geometry.is_empty:
            return 0.0
        if isinstance(geometry, Polygon):
            return self.polygon_area(geometry)
        parts = getattr(geometry, "geoms", ())
        return sum(self.geometry_area(part) for part in parts)

    def ring_length(self, ring: Sequence[Tuple[float, float]]) -> float:
        """Geodesic length of a closed (lng, lat) ring in meters."""
        lngs = [c[0] for c in ring]
        lats = [c[1] for c in ring]
        return self.ellipsoid.line_length(lngs, lats)
