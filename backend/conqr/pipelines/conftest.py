from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

import pytest

from conqr.models import ClaimEvent, GPSPoint, Territory
from conqr.pipelines.calculators import GeodesicCalculator
from conqr.pipelines.territory.geometry import build_polygon, measure, normalize_winding

CENTER_LAT = 37.77
CENTER_LNG = -122.42


def make_square(c_lng: float, c_lat: float, half_size: float) -> List[Tuple[float, float]]:
    """Closed (lng, lat) square ring centered on the given point."""
    return [
        (c_lng - half_size, c_lat - half_size),
        (c_lng + half_size, c_lat - half_size),
        (c_lng + half_size, c_lat + half_size),
        (c_lng - half_size, c_lat + half_size),
        (c_lng - half_size, c_lat - half_size),
    ]


def make_point(lat: float, lng: float, speed: float | None = 1.5) -> GPSPoint:
    return GPSPoint(lat=lat, lng=lng, timestamp=1_700_000_000_000, speed=speed, accuracy=10.0, altitude=0.0)


def trace(corners: Sequence[Tuple[float, float]], per_side: int = 5) -> List[GPSPoint]:
    """GPS path walking the (lat, lng) corners in order and returning to the first."""
    path: List[GPSPoint] = []
    for i, (lat, lng) in enumerate(corners):
        next_lat, next_lng = corners[(i + 1) % len(corners)]
        for step in range(per_side):
            t = step / per_side
            path.append(make_point(lat + t * (next_lat - lat), lng + t * (next_lng - lng)))
    path.append(make_point(*corners[0]))
    return path


def square_path(center_lat: float, center_lng: float, size: float = 0.001) -> List[GPSPoint]:
    """20-point closed square loop plus the closing sample (21 points)."""
    half = size / 2
    return trace([
        (center_lat - half, center_lng - half),
        (center_lat - half, center_lng + half),
        (center_lat + half, center_lng + half),
        (center_lat + half, center_lng - half),
    ])


@pytest.fixture
def calculator() -> GeodesicCalculator:
    return GeodesicCalculator()


@pytest.fixture
def make_territory(calculator: GeodesicCalculator) -> Callable[..., Territory]:
    def _make(territory_id: str, owner_id: str, ring, **overrides) -> Territory:
        measured = measure(normalize_winding(build_polygon(ring)), calculator)
        fields = dict(
            id=territory_id,
            owner_id=owner_id,
            activity_id=f"activity-{territory_id}",
            claimed_at=1_700_000_000_000,
            area=measured["area"],
            perimeter=measured["perimeter"],
            center=measured["center"],
            polygon=list(ring),
            history=[ClaimEvent(claimed_by=owner_id, claimed_at=1_700_000_000_000, activity_id=f"activity-{territory_id}")],
        )
        fields.update(overrides)
        return Territory(**fields)

    return _make
