import math
from typing import Any, Iterable, List, Sequence, Tuple


def is_valid_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def has_valid_coordinates(point: Any) -> bool:
    """True when the point carries finite numeric lat/lng."""
    if point is None:
        return False
    return is_valid_number(getattr(point, "lat", None)) and is_valid_number(getattr(point, "lng", None))


def close_ring(coords: Sequence[Sequence[float]]) -> List[Tuple[float, float]]:
    """Copy coordinates as (x, y) tuples, appending the first if the ring is open."""
    ring = [(float(c[0]), float(c[1])) for c in coords]
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])
    return ring


def path_to_ring(path: Iterable[Any]) -> List[Tuple[float, float]]:
    """Closed (lng, lat) ring from the valid points of a GPS path."""
    return close_ring([(p.lng, p.lat) for p in path if has_valid_coordinates(p)])
