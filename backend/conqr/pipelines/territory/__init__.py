"""
Territory Module
Polygon building and conquering for claimed territories
"""
from .geometry import TerritoryGeometryError
from .polygon_builder import PolygonBuilder, process_territory
from .overlap_resolver import OverlapResolver, resolve_overlaps
from .pipeline import ConquerPipeline

__all__ = [
    "ConquerPipeline",
    "OverlapResolver",
    "PolygonBuilder",
    "TerritoryGeometryError",
    "process_territory",
    "resolve_overlaps",
]
