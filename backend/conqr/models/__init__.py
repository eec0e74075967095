"""
Domain models shared by the tracking and territory pipelines.
"""
from .types import ActivityType, parse_activity_type
from .territory import (
    ClaimEvent,
    ConquerResult,
    Coordinate,
    GPSPoint,
    LngLat,
    LoopClosure,
    SpeedVerdict,
    Territory,
    TerritoryInvasion,
)

__all__ = [
    "ActivityType",
    "ClaimEvent",
    "ConquerResult",
    "Coordinate",
    "GPSPoint",
    "LngLat",
    "LoopClosure",
    "SpeedVerdict",
    "Territory",
    "TerritoryInvasion",
    "parse_activity_type",
]
