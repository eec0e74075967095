"""
Conqr Territory Engine
Turns closed GPS loops into claimed territories and resolves conquering
between overlapping claims.
"""
from .models import (
    ActivityType,
    ClaimEvent,
    ConquerResult,
    Coordinate,
    GPSPoint,
    LoopClosure,
    SpeedVerdict,
    Territory,
    TerritoryInvasion,
)
from .pipelines.tracking import check_loop_closure, validate_speed
from .pipelines.territory import ConquerPipeline, process_territory, resolve_overlaps

__all__ = [
    "ActivityType",
    "ClaimEvent",
    "ConquerPipeline",
    "ConquerResult",
    "Coordinate",
    "GPSPoint",
    "LoopClosure",
    "SpeedVerdict",
    "Territory",
    "TerritoryInvasion",
    "check_loop_closure",
    "process_territory",
    "resolve_overlaps",
    "validate_speed",
]
