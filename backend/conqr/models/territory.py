from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .types import ActivityType

LngLat = Tuple[float, float]


@dataclass(frozen=True)
class GPSPoint:
    """
    One location sample as recorded by the device.

    Coordinates are WGS84 decimal degrees, timestamp is epoch milliseconds
    and speed is meters/second (None when the sensor did not report it).
    """

    lat: float
    lng: float
    timestamp: int = 0
    speed: Optional[float] = None
    accuracy: Optional[float] = None
    altitude: Optional[float] = None


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float


@dataclass
class ClaimEvent:
    """
    Entry in a territory's append-only claim log.

    ``previous_owner_id`` is only set on invasion entries.
    """

    claimed_by: str
    claimed_at: int
    activity_id: str
    previous_owner_id: Optional[str] = None


@dataclass
class Territory:
    """
    A claimed polygonal area of ground, owned by exactly one user.

    ``polygon`` is a closed ring of (lng, lat) pairs. ``holes`` holds closed
    interior rings left behind when another claim punched through the middle.
    """

    id: str
    owner_id: str
    activity_id: str
    claimed_at: int
    area: float  # square meters
    perimeter: float  # meters
    center: Coordinate
    polygon: List[LngLat]
    history: List[ClaimEvent] = field(default_factory=list)
    name: str = ""
    owner_name: Optional[str] = None
    holes: List[List[LngLat]] = field(default_factory=list)


@dataclass
class TerritoryInvasion:
    """
    Notification record for one instance of conquering.

    The ``seen`` flag belongs to the notification collaborator.
    """

    id: str
    invaded_user_id: str
    invader_user_id: str
    invaded_territory_id: str
    new_territory_id: str
    overlap_area: float
    territory_was_destroyed: bool
    created_at: int
    invader_username: Optional[str] = None
    seen: bool = False


@dataclass
class ConquerResult:
    new_territory: Territory
    modified_territories: List[Territory] = field(default_factory=list)
    deleted_territory_ids: List[str] = field(default_factory=list)
    invasions: List[TerritoryInvasion] = field(default_factory=list)
    total_conquered_area: float = 0.0


@dataclass(frozen=True)
class LoopClosure:
    is_closed: bool
    distance: float  # meters between first and last point


@dataclass(frozen=True)
class SpeedVerdict:
    valid: bool
    reason: Optional[str] = None
    suggested: Optional[ActivityType] = None
    suspicious: bool = False
