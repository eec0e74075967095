from __future__ import annotations

from enum import Enum


class ActivityType(str, Enum):
    """
    Declared activity type for a recording session.
    """

    WALK = "WALK"
    RUN = "RUN"
    RIDE = "RIDE"


def parse_activity_type(value: str | ActivityType) -> ActivityType:
    if isinstance(value, ActivityType):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unknown activity type: {value!r}")
    norm = value.strip().upper()
    if norm in ActivityType.__members__:
        return ActivityType[norm]
    raise ValueError(f"Unknown activity type: {value!r}")
