"""
Speed Validator
Per-sample plausibility check against the declared activity type
"""
import logging
from typing import Dict, Union

from ...models import ActivityType, GPSPoint, SpeedVerdict, parse_activity_type

logger = logging.getLogger(__name__)

# Envelopes in m/s; limits are slightly loose to tolerate GPS jitter
SPEED_LIMITS: Dict[ActivityType, Dict[str, float]] = {
    ActivityType.WALK: {"min": 0.0, "max": 7 / 3.6},
    ActivityType.RUN: {"min": 5 / 3.6, "max": 25 / 3.6},
    ActivityType.RIDE: {"min": 10 / 3.6, "max": 50 / 3.6},
}


class SpeedValidator:
    """
    Classifies a single GPS sample's reported speed.

    Pure classification: the verdict is returned to the caller, which decides
    whether to drop the point, reclassify the activity or flag the session.
    """

    def __init__(self, limits: Dict[ActivityType, Dict[str, float]] = None):
        self.limits = limits or SPEED_LIMITS

    def validate(self, point: GPSPoint, activity_type: Union[str, ActivityType]) -> SpeedVerdict:
        if point.speed is None:
            # Sensor did not report speed, nothing to judge
            return SpeedVerdict(valid=True)

        try:
            kind = parse_activity_type(activity_type)
        except ValueError as e:
            logger.warning(f"🏃 Speed check skipped: {str(e)}")
            return SpeedVerdict(valid=True)

        limit = self.limits[kind]
        if point.speed > limit["max"]:
            logger.debug(f"🏃 {point.speed:.2f} m/s exceeds {kind.value} max {limit['max']:.2f} m/s")
            if kind is ActivityType.WALK:
                return SpeedVerdict(valid=False, reason="TOO_FAST_FOR_WALK", suggested=ActivityType.RUN)
            return SpeedVerdict(valid=False, reason=f"TOO_FAST_FOR_{kind.value}", suspicious=True)

        return SpeedVerdict(valid=True)


_default_validator = SpeedValidator()


def validate_speed(point: GPSPoint, activity_type: Union[str, ActivityType]) -> SpeedVerdict:
    return _default_validator.validate(point, activity_type)
