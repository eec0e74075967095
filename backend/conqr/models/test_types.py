from __future__ import annotations

import pytest

from .types import ActivityType, parse_activity_type


def test_parse_activity_type_enum_passthrough() -> None:
    assert parse_activity_type(ActivityType.RIDE) is ActivityType.RIDE


@pytest.mark.parametrize(
    "value, expected",
    [
        ("WALK", ActivityType.WALK),
        ("run", ActivityType.RUN),
        (" Ride ", ActivityType.RIDE),
    ],
)
def test_parse_activity_type_variants(value: str, expected: ActivityType) -> None:
    assert parse_activity_type(value) is expected


@pytest.mark.parametrize("value", ["swim", "", None, 3])
def test_parse_activity_type_unknown_raises(value) -> None:
    with pytest.raises(ValueError):
        parse_activity_type(value)
