from datetime import datetime, timedelta

import pytest

from session_auth.app.services.expiry import (
    calculate_expiry,
    is_valid_duration,
    parse_duration,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("30s", timedelta(seconds=30)),
        ("15m", timedelta(minutes=15)),
        ("12h", timedelta(hours=12)),
        ("7d", timedelta(days=7)),
        ("0s", timedelta(0)),
    ],
)
def test_parse_duration_units(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "7", "d7", "7w", "1.5h", " 7d", "7d ", "-1d", None])
def test_parse_duration_malformed_falls_back_to_seven_days(value):
    assert parse_duration(value) == timedelta(days=7)


def test_is_valid_duration():
    assert is_valid_duration("15m")
    assert not is_valid_duration("fifteen minutes")
    assert not is_valid_duration(None)


def test_calculate_expiry_is_relative_to_now():
    now = datetime(2024, 1, 1, 12, 0, 0)
    assert calculate_expiry("1h", now) == datetime(2024, 1, 1, 13, 0, 0)
    assert calculate_expiry("bogus", now) == datetime(2024, 1, 8, 12, 0, 0)
