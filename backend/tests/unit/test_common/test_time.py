"""
Time utilities tests
"""

from datetime import datetime, timedelta, timezone

from restapi.common.time import UTC, ensure_utc, utc_now_naive
from restapi.domain.user import UserResponse


def test_ensure_utc_naive_is_treated_as_utc():
    dt = ensure_utc(datetime(2024, 1, 2, 3, 4, 5))
    
    assert dt == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


def test_ensure_utc_converts_aware():
    plus_two = timezone(timedelta(hours=2))
    dt = ensure_utc(datetime(2024, 1, 2, 5, 0, tzinfo=plus_two))
    
    assert dt.tzinfo is UTC
    assert dt.hour == 3


def test_ensure_utc_none():
    assert ensure_utc(None) is None


def test_utc_now_naive():
    assert utc_now_naive().tzinfo is None


def test_response_timestamps_are_utc():
    naive = datetime(2024, 1, 2, 3, 4, 5)
    response = UserResponse(
        id="u1",
        username="john",
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        created_at=naive,
        updated_at=naive,
    )
    
    assert response.created_at.tzinfo is UTC
    assert response.model_dump(mode="json")["updated_at"] == "2024-01-02T03:04:05Z"
