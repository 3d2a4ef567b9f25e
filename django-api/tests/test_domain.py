"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import UTC, datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest

from trips.domain import Activity, ActivityId, EmailAddress, TripId, TripPeriod, WebUrl
from trips.domain.errors import DomainError, ErrorCode, TripNotFoundError
from trips.domain.itinerary import group_activities_by_day

TRIP_ID = TripId(value=UUID("7b3c1a52-7d0e-4d3f-9e43-2a4f5b6c7d8e"))


def make_activity(title: str, occurs_at: datetime) -> Activity:
    return Activity(
        id=ActivityId(value=uuid4()),
        trip_id=TRIP_ID,
        title=title,
        occurs_at=occurs_at,
        created_at=occurs_at,
    )


class TestTripId:
    """Tests for TripId value object."""

    def test_from_string_valid_uuid(self):
        """TripId.from_string parses valid UUID."""
        trip_id = TripId.from_string("7b3c1a52-7d0e-4d3f-9e43-2a4f5b6c7d8e")
        assert trip_id == TRIP_ID
        assert str(trip_id) == "7b3c1a52-7d0e-4d3f-9e43-2a4f5b6c7d8e"

    def test_from_string_invalid_uuid(self):
        """TripId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            TripId.from_string("not-a-uuid")


class TestEmailAddress:
    """Tests for EmailAddress value object."""

    def test_from_string_normalizes(self):
        assert EmailAddress.from_string("  Alice@Example.COM ").value == "alice@example.com"

    @pytest.mark.parametrize("value", ["", "alice", "alice@", "@example.com"])
    def test_rejects_malformed_address(self, value):
        with pytest.raises(ValueError):
            EmailAddress(value=value)


class TestWebUrl:
    """Tests for WebUrl value object."""

    def test_accepts_https_url(self):
        assert str(WebUrl(value="https://airbnb.com/rooms/1")) == "https://airbnb.com/rooms/1"

    @pytest.mark.parametrize("value", ["airbnb", "ftp://example.com/file", ""])
    def test_rejects_invalid_url(self, value):
        with pytest.raises(ValueError):
            WebUrl(value=value)


class TestTripPeriod:
    """Tests for TripPeriod value object."""

    def test_accepts_single_instant(self):
        moment = datetime(2025, 6, 1, tzinfo=UTC)
        assert TripPeriod(starts_at=moment, ends_at=moment).contains(moment)

    def test_rejects_end_before_start(self):
        with pytest.raises(ValueError):
            TripPeriod(
                starts_at=datetime(2025, 6, 10, tzinfo=UTC),
                ends_at=datetime(2025, 6, 1, tzinfo=UTC),
            )

    def test_contains_is_inclusive(self):
        period = TripPeriod(
            starts_at=datetime(2025, 6, 1, tzinfo=UTC),
            ends_at=datetime(2025, 6, 10, tzinfo=UTC),
        )
        assert period.contains(datetime(2025, 6, 10, tzinfo=UTC))
        assert not period.contains(datetime(2025, 6, 10, 0, 0, 1, tzinfo=UTC))


class TestDomainError:
    """Tests for domain error formatting."""

    def test_str_includes_code(self):
        error = TripNotFoundError("abc")
        assert isinstance(error, DomainError)
        assert error.code is ErrorCode.TRIP_NOT_FOUND
        assert error.trip_id == "abc"
        assert str(error) == "TRIP_NOT_FOUND: trip not found"


class TestGroupActivitiesByDay:
    """Tests for grouping activities into calendar days."""

    def test_same_date_different_times_share_a_group(self):
        morning = make_activity("museum", datetime(2025, 6, 2, 9, 0, tzinfo=UTC))
        evening = make_activity("dinner", datetime(2025, 6, 2, 20, 0, tzinfo=UTC))

        days = group_activities_by_day([evening, morning], UTC)

        assert len(days) == 1
        assert days[0].date.isoformat() == "2025-06-02"
        assert [a.title for a in days[0].activities] == ["museum", "dinner"]

    def test_different_dates_are_separate_groups_in_ascending_order(self):
        later = make_activity("louvre", datetime(2025, 6, 5, 10, 0, tzinfo=UTC))
        earlier = make_activity("eiffel", datetime(2025, 6, 2, 10, 0, tzinfo=UTC))

        days = group_activities_by_day([later, earlier], UTC)

        assert [d.date.isoformat() for d in days] == ["2025-06-02", "2025-06-05"]

    def test_uses_local_calendar_date(self):
        late_utc = make_activity("late", datetime(2025, 6, 2, 23, 30, tzinfo=UTC))
        sao_paulo = timezone(timedelta(hours=-3))
        paris_summer = timezone(timedelta(hours=2))

        assert group_activities_by_day([late_utc], sao_paulo)[0].date.isoformat() == "2025-06-02"
        assert group_activities_by_day([late_utc], paris_summer)[0].date.isoformat() == "2025-06-03"

    def test_empty_input(self):
        assert group_activities_by_day([]) == []
