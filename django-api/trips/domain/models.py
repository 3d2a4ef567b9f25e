"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in trips/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from trips.domain.value_objects import (
    ActivityId,
    LinkId,
    ParticipantId,
    TripId,
    TripPeriod,
)


@dataclass(frozen=True)
class Trip:
    """Domain representation of a Trip."""

    id: TripId
    destination: str
    starts_at: datetime
    ends_at: datetime
    owner_name: str
    owner_email: str
    is_confirmed: bool
    created_at: datetime

    @property
    def period(self) -> TripPeriod:
        return TripPeriod(starts_at=self.starts_at, ends_at=self.ends_at)


@dataclass(frozen=True)
class Participant:
    """Domain representation of a Participant invited to a trip."""

    id: ParticipantId
    trip_id: TripId
    email: str
    is_confirmed: bool
    created_at: datetime


@dataclass(frozen=True)
class Activity:
    """Domain representation of an Activity."""

    id: ActivityId
    trip_id: TripId
    title: str
    occurs_at: datetime
    created_at: datetime


@dataclass(frozen=True)
class Link:
    """Domain representation of an external Link attached to a trip."""

    id: LinkId
    trip_id: TripId
    title: str
    url: str
    created_at: datetime


@dataclass(frozen=True)
class ActivityDay:
    """Activities that fall on one calendar date."""

    date: date
    activities: tuple[Activity, ...] = ()
