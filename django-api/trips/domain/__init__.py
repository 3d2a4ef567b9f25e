from trips.domain.models import Activity, ActivityDay, Link, Participant, Trip
from trips.domain.value_objects import (
    ActivityId,
    EmailAddress,
    LinkId,
    ParticipantId,
    TripId,
    TripPeriod,
    WebUrl,
)

__all__ = [
    "Trip",
    "Participant",
    "Activity",
    "ActivityDay",
    "Link",
    "TripId",
    "ParticipantId",
    "ActivityId",
    "LinkId",
    "EmailAddress",
    "WebUrl",
    "TripPeriod",
]
