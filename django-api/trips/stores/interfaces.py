"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from trips.domain import (
    Activity,
    ActivityId,
    Link,
    LinkId,
    Participant,
    ParticipantId,
    Trip,
    TripId,
)
from trips.domain.commands import CreateTripCommand


class StoreError(Exception):
    """Storage failed for a reason the caller cannot act on."""


class NoRowsError(StoreError):
    """The row an operation depends on does not exist."""


class DuplicateRowError(StoreError):
    """A uniqueness constraint rejected the write."""


class TripStore(ABC):
    """Interface for trip persistence operations.

    ``get_*`` methods return ``None`` when no row matches. Writes that
    reference a missing trip raise ``NoRowsError``; every other storage
    failure is raised as ``StoreError``.
    """

    @abstractmethod
    def create_trip(self, command: CreateTripCommand) -> TripId:
        """Create a trip and its initial participants atomically."""
        ...

    @abstractmethod
    def get_trip(self, trip_id: TripId) -> Trip | None:
        """Return a trip by ID, or None if not found."""
        ...

    @abstractmethod
    def trip_exists(self, trip_id: TripId) -> bool:
        """Check if a trip exists."""
        ...

    @abstractmethod
    def update_trip(
        self, trip_id: TripId, destination: str, starts_at: datetime, ends_at: datetime
    ) -> bool:
        """Overwrite destination and dates, leaving is_confirmed untouched.

        Returns False if the trip does not exist.
        """
        ...

    @abstractmethod
    def confirm_trip(self, trip_id: TripId) -> bool:
        """Flip is_confirmed from false to true.

        Returns True only for the call that performed the flip.
        """
        ...

    @abstractmethod
    def create_participant(self, trip_id: TripId, email: str) -> ParticipantId:
        """Invite an email to a trip.

        Raises:
            NoRowsError: If the trip does not exist.
            DuplicateRowError: If the email is already on the trip.
        """
        ...

    @abstractmethod
    def get_participant(self, participant_id: ParticipantId) -> Participant | None:
        """Return a participant by ID, or None if not found."""
        ...

    @abstractmethod
    def confirm_participant(self, participant_id: ParticipantId) -> bool:
        """Flip is_confirmed from false to true.

        Returns True only for the call that performed the flip.
        """
        ...

    @abstractmethod
    def list_participants(self, trip_id: TripId) -> list[Participant]:
        """Return participants of a trip ordered by created_at ascending."""
        ...

    @abstractmethod
    def create_activity(
        self, trip_id: TripId, title: str, occurs_at: datetime
    ) -> ActivityId:
        """Raises NoRowsError if the trip does not exist."""
        ...

    @abstractmethod
    def list_activities(self, trip_id: TripId) -> list[Activity]:
        """Return activities of a trip ordered by occurs_at ascending."""
        ...

    @abstractmethod
    def create_link(self, trip_id: TripId, title: str, url: str) -> LinkId:
        """Raises NoRowsError if the trip does not exist."""
        ...

    @abstractmethod
    def list_links(self, trip_id: TripId) -> list[Link]:
        """Return links of a trip ordered by created_at ascending."""
        ...
