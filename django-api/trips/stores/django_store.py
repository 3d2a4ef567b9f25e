"""Django ORM implementation of the TripStore."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from django.db import DatabaseError, IntegrityError, transaction

from trips import models
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
from trips.stores.interfaces import DuplicateRowError, NoRowsError, StoreError, TripStore


@contextmanager
def _database_errors() -> Iterator[None]:
    try:
        yield
    except DatabaseError as e:
        raise StoreError(str(e)) from e


class DjangoTripStore(TripStore):
    """Relational trip store using Django ORM."""

    def create_trip(self, command: CreateTripCommand) -> TripId:
        with _database_errors(), transaction.atomic():
            trip = models.Trip.objects.create(
                destination=command.destination,
                starts_at=command.starts_at,
                ends_at=command.ends_at,
                owner_name=command.owner_name,
                owner_email=command.owner_email,
            )
            models.Participant.objects.bulk_create(
                models.Participant(trip=trip, email=email)
                for email in command.participant_emails
            )
        return TripId(value=trip.id)

    def get_trip(self, trip_id: TripId) -> Trip | None:
        with _database_errors():
            row = models.Trip.objects.filter(pk=trip_id.value).first()
        if row is None:
            return None
        return _to_trip(row)

    def trip_exists(self, trip_id: TripId) -> bool:
        with _database_errors():
            return models.Trip.objects.filter(pk=trip_id.value).exists()

    def update_trip(
        self, trip_id: TripId, destination: str, starts_at: datetime, ends_at: datetime
    ) -> bool:
        with _database_errors():
            updated = models.Trip.objects.filter(pk=trip_id.value).update(
                destination=destination,
                starts_at=starts_at,
                ends_at=ends_at,
            )
        return updated == 1

    def confirm_trip(self, trip_id: TripId) -> bool:
        with _database_errors():
            updated = models.Trip.objects.filter(
                pk=trip_id.value, is_confirmed=False
            ).update(is_confirmed=True)
        return updated == 1

    def create_participant(self, trip_id: TripId, email: str) -> ParticipantId:
        with _database_errors():
            try:
                with self._child_of(trip_id):
                    row = models.Participant.objects.create(
                        trip_id=trip_id.value, email=email
                    )
            except IntegrityError as e:
                raise DuplicateRowError(
                    f"participant {email} already invited to trip {trip_id}"
                ) from e
        return ParticipantId(value=row.id)

    def get_participant(self, participant_id: ParticipantId) -> Participant | None:
        with _database_errors():
            row = models.Participant.objects.filter(pk=participant_id.value).first()
        if row is None:
            return None
        return _to_participant(row)

    def confirm_participant(self, participant_id: ParticipantId) -> bool:
        with _database_errors():
            updated = models.Participant.objects.filter(
                pk=participant_id.value, is_confirmed=False
            ).update(is_confirmed=True)
        return updated == 1

    def list_participants(self, trip_id: TripId) -> list[Participant]:
        with _database_errors():
            rows = models.Participant.objects.filter(trip_id=trip_id.value).order_by(
                "created_at", "email"
            )
            return [_to_participant(row) for row in rows]

    def create_activity(
        self, trip_id: TripId, title: str, occurs_at: datetime
    ) -> ActivityId:
        with _database_errors(), self._child_of(trip_id):
            row = models.Activity.objects.create(
                trip_id=trip_id.value, title=title, occurs_at=occurs_at
            )
        return ActivityId(value=row.id)

    def list_activities(self, trip_id: TripId) -> list[Activity]:
        with _database_errors():
            rows = models.Activity.objects.filter(trip_id=trip_id.value).order_by(
                "occurs_at", "created_at"
            )
            return [_to_activity(row) for row in rows]

    def create_link(self, trip_id: TripId, title: str, url: str) -> LinkId:
        with _database_errors(), self._child_of(trip_id):
            row = models.Link.objects.create(trip_id=trip_id.value, title=title, url=url)
        return LinkId(value=row.id)

    def list_links(self, trip_id: TripId) -> list[Link]:
        with _database_errors():
            rows = models.Link.objects.filter(trip_id=trip_id.value).order_by("created_at")
            return [_to_link(row) for row in rows]

    def _require_trip(self, trip_id: TripId) -> None:
        if not models.Trip.objects.filter(pk=trip_id.value).exists():
            raise NoRowsError(f"trip {trip_id} does not exist")

    @contextmanager
    def _child_of(self, trip_id: TripId) -> Iterator[None]:
        """Wrap an insert of a row that references trip_id.

        A trip deleted between the check and the insert trips the foreign
        key; that IntegrityError is reported as NoRowsError. Any other
        IntegrityError propagates.
        """
        try:
            with transaction.atomic():
                self._require_trip(trip_id)
                yield
        except IntegrityError as e:
            if not self.trip_exists(trip_id):
                raise NoRowsError(f"trip {trip_id} does not exist") from e
            raise


def _to_trip(row: models.Trip) -> Trip:
    return Trip(
        id=TripId(value=row.id),
        destination=row.destination,
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        owner_name=row.owner_name,
        owner_email=row.owner_email,
        is_confirmed=row.is_confirmed,
        created_at=row.created_at,
    )


def _to_participant(row: models.Participant) -> Participant:
    return Participant(
        id=ParticipantId(value=row.id),
        trip_id=TripId(value=row.trip_id),
        email=row.email,
        is_confirmed=row.is_confirmed,
        created_at=row.created_at,
    )


def _to_activity(row: models.Activity) -> Activity:
    return Activity(
        id=ActivityId(value=row.id),
        trip_id=TripId(value=row.trip_id),
        title=row.title,
        occurs_at=row.occurs_at,
        created_at=row.created_at,
    )


def _to_link(row: models.Link) -> Link:
    return Link(
        id=LinkId(value=row.id),
        trip_id=TripId(value=row.trip_id),
        title=row.title,
        url=row.url,
        created_at=row.created_at,
    )
