"""Trip service - all business logic lives here.

Services:
- Depend only on interfaces (store, notifier, dispatcher)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import tzinfo

from trips.domain import (
    ActivityDay,
    ActivityId,
    EmailAddress,
    Link,
    LinkId,
    Participant,
    ParticipantId,
    Trip,
    TripId,
    TripPeriod,
    WebUrl,
)
from trips.domain.commands import (
    CreateActivityCommand,
    CreateLinkCommand,
    CreateTripCommand,
    UpdateTripCommand,
)
from trips.domain.errors import (
    InvalidInputError,
    InvalidParticipantIdError,
    InvalidTripIdError,
    ParticipantAlreadyConfirmedError,
    ParticipantAlreadyInvitedError,
    ParticipantNotFoundError,
    ServiceUnavailableError,
    TripNotFoundError,
)
from trips.domain.itinerary import group_activities_by_day
from trips.notifications.interfaces import Dispatcher, NotificationTask, Notifier
from trips.stores.interfaces import DuplicateRowError, NoRowsError, StoreError, TripStore

logger = logging.getLogger(__name__)


@contextmanager
def _storage(operation: str, entity_id: object = None) -> Iterator[None]:
    """Log store failures with context and hide their details from callers."""
    try:
        yield
    except StoreError as e:
        logger.error(
            "store failure during %s id=%s: %s", operation, entity_id, e, exc_info=True
        )
        raise ServiceUnavailableError() from e


def _parse_trip_id(trip_id: str) -> TripId:
    try:
        return TripId.from_string(trip_id)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidTripIdError() from e


def _parse_participant_id(participant_id: str) -> ParticipantId:
    try:
        return ParticipantId.from_string(participant_id)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidParticipantIdError() from e


def _parse_email(email: str) -> EmailAddress:
    try:
        return EmailAddress.from_string(email)
    except ValueError as e:
        raise InvalidInputError(f"{email!r} is not a valid email address") from e


def _require_text(value: str, field: str) -> str:
    value = value.strip()
    if not value:
        raise InvalidInputError(f"{field} is required")
    return value


def _build_period(command: CreateTripCommand | UpdateTripCommand) -> TripPeriod:
    try:
        return TripPeriod(starts_at=command.starts_at, ends_at=command.ends_at)
    except ValueError as e:
        raise InvalidInputError("starts_at must not be after ends_at") from e


class TripService:
    """Service for the trip and participant workflow."""

    def __init__(
        self,
        store: TripStore,
        notifier: Notifier,
        dispatcher: Dispatcher,
        tz: tzinfo | None = None,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._dispatcher = dispatcher
        self._tz = tz

    def create_trip(self, command: CreateTripCommand) -> TripId:
        """Create a trip with its initial participants.

        The owner confirmation email is scheduled in the background; its
        outcome never affects the result.

        Raises:
            InvalidInputError: If a field fails validation.
            ServiceUnavailableError: If storage fails.
        """
        _build_period(command)
        owner_email = _parse_email(command.owner_email)
        participant_emails = tuple(
            dict.fromkeys(str(_parse_email(e)) for e in command.participant_emails)
        )
        command = replace(
            command,
            destination=_require_text(command.destination, "destination"),
            owner_name=_require_text(command.owner_name, "owner_name"),
            owner_email=str(owner_email),
            participant_emails=participant_emails,
        )

        with _storage("create_trip"):
            trip_id = self._store.create_trip(command)

        logger.info("trip created trip_id=%s", trip_id)
        self._dispatcher.submit(
            NotificationTask(
                operation="owner_confirmation",
                trip_id=trip_id,
                send=self._notifier.send_owner_confirmation_email,
            )
        )
        return trip_id

    def get_trip(self, trip_id: str) -> Trip:
        """Return a trip by ID.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            TripNotFoundError: If the trip does not exist.
        """
        return self._get_trip(_parse_trip_id(trip_id))

    def update_trip(self, trip_id: str, command: UpdateTripCommand) -> None:
        """Overwrite destination and dates. Never touches is_confirmed.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            TripNotFoundError: If the trip does not exist.
            InvalidInputError: If a field fails validation.
        """
        tid = _parse_trip_id(trip_id)
        self._get_trip(tid)
        period = _build_period(command)
        destination = _require_text(command.destination, "destination")

        with _storage("update_trip", tid):
            updated = self._store.update_trip(
                tid, destination, period.starts_at, period.ends_at
            )
        if not updated:
            raise TripNotFoundError(str(tid))

    def confirm_trip(self, trip_id: str) -> bool:
        """Confirm a trip and notify its participants.

        Confirming an already confirmed trip is a no-op. Only the call that
        flips the flag schedules the participant emails.

        Returns:
            True if this call confirmed the trip.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            TripNotFoundError: If the trip does not exist.
        """
        tid = _parse_trip_id(trip_id)
        trip = self._get_trip(tid)
        if trip.is_confirmed:
            logger.info("trip already confirmed trip_id=%s", tid)
            return False

        with _storage("confirm_trip", tid):
            confirmed = self._store.confirm_trip(tid)
        if not confirmed:
            logger.info("trip confirmed concurrently trip_id=%s", tid)
            return False

        logger.info("trip confirmed trip_id=%s", tid)
        self._dispatcher.submit(
            NotificationTask(
                operation="trip_confirmed",
                trip_id=tid,
                send=self._notifier.send_trip_confirmed_emails,
            )
        )
        return True

    def invite_participant(self, trip_id: str, email: str) -> ParticipantId:
        """Invite an email address to a trip.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            InvalidInputError: If the email is malformed.
            TripNotFoundError: If the trip does not exist.
            ParticipantAlreadyInvitedError: If the email is already on the trip.
        """
        tid = _parse_trip_id(trip_id)
        address = _parse_email(email)
        with _storage("invite_participant", tid):
            try:
                participant_id = self._store.create_participant(tid, str(address))
            except NoRowsError as e:
                raise TripNotFoundError(str(tid)) from e
            except DuplicateRowError as e:
                raise ParticipantAlreadyInvitedError(str(tid)) from e

        logger.info("participant invited trip_id=%s participant_id=%s", tid, participant_id)
        return participant_id

    def confirm_participant(self, participant_id: str) -> None:
        """Confirm a participant's attendance.

        Raises:
            InvalidParticipantIdError: If the participant_id is not a valid UUID.
            ParticipantNotFoundError: If the participant does not exist.
            ParticipantAlreadyConfirmedError: If the participant was already
                confirmed, including by a concurrent request.
        """
        pid = _parse_participant_id(participant_id)
        with _storage("get_participant", pid):
            participant = self._store.get_participant(pid)
        if participant is None:
            raise ParticipantNotFoundError(str(pid))
        if participant.is_confirmed:
            raise ParticipantAlreadyConfirmedError(str(pid))

        with _storage("confirm_participant", pid):
            confirmed = self._store.confirm_participant(pid)
        if not confirmed:
            raise ParticipantAlreadyConfirmedError(str(pid))
        logger.info("participant confirmed participant_id=%s", pid)

    def list_participants(self, trip_id: str) -> list[Participant]:
        """Return participants of a trip.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            TripNotFoundError: If the trip does not exist.
        """
        tid = _parse_trip_id(trip_id)
        self._require_trip(tid)
        with _storage("list_participants", tid):
            return self._store.list_participants(tid)

    def create_activity(self, trip_id: str, command: CreateActivityCommand) -> ActivityId:
        """Add an activity that occurs within the trip's dates.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            TripNotFoundError: If the trip does not exist.
            InvalidInputError: If the title is blank or occurs_at falls
                outside the trip.
        """
        tid = _parse_trip_id(trip_id)
        trip = self._get_trip(tid)
        title = _require_text(command.title, "title")
        if not trip.period.contains(command.occurs_at):
            raise InvalidInputError("activity must occur within the trip dates")

        with _storage("create_activity", tid):
            try:
                return self._store.create_activity(tid, title, command.occurs_at)
            except NoRowsError as e:
                raise TripNotFoundError(str(tid)) from e

    def list_activities(self, trip_id: str) -> list[ActivityDay]:
        """Return a trip's activities grouped by calendar date.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            TripNotFoundError: If the trip does not exist.
        """
        tid = _parse_trip_id(trip_id)
        self._require_trip(tid)
        with _storage("list_activities", tid):
            activities = self._store.list_activities(tid)
        return group_activities_by_day(activities, self._tz)

    def create_link(self, trip_id: str, command: CreateLinkCommand) -> LinkId:
        """Attach an external link to a trip.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            InvalidInputError: If the title is blank or the URL is malformed.
            TripNotFoundError: If the trip does not exist.
        """
        tid = _parse_trip_id(trip_id)
        title = _require_text(command.title, "title")
        try:
            url = WebUrl(value=command.url.strip())
        except ValueError as e:
            raise InvalidInputError(f"{command.url!r} is not a valid URL") from e

        with _storage("create_link", tid):
            try:
                return self._store.create_link(tid, title, str(url))
            except NoRowsError as e:
                raise TripNotFoundError(str(tid)) from e

    def list_links(self, trip_id: str) -> list[Link]:
        """Return links attached to a trip.

        Raises:
            InvalidTripIdError: If the trip_id is not a valid UUID.
            TripNotFoundError: If the trip does not exist.
        """
        tid = _parse_trip_id(trip_id)
        self._require_trip(tid)
        with _storage("list_links", tid):
            return self._store.list_links(tid)

    def _get_trip(self, trip_id: TripId) -> Trip:
        with _storage("get_trip", trip_id):
            trip = self._store.get_trip(trip_id)
        if trip is None:
            raise TripNotFoundError(str(trip_id))
        return trip

    def _require_trip(self, trip_id: TripId) -> None:
        with _storage("trip_exists", trip_id):
            exists = self._store.trip_exists(trip_id)
        if not exists:
            raise TripNotFoundError(str(trip_id))
