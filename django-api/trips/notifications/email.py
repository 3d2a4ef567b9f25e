"""Email notifier backed by django.core.mail.

The transport is whatever EMAIL_BACKEND is configured: SMTP (Mailpit in
development) in production, the locmem outbox under tests.
"""

import smtplib

from django.conf import settings
from django.core.mail import EmailMessage, get_connection
from django.template.loader import render_to_string
from django.urls import reverse

from trips.domain import Trip, TripId
from trips.notifications.interfaces import NotificationError, Notifier
from trips.stores.interfaces import StoreError, TripStore

OWNER_CONFIRMATION_SUBJECT = "Confirm your trip"
TRIP_CONFIRMED_SUBJECT = "Your trip is confirmed"


class EmailNotifier(Notifier):
    """Sends trip emails through Django's mail framework."""

    def __init__(
        self,
        store: TripStore,
        from_email: str | None = None,
        base_url: str | None = None,
    ) -> None:
        self._store = store
        self._from_email = from_email or settings.DEFAULT_FROM_EMAIL
        self._base_url = (base_url or settings.TRIPS["PUBLIC_BASE_URL"]).rstrip("/")

    def send_owner_confirmation_email(self, trip_id: TripId) -> None:
        trip = self._load_trip(trip_id, "send_owner_confirmation_email")
        body = render_to_string(
            "trips/email/owner_confirmation.txt",
            {
                "trip": trip,
                "confirm_url": self._base_url
                + reverse("trip-confirm", kwargs={"trip_id": str(trip_id)}),
            },
        )
        message = EmailMessage(
            subject=OWNER_CONFIRMATION_SUBJECT,
            body=body,
            from_email=self._from_email,
            to=[trip.owner_email],
        )
        try:
            message.send()
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(
                f"failed to send owner confirmation email for trip {trip_id}"
            ) from e

    def send_trip_confirmed_emails(self, trip_id: TripId) -> None:
        trip = self._load_trip(trip_id, "send_trip_confirmed_emails")
        try:
            participants = self._store.list_participants(trip_id)
        except StoreError as e:
            raise NotificationError(
                f"failed to get participants for trip {trip_id}"
            ) from e
        if not participants:
            return

        messages = [
            EmailMessage(
                subject=TRIP_CONFIRMED_SUBJECT,
                body=render_to_string(
                    "trips/email/trip_confirmed.txt",
                    {"trip": trip, "participant": participant},
                ),
                from_email=self._from_email,
                to=[participant.email],
            )
            for participant in participants
        ]
        try:
            with get_connection() as connection:
                connection.send_messages(messages)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(
                f"failed to send trip confirmed emails for trip {trip_id}"
            ) from e

    def _load_trip(self, trip_id: TripId, operation: str) -> Trip:
        try:
            trip = self._store.get_trip(trip_id)
        except StoreError as e:
            raise NotificationError(f"{operation}: failed to get trip {trip_id}") from e
        if trip is None:
            raise NotificationError(f"{operation}: trip {trip_id} does not exist")
        return trip
