"""Tests for the email notifier and the notification dispatchers.

Run with: pytest tests/test_notifications.py -v
"""

import logging
import smtplib
import threading
from datetime import UTC, datetime
from uuid import uuid4

import pytest
from django.core import mail

from tests.fakes import InMemoryTripStore
from trips.domain import TripId
from trips.domain.commands import CreateTripCommand
from trips.notifications.dispatch import (
    InlineDispatcher,
    ThreadPoolDispatcher,
    get_dispatcher,
    run_task,
)
from trips.notifications.email import (
    OWNER_CONFIRMATION_SUBJECT,
    TRIP_CONFIRMED_SUBJECT,
    EmailNotifier,
)
from trips.notifications.interfaces import NotificationError, NotificationTask
from trips.stores.django_store import DjangoTripStore
from trips.stores.interfaces import StoreError


def paris_trip(*participants: str) -> CreateTripCommand:
    return CreateTripCommand(
        destination="Paris",
        starts_at=datetime(2025, 6, 1, 9, tzinfo=UTC),
        ends_at=datetime(2025, 6, 10, tzinfo=UTC),
        owner_name="Ana",
        owner_email="ana@x.com",
        participant_emails=participants,
    )


@pytest.mark.django_db
class TestEmailNotifier:
    """Tests for EmailNotifier using the locmem outbox."""

    def test_owner_confirmation_email(self):
        store = DjangoTripStore()
        trip_id = store.create_trip(paris_trip())
        notifier = EmailNotifier(store, base_url="https://journey.example.com/")

        notifier.send_owner_confirmation_email(trip_id)

        [message] = mail.outbox
        assert message.to == ["ana@x.com"]
        assert message.subject == OWNER_CONFIRMATION_SUBJECT
        assert "Hello, Ana!" in message.body
        assert "Paris" in message.body
        assert "2025-06-01" in message.body
        assert f"https://journey.example.com/api/trips/{trip_id}/confirm" in message.body

    def test_trip_confirmed_emails_go_to_every_participant(self):
        store = DjangoTripStore()
        trip_id = store.create_trip(paris_trip("b@x.com", "c@x.com"))
        [first, _] = store.list_participants(trip_id)
        store.confirm_participant(first.id)

        EmailNotifier(store).send_trip_confirmed_emails(trip_id)

        assert sorted(m.to[0] for m in mail.outbox) == ["b@x.com", "c@x.com"]
        assert all(m.subject == TRIP_CONFIRMED_SUBJECT for m in mail.outbox)
        by_recipient = {m.to[0]: m.body for m in mail.outbox}
        assert "Please confirm your attendance" not in by_recipient[first.email]

    def test_trip_without_participants_sends_nothing(self):
        store = DjangoTripStore()
        trip_id = store.create_trip(paris_trip())

        EmailNotifier(store).send_trip_confirmed_emails(trip_id)

        assert mail.outbox == []

    def test_missing_trip_raises(self):
        notifier = EmailNotifier(DjangoTripStore())
        with pytest.raises(NotificationError):
            notifier.send_owner_confirmation_email(TripId(value=uuid4()))

    def test_transport_failure_raises_notification_error(self, monkeypatch):
        store = DjangoTripStore()
        trip_id = store.create_trip(paris_trip())

        def refuse(self, *args, **kwargs):
            raise smtplib.SMTPServerDisconnected("gone")

        monkeypatch.setattr("django.core.mail.EmailMessage.send", refuse)

        with pytest.raises(NotificationError):
            EmailNotifier(store).send_owner_confirmation_email(trip_id)


class TestEmailNotifierStoreFailure:
    def test_store_failure_raises_notification_error(self):
        store = InMemoryTripStore()
        store.fail_with = StoreError("db down")
        with pytest.raises(NotificationError):
            EmailNotifier(store, base_url="http://x").send_trip_confirmed_emails(
                TripId(value=uuid4())
            )


class TestRunTask:
    """Tests for the shared task runner."""

    def test_failure_is_logged_with_context(self, caplog):
        trip_id = TripId(value=uuid4())

        def explode(_: TripId) -> None:
            raise ConnectionRefusedError("smtp down")

        task = NotificationTask(operation="trip_confirmed", trip_id=trip_id, send=explode)
        with caplog.at_level(logging.ERROR, logger="trips"):
            assert run_task(task) is False

        [record] = caplog.records
        assert record.levelno == logging.ERROR
        assert f"trip_id={trip_id}" in record.getMessage()
        assert f"correlation_id={task.correlation_id}" in record.getMessage()
        assert record.exc_info is not None

    def test_success(self):
        seen = []
        task = NotificationTask(
            operation="owner_confirmation", trip_id=TripId(value=uuid4()), send=seen.append
        )
        assert run_task(task) is True
        assert seen == [task.trip_id]

    def test_tasks_get_distinct_correlation_ids(self):
        trip_id = TripId(value=uuid4())
        first = NotificationTask(operation="x", trip_id=trip_id, send=lambda _: None)
        second = NotificationTask(operation="x", trip_id=trip_id, send=lambda _: None)
        assert first.correlation_id != second.correlation_id


class TestInlineDispatcher:
    def test_swallows_task_failure(self):
        def explode(_: TripId) -> None:
            raise RuntimeError("boom")

        InlineDispatcher().submit(
            NotificationTask(operation="x", trip_id=TripId(value=uuid4()), send=explode)
        )


@pytest.mark.django_db(transaction=True)
class TestThreadPoolDispatcher:
    """Tests for the background worker pool."""

    def test_runs_tasks_off_the_calling_thread(self):
        dispatcher = ThreadPoolDispatcher(max_workers=2)
        threads = []
        task = NotificationTask(
            operation="owner_confirmation",
            trip_id=TripId(value=uuid4()),
            send=lambda _: threads.append(threading.current_thread().name),
        )

        dispatcher.submit(task)
        dispatcher.shutdown(wait=True)

        assert len(threads) == 1
        assert threads[0] != threading.current_thread().name
        assert threads[0].startswith("trip-notifications")

    def test_failure_is_logged_not_raised(self, caplog):
        dispatcher = ThreadPoolDispatcher(max_workers=1)
        trip_id = TripId(value=uuid4())

        def explode(_: TripId) -> None:
            raise ConnectionRefusedError("smtp down")

        with caplog.at_level(logging.ERROR, logger="trips"):
            dispatcher.submit(
                NotificationTask(operation="trip_confirmed", trip_id=trip_id, send=explode)
            )
            dispatcher.shutdown(wait=True)

        assert f"trip_id={trip_id}" in caplog.text


class TestGetDispatcher:
    def test_loads_configured_dispatcher_once(self):
        first = get_dispatcher()
        assert isinstance(first, InlineDispatcher)
        assert get_dispatcher() is first

    def test_options_change_builds_new_dispatcher(self, settings):
        path = "trips.notifications.dispatch.ThreadPoolDispatcher"
        settings.TRIPS = {
            **settings.TRIPS,
            "DISPATCHER": path,
            "DISPATCHER_OPTIONS": {"max_workers": 1},
        }
        first = get_dispatcher()
        settings.TRIPS = {**settings.TRIPS, "DISPATCHER_OPTIONS": {"max_workers": 2}}
        second = get_dispatcher()

        assert isinstance(second, ThreadPoolDispatcher)
        assert second is not first
        assert get_dispatcher() is second
        first.shutdown()
        second.shutdown()
