"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime

import pytest
from rest_framework.test import APIClient

from tests.fakes import InMemoryTripStore, RecordingNotifier
from trips.domain.commands import CreateTripCommand
from trips.notifications.dispatch import InlineDispatcher
from trips.services.trip_service import TripService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def inline_notifications(settings):
    """Run notifications in the test thread so mail.outbox is filled synchronously."""
    settings.TRIPS = {
        **settings.TRIPS,
        "PUBLIC_BASE_URL": "http://testserver",
        "DISPATCHER": "trips.notifications.dispatch.InlineDispatcher",
        "DISPATCHER_OPTIONS": {},
    }


@pytest.fixture
def store() -> InMemoryTripStore:
    return InMemoryTripStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def service(store, notifier) -> TripService:
    return TripService(store=store, notifier=notifier, dispatcher=InlineDispatcher(), tz=UTC)


@pytest.fixture
def create_trip_command():
    """Factory fixture for CreateTripCommand with a Paris trip by default."""

    def _factory(**overrides) -> CreateTripCommand:
        fields = {
            "destination": "Paris",
            "starts_at": datetime(2025, 6, 1, tzinfo=UTC),
            "ends_at": datetime(2025, 6, 10, tzinfo=UTC),
            "owner_name": "A",
            "owner_email": "a@x.com",
            "participant_emails": (),
        }
        fields.update(overrides)
        return CreateTripCommand(**fields)

    return _factory
