"""Notifier and dispatcher interfaces.

Notifiers run detached from the request that triggered them, so they take
only a trip ID and load whatever they need through their own store.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import uuid4

from trips.domain import TripId


class NotificationError(Exception):
    """A notification could not be delivered."""


class Notifier(ABC):
    """Interface for trip emails."""

    @abstractmethod
    def send_owner_confirmation_email(self, trip_id: TripId) -> None:
        """Ask the trip owner to confirm a freshly created trip."""
        ...

    @abstractmethod
    def send_trip_confirmed_emails(self, trip_id: TripId) -> None:
        """Tell every participant that the trip was confirmed."""
        ...


@dataclass(frozen=True)
class NotificationTask:
    """A notifier call scheduled by a workflow operation."""

    operation: str
    trip_id: TripId
    send: Callable[[TripId], None]
    correlation_id: str = field(default_factory=lambda: uuid4().hex)


class Dispatcher(ABC):
    """Hands notification tasks to background execution."""

    @abstractmethod
    def submit(self, task: NotificationTask) -> None:
        """Schedule a task. Must not raise on task failure."""
        ...
