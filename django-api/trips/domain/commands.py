"""Typed commands decoded from requests by the handler layer.

Commands carry raw caller input; the service validates them.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CreateTripCommand:
    destination: str
    starts_at: datetime
    ends_at: datetime
    owner_name: str
    owner_email: str
    participant_emails: tuple[str, ...] = ()


@dataclass(frozen=True)
class UpdateTripCommand:
    destination: str
    starts_at: datetime
    ends_at: datetime


@dataclass(frozen=True)
class CreateActivityCommand:
    title: str
    occurs_at: datetime


@dataclass(frozen=True)
class CreateLinkCommand:
    title: str
    url: str
