"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime
from typing import Self
from uuid import UUID

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator, validate_email


@dataclass(frozen=True)
class TripId:
    """Unique identifier for a Trip."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ParticipantId:
    """Unique identifier for a Participant."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ActivityId:
    """Unique identifier for an Activity."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class LinkId:
    """Unique identifier for a Link."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EmailAddress:
    """A syntactically valid, normalized email address."""

    value: str

    def __post_init__(self) -> None:
        try:
            validate_email(self.value)
        except ValidationError as e:
            raise ValueError(f"Invalid email address: {self.value!r}") from e

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip().lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WebUrl:
    """An absolute http(s) URL."""

    value: str

    def __post_init__(self) -> None:
        try:
            URLValidator(schemes=["http", "https"])(self.value)
        except ValidationError as e:
            raise ValueError(f"Invalid URL: {self.value!r}") from e

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TripPeriod:
    """Inclusive time range a trip spans."""

    starts_at: datetime
    ends_at: datetime

    def __post_init__(self) -> None:
        if self.starts_at > self.ends_at:
            raise ValueError("Trip cannot end before it starts")

    def contains(self, moment: datetime) -> bool:
        return self.starts_at <= moment <= self.ends_at
