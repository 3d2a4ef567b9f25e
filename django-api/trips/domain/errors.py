"""Domain error codes for the trips module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_TRIP_ID = "INVALID_TRIP_ID"
    INVALID_PARTICIPANT_ID = "INVALID_PARTICIPANT_ID"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    PARTICIPANT_NOT_FOUND = "PARTICIPANT_NOT_FOUND"
    PARTICIPANT_ALREADY_CONFIRMED = "PARTICIPANT_ALREADY_CONFIRMED"
    PARTICIPANT_ALREADY_INVITED = "PARTICIPANT_ALREADY_INVITED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when caller input violates a field rule."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=f"invalid input: {detail}",
        )


class InvalidTripIdError(DomainError):
    """Raised when a trip ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TRIP_ID,
            message="invalid trip id",
        )


class InvalidParticipantIdError(DomainError):
    """Raised when a participant ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PARTICIPANT_ID,
            message="invalid participant id",
        )


class TripNotFoundError(DomainError):
    """Raised when a trip is not found."""

    def __init__(self, trip_id: str) -> None:
        super().__init__(
            code=ErrorCode.TRIP_NOT_FOUND,
            message="trip not found",
        )
        object.__setattr__(self, "trip_id", trip_id)


class ParticipantNotFoundError(DomainError):
    """Raised when a participant is not found."""

    def __init__(self, participant_id: str) -> None:
        super().__init__(
            code=ErrorCode.PARTICIPANT_NOT_FOUND,
            message="participant not found",
        )
        object.__setattr__(self, "participant_id", participant_id)


class ParticipantAlreadyConfirmedError(DomainError):
    """Raised when confirming a participant that is already confirmed."""

    def __init__(self, participant_id: str) -> None:
        super().__init__(
            code=ErrorCode.PARTICIPANT_ALREADY_CONFIRMED,
            message="participant already confirmed",
        )
        object.__setattr__(self, "participant_id", participant_id)


class ParticipantAlreadyInvitedError(DomainError):
    """Raised when an email is invited twice to the same trip."""

    def __init__(self, trip_id: str) -> None:
        super().__init__(
            code=ErrorCode.PARTICIPANT_ALREADY_INVITED,
            message="participant already invited to this trip",
        )
        object.__setattr__(self, "trip_id", trip_id)


class ServiceUnavailableError(DomainError):
    """Raised when storage fails; the caller may retry."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SERVICE_UNAVAILABLE,
            message="something went wrong, try again",
        )
