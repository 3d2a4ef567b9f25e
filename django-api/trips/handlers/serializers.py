"""Serializers for decoding requests into commands and encoding domain models."""

from rest_framework import serializers

from trips.domain.commands import (
    CreateActivityCommand,
    CreateLinkCommand,
    CreateTripCommand,
    UpdateTripCommand,
)


class CreateTripSerializer(serializers.Serializer):
    """Request body for POST /api/trips."""

    destination = serializers.CharField(max_length=255)
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    owner_name = serializers.CharField(max_length=255)
    owner_email = serializers.EmailField(max_length=255)
    emails_to_invite = serializers.ListField(
        child=serializers.EmailField(max_length=255), required=False, default=list
    )

    def to_command(self) -> CreateTripCommand:
        data = self.validated_data
        return CreateTripCommand(
            destination=data["destination"],
            starts_at=data["starts_at"],
            ends_at=data["ends_at"],
            owner_name=data["owner_name"],
            owner_email=data["owner_email"],
            participant_emails=tuple(data["emails_to_invite"]),
        )


class UpdateTripSerializer(serializers.Serializer):
    """Request body for PUT /api/trips/{trip_id}."""

    destination = serializers.CharField(max_length=255)
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()

    def to_command(self) -> UpdateTripCommand:
        return UpdateTripCommand(**self.validated_data)


class InviteParticipantSerializer(serializers.Serializer):
    """Request body for POST /api/trips/{trip_id}/invites."""

    email = serializers.EmailField(max_length=255)


class CreateActivitySerializer(serializers.Serializer):
    """Request body for POST /api/trips/{trip_id}/activities."""

    title = serializers.CharField(max_length=255)
    occurs_at = serializers.DateTimeField()

    def to_command(self) -> CreateActivityCommand:
        return CreateActivityCommand(**self.validated_data)


class CreateLinkSerializer(serializers.Serializer):
    """Request body for POST /api/trips/{trip_id}/links."""

    title = serializers.CharField(max_length=255)
    url = serializers.URLField(max_length=500)

    def to_command(self) -> CreateLinkCommand:
        return CreateLinkCommand(**self.validated_data)


class TripSerializer(serializers.Serializer):
    """Serializer for Trip domain model."""

    id = serializers.UUIDField(source="id.value")
    destination = serializers.CharField()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    is_confirmed = serializers.BooleanField()


class ParticipantSerializer(serializers.Serializer):
    """Serializer for Participant domain model."""

    id = serializers.UUIDField(source="id.value")
    email = serializers.EmailField()
    is_confirmed = serializers.BooleanField()


class ActivitySerializer(serializers.Serializer):
    """Serializer for Activity domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    occurs_at = serializers.DateTimeField()


class ActivityDaySerializer(serializers.Serializer):
    """Serializer for a day of activities."""

    date = serializers.DateField()
    activities = ActivitySerializer(many=True)


class LinkSerializer(serializers.Serializer):
    """Serializer for Link domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    url = serializers.URLField()
