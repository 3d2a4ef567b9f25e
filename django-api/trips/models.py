"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Trip(models.Model):
    """Persistence model for trips."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    destination = models.CharField(max_length=255)
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    owner_name = models.CharField(max_length=255)
    owner_email = models.EmailField(max_length=255)
    is_confirmed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(starts_at__lte=models.F("ends_at")),
                name="trip_starts_before_it_ends",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.destination} ({self.owner_email})"


class Participant(models.Model):
    """Persistence model for participants invited to a trip."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    trip = models.ForeignKey(Trip, on_delete=models.CASCADE, related_name="participants")
    email = models.EmailField(max_length=255)
    is_confirmed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["trip", "email"], name="unique_participant_email_per_trip"
            ),
        ]

    def __str__(self) -> str:
        return self.email


class Activity(models.Model):
    """Persistence model for trip activities."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    trip = models.ForeignKey(Trip, on_delete=models.CASCADE, related_name="activities")
    title = models.CharField(max_length=255)
    occurs_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["occurs_at"]
        verbose_name_plural = "activities"
        indexes = [
            models.Index(fields=["trip", "occurs_at"], name="activity_trip_occurs_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.occurs_at}"


class Link(models.Model):
    """Persistence model for external links attached to a trip."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    trip = models.ForeignKey(Trip, on_delete=models.CASCADE, related_name="links")
    title = models.CharField(max_length=255)
    url = models.URLField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.title
