from django.contrib import admin

from trips.models import Activity, Link, Participant, Trip


class ParticipantInline(admin.TabularInline):
    model = Participant
    extra = 0
    readonly_fields = ["is_confirmed", "created_at"]


class ActivityInline(admin.TabularInline):
    model = Activity
    extra = 1


class LinkInline(admin.TabularInline):
    model = Link
    extra = 1


@admin.register(Trip)
class TripAdmin(admin.ModelAdmin):
    list_display = ["destination", "owner_name", "owner_email", "starts_at", "is_confirmed"]
    list_filter = ["is_confirmed"]
    search_fields = ["destination", "owner_name", "owner_email"]
    readonly_fields = ["is_confirmed", "created_at"]
    inlines = [ParticipantInline, ActivityInline, LinkInline]


@admin.register(Participant)
class ParticipantAdmin(admin.ModelAdmin):
    list_display = ["email", "trip", "is_confirmed"]
    list_filter = ["is_confirmed"]
    search_fields = ["email"]
