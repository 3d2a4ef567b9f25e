from django.urls import path

from trips.handlers import (
    ParticipantConfirmView,
    TripActivityListView,
    TripConfirmView,
    TripCreateView,
    TripDetailView,
    TripInviteView,
    TripLinkListView,
    TripParticipantListView,
)

urlpatterns = [
    path("trips", TripCreateView.as_view(), name="trip-create"),
    path("trips/<str:trip_id>", TripDetailView.as_view(), name="trip-detail"),
    path("trips/<str:trip_id>/confirm", TripConfirmView.as_view(), name="trip-confirm"),
    path("trips/<str:trip_id>/invites", TripInviteView.as_view(), name="trip-invite"),
    path(
        "trips/<str:trip_id>/participants",
        TripParticipantListView.as_view(),
        name="trip-participant-list",
    ),
    path(
        "trips/<str:trip_id>/activities",
        TripActivityListView.as_view(),
        name="trip-activity-list",
    ),
    path("trips/<str:trip_id>/links", TripLinkListView.as_view(), name="trip-link-list"),
    path(
        "participants/<str:participant_id>/confirm",
        ParticipantConfirmView.as_view(),
        name="participant-confirm",
    ),
]
