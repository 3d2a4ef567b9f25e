from trips.handlers.views import (
    ParticipantConfirmView,
    TripActivityListView,
    TripConfirmView,
    TripCreateView,
    TripDetailView,
    TripInviteView,
    TripLinkListView,
    TripParticipantListView,
)

__all__ = [
    "ParticipantConfirmView",
    "TripActivityListView",
    "TripConfirmView",
    "TripCreateView",
    "TripDetailView",
    "TripInviteView",
    "TripLinkListView",
    "TripParticipantListView",
]
