"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never expose internal error details

Domain errors raised by the service are mapped to responses by
trips.handlers.exceptions.exception_handler.
"""

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from trips.handlers.serializers import (
    ActivityDaySerializer,
    CreateActivitySerializer,
    CreateLinkSerializer,
    CreateTripSerializer,
    InviteParticipantSerializer,
    LinkSerializer,
    ParticipantSerializer,
    TripSerializer,
    UpdateTripSerializer,
)
from trips.notifications.dispatch import get_dispatcher
from trips.notifications.email import EmailNotifier
from trips.services.trip_service import TripService
from trips.stores.django_store import DjangoTripStore


def build_trip_service() -> TripService:
    store = DjangoTripStore()
    return TripService(
        store=store,
        notifier=EmailNotifier(store),
        dispatcher=get_dispatcher(),
        tz=timezone.get_current_timezone(),
    )


class TripServiceMixin:
    @property
    def service(self) -> TripService:
        return build_trip_service()


class TripCreateView(TripServiceMixin, APIView):
    """Handler for POST /api/trips"""

    def post(self, request: Request) -> Response:
        serializer = CreateTripSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        trip_id = self.service.create_trip(serializer.to_command())
        return Response({"trip_id": str(trip_id)}, status=status.HTTP_201_CREATED)


class TripDetailView(TripServiceMixin, APIView):
    """Handler for GET and PUT /api/trips/{trip_id}"""

    def get(self, request: Request, trip_id: str) -> Response:
        trip = self.service.get_trip(trip_id)
        return Response({"trip": TripSerializer(trip).data})

    def put(self, request: Request, trip_id: str) -> Response:
        service = self.service
        # Unknown trips answer 404 whatever the body holds.
        service.get_trip(trip_id)
        serializer = UpdateTripSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service.update_trip(trip_id, serializer.to_command())
        return Response(status=status.HTTP_204_NO_CONTENT)


class TripConfirmView(TripServiceMixin, APIView):
    """Handler for GET /api/trips/{trip_id}/confirm

    A GET so the link in the owner confirmation email works as-is.
    """

    def get(self, request: Request, trip_id: str) -> Response:
        self.service.confirm_trip(trip_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TripInviteView(TripServiceMixin, APIView):
    """Handler for POST /api/trips/{trip_id}/invites"""

    def post(self, request: Request, trip_id: str) -> Response:
        serializer = InviteParticipantSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        participant_id = self.service.invite_participant(
            trip_id, serializer.validated_data["email"]
        )
        return Response(
            {"participant_id": str(participant_id)}, status=status.HTTP_201_CREATED
        )


class TripParticipantListView(TripServiceMixin, APIView):
    """Handler for GET /api/trips/{trip_id}/participants"""

    def get(self, request: Request, trip_id: str) -> Response:
        participants = self.service.list_participants(trip_id)
        return Response(
            {"participants": ParticipantSerializer(participants, many=True).data}
        )


class TripActivityListView(TripServiceMixin, APIView):
    """Handler for GET and POST /api/trips/{trip_id}/activities"""

    def get(self, request: Request, trip_id: str) -> Response:
        days = self.service.list_activities(trip_id)
        return Response({"activities": ActivityDaySerializer(days, many=True).data})

    def post(self, request: Request, trip_id: str) -> Response:
        serializer = CreateActivitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        activity_id = self.service.create_activity(trip_id, serializer.to_command())
        return Response({"activity_id": str(activity_id)}, status=status.HTTP_201_CREATED)


class TripLinkListView(TripServiceMixin, APIView):
    """Handler for GET and POST /api/trips/{trip_id}/links"""

    def get(self, request: Request, trip_id: str) -> Response:
        links = self.service.list_links(trip_id)
        return Response({"links": LinkSerializer(links, many=True).data})

    def post(self, request: Request, trip_id: str) -> Response:
        serializer = CreateLinkSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        link_id = self.service.create_link(trip_id, serializer.to_command())
        return Response({"link_id": str(link_id)}, status=status.HTTP_201_CREATED)


class ParticipantConfirmView(TripServiceMixin, APIView):
    """Handler for PATCH /api/participants/{participant_id}/confirm"""

    def patch(self, request: Request, participant_id: str) -> Response:
        self.service.confirm_participant(participant_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
