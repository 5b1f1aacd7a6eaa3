"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic

Domain errors are mapped to HTTP responses by handlers.errors.
"""

import logging

from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import (
    ApproveEventSerializer,
    CreateEventItemSerializer,
    CreateEventSerializer,
    EventItemSerializer,
    EventSerializer,
    RejectEventSerializer,
    UpdateEventSerializer,
)
from events.services.booking_service import BookingService
from events.services.catalog_service import CatalogService
from events.services.event_service import EventService
from events.stores.django_store import (
    DjangoCompanyStore,
    DjangoEventItemStore,
    DjangoEventStore,
    DjangoVendorStore,
)

logger = logging.getLogger(__name__)


def booking_service() -> BookingService:
    item_store = DjangoEventItemStore()
    return BookingService(
        events=EventService(DjangoEventStore(), item_store, DjangoCompanyStore()),
        catalog=CatalogService(item_store, DjangoVendorStore()),
    )


def _validated(serializer_class, request: Request) -> dict:
    serializer = serializer_class(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = booking_service().list_events(request.user.identity)
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        data = _validated(CreateEventSerializer, request)
        event = booking_service().create_event(
            request.user.identity,
            event_item_id=data["event_item_id"],
            proposed_dates=data["proposed_dates"],
            location=dict(data["location"]),
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = booking_service().get_event(event_id, request.user.identity)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        data = _validated(UpdateEventSerializer, request)
        location = data.get("location")
        event = booking_service().update_event(
            event_id,
            request.user.identity,
            proposed_dates=data.get("proposed_dates"),
            location=dict(location) if location is not None else None,
        )
        return Response(EventSerializer(event).data)


class EventApproveView(APIView):
    """Handler for POST /api/events/{event_id}/approve"""

    def post(self, request: Request, event_id: str) -> Response:
        data = _validated(ApproveEventSerializer, request)
        event = booking_service().approve_event(
            event_id, data["confirmed_date"], request.user.identity
        )
        return Response(EventSerializer(event).data)


class EventRejectView(APIView):
    """Handler for POST /api/events/{event_id}/reject"""

    def post(self, request: Request, event_id: str) -> Response:
        data = _validated(RejectEventSerializer, request)
        event = booking_service().reject_event(
            event_id, data["remarks"], request.user.identity
        )
        return Response(EventSerializer(event).data)


class EventItemListView(APIView):
    """Handler for GET/POST /api/event-items"""

    def get(self, request: Request) -> Response:
        items = booking_service().list_event_items(request.user.identity)
        return Response(EventItemSerializer(items, many=True).data)

    def post(self, request: Request) -> Response:
        data = _validated(CreateEventItemSerializer, request)
        item = booking_service().create_event_item(
            request.user.identity, data["name"], data.get("description")
        )
        return Response(EventItemSerializer(item).data, status=status.HTTP_201_CREATED)


class MyEventItemListView(APIView):
    """Handler for GET /api/event-items/mine"""

    def get(self, request: Request) -> Response:
        items = booking_service().list_my_event_items(request.user.identity)
        return Response(EventItemSerializer(items, many=True).data)


class EventItemEventListView(APIView):
    """Handler for GET /api/event-items/{event_item_id}/events"""

    def get(self, request: Request, event_item_id: str) -> Response:
        events = booking_service().list_events_for_event_item(
            event_item_id, request.user.identity
        )
        return Response(EventSerializer(events, many=True).data)


class HealthView(APIView):
    """Handler for GET /api/health"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        try:
            connection.ensure_connection()
        except DatabaseError as exc:
            logger.error("Health check failed: %s", type(exc).__name__)
            return Response(
                {"status": "error", "database": "down"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response(
            {"status": "ok", "database": "up", "timestamp": timezone.now()}
        )
