from django.urls import path

from events.handlers import (
    EventApproveView,
    EventDetailView,
    EventItemEventListView,
    EventItemListView,
    EventListView,
    EventRejectView,
    HealthView,
    MyEventItemListView,
)

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/approve", EventApproveView.as_view(), name="event-approve"),
    path("events/<str:event_id>/reject", EventRejectView.as_view(), name="event-reject"),
    path("event-items", EventItemListView.as_view(), name="event-item-list"),
    path("event-items/mine", MyEventItemListView.as_view(), name="event-item-mine"),
    path(
        "event-items/<str:event_item_id>/events",
        EventItemEventListView.as_view(),
        name="event-item-events",
    ),
]
