from events.handlers.views import (
    EventApproveView,
    EventDetailView,
    EventItemEventListView,
    EventItemListView,
    EventListView,
    EventRejectView,
    HealthView,
    MyEventItemListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventApproveView",
    "EventRejectView",
    "EventItemListView",
    "MyEventItemListView",
    "EventItemEventListView",
    "HealthView",
]
