"""Operations callable with a resolved caller identity.

Each operation checks the caller's role, then delegates to the catalog or the
lifecycle service with the caller's own tenant id.
"""

from events.domain import Event, EventItem, EventItemId, HrAdmin, Identity, VendorAdmin
from events.domain.errors import ForbiddenError
from events.services.access import validate_access
from events.services.catalog_service import CatalogService
from events.services.event_service import EventService


def _require_hr_admin(identity: Identity) -> HrAdmin:
    if not isinstance(identity, HrAdmin):
        raise ForbiddenError("Only HR admins can perform this action")
    return identity


def _require_vendor_admin(identity: Identity) -> VendorAdmin:
    if not isinstance(identity, VendorAdmin):
        raise ForbiddenError("Only vendor admins can perform this action")
    return identity


class BookingService:
    """Identity-scoped facade over the catalog and the event lifecycle."""

    def __init__(self, events: EventService, catalog: CatalogService) -> None:
        self._events = events
        self._catalog = catalog

    def create_event(
        self,
        identity: Identity,
        event_item_id: str,
        proposed_dates: list[str],
        location: dict,
    ) -> Event:
        hr_admin = _require_hr_admin(identity)
        return self._events.create(
            event_item_id, proposed_dates, location, hr_admin.company_id
        )

    def list_events(self, identity: Identity) -> list[Event]:
        """Return the caller's own events, most recent first."""
        match identity:
            case HrAdmin(company_id=company_id):
                return self._events.find_by_company(company_id)
            case VendorAdmin(vendor_id=vendor_id):
                return self._events.find_by_vendor(vendor_id)
        raise ForbiddenError()

    def get_event(self, event_id: str, identity: Identity) -> Event:
        return self._events.find_one_authorized(event_id, identity)

    def update_event(
        self,
        event_id: str,
        identity: Identity,
        proposed_dates: list[str] | None = None,
        location: dict | None = None,
    ) -> Event:
        _require_hr_admin(identity)
        event = self._events.get(event_id)
        validate_access(event, identity)
        return self._events.update(
            event_id, proposed_dates=proposed_dates, location=location
        )

    def approve_event(self, event_id: str, confirmed_date: str, identity: Identity) -> Event:
        vendor_admin = _require_vendor_admin(identity)
        return self._events.approve(event_id, confirmed_date, vendor_admin.vendor_id)

    def reject_event(self, event_id: str, remarks: str, identity: Identity) -> Event:
        vendor_admin = _require_vendor_admin(identity)
        return self._events.reject(event_id, remarks, vendor_admin.vendor_id)

    def list_events_for_event_item(self, event_item_id: str, identity: Identity) -> list[Event]:
        """Return bookings of one of the caller's own event items."""
        vendor_admin = _require_vendor_admin(identity)
        if not self._catalog.validate_ownership(event_item_id, vendor_admin.vendor_id):
            raise ForbiddenError("Not authorized to access this event item")
        return self._events.find_by_event_item(EventItemId.from_string(event_item_id))

    def list_event_items(self, identity: Identity) -> list[EventItem]:
        return self._catalog.list_all()

    def list_my_event_items(self, identity: Identity) -> list[EventItem]:
        vendor_admin = _require_vendor_admin(identity)
        return self._catalog.list_by_vendor(vendor_admin.vendor_id)

    def create_event_item(
        self, identity: Identity, name: str, description: str | None = None
    ) -> EventItem:
        vendor_admin = _require_vendor_admin(identity)
        return self._catalog.create(name, description, vendor_admin.vendor_id)
