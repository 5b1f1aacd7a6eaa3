"""Event item catalog: the vendor-owned list of bookable offerings."""

import logging

from events.domain import EventItem, EventItemId, VendorId
from events.domain.errors import EventItemNotFoundError, InvalidIdError, ValidationError, VendorNotFoundError
from events.stores.interfaces import EventItemStore, VendorStore

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


class CatalogService:
    """Service for event item catalog operations."""

    def __init__(self, item_store: EventItemStore, vendor_store: VendorStore) -> None:
        self._items = item_store
        self._vendors = vendor_store

    def list_all(self) -> list[EventItem]:
        """Return every event item with its approval flag."""
        return self._items.list_event_items()

    def list_by_vendor(self, vendor_id: VendorId) -> list[EventItem]:
        return self._items.list_event_items_for_vendor(vendor_id)

    def get(self, event_item_id: str) -> EventItem:
        """Return an event item by ID.

        Raises:
            InvalidIdError: If the event_item_id is not a valid UUID.
            EventItemNotFoundError: If the event item does not exist.
        """
        try:
            item_id = EventItemId.from_string(event_item_id)
        except ValueError:
            raise InvalidIdError("event item ID") from None
        item = self._items.get_event_item(item_id)
        if item is None:
            raise EventItemNotFoundError(event_item_id)
        return item

    def create(self, name: str, description: str | None, vendor_id: VendorId) -> EventItem:
        """Add an offering to a vendor's catalog.

        Raises:
            ValidationError: If the name is blank or too long, or the
                description is too long.
            VendorNotFoundError: If the vendor does not exist.
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Event item name is required")
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"Event item name must be at most {NAME_MAX_LENGTH} characters"
            )
        if description is not None:
            description = description.strip() or None
        if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Event item description must be at most {DESCRIPTION_MAX_LENGTH} characters"
            )

        if self._vendors.get_vendor(vendor_id) is None:
            raise VendorNotFoundError(str(vendor_id))

        item = self._items.create_event_item(vendor_id, name, description)
        logger.info("Event item created: item=%s vendor=%s", item.id, vendor_id)
        return item

    def validate_ownership(self, event_item_id: str, vendor_id: VendorId) -> bool:
        """Return True iff the event item exists and belongs to the vendor."""
        try:
            item_id = EventItemId.from_string(event_item_id)
        except ValueError:
            return False
        return self._items.event_item_belongs_to_vendor(item_id, vendor_id)
