"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from events.domain import (
    Company,
    CompanyId,
    Event,
    EventChanges,
    EventId,
    EventItem,
    EventItemId,
    EventStatus,
    NewEvent,
    Vendor,
    VendorId,
)


class CompanyStore(ABC):
    """Interface for company persistence operations."""

    @abstractmethod
    def create_company(self, name: str) -> Company:
        ...

    @abstractmethod
    def get_company(self, company_id: CompanyId) -> Company | None:
        """Return a company by ID, or None if not found."""
        ...


class VendorStore(ABC):
    """Interface for vendor persistence operations."""

    @abstractmethod
    def create_vendor(
        self,
        name: str,
        contact_email: str,
        description: str | None = None,
        contact_phone: str | None = None,
        address: str | None = None,
    ) -> Vendor:
        ...

    @abstractmethod
    def get_vendor(self, vendor_id: VendorId) -> Vendor | None:
        """Return a vendor by ID, or None if not found."""
        ...


class EventItemStore(ABC):
    """Interface for catalog persistence operations.

    Every EventItem returned carries a freshly computed `has_approved_event`.
    """

    @abstractmethod
    def list_event_items(self) -> list[EventItem]:
        """Return all event items ordered by created_at descending."""
        ...

    @abstractmethod
    def list_event_items_for_vendor(self, vendor_id: VendorId) -> list[EventItem]:
        """Return a vendor's event items ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event_item(self, event_item_id: EventItemId) -> EventItem | None:
        """Return an event item by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event_item(
        self, vendor_id: VendorId, name: str, description: str | None
    ) -> EventItem:
        ...

    @abstractmethod
    def event_item_belongs_to_vendor(
        self, event_item_id: EventItemId, vendor_id: VendorId
    ) -> bool:
        """Check if the event item exists and is owned by the vendor."""
        ...


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Run the enclosed store calls in one transaction.

        Raises:
            TransactionError: If the transaction could not be committed.
        """
        ...

    @abstractmethod
    def lock_event_item(self, event_item_id: EventItemId) -> None:
        """Lock the event item row until the enclosing transaction ends."""
        ...

    @abstractmethod
    def create_event(self, new_event: NewEvent) -> Event:
        """Persist a new event, stamping date_created and last_modified.

        Raises:
            ValidationError: If the record fails model validation.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_events_for_company(self, company_id: CompanyId) -> list[Event]:
        """Return a company's events, most recent first."""
        ...

    @abstractmethod
    def list_events_for_vendor(self, vendor_id: VendorId) -> list[Event]:
        """Return a vendor's events, most recent first."""
        ...

    @abstractmethod
    def list_events_for_event_item(self, event_item_id: EventItemId) -> list[Event]:
        """Return all events for an event item, most recent first."""
        ...

    @abstractmethod
    def update_event(
        self,
        event_id: EventId,
        changes: EventChanges,
        expected_status: EventStatus | None = None,
    ) -> Event | None:
        """Merge changes and stamp last_modified.

        Returns None when no row matched the id (and expected_status, if given).
        """
        ...

    @abstractmethod
    def transition_status(
        self,
        event_id: EventId,
        from_status: EventStatus,
        to_status: EventStatus,
        confirmed_date: datetime | None = None,
        remarks: str | None = None,
    ) -> bool:
        """Conditionally move an event between states.

        Returns True iff the event was in `from_status` and has been updated.
        """
        ...

    @abstractmethod
    def list_pending_event_ids_for_item(
        self, event_item_id: EventItemId, exclude: EventId | None = None
    ) -> list[EventId]:
        ...

    @abstractmethod
    def count_approved_for_event_item(self, event_item_id: EventItemId) -> int:
        ...

    def has_approved_event_for_item(self, event_item_id: EventItemId) -> bool:
        return self.count_approved_for_event_item(event_item_id) > 0

    @abstractmethod
    def bulk_set_status(
        self, event_ids: list[EventId], status: EventStatus, remarks: str | None
    ) -> int:
        """Set status and remarks on the Pending events among `event_ids`.

        Events that already left Pending are skipped. Returns the count changed.
        """
        ...
