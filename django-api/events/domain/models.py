"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import (
    CompanyId,
    EventId,
    EventItemId,
    EventStatus,
    Location,
    ProposedDates,
    VendorId,
)

AUTO_REJECT_REMARK = (
    "Automatically rejected: Another event for this event item has been approved"
)


@dataclass(frozen=True)
class Company:
    """Domain representation of a client Company (tenant)."""

    id: CompanyId
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Vendor:
    """Domain representation of a wellness Vendor."""

    id: VendorId
    name: str
    contact_email: str
    created_at: datetime
    description: str | None = None
    contact_phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class EventItem:
    """A vendor's bookable offering.

    `has_approved_event` is derived from the events table on every read.
    """

    id: EventItemId
    vendor_id: VendorId
    name: str
    description: str | None
    created_at: datetime
    has_approved_event: bool = False
    vendor_name: str | None = None


@dataclass(frozen=True)
class NewEvent:
    """Fields supplied when persisting a new Event."""

    company_id: CompanyId
    event_item_id: EventItemId
    vendor_id: VendorId
    proposed_dates: ProposedDates
    location: Location
    status: EventStatus = EventStatus.PENDING


@dataclass(frozen=True)
class EventChanges:
    """Partial update of a Pending event. `None` leaves a field untouched."""

    proposed_dates: ProposedDates | None = None
    location: Location | None = None

    @property
    def is_empty(self) -> bool:
        return self.proposed_dates is None and self.location is None


@dataclass(frozen=True)
class Event:
    """Domain representation of a booking request.

    `confirmed_date` is set only when Approved and `remarks` only when Rejected.
    The `*_name` fields are populated from related records on read.
    """

    id: EventId
    company_id: CompanyId
    event_item_id: EventItemId
    vendor_id: VendorId
    proposed_dates: ProposedDates
    location: Location
    status: EventStatus
    date_created: datetime
    last_modified: datetime
    confirmed_date: datetime | None = None
    remarks: str | None = None
    company_name: str | None = None
    event_item_name: str | None = None
    event_item_description: str | None = None
    vendor_name: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is EventStatus.PENDING
