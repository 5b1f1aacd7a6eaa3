from events.domain.identity import HrAdmin, Identity, Role, VendorAdmin, identity_from_claims
from events.domain.models import (
    AUTO_REJECT_REMARK,
    Company,
    Event,
    EventChanges,
    EventItem,
    NewEvent,
    Vendor,
)
from events.domain.value_objects import (
    CompanyId,
    EventId,
    EventItemId,
    EventStatus,
    Location,
    ProposedDates,
    VendorId,
)

__all__ = [
    "AUTO_REJECT_REMARK",
    "Company",
    "Vendor",
    "EventItem",
    "Event",
    "NewEvent",
    "EventChanges",
    "CompanyId",
    "VendorId",
    "EventItemId",
    "EventId",
    "EventStatus",
    "Location",
    "ProposedDates",
    "HrAdmin",
    "VendorAdmin",
    "Identity",
    "Role",
    "identity_from_claims",
]
