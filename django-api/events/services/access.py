"""Tenant isolation checks for single-event lookups.

List queries are scoped by the caller's own id and do not go through here.
"""

import logging

from events.domain import Event, HrAdmin, Identity, VendorAdmin
from events.domain.errors import ForbiddenError

logger = logging.getLogger(__name__)


def validate_access(event: Event, identity: Identity) -> None:
    """Allow an identity to touch an event only inside its own tenant.

    Raises:
        ForbiddenError: If the identity's company or vendor differs from the
            event's, or the identity is of no known kind.
    """
    match identity:
        case HrAdmin(company_id=company_id) if company_id == event.company_id:
            return
        case VendorAdmin(vendor_id=vendor_id) if vendor_id == event.vendor_id:
            return
        case HrAdmin() | VendorAdmin():
            logger.warning(
                "Tenant mismatch: user=%s role=%s event=%s",
                identity.user_id,
                identity.role.value,
                event.id,
            )
        case _:
            logger.warning("Unknown identity kind for event=%s", event.id)
    raise ForbiddenError()
