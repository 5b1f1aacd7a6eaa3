"""Resolved caller identities.

The auth gateway authenticates the caller; this module only turns its claims
into one of the two identity variants the core understands.
"""

from dataclasses import dataclass
from enum import Enum

from events.domain.errors import ForbiddenError
from events.domain.value_objects import CompanyId, VendorId


class Role(Enum):
    HR_ADMIN = "HR_ADMIN"
    VENDOR_ADMIN = "VENDOR_ADMIN"


@dataclass(frozen=True)
class HrAdmin:
    """Identity scoped to one Company."""

    user_id: str
    company_id: CompanyId

    role = Role.HR_ADMIN


@dataclass(frozen=True)
class VendorAdmin:
    """Identity scoped to one Vendor."""

    user_id: str
    vendor_id: VendorId

    role = Role.VENDOR_ADMIN


Identity = HrAdmin | VendorAdmin


def identity_from_claims(
    user_id: str,
    role: str | None,
    company_id: str | None = None,
    vendor_id: str | None = None,
) -> Identity:
    """Build an identity from authenticated claims.

    Raises:
        ForbiddenError: For an unknown role, or a role whose scope id is
            missing or malformed.
    """
    try:
        resolved = Role(role)
    except ValueError:
        raise ForbiddenError("Unknown role") from None

    match resolved:
        case Role.HR_ADMIN:
            if not company_id:
                raise ForbiddenError("HR admin identity has no company")
            try:
                return HrAdmin(user_id=user_id, company_id=CompanyId.from_string(company_id))
            except ValueError:
                raise ForbiddenError("HR admin identity has an invalid company") from None
        case Role.VENDOR_ADMIN:
            if not vendor_id:
                raise ForbiddenError("Vendor admin identity has no vendor")
            try:
                return VendorAdmin(user_id=user_id, vendor_id=VendorId.from_string(vendor_id))
            except ValueError:
                raise ForbiddenError("Vendor admin identity has an invalid vendor") from None
