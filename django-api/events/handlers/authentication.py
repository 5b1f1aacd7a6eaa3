"""Adapter from the auth gateway's headers to a domain identity.

Credentials are verified upstream; requests reach this service with the
caller's claims in trusted headers.
"""

from rest_framework.authentication import BaseAuthentication
from rest_framework.request import Request

from events.domain import Identity, identity_from_claims

USER_ID_HEADER = "HTTP_X_USER_ID"
ROLE_HEADER = "HTTP_X_USER_ROLE"
COMPANY_HEADER = "HTTP_X_COMPANY_ID"
VENDOR_HEADER = "HTTP_X_VENDOR_ID"


class IdentityUser:
    """Minimal user object so DRF permissions see an authenticated caller."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, identity: Identity) -> None:
        self.identity = identity

    @property
    def pk(self) -> str:
        return self.identity.user_id


class GatewayIdentityAuthentication(BaseAuthentication):
    """Builds the caller identity from X-User-* headers."""

    def authenticate(self, request: Request):
        meta = request.META
        user_id = meta.get(USER_ID_HEADER)
        if not user_id:
            return None
        identity = identity_from_claims(
            user_id=user_id,
            role=meta.get(ROLE_HEADER),
            company_id=meta.get(COMPANY_HEADER),
            vendor_id=meta.get(VENDOR_HEADER),
        )
        return IdentityUser(identity), None

    def authenticate_header(self, request: Request) -> str:
        return "Gateway"
