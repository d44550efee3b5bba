"""
Admin authentication contract models.
"""

from datetime import datetime

from pydantic import field_serializer

from storefront.models.contracts.common import CamelModel


class LoginRequest(CamelModel):
    """Admin console login"""
    password: str = ""


class SessionStatusResponse(CamelModel):
    """Whether the caller holds a valid admin session"""
    authenticated: bool
    expires_at: datetime | None = None

    @field_serializer("expires_at")
    def serialize_dt(self, dt: datetime | None) -> str | None:
        return dt.isoformat() if dt else None
