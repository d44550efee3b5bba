"""
Authentication and Authorization

FastAPI dependencies gating the admin console.

There is no session table: the signed token in the admin session cookie is the
only record of a login, verified on every request.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from storefront.config import get_settings
from storefront.core.security import verify_session_token

logger = logging.getLogger(__name__)


@dataclass
class AdminPrincipal:
    """
    Authenticated admin session.

    Built from the verified token payload (no database lookup required).
    """
    subject: str
    session_id: str
    expires_at: datetime

    @property
    def actor(self) -> str:
        """Name recorded as created_by on layout versions."""
        return self.subject


async def get_current_admin_optional(request: Request) -> AdminPrincipal | None:
    """
    Get the current admin session from the session cookie (optional).

    Returns None if the cookie is missing or the token is invalid or expired.
    Does not raise an exception for unauthenticated requests.
    """
    settings = get_settings()
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return None

    payload = verify_session_token(token, settings.admin_secret)
    if payload is None:
        return None

    return AdminPrincipal(
        subject=payload["sub"],
        session_id=payload["jti"],
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


async def get_current_admin(
    admin: Annotated[AdminPrincipal | None, Depends(get_current_admin_optional)],
) -> AdminPrincipal:
    """
    Get the current admin session (required).

    Raises:
        HTTPException: If not authenticated or the session has expired
    """
    if admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return admin


# Dependency for requiring an admin session
# Usage: dependencies=[RequireAdmin]
RequireAdmin = Depends(get_current_admin)

# Type aliases for dependency injection
CurrentAdmin = Annotated[AdminPrincipal, Depends(get_current_admin)]
OptionalAdmin = Annotated[AdminPrincipal | None, Depends(get_current_admin_optional)]
