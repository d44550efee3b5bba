"""
Admin Authentication Router

Password login, logout and session status for the admin console.
A successful login sets a signed session cookie; nothing is stored server-side.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import ValidationError

from storefront.config import Settings, get_settings
from storefront.core.auth import OptionalAdmin
from storefront.core.exceptions import ConfigurationError
from storefront.core.rate_limit import LoginLimiter, get_client_ip
from storefront.core.security import create_session_token, verify_admin_password
from storefront.models.contracts.auth import LoginRequest, SessionStatusResponse
from storefront.models.contracts.common import OkResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Authentication"])


# =============================================================================
# Cookie Helpers
# =============================================================================


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Set the admin session cookie; lifetime matches the token expiry."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=settings.session_ttl_seconds,
        path="/",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Overwrite the session cookie with an empty, immediately expiring one."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value="",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=0,
        path="/",
    )


# =============================================================================
# Request Parsing
# =============================================================================


async def read_login_password(request: Request) -> str:
    """Password from a login body, or "" if the body is not valid JSON or has no string password."""
    try:
        body = await request.json()
    except ValueError:
        return ""

    try:
        return LoginRequest.model_validate(body).password
    except ValidationError:
        return ""


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/login")
async def login(
    request: Request,
    response: Response,
    limiter: LoginLimiter,
) -> OkResponse:
    """
    Log in with the admin password.

    Rate limited per client IP. Every attempt counts, so once the limit is hit
    even the correct password is rejected until the window resets. The body
    (``{"password": ...}``) is read after the attempt is counted.

    Raises:
        HTTPException: 429 when rate limited, 401 for a wrong password
        ConfigurationError: If no admin password is configured (500)
    """
    settings = get_settings()
    if not settings.admin_password and not settings.admin_password_hash:
        raise ConfigurationError("Admin password is not configured")

    client_ip = get_client_ip(request)
    await limiter.check("admin_login", client_ip)

    # Parsed only after the attempt is counted; a malformed body is a wrong password
    password = await read_login_password(request)

    if not verify_admin_password(
        password,
        settings.admin_password,
        settings.admin_password_hash,
    ):
        logger.warning(f"Failed admin login from {client_ip}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = create_session_token(settings.admin_secret, ttl_seconds=settings.session_ttl_seconds)
    set_session_cookie(response, token, settings)

    logger.info(f"Admin logged in from {client_ip}")
    return OkResponse()


@router.post("/logout")
async def logout(response: Response) -> OkResponse:
    """Clear the session cookie. Safe to call without a session."""
    clear_session_cookie(response, get_settings())
    logger.info("Admin logged out")
    return OkResponse()


@router.get("/session")
async def session_status(admin: OptionalAdmin) -> SessionStatusResponse:
    """Report whether the caller holds a valid session."""
    if admin is None:
        return SessionStatusResponse(authenticated=False)
    return SessionStatusResponse(authenticated=True, expires_at=admin.expires_at)
