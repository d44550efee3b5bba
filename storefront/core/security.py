"""
Security Utilities

Admin session tokens and password verification.

Session tokens are compact HS256 tokens (header.payload.signature, base64url)
signed with PyJWT. The signing secret is always passed in by the caller so the
functions can be exercised without any environment setup.

Uses pwdlib (modern replacement for unmaintained passlib) when the admin
password is configured as a bcrypt hash.
"""

import logging
import secrets
import time
import uuid
from typing import Any

import jwt
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.bcrypt import BcryptHasher

logger = logging.getLogger(__name__)

SESSION_SUBJECT = "admin"
SESSION_ALGORITHM = "HS256"
DEFAULT_SESSION_TTL_SECONDS = 2 * 60 * 60

# We explicitly use BcryptHasher to avoid requiring argon2 dependency
password_hash = PasswordHash((BcryptHasher(),))


def create_session_token(
    secret: str,
    ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
    now: float | None = None,
) -> str:
    """
    Create a signed admin session token.

    Args:
        secret: Server-held signing secret
        ttl_seconds: Lifetime of the token in seconds
        now: Unix time to issue at (defaults to the current time)

    Returns:
        Token string with three dot-separated base64url segments
    """
    issued_at = int(now if now is not None else time.time())
    payload = {
        "sub": SESSION_SUBJECT,
        "exp": issued_at + ttl_seconds,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(payload, secret, algorithm=SESSION_ALGORITHM)


def verify_session_token(
    token: str | None,
    secret: str,
    now: float | None = None,
) -> dict[str, Any] | None:
    """
    Verify an admin session token.

    PyJWT recomputes the HMAC over the first two segments and compares it with
    hmac.compare_digest. Expiry is checked here against ``now`` rather than by
    PyJWT so callers can pin the clock.

    Args:
        token: Token string from the session cookie
        secret: Server-held signing secret
        now: Unix time to check expiry against (defaults to the current time)

    Returns:
        Decoded payload, or None if the token is missing, malformed,
        tampered with, not an admin token, or expired
    """
    if not token:
        return None

    if len(token.split(".")) != 3:
        return None

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[SESSION_ALGORITHM],
            options={"verify_exp": False},
        )
    except jwt.InvalidTokenError:
        return None
    except (ValueError, TypeError):
        return None

    if payload.get("sub") != SESSION_SUBJECT:
        return None

    exp = payload.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return None

    current = now if now is not None else time.time()
    if current > exp:
        return None

    if not isinstance(payload.get("jti"), str):
        return None

    return payload


def verify_admin_password(
    supplied: str,
    password: str | None,
    hashed_password: str | None = None,
) -> bool:
    """
    Check a login attempt against the configured admin password.

    A bcrypt hash, when configured, takes precedence over the plaintext value.
    Plaintext comparison is constant-time.
    """
    if hashed_password:
        try:
            return password_hash.verify(supplied, hashed_password)
        except (UnknownHashError, ValueError):
            logger.warning("Configured admin password hash could not be parsed")
            return False

    if not password:
        return False

    return secrets.compare_digest(supplied.encode("utf-8"), password.encode("utf-8"))


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Used to produce a value for STOREFRONT_ADMIN_PASSWORD_HASH.
    """
    return password_hash.hash(password)
