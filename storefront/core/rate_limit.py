"""
Rate Limiting

Fixed-window attempt counting for the admin login endpoint.

The limiter is an explicit object built once per process by create_app() and
kept on app.state; nothing here is a module-level singleton. Counters live in a
pluggable store:

- MemoryRateLimitStore: per-process dict with an injected clock (default).
  Each process instance throttles independently.
- RedisRateLimitStore: INCR/EXPIRE counters shared by every process.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Annotated, Callable, Protocol

import redis.asyncio as redis
from fastapi import Depends, HTTPException, Request, status

from storefront.config import Settings

logger = logging.getLogger(__name__)

RATE_LIMIT_KEY_PREFIX = "storefront:ratelimit"

# Expired windows are swept once the in-memory table grows past this size
MEMORY_PRUNE_THRESHOLD = 1024


def rate_limit_key(endpoint: str, identifier: str) -> str:
    """Key for the attempt counter of one endpoint and client."""
    return f"{RATE_LIMIT_KEY_PREFIX}:{endpoint}:{identifier}"


class RateLimitStore(Protocol):
    """Counter storage used by RateLimiter."""

    async def hit(self, key: str, window_seconds: int) -> tuple[int, int]:
        """
        Record one attempt.

        Returns:
            Tuple of (attempts in the current window including this one,
            seconds until the window resets)
        """
        ...

    async def close(self) -> None:
        ...


@dataclass
class _Window:
    count: int
    reset_at: float


class MemoryRateLimitStore:
    """
    In-process counter table.

    A window opens on the first attempt for a key and lasts window_seconds;
    the count restarts at the first attempt after it has elapsed.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._windows: dict[str, _Window] = {}

    async def hit(self, key: str, window_seconds: int) -> tuple[int, int]:
        now = self._clock()

        if len(self._windows) > MEMORY_PRUNE_THRESHOLD:
            self._prune(now)

        window = self._windows.get(key)
        if window is None or now >= window.reset_at:
            window = _Window(count=0, reset_at=now + window_seconds)
            self._windows[key] = window

        window.count += 1
        retry_after = max(0, math.ceil(window.reset_at - now))
        return window.count, retry_after

    def _prune(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if now >= window.reset_at]
        for key in expired:
            del self._windows[key]

    async def close(self) -> None:
        self._windows.clear()


class RedisRateLimitStore:
    """Redis counters shared across processes (INCR, EXPIRE on first hit)."""

    def __init__(self, client: redis.Redis):
        self._redis = client

    @classmethod
    def from_url(cls, url: str) -> "RedisRateLimitStore":
        return cls(redis.from_url(url, decode_responses=True))

    async def hit(self, key: str, window_seconds: int) -> tuple[int, int]:
        current = await self._redis.incr(key)

        # Set expiry on first request
        if current == 1:
            await self._redis.expire(key, window_seconds)

        ttl = await self._redis.ttl(key)
        if ttl is None or ttl < 0:
            # Key lost its expiry (e.g. a crash between INCR and EXPIRE)
            await self._redis.expire(key, window_seconds)
            ttl = window_seconds

        return int(current), int(ttl)

    async def close(self) -> None:
        await self._redis.aclose()


class RateLimiter:
    """
    Attempt limiter for one endpoint family.

    When limit is exceeded, raises 429 Too Many Requests until the window
    resets. The check does not depend on whether the attempt later succeeds.
    """

    def __init__(
        self,
        store: RateLimitStore,
        max_requests: int = 5,
        window_seconds: int = 600,
    ):
        """
        Initialize rate limiter.

        Args:
            store: Counter storage
            max_requests: Maximum attempts allowed in the window
            window_seconds: Window length in seconds
        """
        self.store = store
        self.max_requests = max_requests
        self.window_seconds = window_seconds

    async def check(self, endpoint: str, identifier: str) -> None:
        """
        Count an attempt and reject it if the limit is exceeded.

        Args:
            endpoint: Endpoint name for rate limit key
            identifier: Client IP address

        Raises:
            HTTPException: If rate limit exceeded (429)
        """
        key = rate_limit_key(endpoint, identifier)
        current, retry_after = await self.store.hit(key, self.window_seconds)

        if current > self.max_requests:
            logger.warning(
                f"Rate limit exceeded for {endpoint}",
                extra={
                    "endpoint": endpoint,
                    "identifier": identifier,
                    "requests": current,
                    "limit": self.max_requests,
                }
            )
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail="Too many attempts, try again later",
                headers={"Retry-After": str(retry_after)},
            )

    async def close(self) -> None:
        await self.store.close()


def build_login_limiter(
    settings: Settings,
    clock: Callable[[], float] = time.monotonic,
) -> RateLimiter:
    """Create the process-wide login limiter from settings."""
    store: RateLimitStore
    if settings.rate_limit_backend == "redis":
        store = RedisRateLimitStore.from_url(settings.redis_url)
    else:
        store = MemoryRateLimitStore(clock=clock)

    return RateLimiter(
        store,
        max_requests=settings.login_max_attempts,
        window_seconds=settings.login_window_seconds,
    )


def get_client_ip(request: Request) -> str:
    """
    Get client IP address from request.

    Handles X-Forwarded-For header for requests behind proxy/load balancer.
    """
    # Check for forwarded header (behind proxy)
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # Take first IP (original client)
        return forwarded.split(",")[0].strip()

    # Direct connection
    if request.client:
        return request.client.host

    return "unknown"


def get_login_limiter(request: Request) -> RateLimiter:
    """FastAPI dependency returning the limiter created at startup."""
    return request.app.state.login_limiter


LoginLimiter = Annotated[RateLimiter, Depends(get_login_limiter)]
