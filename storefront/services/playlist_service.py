"""Service for the homepage hero video playlist."""

import logging
from typing import Any
from urllib.parse import urlsplit

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import InvalidInputError
from storefront.repositories.playlist import VideoPlaylistRepository

logger = logging.getLogger(__name__)


def is_https_url(value: str) -> bool:
    """Check that a string is an absolute https URL with a host."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme == "https" and bool(parts.netloc)


def clean_video_urls(raw: Any) -> list[str]:
    """
    Validate a playlist submitted by the admin.

    Entries are stringified and trimmed, blanks are dropped.

    Raises:
        InvalidInputError: If the input is not a non-empty list, nothing is left
            after trimming, or any entry is not an https URL
    """
    if not isinstance(raw, list) or not raw:
        raise InvalidInputError("videoUrls must be a non-empty array", status_code=422)

    cleaned = [str(value).strip() for value in raw if value is not None]
    cleaned = [value for value in cleaned if value]
    if not cleaned:
        raise InvalidInputError("videoUrls must contain at least one URL", status_code=422)

    invalid = next((value for value in cleaned if not is_https_url(value)), None)
    if invalid is not None:
        raise InvalidInputError(f"Invalid https URL: {invalid}", status_code=422)

    return cleaned


class VideoPlaylistService:
    """Service for reading and replacing the playlist."""

    def __init__(self, session: AsyncSession, repository: VideoPlaylistRepository | None = None):
        self.session = session
        self.repository = repository or VideoPlaylistRepository(session)

    async def read_urls(self) -> list[str]:
        """Stored playlist; empty if none was ever saved."""
        stored = await self.repository.get_urls()
        if not isinstance(stored, list):
            return []
        return [str(value).strip() for value in stored if value and str(value).strip()]

    async def write_urls(self, raw: Any) -> list[str]:
        """Validate and store a new playlist, returning what was stored."""
        urls = clean_video_urls(raw)
        await self.repository.replace_urls(urls)
        logger.info(f"Video playlist replaced ({len(urls)} URLs)")
        return urls
