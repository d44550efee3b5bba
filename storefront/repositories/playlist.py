"""
Video Playlist Repository
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert

from storefront.models.orm.playlist import VIDEO_PLAYLIST_ID, VideoPlaylist
from storefront.repositories.base import BaseRepository


class VideoPlaylistRepository(BaseRepository):
    """Singleton playlist row, replaced whole on every write."""

    async def get_urls(self) -> Any:
        """Stored URL list as-is, or None if never written."""
        result = await self._execute(
            select(VideoPlaylist.video_urls).where(VideoPlaylist.id == VIDEO_PLAYLIST_ID)
        )
        return result.scalars().first()

    async def replace_urls(self, urls: list[str]) -> None:
        stmt = insert(VideoPlaylist).values(
            id=VIDEO_PLAYLIST_ID,
            video_urls=urls,
            updated_at=func.now(),
        ).on_conflict_do_update(
            index_elements=[VideoPlaylist.id],
            set_={
                "video_urls": urls,
                "updated_at": func.now(),
            },
        )
        await self._execute(stmt)
