"""
VideoPlaylist ORM model.

Singleton row (id=1) holding the homepage hero video URLs in display order.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.orm.base import Base

VIDEO_PLAYLIST_ID = 1


class VideoPlaylist(Base):
    """Hero video playlist."""

    __tablename__ = "site_video_playlist"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=VIDEO_PLAYLIST_ID)
    video_urls: Mapped[list[str]] = mapped_column(
        JSONB, nullable=False, server_default=text("'[]'::jsonb")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )
