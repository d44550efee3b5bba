"""
Video playlist contract models.
"""

from typing import Any

from storefront.models.contracts.common import CamelModel


class VideoPlaylistRequest(CamelModel):
    """Replace the hero playlist; validated by VideoPlaylistService"""
    video_urls: Any = None


class VideoPlaylistResponse(CamelModel):
    """Hero playlist in display order"""
    video_urls: list[str]


class VideoPlaylistWriteResponse(CamelModel):
    ok: bool = True
    video_urls: list[str]
