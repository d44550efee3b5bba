"""
Video Playlist Router

Admin endpoints for the homepage hero videos.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from storefront.core.auth import RequireAdmin
from storefront.core.database import DbSession
from storefront.models.contracts.playlist import (
    VideoPlaylistRequest,
    VideoPlaylistResponse,
    VideoPlaylistWriteResponse,
)
from storefront.services.playlist_service import VideoPlaylistService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["Videos"],
    dependencies=[RequireAdmin],  # All endpoints require an admin session
)


def get_playlist_service(db: DbSession) -> VideoPlaylistService:
    return VideoPlaylistService(db)


PlaylistServiceDep = Annotated[VideoPlaylistService, Depends(get_playlist_service)]


@router.get("/videos")
async def get_videos(service: PlaylistServiceDep) -> VideoPlaylistResponse:
    """Get the hero playlist."""
    return VideoPlaylistResponse(video_urls=await service.read_urls())


@router.post("/videos", status_code=status.HTTP_200_OK)
async def update_videos(
    request: VideoPlaylistRequest,
    service: PlaylistServiceDep,
    db: DbSession,
) -> VideoPlaylistWriteResponse:
    """
    Replace the hero playlist.

    Requires a non-empty list of https URLs; fails with 422 otherwise.
    """
    urls = await service.write_urls(request.video_urls)
    await db.commit()
    return VideoPlaylistWriteResponse(video_urls=urls)
