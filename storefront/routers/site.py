"""
Public Site Router

Unauthenticated reads used by the homepage.
"""

import asyncio
import logging

from fastapi import APIRouter

from storefront.models.contracts.layouts import PublicLayoutResponse
from storefront.models.contracts.playlist import VideoPlaylistResponse
from storefront.models.contracts.theme import PublicThemeResponse
from storefront.routers.layouts import LayoutServiceDep, PageKeyParam
from storefront.routers.playlist import PlaylistServiceDep
from storefront.routers.theme import PosClientDep, ThemeServiceDep
from storefront.services.theme import extract_theme, merge_theme

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/site", tags=["Site"])


@router.get("/layout")
async def get_site_layout(
    page_key: PageKeyParam,
    service: LayoutServiceDep,
) -> PublicLayoutResponse:
    """Current layout for a page (the default layout if none was saved)."""
    current = await service.read_current(page_key)
    return PublicLayoutResponse(
        page_key=page_key,
        version_id=current.version_id,
        layout=current.layout,
    )


@router.get("/theme")
async def get_site_theme(
    service: ThemeServiceDep,
    pos_client: PosClientDep,
) -> PublicThemeResponse:
    """Effective theme: overrides merged over the POS branding."""
    pos_client_record, overrides = await asyncio.gather(
        pos_client.fetch_client_record(),
        service.read_overrides(),
    )
    return PublicThemeResponse(theme=merge_theme(extract_theme(pos_client_record), overrides))


@router.get("/videos")
async def get_site_videos(service: PlaylistServiceDep) -> VideoPlaylistResponse:
    """Hero playlist."""
    return VideoPlaylistResponse(video_urls=await service.read_urls())
