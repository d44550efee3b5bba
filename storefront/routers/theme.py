"""
Theme Router

Admin endpoints for theme colour overrides.
"""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from storefront.core.auth import RequireAdmin
from storefront.core.database import DbSession
from storefront.models.contracts.theme import (
    ThemeResponse,
    ThemeWriteRequest,
    ThemeWriteResponse,
)
from storefront.services.pos_client import PosClient, get_pos_client
from storefront.services.theme import ThemeService, extract_theme, merge_theme

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["Theme"],
    dependencies=[RequireAdmin],  # All endpoints require an admin session
)


def get_theme_service(db: DbSession) -> ThemeService:
    return ThemeService(db)


ThemeServiceDep = Annotated[ThemeService, Depends(get_theme_service)]
PosClientDep = Annotated[PosClient, Depends(get_pos_client)]


@router.get("/theme")
async def get_theme(
    service: ThemeServiceDep,
    pos_client: PosClientDep,
) -> ThemeResponse:
    """
    Get the upstream theme, the stored overrides and the effective theme.

    Fails with 502 if the POS platform cannot be reached.
    """
    pos_client_record, overrides = await asyncio.gather(
        pos_client.fetch_client_record(),
        service.read_overrides(),
    )
    pos_theme = extract_theme(pos_client_record)

    return ThemeResponse(
        pos_theme=pos_theme,
        overrides=overrides,
        effective_theme=merge_theme(pos_theme, overrides),
    )


@router.post("/theme", status_code=status.HTTP_200_OK)
async def update_theme(
    request: ThemeWriteRequest,
    service: ThemeServiceDep,
    db: DbSession,
) -> ThemeWriteResponse:
    """
    Replace the theme overrides, or clear them with ``{"action": "reset"}``.

    Returns the overrides as stored; invalid colours are dropped.
    """
    if request.action == "reset":
        saved = await service.reset_overrides()
        logger.info("Theme overrides reset")
    else:
        saved = await service.write_overrides(request.overrides_input())

    await db.commit()

    return ThemeWriteResponse(overrides=saved)
