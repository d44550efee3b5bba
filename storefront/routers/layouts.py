"""
Layout Router

Admin endpoints for the versioned homepage section layout.
"""

import logging
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from storefront.core.auth import CurrentAdmin, RequireAdmin
from storefront.core.database import DbSession
from storefront.core.exceptions import InvalidInputError
from storefront.models.contracts.layouts import (
    AdminLayoutResponse,
    LayoutWriteRequest,
    LayoutWriteResponse,
)
from storefront.models.enums import PageKey
from storefront.services.layout_config import is_page_key, sections_for
from storefront.services.layout_service import LayoutService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["Layout"],
    dependencies=[RequireAdmin],  # All endpoints require an admin session
)


# =============================================================================
# Dependencies
# =============================================================================


def get_page_key(page: Annotated[str, Query()] = PageKey.HOME.value) -> PageKey:
    """Resolve the ?page= query parameter to a known page key."""
    if not is_page_key(page):
        raise InvalidInputError("Invalid page key")
    return PageKey(page)


def get_layout_service(db: DbSession) -> LayoutService:
    return LayoutService(db)


PageKeyParam = Annotated[PageKey, Depends(get_page_key)]
LayoutServiceDep = Annotated[LayoutService, Depends(get_layout_service)]


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/layout")
async def get_layout(
    page_key: PageKeyParam,
    service: LayoutServiceDep,
) -> AdminLayoutResponse:
    """
    Get the current layout, the section catalog and the full version history.

    History is newest first and unbounded.
    """
    current = await service.read_current(page_key)
    history = await service.list_history(page_key)

    return AdminLayoutResponse(
        page_key=page_key,
        sections=sections_for(page_key),
        current=current,
        history=history,
    )


@router.post("/layout", status_code=status.HTTP_200_OK)
async def write_layout(
    payload: Annotated[LayoutWriteRequest | list[Any], Body()],
    page_key: PageKeyParam,
    service: LayoutServiceDep,
    db: DbSession,
    admin: CurrentAdmin,
) -> LayoutWriteResponse:
    """
    Save a new layout version, or restore an earlier one.

    Restoring repoints the page at the existing version without adding to
    history.
    """
    # A bare array is the item list itself
    request = payload if isinstance(payload, LayoutWriteRequest) else LayoutWriteRequest(layout=payload)

    if request.action == "restore":
        if not request.version_id:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="versionId is required",
            )

        try:
            version_id = UUID(request.version_id)
        except ValueError:
            # A malformed id cannot name a stored version
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Version not found",
            )

        restored = await service.restore(page_key, version_id)
        if restored is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Version not found",
            )

        await db.commit()
        return LayoutWriteResponse(current=restored)

    saved = await service.save(page_key, request.layout_input(), created_by=admin.actor)
    await db.commit()

    logger.info(f"Layout for {page_key.value} saved by {admin.actor}")

    return LayoutWriteResponse(current=saved)
