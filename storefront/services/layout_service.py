"""
Layout Version Service

Save, list and restore homepage section layouts.

Every save appends an immutable version and repoints the page's current
pointer at it. Restore only repoints, so history does not grow. Callers commit
the session after a save so the insert and the repoint land together.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.contracts.layouts import LayoutState, LayoutVersionPublic
from storefront.models.enums import PageKey
from storefront.models.orm.layouts import LayoutVersion
from storefront.repositories.layouts import LayoutRepository
from storefront.services.layout_config import default_layout, normalize_layout

logger = logging.getLogger(__name__)


class LayoutService:
    """Service for layout versions of a page."""

    def __init__(self, session: AsyncSession, repository: LayoutRepository | None = None):
        """Initialize the service with a database session."""
        self.session = session
        self.repository = repository or LayoutRepository(session)

    async def read_current(self, page_key: PageKey) -> LayoutState:
        """
        Get the layout a page currently shows.

        Returns:
            LayoutState for the current version, or the default layout with
            version_id None when nothing has been saved for the page
        """
        version = await self.repository.get_current(page_key.value)
        if version is None:
            return LayoutState(version_id=None, layout=default_layout(page_key))

        return LayoutState(
            version_id=version.id,
            layout=normalize_layout(version.layout, page_key),
        )

    async def list_history(self, page_key: PageKey) -> list[LayoutVersionPublic]:
        """All versions for a page, newest first, each normalized."""
        versions = await self.repository.list_versions(page_key.value)
        return [self._to_public(version, page_key) for version in versions]

    async def save(
        self,
        page_key: PageKey,
        layout_input: object,
        created_by: str | None = None,
    ) -> LayoutState:
        """
        Save a new layout version and make it current.

        Args:
            page_key: Page being edited
            layout_input: Raw layout document from the admin
            created_by: Who made the change

        Returns:
            LayoutState with the new version id and the normalized layout
            that was stored (not the raw input)
        """
        layout = normalize_layout(layout_input, page_key)

        version = await self.repository.insert_version(
            page_key=page_key.value,
            layout=layout.model_dump(mode="json"),
            created_by=created_by,
        )
        await self.repository.set_current(page_key.value, version.id)

        logger.info(
            f"Saved layout version {version.id} for page {page_key.value}",
            extra={"page_key": page_key.value, "version_id": str(version.id), "items": len(layout.items)},
        )

        return LayoutState(version_id=version.id, layout=layout)

    async def restore(self, page_key: PageKey, version_id: UUID) -> LayoutState | None:
        """
        Make an existing version current again.

        Args:
            page_key: Page being edited
            version_id: Version to restore; must belong to the page

        Returns:
            LayoutState for the restored version, or None if no such version
            exists for the page (nothing is changed in that case)
        """
        version = await self.repository.get_version(page_key.value, version_id)
        if version is None:
            logger.info(
                f"Layout version {version_id} not found for page {page_key.value}"
            )
            return None

        await self.repository.set_current(page_key.value, version.id)

        logger.info(
            f"Restored layout version {version.id} for page {page_key.value}",
            extra={"page_key": page_key.value, "version_id": str(version.id)},
        )

        return LayoutState(
            version_id=version.id,
            layout=normalize_layout(version.layout, page_key),
        )

    @staticmethod
    def _to_public(version: LayoutVersion, page_key: PageKey) -> LayoutVersionPublic:
        return LayoutVersionPublic(
            id=version.id,
            page_key=page_key,
            layout=normalize_layout(version.layout, page_key),
            created_at=version.created_at,
            created_by=version.created_by,
        )
