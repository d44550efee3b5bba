"""
Layout Repository

Data access for the layout version log and the per-page current pointer.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert

from storefront.models.orm.layouts import LayoutCurrent, LayoutVersion
from storefront.repositories.base import BaseRepository


class LayoutRepository(BaseRepository):
    """
    Layout version repository.

    Version rows are only ever inserted. The pointer table is upserted by
    page key, so repointing never touches the log.
    """

    async def get_current(self, page_key: str) -> LayoutVersion | None:
        """Version the page currently points at, or None if nothing was saved yet."""
        query = (
            select(LayoutVersion)
            .join(LayoutCurrent, LayoutCurrent.version_id == LayoutVersion.id)
            .where(LayoutCurrent.page_key == page_key)
            .limit(1)
        )
        result = await self._execute(query)
        return result.scalars().first()

    async def list_versions(self, page_key: str) -> list[LayoutVersion]:
        """All versions for a page, newest first."""
        query = (
            select(LayoutVersion)
            .where(LayoutVersion.page_key == page_key)
            .order_by(LayoutVersion.created_at.desc())
        )
        result = await self._execute(query)
        return list(result.scalars().all())

    async def get_version(self, page_key: str, version_id: UUID) -> LayoutVersion | None:
        """Version by id, restricted to the given page."""
        query = select(LayoutVersion).where(
            LayoutVersion.id == version_id,
            LayoutVersion.page_key == page_key,
        )
        result = await self._execute(query)
        return result.scalars().first()

    async def insert_version(
        self,
        page_key: str,
        layout: dict[str, Any],
        created_by: str | None = None,
    ) -> LayoutVersion:
        """
        Append a version row.

        Args:
            page_key: Page the layout belongs to
            layout: Normalized layout document (JSON-serializable)
            created_by: Who saved it

        Returns:
            The flushed LayoutVersion
        """
        version = LayoutVersion(
            id=uuid4(),
            page_key=page_key,
            layout=layout,
            created_at=datetime.now(timezone.utc),
            created_by=created_by,
        )
        self.session.add(version)
        await self._flush()
        return version

    async def set_current(self, page_key: str, version_id: UUID) -> None:
        """Point the page at a version (insert or update the pointer row)."""
        stmt = insert(LayoutCurrent).values(
            page_key=page_key,
            version_id=version_id,
            updated_at=func.now(),
        ).on_conflict_do_update(
            index_elements=[LayoutCurrent.page_key],
            set_={
                "version_id": version_id,
                "updated_at": func.now(),
            },
        )
        await self._execute(stmt)
