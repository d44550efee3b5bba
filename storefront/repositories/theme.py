"""
Theme Settings Repository

Reads and replaces the singleton theme overrides row.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert

from storefront.models.orm.theme import THEME_SETTINGS_ID, ThemeSettings
from storefront.repositories.base import BaseRepository


class ThemeSettingsRepository(BaseRepository):
    """Singleton overrides document, replaced whole on every write."""

    async def get_overrides(self) -> dict[str, Any] | None:
        """Stored overrides document as-is, or None if never written."""
        result = await self._execute(
            select(ThemeSettings.overrides).where(ThemeSettings.id == THEME_SETTINGS_ID)
        )
        return result.scalars().first()

    async def replace_overrides(self, overrides: dict[str, str]) -> None:
        """Upsert the singleton row with a complete overrides document."""
        stmt = insert(ThemeSettings).values(
            id=THEME_SETTINGS_ID,
            overrides=overrides,
            updated_at=func.now(),
        ).on_conflict_do_update(
            index_elements=[ThemeSettings.id],
            set_={
                "overrides": overrides,
                "updated_at": func.now(),
            },
        )
        await self._execute(stmt)
