"""
ThemeSettings ORM model.

Singleton row (id=1) holding the admin's colour overrides.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.orm.base import Base

THEME_SETTINGS_ID = 1


class ThemeSettings(Base):
    """Theme colour overrides layered over the POS branding."""

    __tablename__ = "site_theme_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=THEME_SETTINGS_ID)
    overrides: Mapped[dict[str, Any]] = mapped_column(
        JSONB, nullable=False, server_default=text("'{}'::jsonb")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )
