"""
Layout version ORM models.

site_layout_versions is an append-only log of layout documents.
site_layout_current holds one pointer per page key into that log.
"""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Index, String, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.orm.base import Base


class LayoutVersion(Base):
    """Immutable snapshot of a page's section arrangement."""

    __tablename__ = "site_layout_versions"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    page_key: Mapped[str] = mapped_column(String(50), nullable=False)
    layout: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )
    created_by: Mapped[str | None] = mapped_column(String(255), default=None)

    __table_args__ = (
        Index("ix_site_layout_versions_page_key_created_at", "page_key", "created_at"),
    )


class LayoutCurrent(Base):
    """Current-version pointer for a page key."""

    __tablename__ = "site_layout_current"

    page_key: Mapped[str] = mapped_column(String(50), primary_key=True)
    version_id: Mapped[UUID] = mapped_column(
        ForeignKey("site_layout_versions.id"), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )

