"""
Layout contract models.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import ConfigDict, Field, field_serializer

from storefront.models.contracts.common import CamelModel
from storefront.models.enums import LayoutSectionId, PageKey


# ==================== CATALOG ====================


class LayoutSection(CamelModel):
    """A section that can appear on a page (static catalog entry)"""
    model_config = ConfigDict(frozen=True)

    id: LayoutSectionId
    label: str
    description: str


# ==================== DOCUMENTS ====================


class LayoutItem(CamelModel):
    """One section in display order"""
    id: LayoutSectionId
    enabled: bool = True


class LayoutConfig(CamelModel):
    """Ordered section arrangement for a page; ids are unique and known to the catalog"""
    items: list[LayoutItem] = Field(default_factory=list)


class LayoutState(CamelModel):
    """The layout a page currently shows and the version it came from"""
    version_id: UUID | None = Field(default=None, description="None when no version has been saved yet")
    layout: LayoutConfig


class LayoutVersionPublic(CamelModel):
    """History entry"""
    id: UUID
    page_key: PageKey
    layout: LayoutConfig
    created_at: datetime
    created_by: str | None = None

    @field_serializer("created_at")
    def serialize_dt(self, dt: datetime) -> str:
        return dt.isoformat()


# ==================== REQUESTS / RESPONSES ====================


class LayoutWriteRequest(CamelModel):
    """
    Save or restore a page layout.

    ``{"action": "restore", "versionId": ...}`` repoints the page at an existing
    version. Any other body saves ``layout`` (or a top-level ``items`` list) as a
    new version; unrecognised actions are treated as a save.
    """
    action: str | None = None
    version_id: str | None = None
    layout: Any = None
    items: Any = None

    def layout_input(self) -> Any:
        """Raw layout document to normalize and save."""
        if self.layout is not None:
            return self.layout
        return {"items": self.items if self.items is not None else []}


class AdminLayoutResponse(CamelModel):
    """Current layout, section catalog and full history for a page"""
    page_key: PageKey
    sections: list[LayoutSection]
    current: LayoutState
    history: list[LayoutVersionPublic]


class LayoutWriteResponse(CamelModel):
    """Result of a save or restore"""
    ok: bool = True
    current: LayoutState


class PublicLayoutResponse(CamelModel):
    """Layout read by the public homepage"""
    page_key: PageKey
    version_id: UUID | None = None
    layout: LayoutConfig
