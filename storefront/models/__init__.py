"""
Storefront Models

ORM models (database tables):
    from storefront.models import LayoutVersion, ThemeSettings
    from storefront.models.orm.layouts import LayoutVersion  # Granular access

Pydantic contracts (API request/response):
    from storefront.models import LayoutConfig, ThemeResponse
    from storefront.models.contracts.layouts import LayoutConfig  # Granular access

Enums:
    from storefront.models import PageKey
    from storefront.models.enums import PageKey
"""

# ORM models (database tables)
from storefront.models.orm import (
    Base,
    LayoutCurrent,
    LayoutVersion,
    ThemeSettings,
    VideoPlaylist,
)

# Pydantic schemas (API request/response) - from contracts/
from storefront.models.contracts import (
    AdminLayoutResponse,
    HealthResponse,
    LayoutConfig,
    LayoutItem,
    LayoutSection,
    LayoutState,
    LayoutVersionPublic,
    LayoutWriteRequest,
    LayoutWriteResponse,
    LoginRequest,
    OkResponse,
    PublicLayoutResponse,
    PublicThemeResponse,
    SessionStatusResponse,
    ThemeResponse,
    ThemeWriteRequest,
    ThemeWriteResponse,
    VideoPlaylistRequest,
    VideoPlaylistResponse,
    VideoPlaylistWriteResponse,
)

# Enums
from storefront.models.enums import LayoutSectionId, PageKey

__all__ = [
    # ORM
    "Base",
    "LayoutVersion",
    "LayoutCurrent",
    "ThemeSettings",
    "VideoPlaylist",
    # Contracts
    "AdminLayoutResponse",
    "HealthResponse",
    "LayoutConfig",
    "LayoutItem",
    "LayoutSection",
    "LayoutState",
    "LayoutVersionPublic",
    "LayoutWriteRequest",
    "LayoutWriteResponse",
    "LoginRequest",
    "OkResponse",
    "PublicLayoutResponse",
    "PublicThemeResponse",
    "SessionStatusResponse",
    "ThemeResponse",
    "ThemeWriteRequest",
    "ThemeWriteResponse",
    "VideoPlaylistRequest",
    "VideoPlaylistResponse",
    "VideoPlaylistWriteResponse",
    # Enums
    "LayoutSectionId",
    "PageKey",
]
