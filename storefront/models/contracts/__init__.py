"""
Pydantic contracts (API request/response models).
"""

from storefront.models.contracts.auth import LoginRequest, SessionStatusResponse
from storefront.models.contracts.common import CamelModel, OkResponse
from storefront.models.contracts.health import HealthResponse
from storefront.models.contracts.layouts import (
    AdminLayoutResponse,
    LayoutConfig,
    LayoutItem,
    LayoutSection,
    LayoutState,
    LayoutVersionPublic,
    LayoutWriteRequest,
    LayoutWriteResponse,
    PublicLayoutResponse,
)
from storefront.models.contracts.playlist import (
    VideoPlaylistRequest,
    VideoPlaylistResponse,
    VideoPlaylistWriteResponse,
)
from storefront.models.contracts.theme import (
    PublicThemeResponse,
    ThemeResponse,
    ThemeWriteRequest,
    ThemeWriteResponse,
)

__all__ = [
    "CamelModel",
    "OkResponse",
    "HealthResponse",
    # Auth
    "LoginRequest",
    "SessionStatusResponse",
    # Layouts
    "LayoutSection",
    "LayoutItem",
    "LayoutConfig",
    "LayoutState",
    "LayoutVersionPublic",
    "LayoutWriteRequest",
    "LayoutWriteResponse",
    "AdminLayoutResponse",
    "PublicLayoutResponse",
    # Theme
    "ThemeResponse",
    "ThemeWriteRequest",
    "ThemeWriteResponse",
    "PublicThemeResponse",
    # Playlist
    "VideoPlaylistRequest",
    "VideoPlaylistResponse",
    "VideoPlaylistWriteResponse",
]
