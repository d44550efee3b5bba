"""
SQLAlchemy ORM Models

Pure database models using SQLAlchemy 2.0 declarative style.

For API schemas (requests/responses), see storefront.models.contracts
"""

from storefront.models.orm.base import Base
from storefront.models.orm.layouts import LayoutCurrent, LayoutVersion
from storefront.models.orm.playlist import VIDEO_PLAYLIST_ID, VideoPlaylist
from storefront.models.orm.theme import THEME_SETTINGS_ID, ThemeSettings

__all__ = [
    # Base
    "Base",
    # Layouts
    "LayoutVersion",
    "LayoutCurrent",
    # Theme
    "ThemeSettings",
    "THEME_SETTINGS_ID",
    # Playlist
    "VideoPlaylist",
    "VIDEO_PLAYLIST_ID",
]
