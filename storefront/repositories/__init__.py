# Data access layer - PostgreSQL repositories
from storefront.repositories.base import BaseRepository
from storefront.repositories.layouts import LayoutRepository
from storefront.repositories.playlist import VideoPlaylistRepository
from storefront.repositories.theme import ThemeSettingsRepository

__all__ = [
    "BaseRepository",
    "LayoutRepository",
    "ThemeSettingsRepository",
    "VideoPlaylistRepository",
]
