# FastAPI Routers
from storefront.routers.auth import router as auth_router
from storefront.routers.health import router as health_router
from storefront.routers.layouts import router as layouts_router
from storefront.routers.playlist import router as playlist_router
from storefront.routers.site import router as site_router
from storefront.routers.theme import router as theme_router

__all__ = [
    "auth_router",
    "health_router",
    "layouts_router",
    "playlist_router",
    "site_router",
    "theme_router",
]
