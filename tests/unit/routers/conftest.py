"""
Shared fixtures for router tests.

Requests go through the real application over httpx's ASGI transport. The
database session and the service layer are overridden so no database is needed.
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from storefront.core.database import get_db
from storefront.core.security import create_session_token
from storefront.main import create_app
from storefront.routers.layouts import get_layout_service
from storefront.routers.playlist import get_playlist_service
from storefront.routers.theme import get_theme_service
from storefront.services.layout_service import LayoutService
from storefront.services.playlist_service import VideoPlaylistService
from storefront.services.pos_client import get_pos_client
from storefront.services.theme import ThemeService
from tests.helpers.layouts import InMemoryLayoutRepository


@pytest.fixture
def mock_db():
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.execute = AsyncMock()
    return session


@pytest.fixture
def layout_repository() -> InMemoryLayoutRepository:
    return InMemoryLayoutRepository()


@pytest.fixture
def theme_repository():
    repository = MagicMock()
    repository.get_overrides = AsyncMock(return_value={})
    repository.replace_overrides = AsyncMock()
    return repository


@pytest.fixture
def playlist_repository():
    repository = MagicMock()
    repository.get_urls = AsyncMock(return_value=None)
    repository.replace_urls = AsyncMock()
    return repository


@pytest.fixture
def pos_client():
    client = MagicMock()
    client.fetch_client_record = AsyncMock(
        return_value={"primaryColor": "0xFF112233", "textColor": "#333333"}
    )
    return client


@pytest.fixture
def app(mock_db, layout_repository, theme_repository, playlist_repository, pos_client) -> FastAPI:
    app = create_app()

    async def override_get_db() -> AsyncGenerator:
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_layout_service] = lambda: LayoutService(mock_db, repository=layout_repository)
    app.dependency_overrides[get_theme_service] = lambda: ThemeService(mock_db, repository=theme_repository)
    app.dependency_overrides[get_playlist_service] = lambda: VideoPlaylistService(
        mock_db, repository=playlist_repository
    )
    app.dependency_overrides[get_pos_client] = lambda: pos_client
    return app


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Anonymous client. https so the Secure session cookie is sent back."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="https://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def admin_client(app, admin_secret) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client carrying a valid admin session cookie."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="https://testserver") as client:
        client.cookies.set("admin_session", create_session_token(admin_secret))
        yield client
