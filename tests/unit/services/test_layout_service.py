"""
Unit tests for LayoutService.

Uses InMemoryLayoutRepository so the version log and the
current pointer can be inspected directly.
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from storefront.models.enums import LayoutSectionId, PageKey
from storefront.services.layout_service import LayoutService
from tests.helpers.layouts import InMemoryLayoutRepository


@pytest.fixture
def repository() -> InMemoryLayoutRepository:
    return InMemoryLayoutRepository()


@pytest.fixture
def service(repository) -> LayoutService:
    return LayoutService(MagicMock(), repository=repository)


class TestReadCurrent:

    @pytest.mark.asyncio
    async def test_default_layout_before_first_save(self, service):
        state = await service.read_current(PageKey.HOME)

        assert state.version_id is None
        assert [item.id.value for item in state.layout.items] == [
            "ticker",
            "story",
            "seasonal",
            "categories",
            "contact",
        ]

    @pytest.mark.asyncio
    async def test_stored_layout_is_normalized_on_read(self, service, repository):
        version = await repository.insert_version(
            "home",
            {"items": [{"id": "story"}, {"id": "legacy"}, {"id": "story"}]},
        )
        await repository.set_current("home", version.id)

        state = await service.read_current(PageKey.HOME)

        assert state.version_id == version.id
        assert [item.id for item in state.layout.items] == [LayoutSectionId.STORY]


class TestSave:

    @pytest.mark.asyncio
    async def test_save_then_read_returns_normalized_input(self, service):
        saved = await service.save(
            PageKey.HOME,
            {"items": [{"id": "contact", "enabled": False}, {"id": "nope"}, {"id": "ticker"}]},
            created_by="admin",
        )

        current = await service.read_current(PageKey.HOME)

        assert current.version_id == saved.version_id
        assert current.layout == saved.layout
        assert [(i.id.value, i.enabled) for i in current.layout.items] == [
            ("contact", False),
            ("ticker", True),
        ]

    @pytest.mark.asyncio
    async def test_stored_document_is_normalized(self, service, repository):
        await service.save(PageKey.HOME, [{"id": "story"}, {"id": "story"}])

        assert repository.versions[0].layout == {"items": [{"id": "story", "enabled": True}]}

    @pytest.mark.asyncio
    async def test_each_save_adds_history_newest_first(self, service):
        first = await service.save(PageKey.HOME, {"items": [{"id": "ticker"}]}, created_by="admin")
        second = await service.save(PageKey.HOME, {"items": [{"id": "story"}]}, created_by="admin")

        history = await service.list_history(PageKey.HOME)

        assert [v.id for v in history] == [second.version_id, first.version_id]
        assert all(v.created_by == "admin" for v in history)

    @pytest.mark.asyncio
    async def test_empty_layout_is_saved(self, service):
        saved = await service.save(PageKey.HOME, {"items": []})

        assert saved.version_id is not None
        assert saved.layout.items == []


class TestRestore:

    @pytest.mark.asyncio
    async def test_restore_repoints_without_growing_history(self, service):
        first = await service.save(PageKey.HOME, {"items": [{"id": "ticker"}]})
        await service.save(PageKey.HOME, {"items": [{"id": "story"}]})

        restored = await service.restore(PageKey.HOME, first.version_id)

        assert restored.version_id == first.version_id
        assert (await service.read_current(PageKey.HOME)).version_id == first.version_id
        assert len(await service.list_history(PageKey.HOME)) == 2

    @pytest.mark.asyncio
    async def test_restore_unknown_version_changes_nothing(self, service):
        saved = await service.save(PageKey.HOME, {"items": [{"id": "ticker"}]})

        result = await service.restore(PageKey.HOME, uuid4())

        assert result is None
        assert (await service.read_current(PageKey.HOME)).version_id == saved.version_id

    @pytest.mark.asyncio
    async def test_restore_version_of_other_page_not_found(self, service, repository):
        other = await repository.insert_version("menu", {"items": []})

        assert await service.restore(PageKey.HOME, other.id) is None
