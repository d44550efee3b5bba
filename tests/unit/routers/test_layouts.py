"""Router tests for admin layout save, restore and history."""

from uuid import uuid4

import pytest


class TestGetLayout:

    @pytest.mark.asyncio
    async def test_default_state(self, admin_client):
        response = await admin_client.get("/api/admin/layout")

        assert response.status_code == 200
        body = response.json()
        assert body["pageKey"] == "home"
        assert body["current"]["versionId"] is None
        assert [s["id"] for s in body["sections"]] == ["ticker", "story", "seasonal", "categories", "contact"]
        assert body["history"] == []

    @pytest.mark.asyncio
    async def test_unknown_page_rejected(self, admin_client):
        response = await admin_client.get("/api/admin/layout", params={"page": "about"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid page key"}


class TestSaveLayout:

    @pytest.mark.asyncio
    async def test_save_normalizes_and_commits(self, admin_client, mock_db, layout_repository):
        response = await admin_client.post(
            "/api/admin/layout",
            json={"layout": {"items": [{"id": "contact", "enabled": False}, {"id": "bogus"}, {"id": "contact"}]}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["current"]["layout"] == {"items": [{"id": "contact", "enabled": False}]}
        assert body["current"]["versionId"] == str(layout_repository.versions[0].id)
        assert layout_repository.versions[0].created_by == "admin"
        mock_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_top_level_items_accepted(self, admin_client):
        response = await admin_client.post(
            "/api/admin/layout",
            json={"items": [{"id": "story"}, {"id": "ticker"}]},
        )

        assert [i["id"] for i in response.json()["current"]["layout"]["items"]] == ["story", "ticker"]

    @pytest.mark.asyncio
    async def test_saves_appear_in_history_newest_first(self, admin_client):
        first = await admin_client.post("/api/admin/layout", json={"items": [{"id": "ticker"}]})
        second = await admin_client.post("/api/admin/layout", json={"items": [{"id": "story"}]})

        history = (await admin_client.get("/api/admin/layout")).json()["history"]

        assert [v["id"] for v in history] == [
            second.json()["current"]["versionId"],
            first.json()["current"]["versionId"],
        ]
        assert history[0]["createdBy"] == "admin"


class TestRestoreLayout:

    @pytest.mark.asyncio
    async def test_restore_repoints_without_new_version(self, admin_client, layout_repository):
        first = await admin_client.post("/api/admin/layout", json={"items": [{"id": "ticker"}]})
        await admin_client.post("/api/admin/layout", json={"items": [{"id": "story"}]})
        first_id = first.json()["current"]["versionId"]

        response = await admin_client.post(
            "/api/admin/layout",
            json={"action": "restore", "versionId": first_id},
        )

        assert response.status_code == 200
        assert response.json()["current"]["versionId"] == first_id
        assert len(layout_repository.versions) == 2

        current = (await admin_client.get("/api/admin/layout")).json()["current"]
        assert current["versionId"] == first_id

    @pytest.mark.asyncio
    async def test_restore_without_version_id(self, admin_client):
        response = await admin_client.post("/api/admin/layout", json={"action": "restore"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_restore_unknown_version(self, admin_client, mock_db):
        response = await admin_client.post(
            "/api/admin/layout",
            json={"action": "restore", "versionId": str(uuid4())},
        )

        assert response.status_code == 404
        mock_db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_restore_malformed_version_id(self, admin_client):
        response = await admin_client.post(
            "/api/admin/layout",
            json={"action": "restore", "versionId": "not-a-uuid"},
        )

        assert response.status_code == 404


class TestSaveLayoutBodyShapes:

    @pytest.mark.asyncio
    async def test_bare_array_body_is_saved(self, admin_client, layout_repository):
        response = await admin_client.post("/api/admin/layout", json=[{"id": "story"}, {"id": "ticker"}])

        assert response.status_code == 200
        assert [i["id"] for i in response.json()["current"]["layout"]["items"]] == ["story", "ticker"]
        assert len(layout_repository.versions) == 1

    @pytest.mark.asyncio
    async def test_other_actions_save(self, admin_client, layout_repository):
        response = await admin_client.post(
            "/api/admin/layout",
            json={"action": "save", "layout": {"items": [{"id": "contact"}]}},
        )

        assert response.status_code == 200
        assert response.json()["current"]["layout"] == {"items": [{"id": "contact", "enabled": True}]}
        assert len(layout_repository.versions) == 1

    @pytest.mark.asyncio
    async def test_non_list_items_saves_empty_layout(self, admin_client):
        response = await admin_client.post("/api/admin/layout", json={"items": "ticker"})

        assert response.status_code == 200
        assert response.json()["current"]["layout"] == {"items": []}
