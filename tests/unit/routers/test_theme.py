"""Router tests for admin theme overrides."""

from unittest.mock import AsyncMock

import pytest

from storefront.core.exceptions import UpstreamError


class TestGetTheme:

    @pytest.mark.asyncio
    async def test_returns_pos_overrides_and_effective(self, admin_client, theme_repository):
        theme_repository.get_overrides.return_value = {"primaryColor": "#ABCDEF"}

        response = await admin_client.get("/api/admin/theme")

        assert response.status_code == 200
        body = response.json()
        assert body["posTheme"]["primaryColor"] == "#112233"
        assert body["posTheme"]["headingPrimaryColor"] == "#112233"
        assert body["overrides"] == {"primaryColor": "#ABCDEF"}
        assert body["effectiveTheme"]["primaryColor"] == "#ABCDEF"
        assert body["effectiveTheme"]["textColor"] == "#333333"

    @pytest.mark.asyncio
    async def test_upstream_failure_is_bad_gateway(self, admin_client, pos_client):
        pos_client.fetch_client_record = AsyncMock(side_effect=UpstreamError("Upstream 503"))

        response = await admin_client.get("/api/admin/theme")

        assert response.status_code == 502
        assert response.json() == {"detail": "Upstream 503"}


class TestUpdateTheme:

    @pytest.mark.asyncio
    async def test_write_returns_sanitized_overrides(self, admin_client, theme_repository, mock_db):
        response = await admin_client.post(
            "/api/admin/theme",
            json={"overrides": {"primaryColor": "abcdef", "textColor": "not-a-colour"}},
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True, "overrides": {"primaryColor": "#abcdef"}}
        theme_repository.replace_overrides.assert_awaited_once_with({"primaryColor": "#abcdef"})
        mock_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reset_clears_overrides(self, admin_client, theme_repository):
        response = await admin_client.post("/api/admin/theme", json={"action": "reset"})

        assert response.json() == {"ok": True, "overrides": {}}
        theme_repository.replace_overrides.assert_awaited_once_with({})

    @pytest.mark.asyncio
    async def test_top_level_colour_keys_are_stored(self, admin_client, theme_repository):
        response = await admin_client.post("/api/admin/theme", json={"primaryColor": "#111111"})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "overrides": {"primaryColor": "#111111"}}
        theme_repository.replace_overrides.assert_awaited_once_with({"primaryColor": "#111111"})

    @pytest.mark.asyncio
    async def test_null_overrides_fall_back_to_top_level_keys(self, admin_client, theme_repository):
        response = await admin_client.post(
            "/api/admin/theme",
            json={"overrides": None, "textColor": "222222"},
        )

        assert response.status_code == 200
        assert response.json()["overrides"] == {"textColor": "#222222"}
