"""
POS Platform Client

Fetches the restaurant's client record (branding, contact details) from the
online ordering platform. The record is the source of truth for the theme
before local overrides are applied.
"""

import logging
from typing import Any

import httpx

from storefront.config import Settings, get_settings
from storefront.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class PosClient:
    """HTTP client for the ordering platform's getClientAndMenu endpoint."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    async def fetch_client_record(self) -> dict[str, Any]:
        """
        Fetch the client record.

        Returns:
            The ``client`` member of the response, or the whole response body
            when the upstream returns the record at the top level

        Raises:
            UpstreamError: If the upstream is not configured, unreachable,
                answers with a non-2xx status, or returns something other
                than a JSON object
        """
        if not self.settings.pos_configured:
            raise UpstreamError("POS upstream config is not set")

        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.settings.pos_api_key or "",
        }
        body = {"clientId": self.settings.pos_client_id}

        async with httpx.AsyncClient(
            timeout=self.settings.pos_timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self.settings.pos_upstream_url, json=body, headers=headers)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.warning(f"POS upstream returned {e.response.status_code}")
                raise UpstreamError(f"Upstream {e.response.status_code}") from e
            except httpx.HTTPError as e:
                logger.warning(f"POS upstream request failed: {e}")
                raise UpstreamError("Upstream request failed") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Upstream returned invalid JSON") from e

        if not isinstance(data, dict):
            raise UpstreamError("Upstream returned an unexpected payload")

        client_record = data.get("client")
        if isinstance(client_record, dict):
            return client_record
        return data


def get_pos_client() -> PosClient:
    """FastAPI dependency for the upstream client."""
    return PosClient(get_settings())
