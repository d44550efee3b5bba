"""
Theme Service

Colour normalization and the override-wins merge of local theme overrides onto
the POS platform's branding, plus storage of the overrides.

The upstream sends colours in several shapes (``0xAARRGGBB``, ``#RRGGBB``,
``RRGGBB``); everything is normalized to ``#RRGGBB`` or rejected as ``""``.
"""

import logging
import re
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.repositories.theme import ThemeSettingsRepository

logger = logging.getLogger(__name__)

THEME_KEYS: tuple[str, ...] = (
    "primaryColor",
    "secondaryColor",
    "headingPrimaryColor",
    "headingSecondaryColor",
    "textColor",
    "coverTextColor",
    "backgroundColor",
)

_HEX6 = re.compile(r"^[0-9a-fA-F]{6}$")
_HASH_HEX6 = re.compile(r"^#[0-9a-fA-F]{6}$")


def normalize_hex_color(value: Any) -> str:
    """
    Normalize a colour value to ``#RRGGBB``.

    - ``0x`` followed by at least six more characters: the last six are the RGB
      part (a leading alpha byte is dropped)
    - ``#RRGGBB``: unchanged
    - ``RRGGBB``: prefixed with ``#``

    Returns:
        The normalized colour, or "" if the value is empty or not a colour
    """
    if not value:
        return ""

    raw = str(value).strip()
    if not raw:
        return ""

    if raw.startswith("0x") and len(raw) >= 8:
        rgb = raw[-6:]
        return f"#{rgb}" if _HEX6.match(rgb) else ""

    if _HASH_HEX6.match(raw):
        return raw

    if _HEX6.match(raw):
        return f"#{raw}"

    return ""


def empty_theme() -> dict[str, str]:
    """All seven keys, unset."""
    return {key: "" for key in THEME_KEYS}


def extract_theme(client: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Pull the theme out of an upstream client record.

    Heading colours fall back to the primary/secondary colour, then to the
    text colour. The background also accepts the upstream's ``bgColor`` field.
    """
    client = client or {}

    primary_color = normalize_hex_color(client.get("primaryColor"))
    secondary_color = normalize_hex_color(client.get("secondaryColor"))
    text_color = normalize_hex_color(client.get("textColor"))

    return {
        "primaryColor": primary_color,
        "secondaryColor": secondary_color,
        "headingPrimaryColor": (
            normalize_hex_color(client.get("headingPrimaryColor")) or primary_color or text_color
        ),
        "headingSecondaryColor": (
            normalize_hex_color(client.get("headingSecondaryColor")) or secondary_color or text_color
        ),
        "textColor": text_color,
        "coverTextColor": normalize_hex_color(client.get("coverTextColor")),
        "backgroundColor": normalize_hex_color(
            client.get("backgroundColor") or client.get("bgColor")
        ),
    }


def sanitize_theme_overrides(raw: Any) -> dict[str, str]:
    """Keep only the known keys whose values normalize to a colour."""
    if not isinstance(raw, Mapping):
        return {}

    overrides: dict[str, str] = {}
    for key in THEME_KEYS:
        normalized = normalize_hex_color(raw.get(key))
        if normalized:
            overrides[key] = normalized
    return overrides


def merge_theme(pos_theme: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Per key, the override when set, otherwise the upstream value."""
    return {key: overrides.get(key) or pos_theme.get(key, "") for key in THEME_KEYS}


class ThemeService:
    """Service for the stored theme overrides."""

    def __init__(self, session: AsyncSession, repository: ThemeSettingsRepository | None = None):
        self.session = session
        self.repository = repository or ThemeSettingsRepository(session)

    async def read_overrides(self) -> dict[str, str]:
        """Stored overrides, sanitized; empty if none were ever written."""
        stored = await self.repository.get_overrides()
        return sanitize_theme_overrides(stored or {})

    async def write_overrides(self, overrides: Any) -> dict[str, str]:
        """
        Replace the stored overrides.

        Args:
            overrides: Raw overrides from the admin

        Returns:
            What was actually stored. Invalid keys and values are dropped,
            so callers should use this rather than their input.
        """
        sanitized = sanitize_theme_overrides(overrides or {})
        await self.repository.replace_overrides(sanitized)

        logger.info(
            f"Theme overrides replaced ({len(sanitized)} keys)",
            extra={"keys": sorted(sanitized)},
        )
        return sanitized

    async def reset_overrides(self) -> dict[str, str]:
        """Clear all overrides so the effective theme is the upstream one."""
        return await self.write_overrides({})
