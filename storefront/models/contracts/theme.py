"""
Theme contract models.

Theme documents are plain ``dict[str, str]`` keyed by the seven colour names
(``primaryColor``, ``secondaryColor``, ...), the same keys the upstream uses.
"""

from typing import Any

from pydantic import ConfigDict

from storefront.models.contracts.common import CamelModel


class ThemeResponse(CamelModel):
    """Admin view of the theme: upstream values, local overrides and the merge of both"""
    pos_theme: dict[str, str]
    overrides: dict[str, str]
    effective_theme: dict[str, str]


class ThemeWriteRequest(CamelModel):
    """
    Replace the overrides, or clear them with ``{"action": "reset"}``.

    Overrides may be nested under ``overrides`` or sent as top-level colour keys.
    """
    model_config = ConfigDict(extra="allow")

    action: str | None = None
    overrides: dict[str, Any] | None = None

    def overrides_input(self) -> dict[str, Any]:
        """Raw overrides to sanitize and store."""
        if self.overrides is not None:
            return self.overrides
        return dict(self.model_extra or {})


class ThemeWriteResponse(CamelModel):
    """Overrides as stored after sanitization"""
    ok: bool = True
    overrides: dict[str, str]


class PublicThemeResponse(CamelModel):
    """Effective theme read by the public homepage"""
    theme: dict[str, str]
