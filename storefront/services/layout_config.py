"""
Layout catalog and normalization.

Pure functions with no I/O. Every layout document entering or leaving storage
passes through normalize_layout(), which degrades malformed input instead of
rejecting it:

- accepts ``{"items": [...]}``, a bare list, or an existing LayoutConfig
- drops entries whose id is missing or not in the page's catalog
- keeps the first occurrence of a repeated id
- treats ``enabled`` as true unless it is exactly ``False``
- never adds sections the input left out
"""

from typing import Any

from pydantic import BaseModel

from storefront.models.contracts.layouts import LayoutConfig, LayoutItem, LayoutSection
from storefront.models.enums import LayoutSectionId, PageKey

LAYOUT_SECTIONS: dict[PageKey, tuple[LayoutSection, ...]] = {
    PageKey.HOME: (
        LayoutSection(id=LayoutSectionId.TICKER, label="Ticker", description="Scrolling announcement banner."),
        LayoutSection(id=LayoutSectionId.STORY, label="Our Story", description="Brand story with image."),
        LayoutSection(id=LayoutSectionId.SEASONAL, label="Seasonal Offers", description="Showcase specials section."),
        LayoutSection(id=LayoutSectionId.CATEGORIES, label="Categories", description="Category carousel."),
        LayoutSection(id=LayoutSectionId.CONTACT, label="Contact", description="Contact details and map."),
    ),
}


def is_page_key(value: str) -> bool:
    """Check whether a string names a page with an editable layout."""
    return value in {key.value for key in PageKey}


def sections_for(page_key: PageKey) -> list[LayoutSection]:
    """Section catalog for a page, in default display order."""
    return list(LAYOUT_SECTIONS[page_key])


def default_layout(page_key: PageKey) -> LayoutConfig:
    """Every catalog section, enabled, in catalog order."""
    return LayoutConfig(
        items=[LayoutItem(id=section.id, enabled=True) for section in LAYOUT_SECTIONS[page_key]]
    )


def _raw_items(raw: Any) -> list[Any]:
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(mode="json")
    if isinstance(raw, dict) and isinstance(raw.get("items"), list):
        return raw["items"]
    if isinstance(raw, list):
        return raw
    return []


def normalize_layout(raw: Any, page_key: PageKey) -> LayoutConfig:
    """
    Normalize an arbitrary layout document for a page.

    Args:
        raw: Admin input or a stored document, in any shape
        page_key: Page whose catalog decides which ids are valid

    Returns:
        LayoutConfig with unique, known ids in first-occurrence input order
    """
    available = {section.id.value for section in LAYOUT_SECTIONS[page_key]}
    seen: set[str] = set()
    items: list[LayoutItem] = []

    for entry in _raw_items(raw):
        if not isinstance(entry, dict):
            continue

        section_id = entry.get("id")
        if isinstance(section_id, LayoutSectionId):
            section_id = section_id.value
        if not section_id or not isinstance(section_id, str):
            continue
        if section_id not in available or section_id in seen:
            continue

        items.append(
            LayoutItem(id=LayoutSectionId(section_id), enabled=entry.get("enabled") is not False)
        )
        seen.add(section_id)

    return LayoutConfig(items=items)
