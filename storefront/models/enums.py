"""
Enumeration types used across the application.
"""

from enum import Enum


class PageKey(str, Enum):
    """Logical pages whose section layout can be edited"""
    HOME = "home"


class LayoutSectionId(str, Enum):
    """Homepage sections that can be reordered or hidden"""
    TICKER = "ticker"
    STORY = "story"
    SEASONAL = "seasonal"
    CATEGORIES = "categories"
    CONTACT = "contact"
