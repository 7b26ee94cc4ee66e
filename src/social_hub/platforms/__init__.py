"""Destination catalog and selection.

Usage:
    from social_hub.platforms import DEFAULT_CATALOG, PlatformSelection

    selection = PlatformSelection(DEFAULT_CATALOG)
    selection.toggle("instagram")
    selection.selected_ids()  # [FACEBOOK, LINKEDIN, TWITTER, INSTAGRAM]
"""

from .catalog import (
    DEFAULT_CATALOG,
    DEFAULT_DESTINATIONS,
    DEFAULT_SELECTED_PLATFORMS,
    Destination,
    Platform,
    PlatformCatalog,
    PlatformId,
)
from .selection import PlatformSelection

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_DESTINATIONS",
    "DEFAULT_SELECTED_PLATFORMS",
    "Destination",
    "Platform",
    "PlatformCatalog",
    "PlatformId",
    "PlatformSelection",
]
