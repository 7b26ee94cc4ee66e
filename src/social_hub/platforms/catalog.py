"""Destination catalog: the fixed set of networks content can be sent to."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Mapping, Union

from ..constants import (
    BLOG_CHARACTER_LIMIT,
    FACEBOOK_CHARACTER_LIMIT,
    INSTAGRAM_CHARACTER_LIMIT,
    LINKEDIN_CHARACTER_LIMIT,
    TWITTER_CHARACTER_LIMIT,
)
from ..errors import UnknownDestinationError


class Platform(str, Enum):
    """Destination identifiers, in catalog order."""

    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    BLOG = "blog"

    @classmethod
    def parse(cls, value: Union["Platform", str]) -> "Platform":
        """Resolve an exact platform id.

        Ids are lower-case. Input surfaces (config, CLI) normalize before
        calling this.

        Raises:
            UnknownDestinationError: If the id is not a known platform.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownDestinationError(value, [p.value for p in cls]) from None


PlatformId = Union[Platform, str]


@dataclass(frozen=True)
class Destination:
    """A distribution channel and its size constraint."""

    platform: Platform
    display_name: str
    character_limit: int
    shows_title: bool = False

    @property
    def id(self) -> str:
        return self.platform.value


DEFAULT_DESTINATIONS: tuple[Destination, ...] = (
    Destination(Platform.FACEBOOK, "Facebook", FACEBOOK_CHARACTER_LIMIT),
    Destination(Platform.LINKEDIN, "LinkedIn", LINKEDIN_CHARACTER_LIMIT),
    Destination(Platform.TWITTER, "Twitter", TWITTER_CHARACTER_LIMIT),
    Destination(Platform.INSTAGRAM, "Instagram", INSTAGRAM_CHARACTER_LIMIT),
    Destination(Platform.BLOG, "Blog", BLOG_CHARACTER_LIMIT, shows_title=True),
)

DEFAULT_SELECTED_PLATFORMS: tuple[Platform, ...] = (
    Platform.FACEBOOK,
    Platform.LINKEDIN,
    Platform.TWITTER,
)


class PlatformCatalog:
    """Read-only registry of destinations.

    Iteration always follows catalog order, which is the canonical order
    everywhere destinations are enumerated.

    Usage:
        catalog = PlatformCatalog()
        twitter = catalog.get("twitter")
        limits = {d.id: d.character_limit for d in catalog.list_destinations()}

        # Alternate limits (tests, custom configurations)
        catalog = PlatformCatalog(limit_overrides={"twitter": 500})
    """

    def __init__(self, limit_overrides: Mapping[PlatformId, int] | None = None):
        """Build the catalog.

        Args:
            limit_overrides: Optional per-destination character limits that
                replace the defaults.

        Raises:
            UnknownDestinationError: If an override names an unknown id.
            ValueError: If an override is not a positive integer.
        """
        overrides: dict[Platform, int] = {}
        for platform_id, limit in (limit_overrides or {}).items():
            platform = Platform.parse(platform_id)
            if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
                raise ValueError(
                    f"Character limit for {platform.value} must be a positive integer, got {limit!r}"
                )
            overrides[platform] = limit

        self._destinations: dict[Platform, Destination] = {}
        for destination in DEFAULT_DESTINATIONS:
            if destination.platform in overrides:
                destination = replace(
                    destination, character_limit=overrides[destination.platform]
                )
            self._destinations[destination.platform] = destination

    def list_destinations(self) -> list[Destination]:
        """Get all destinations in catalog order."""
        return list(self._destinations.values())

    def get(self, platform_id: PlatformId) -> Destination:
        """Get a destination by id.

        Raises:
            UnknownDestinationError: If the id is not in the catalog.
        """
        platform = Platform.parse(platform_id)
        try:
            return self._destinations[platform]
        except KeyError:
            raise UnknownDestinationError(platform_id, self.ids()) from None

    def ids(self) -> list[str]:
        """Get all destination ids in catalog order."""
        return [platform.value for platform in self._destinations]

    def __contains__(self, platform_id: object) -> bool:
        try:
            return Platform.parse(platform_id) in self._destinations  # type: ignore[arg-type]
        except UnknownDestinationError:
            return False

    def __iter__(self) -> Iterator[Destination]:
        return iter(self._destinations.values())

    def __len__(self) -> int:
        return len(self._destinations)


DEFAULT_CATALOG = PlatformCatalog()
