"""Which destinations the author has chosen."""

from __future__ import annotations

from typing import Iterable

from .catalog import (
    DEFAULT_CATALOG,
    DEFAULT_SELECTED_PLATFORMS,
    Platform,
    PlatformCatalog,
    PlatformId,
)


class PlatformSelection:
    """On/off flag for every destination in a catalog.

    Every catalog id always has an entry; only the flags change, and only
    through toggle().
    """

    def __init__(
        self,
        catalog: PlatformCatalog = DEFAULT_CATALOG,
        selected: Iterable[PlatformId] | None = None,
    ):
        """Initialize the selection.

        Args:
            catalog: Catalog whose destinations make up the keys.
            selected: Initially selected ids. Defaults to
                facebook, linkedin and twitter.

        Raises:
            UnknownDestinationError: If an initial id is not in the catalog.
        """
        self.catalog = catalog
        initial = DEFAULT_SELECTED_PLATFORMS if selected is None else selected
        chosen = {catalog.get(platform_id).platform for platform_id in initial}
        self._flags: dict[Platform, bool] = {
            destination.platform: destination.platform in chosen
            for destination in catalog
        }

    def toggle(self, platform_id: PlatformId) -> bool:
        """Flip a destination's flag.

        Returns:
            The new flag value.

        Raises:
            UnknownDestinationError: If the id is not in the catalog.
        """
        platform = self.catalog.get(platform_id).platform
        self._flags[platform] = not self._flags[platform]
        return self._flags[platform]

    def is_selected(self, platform_id: PlatformId) -> bool:
        return self._flags[self.catalog.get(platform_id).platform]

    def selected_count(self) -> int:
        return sum(1 for flag in self._flags.values() if flag)

    def selected_ids(self) -> list[Platform]:
        """Selected ids in catalog order."""
        return [platform for platform, flag in self._flags.items() if flag]

    def is_any_selected(self) -> bool:
        return self.selected_count() > 0

    def default_active(self) -> Platform | None:
        """First selected id in catalog order (the default preview tab)."""
        selected = self.selected_ids()
        return selected[0] if selected else None

    def as_dict(self) -> dict[str, bool]:
        """Full id -> flag mapping in catalog order (a copy)."""
        return {platform.value: flag for platform, flag in self._flags.items()}

    def __repr__(self) -> str:
        selected = ", ".join(p.value for p in self.selected_ids())
        return f"PlatformSelection([{selected}])"
