"""Per-destination preview: truncation and limit usage.

Previews are derived values. They are recomputed from the content, the
selection and the catalog whenever needed and never stored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import (
    PREVIEW_ELLIPSIS,
    PREVIEW_EMPTY_PLACEHOLDER,
    PREVIEW_MAX_PERCENT,
    PREVIEW_NEAR_LIMIT_PERCENT,
    PreviewSeverity,
)
from ..platforms import DEFAULT_CATALOG, Destination, Platform, PlatformCatalog, PlatformSelection


@dataclass(frozen=True)
class PreviewResult:
    """How the content would look on one destination."""

    platform: Platform
    display_name: str
    display_text: str
    used_chars: int
    limit: int
    percent_used: int
    title: str = ""

    @property
    def is_truncated(self) -> bool:
        return self.used_chars > self.limit

    @property
    def severity(self) -> PreviewSeverity:
        if self.percent_used > PREVIEW_NEAR_LIMIT_PERCENT:
            return PreviewSeverity.NEAR_LIMIT
        return PreviewSeverity.GOOD

    @property
    def render_text(self) -> str:
        """Display text, or the placeholder when there is nothing to show."""
        return self.display_text or PREVIEW_EMPTY_PLACEHOLDER


def percent_of_limit(used_chars: int, limit: int) -> int:
    """Usage as a whole percentage, rounded half-up and capped at 100."""
    ratio = used_chars / limit * 100
    return min(math.floor(ratio + 0.5), PREVIEW_MAX_PERCENT)


def truncate(body: str, limit: int) -> str:
    """Body as-is when it fits, otherwise the first `limit` chars plus '...'."""
    if len(body) <= limit:
        return body
    return body[:limit] + PREVIEW_ELLIPSIS


def project(
    body: str,
    destination: Destination,
    title: str = "",
    limit: int | None = None,
) -> PreviewResult:
    """Compute the preview of `body` for one destination.

    Args:
        body: Raw content body. Its full length is counted, untrimmed.
        destination: Target destination.
        title: Content title, kept only for destinations that show one.
        limit: Character limit to use instead of the destination's own.

    Raises:
        ValueError: If an explicit limit is not positive.
    """
    if limit is None:
        limit = destination.character_limit
    elif limit <= 0:
        raise ValueError(f"Character limit must be positive, got {limit}")

    used_chars = len(body)
    return PreviewResult(
        platform=destination.platform,
        display_name=destination.display_name,
        display_text=truncate(body, limit),
        used_chars=used_chars,
        limit=limit,
        percent_used=percent_of_limit(used_chars, limit),
        title=title if destination.shows_title else "",
    )


def project_selected(
    body: str,
    selection: PlatformSelection,
    catalog: PlatformCatalog = DEFAULT_CATALOG,
    title: str = "",
) -> list[PreviewResult]:
    """Previews for the selected destinations only, in catalog order."""
    return [
        project(body, catalog.get(platform), title=title)
        for platform in selection.selected_ids()
    ]
