"""Limit constants for the Social Hub composer.

This module contains all limits and timings used by the composition workflow:
- Per-destination character limits
- Preview thresholds
- Submission and extraction timings

MODIFICATION GUIDE:
------------------
- *_CHARACTER_LIMIT values: check the destination's posting rules first
- PREVIEW_* thresholds: change together with the display legend
- *_DELAY_SECONDS: stand-in collaborator timings, not network timeouts
"""

from typing import Final

# =============================================================================
# DESTINATION CHARACTER LIMITS
# =============================================================================

FACEBOOK_CHARACTER_LIMIT: Final[int] = 500
"""Maximum characters shown for a Facebook post."""

LINKEDIN_CHARACTER_LIMIT: Final[int] = 1300
"""Maximum characters shown for a LinkedIn post."""

TWITTER_CHARACTER_LIMIT: Final[int] = 280
"""Maximum characters for a single tweet."""

INSTAGRAM_CHARACTER_LIMIT: Final[int] = 2200
"""Maximum caption length for Instagram posts."""

BLOG_CHARACTER_LIMIT: Final[int] = 5000
"""Maximum body length for a blog entry."""


# =============================================================================
# PREVIEW THRESHOLDS
# =============================================================================

PREVIEW_NEAR_LIMIT_PERCENT: Final[int] = 90
"""Usage above this percentage is reported as near the limit."""

PREVIEW_MAX_PERCENT: Final[int] = 100
"""Usage percentage is clamped to this value."""

PREVIEW_ELLIPSIS: Final[str] = "..."
"""Marker appended to truncated preview text."""

PREVIEW_EMPTY_PLACEHOLDER: Final[str] = "No content to preview"
"""Shown in place of an empty preview body."""


# =============================================================================
# SUBMISSION AND EXTRACTION TIMINGS
# =============================================================================

SUBMISSION_RESET_DELAY_SECONDS: Final[float] = 3.0
"""Delay before a successful submission clears the form."""

EXTRACTION_STANDIN_DELAY_SECONDS: Final[float] = 2.0
"""Simulated latency of the placeholder extraction service."""

DISTRIBUTION_STANDIN_DELAY_SECONDS: Final[float] = 1.0
"""Simulated latency of the placeholder distribution service."""


# =============================================================================
# USER-FACING MESSAGES
# =============================================================================

INVALID_URL_MESSAGE: Final[str] = (
    "Please enter a valid URL (e.g., https://example.com/article)"
)
"""Inline error shown next to the URL field for a malformed URL."""

EXTRACTION_FAILED_MESSAGE: Final[str] = (
    "Failed to extract content. Please check the URL and try again."
)
"""Inline error shown when the extraction service fails."""

SUBMISSION_FAILED_MESSAGE: Final[str] = (
    "Failed to submit content. Please check your connection and try again."
)
"""Banner shown when distribution fails."""

URL_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})
"""Schemes accepted for URL extraction."""
