"""Global constants package for Social Hub.

This package centralizes the constants and enums used by the composition
workflow. Import from here for consistency.

PACKAGE STRUCTURE:
-----------------
- limits.py   : Character limits, preview thresholds, timings, messages
- status.py   : Submission status, source mode, preview severity enums

USAGE EXAMPLES:
--------------
    from social_hub.constants import TWITTER_CHARACTER_LIMIT
    from social_hub.constants import SubmissionStatus, SourceMode
"""

from .limits import (
    # Character limits
    FACEBOOK_CHARACTER_LIMIT,
    LINKEDIN_CHARACTER_LIMIT,
    TWITTER_CHARACTER_LIMIT,
    INSTAGRAM_CHARACTER_LIMIT,
    BLOG_CHARACTER_LIMIT,
    # Preview
    PREVIEW_NEAR_LIMIT_PERCENT,
    PREVIEW_MAX_PERCENT,
    PREVIEW_ELLIPSIS,
    PREVIEW_EMPTY_PLACEHOLDER,
    # Timings
    SUBMISSION_RESET_DELAY_SECONDS,
    EXTRACTION_STANDIN_DELAY_SECONDS,
    DISTRIBUTION_STANDIN_DELAY_SECONDS,
    # Messages
    INVALID_URL_MESSAGE,
    EXTRACTION_FAILED_MESSAGE,
    SUBMISSION_FAILED_MESSAGE,
    URL_SCHEMES,
)
from .status import (
    SubmissionStatus,
    SourceMode,
    PreviewSeverity,
)

__all__ = [
    "FACEBOOK_CHARACTER_LIMIT",
    "LINKEDIN_CHARACTER_LIMIT",
    "TWITTER_CHARACTER_LIMIT",
    "INSTAGRAM_CHARACTER_LIMIT",
    "BLOG_CHARACTER_LIMIT",
    "PREVIEW_NEAR_LIMIT_PERCENT",
    "PREVIEW_MAX_PERCENT",
    "PREVIEW_ELLIPSIS",
    "PREVIEW_EMPTY_PLACEHOLDER",
    "SUBMISSION_RESET_DELAY_SECONDS",
    "EXTRACTION_STANDIN_DELAY_SECONDS",
    "DISTRIBUTION_STANDIN_DELAY_SECONDS",
    "INVALID_URL_MESSAGE",
    "EXTRACTION_FAILED_MESSAGE",
    "SUBMISSION_FAILED_MESSAGE",
    "URL_SCHEMES",
    "SubmissionStatus",
    "SourceMode",
    "PreviewSeverity",
]
