"""Status enums and state constants for the Social Hub composer.

Status enums represent the state machines of the composition workflow:
  IDLE -> SUBMITTING -> SUCCESS -> (reset delay) -> IDLE
                 |
                 v
               ERROR -> SUBMITTING (on retry)

MODIFICATION GUIDE:
------------------
- Add new enum values at the END to maintain backwards compatibility
- Each enum value should have a human-readable description
- Use .value for string representation when needed
"""

from enum import Enum


# =============================================================================
# SUBMISSION STATUS
# =============================================================================

class SubmissionStatus(str, Enum):
    """Status of the submit action.

    Workflow:
        IDLE -> SUBMITTING -> SUCCESS -> IDLE
                    |
                    v
                  ERROR
    """

    IDLE = "idle"
    """Nothing in flight, no banner shown."""

    SUBMITTING = "submitting"
    """Distribution handler has been called and not yet resolved."""

    SUCCESS = "success"
    """Distribution accepted; the form clears after the reset delay."""

    ERROR = "error"
    """Distribution rejected; content is kept for a retry."""


# =============================================================================
# CONTENT SOURCE MODE
# =============================================================================

class SourceMode(str, Enum):
    """Where the author's content comes from.

    Both modes share the same body and title, switching only changes
    how the input is presented.
    """

    MANUAL = "manual"
    """Author types the content."""

    URL = "url"
    """Content is populated by URL extraction."""


# =============================================================================
# PREVIEW SEVERITY
# =============================================================================

class PreviewSeverity(str, Enum):
    """How close a preview is to its destination's limit."""

    GOOD = "good"
    """Comfortably within the limit."""

    NEAR_LIMIT = "near_limit"
    """Above the near-limit threshold (or truncated)."""

    @property
    def label(self) -> str:
        """Human-readable label."""
        labels = {
            self.GOOD: "Good",
            self.NEAR_LIMIT: "Near limit",
        }
        return labels[self]
