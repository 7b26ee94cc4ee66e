"""Content composition and distribution workflow.

- ContentSource: the author's body/title buffer and URL extraction
- project / project_selected: per-destination previews
- SubmissionController: the submit state machine with its timed reset
- CompositionSession: one form's worth of the above, wired together
"""

from .content import ContentSource, ContentState, count_words, is_valid_url
from .preview import PreviewResult, percent_of_limit, project, project_selected, truncate
from .session import CompositionSession
from .submission import ResetTimer, SubmissionController, SubmissionState

__all__ = [
    "ContentSource",
    "ContentState",
    "count_words",
    "is_valid_url",
    "PreviewResult",
    "percent_of_limit",
    "project",
    "project_selected",
    "truncate",
    "CompositionSession",
    "ResetTimer",
    "SubmissionController",
    "SubmissionState",
]
