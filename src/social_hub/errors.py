"""Exceptions raised by the composition workflow."""

from __future__ import annotations


class ComposerError(Exception):
    """Base exception for composer errors.

    Carries the message shown to the author, if any.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidUrlError(ComposerError):
    """URL is malformed or does not use http/https."""

    pass


class ExtractionFailedError(ComposerError):
    """Extraction service could not produce content for a URL."""

    pass


class SubmissionFailedError(ComposerError):
    """Distribution service rejected a submission."""

    pass


class UnknownDestinationError(ComposerError, LookupError):
    """Destination id is not part of the catalog.

    This is a programming error, never an author-facing one.
    """

    def __init__(self, platform_id: object, available: list[str] | None = None):
        available_text = ", ".join(available or [])
        super().__init__(
            f"Unknown destination: {platform_id}. Available: {available_text}"
        )
        self.platform_id = platform_id
