"""Author's content: the shared body/title buffer and where it came from."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable
from urllib.parse import urlsplit

from ..constants import (
    EXTRACTION_FAILED_MESSAGE,
    INVALID_URL_MESSAGE,
    URL_SCHEMES,
    SourceMode,
)
from ..errors import ExtractionFailedError, InvalidUrlError
from ..services.extraction import ExtractedContent, ExtractionHandler, PlaceholderExtractor

_logger = logging.getLogger("composer")

# Called after the content changes
ChangeListener = Callable[[], None]


@dataclass
class ContentState:
    """Raw form input. Body and title are stored verbatim."""

    body: str = ""
    title: str = ""
    source_mode: SourceMode = SourceMode.MANUAL
    source_url: str = ""
    url_error: str | None = None


def count_words(text: str) -> int:
    """Number of whitespace-separated tokens; runs of whitespace count once."""
    return len(text.split())


def is_valid_url(url: str) -> bool:
    """True for an absolute URL with an http or https scheme and a host."""
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False

    if parts.scheme not in URL_SCHEMES or not hostname:
        return False
    return not any(char.isspace() for char in parts.netloc)


class ContentSource:
    """Holds the author's content and runs URL extraction.

    Manual and URL modes share one body/title buffer: switching modes never
    clears it. At most one extraction runs at a time; a result that arrives
    after the author has edited anything is dropped.

    Usage:
        source = ContentSource(extractor=PlaceholderExtractor(delay_seconds=0))
        source.switch_mode(SourceMode.URL)
        source.set_url("https://example.com/article")
        await source.request_extraction()
        source.word_count()
    """

    def __init__(self, extractor: ExtractionHandler | None = None):
        """Initialize an empty content source.

        Args:
            extractor: Extraction collaborator. Defaults to the local stand-in.
        """
        self._state = ContentState()
        self._extractor = extractor or PlaceholderExtractor()
        self._is_loading = False
        # Bumped on every edit so in-flight extractions can detect staleness
        self._generation = 0
        self._listeners: list[ChangeListener] = []
        self._edit_listeners: list[ChangeListener] = []

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def body(self) -> str:
        return self._state.body

    @property
    def title(self) -> str:
        return self._state.title

    @property
    def source_mode(self) -> SourceMode:
        return self._state.source_mode

    @property
    def source_url(self) -> str:
        return self._state.source_url

    @property
    def url_error(self) -> str | None:
        return self._state.url_error

    @property
    def is_loading(self) -> bool:
        """True while an extraction is in flight."""
        return self._is_loading

    def snapshot(self) -> ContentState:
        """Copy of the current state."""
        return replace(self._state)

    def word_count(self) -> int:
        return count_words(self._state.body)

    def has_content(self) -> bool:
        """True when the body holds more than whitespace."""
        return bool(self._state.body.strip())

    # -------------------------------------------------------------------------
    # Author edits
    # -------------------------------------------------------------------------

    def set_body(self, text: str) -> None:
        self._state.body = text
        self._edited()

    def set_title(self, text: str) -> None:
        self._state.title = text
        self._edited()

    def switch_mode(self, mode: SourceMode | str) -> None:
        """Change the input mode. Body and title are kept."""
        mode = SourceMode(mode)
        if mode == self._state.source_mode:
            return
        self._state.source_mode = mode
        self._edited()

    def set_url(self, text: str) -> None:
        """Replace the URL and dismiss any URL error."""
        self._state.source_url = text
        self._state.url_error = None
        self._edited()

    def add_listener(self, listener: ChangeListener) -> None:
        """Call `listener` after any change, including applied extractions."""
        self._listeners.append(listener)

    def add_edit_listener(self, listener: ChangeListener) -> None:
        """Call `listener` after author edits only."""
        self._edit_listeners.append(listener)

    def clear(self) -> None:
        """Empty body, title and URL after a completed submission.

        Mode is kept. Listeners are not notified since this is not an edit.
        """
        self._state.body = ""
        self._state.title = ""
        self._state.source_url = ""
        self._state.url_error = None
        self._generation += 1

    def _edited(self) -> None:
        self._generation += 1
        self._notify()
        for listener in self._edit_listeners:
            listener()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    async def request_extraction(self) -> ExtractedContent | None:
        """Populate body and title from the current URL.

        Does nothing (returns None) when the URL is blank or an extraction
        is already in flight. Also returns None when the author edited the
        form while the extraction ran, in which case the result is dropped.

        Returns:
            The applied ExtractedContent, or None.

        Raises:
            InvalidUrlError: URL is not an absolute http(s) URL. url_error is set.
            ExtractionFailedError: The extractor failed. url_error is set.
        """
        if self._is_loading:
            _logger.debug("Extraction already in flight, ignoring request")
            return None

        url = self._state.source_url.strip()
        if not url:
            return None

        if not is_valid_url(url):
            self._state.url_error = INVALID_URL_MESSAGE
            _logger.info(f"Rejected extraction URL: {url!r}")
            raise InvalidUrlError(INVALID_URL_MESSAGE, detail=url)

        self._state.url_error = None
        self._is_loading = True
        generation = self._generation

        try:
            extracted = await self._extractor(url)
        except Exception as e:
            _logger.warning(f"Extraction failed for {url}: {e}")
            if generation == self._generation:
                self._state.url_error = EXTRACTION_FAILED_MESSAGE
            raise ExtractionFailedError(EXTRACTION_FAILED_MESSAGE, detail=str(e)) from e
        finally:
            self._is_loading = False

        if generation != self._generation:
            _logger.info(f"Dropping stale extraction result for {url}")
            return None

        self._state.body = extracted.body
        self._state.title = extracted.title
        self._state.url_error = None
        self._generation += 1
        self._notify()
        _logger.debug(f"Extracted {len(extracted.body)} chars from {url}")
        return extracted
