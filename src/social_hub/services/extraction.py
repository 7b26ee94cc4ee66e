"""URL extraction collaborator.

The composer only depends on the ExtractionHandler contract: an async callable
taking a validated http(s) URL and returning ExtractedContent, or raising on
failure. PlaceholderExtractor is a stand-in that fabricates content locally;
it never touches the network.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable
from urllib.parse import urlsplit

from pydantic import BaseModel

from ..constants import EXTRACTION_STANDIN_DELAY_SECONDS

_logger = logging.getLogger("extraction")


class ExtractedContent(BaseModel):
    """Title and body derived from a web page."""

    title: str
    body: str


# Async callable: url -> ExtractedContent
ExtractionHandler = Callable[[str], Awaitable[ExtractedContent]]


_PLACEHOLDER_BODY = (
    "This is extracted content from {url}. A production deployment would plug "
    "in an article extraction service here to pull the main text, title and "
    "description from the page.\n\n"
    "The extraction process typically involves:\n"
    "1. Fetching the HTML content from the URL\n"
    "2. Parsing the DOM structure\n"
    "3. Identifying the main content area\n"
    "4. Extracting text while preserving formatting\n"
    "5. Cleaning up unnecessary elements\n"
    "6. Returning structured data"
)


class PlaceholderExtractor:
    """Stand-in extraction service.

    Waits for a fixed delay and returns canned content titled after the
    URL's host.

    Usage:
        extractor = PlaceholderExtractor(delay_seconds=0)
        content = await extractor("https://example.com/article")
        content.title  # "Article from example.com"
    """

    def __init__(self, delay_seconds: float = EXTRACTION_STANDIN_DELAY_SECONDS):
        self.delay_seconds = delay_seconds

    async def __call__(self, url: str) -> ExtractedContent:
        _logger.info(f"Extracting content from {url}")
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        hostname = urlsplit(url).hostname or url
        return ExtractedContent(
            title=f"Article from {hostname}",
            body=_PLACEHOLDER_BODY.format(url=url),
        )
