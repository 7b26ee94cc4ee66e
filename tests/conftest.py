"""Shared test fixtures and configuration.

Provides collaborator mocks and ready-made composer objects. Collaborator
mocks are AsyncMock instances so they can be awaited like the real services.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from social_hub.composer import CompositionSession, ContentSource, SubmissionController
from social_hub.platforms import DEFAULT_CATALOG, PlatformCatalog, PlatformSelection
from social_hub.services import ExtractedContent

# Short enough to keep tests fast, long enough to observe SUCCESS first
TEST_RESET_DELAY = 0.05


@pytest.fixture
def reset_delay() -> float:
    return TEST_RESET_DELAY


@pytest.fixture
def catalog() -> PlatformCatalog:
    return DEFAULT_CATALOG


@pytest.fixture
def selection(catalog: PlatformCatalog) -> PlatformSelection:
    """Default selection: facebook, linkedin, twitter."""
    return PlatformSelection(catalog)


@pytest.fixture
def mock_extractor() -> AsyncMock:
    """Create a mock extraction handler.

    Returns:
        AsyncMock returning a fixed title and body.
    """
    extractor = AsyncMock()
    extractor.return_value = ExtractedContent(
        title="Article from example.com",
        body="Extracted article body",
    )
    return extractor


@pytest.fixture
def mock_distributor() -> AsyncMock:
    """Create a mock distribution handler that accepts every payload."""
    distributor = AsyncMock()
    distributor.return_value = None
    return distributor


@pytest.fixture
def content(mock_extractor: AsyncMock) -> ContentSource:
    return ContentSource(extractor=mock_extractor)


@pytest.fixture
def controller(mock_distributor: AsyncMock) -> SubmissionController:
    return SubmissionController(
        distributor=mock_distributor,
        reset_delay_seconds=TEST_RESET_DELAY,
    )


@pytest.fixture
def session(mock_extractor: AsyncMock, mock_distributor: AsyncMock) -> CompositionSession:
    return CompositionSession(
        extractor=mock_extractor,
        distributor=mock_distributor,
        reset_delay_seconds=TEST_RESET_DELAY,
    )
