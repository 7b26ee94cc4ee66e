"""Composition session: one author's form, wired together."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import SUBMISSION_RESET_DELAY_SECONDS
from ..platforms import DEFAULT_CATALOG, Platform, PlatformCatalog, PlatformId, PlatformSelection
from ..services.distribution import DistributionHandler, LoggingDistributor
from ..services.extraction import ExtractedContent, ExtractionHandler, PlaceholderExtractor
from .content import ContentSource
from .preview import PreviewResult, project_selected
from .submission import SubmissionController, SubmissionState

if TYPE_CHECKING:
    from ..config import HubConfig


class CompositionSession:
    """Session-scoped state for a single composition form.

    Owns the content, the selection and the submission controller. Each
    session is independent; nothing here is process-wide.

    Usage:
        session = CompositionSession.from_config(load_hub_config())
        session.content.set_body("Launching today!")
        session.selection.toggle("instagram")
        for preview in session.previews():
            print(preview.display_name, preview.percent_used)
        state = await session.submit()
    """

    def __init__(
        self,
        catalog: PlatformCatalog | None = None,
        selected: list[PlatformId] | None = None,
        extractor: ExtractionHandler | None = None,
        distributor: DistributionHandler | None = None,
        reset_delay_seconds: float = SUBMISSION_RESET_DELAY_SECONDS,
    ):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.content = ContentSource(extractor=extractor)
        self.selection = PlatformSelection(self.catalog, selected=selected)
        self.submission = SubmissionController(
            distributor=distributor,
            reset_delay_seconds=reset_delay_seconds,
        )
        self.content.add_edit_listener(self.submission.on_author_edit)

    @classmethod
    def from_config(
        cls,
        config: HubConfig,
        extractor: ExtractionHandler | None = None,
        distributor: DistributionHandler | None = None,
    ) -> "CompositionSession":
        """Build a session from configuration, with stand-in collaborators
        tuned by the config unless real ones are given."""
        return cls(
            catalog=PlatformCatalog(limit_overrides=config.character_limits),
            selected=list(config.default_platforms),
            extractor=extractor or PlaceholderExtractor(config.extraction_delay_seconds),
            distributor=distributor or LoggingDistributor(config.distribution_delay_seconds),
            reset_delay_seconds=config.reset_delay_seconds,
        )

    def word_count(self) -> int:
        return self.content.word_count()

    def selected_count(self) -> int:
        return self.selection.selected_count()

    def previews(self) -> list[PreviewResult]:
        """Previews for the selected destinations, in catalog order."""
        return project_selected(
            self.content.body,
            self.selection,
            self.catalog,
            title=self.content.title,
        )

    def default_preview(self) -> Platform | None:
        return self.selection.default_active()

    @property
    def state(self) -> SubmissionState:
        return self.submission.state

    def can_submit(self) -> bool:
        return self.submission.can_submit(self.content, self.selection)

    async def request_extraction(self) -> ExtractedContent | None:
        return await self.content.request_extraction()

    async def submit(self) -> SubmissionState:
        return await self.submission.submit(self.content, self.selection)

