"""Compose service - builds sessions from CLI input and runs the workflow."""

from __future__ import annotations

import logging

import yaml
from pydantic import ValidationError

from ...composer import CompositionSession, SubmissionState
from ...config import load_hub_config
from ...constants import SourceMode, SubmissionStatus
from ...errors import ComposerError
from ...services import DistributionHandler, ExtractionHandler
from ..core.types import Failure, Result, Success
from .params import ComposeParams

_logger = logging.getLogger("composer")


class ComposeService:
    """Drives a CompositionSession the way the form would.

    Collaborators default to the stand-ins configured in hub.yaml.
    """

    def __init__(
        self,
        extractor: ExtractionHandler | None = None,
        distributor: DistributionHandler | None = None,
    ):
        self._extractor = extractor
        self._distributor = distributor

    def build_session(self, params: ComposeParams) -> Result[CompositionSession]:
        """Create a session and replay the CLI input onto it as author edits."""
        try:
            config = load_hub_config(params.config_path)
        except (ValidationError, yaml.YAMLError) as e:
            return Failure("Invalid configuration", {"Error": str(e)})

        body = ""
        if not params.uses_url:
            try:
                body = params.read_body()
            except UnicodeDecodeError as e:
                return Failure(
                    "Content file is not valid UTF-8",
                    {"Path": str(params.file), "Error": str(e)},
                )

        session = CompositionSession.from_config(
            config,
            extractor=self._extractor,
            distributor=self._distributor,
        )

        for platform_id in params.toggles:
            session.selection.toggle(platform_id)

        if not params.uses_url:
            session.content.set_body(body)
        if params.title:
            session.content.set_title(params.title)
        if params.url:
            session.content.switch_mode(SourceMode.URL)
            session.content.set_url(params.url)

        return Success(session)

    async def extract(self, session: CompositionSession) -> Result[CompositionSession]:
        """Fill the session's body and title from its URL."""
        try:
            await session.request_extraction()
        except ComposerError as e:
            return Failure(e.message, {"URL": session.content.source_url})
        return Success(session)

    async def distribute(
        self,
        session: CompositionSession,
        extract_first: bool = False,
    ) -> Result[SubmissionState]:
        """Submit the session's content, extracting it from the URL first if asked."""
        if extract_first:
            extracted = await self.extract(session)
            if isinstance(extracted, Failure):
                return extracted

        if not session.can_submit():
            return Failure(
                "Nothing to submit",
                {
                    "Words": session.word_count(),
                    "Platforms": session.selected_count(),
                },
            )

        state = await session.submit()
        if state.status == SubmissionStatus.ERROR:
            return Failure(state.message or "Submission failed", {"Reason": state.error})

        _logger.info(f"CLI distribution finished: {state.status.value}")
        return Success(state)
