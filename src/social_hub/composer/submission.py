"""Submit action: the idle/submitting/success/error state machine."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from ..constants import (
    SUBMISSION_FAILED_MESSAGE,
    SUBMISSION_RESET_DELAY_SECONDS,
    SourceMode,
    SubmissionStatus,
)
from ..platforms import PlatformSelection
from ..services.distribution import DistributionHandler, DistributionPayload, LoggingDistributor
from .content import ContentSource

_logger = logging.getLogger("composer")

# Called with the new state after every transition
StateListener = Callable[["SubmissionState"], None]


@dataclass(frozen=True)
class SubmissionState:
    """Current status plus the destination count captured at submit time."""

    status: SubmissionStatus = SubmissionStatus.IDLE
    target_count: int = 0
    error: str | None = None

    @property
    def is_submitting(self) -> bool:
        return self.status == SubmissionStatus.SUBMITTING

    @property
    def message(self) -> str | None:
        """Banner text for the author, if any."""
        if self.status == SubmissionStatus.SUCCESS:
            noun = "platform" if self.target_count == 1 else "platforms"
            return (
                "Content successfully submitted for distribution across "
                f"{self.target_count} {noun}!"
            )
        if self.status == SubmissionStatus.ERROR:
            return SUBMISSION_FAILED_MESSAGE
        return None


class ResetTimer:
    """One-shot, cancelable callback scheduled on the running event loop."""

    def __init__(self, delay_seconds: float, callback: Callable[[], None]):
        self.delay_seconds = delay_seconds
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def active(self) -> bool:
        """True between start() and the callback firing or cancel()."""
        return self._handle is not None

    def start(self) -> None:
        """Schedule the callback. Must be called from a running loop."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay_seconds, self._fire)

    def cancel(self) -> bool:
        """Cancel the pending callback. Returns True if one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def _fire(self) -> None:
        self._handle = None
        self._callback()


class SubmissionController:
    """Runs submissions and owns their state.

    State only changes through this class:
    - submit() moves IDLE/ERROR/SUCCESS -> SUBMITTING -> SUCCESS or ERROR
    - SUCCESS schedules a reset that clears the content and returns to IDLE
    - a new submit or an author edit cancels a pending reset

    Usage:
        controller = SubmissionController(distributor=my_handler)
        state = await controller.submit(content, selection)
        if state.message:
            show_banner(state.message)
    """

    def __init__(
        self,
        distributor: DistributionHandler | None = None,
        reset_delay_seconds: float = SUBMISSION_RESET_DELAY_SECONDS,
    ):
        """Initialize the controller.

        Args:
            distributor: Distribution collaborator. Defaults to the local stand-in.
            reset_delay_seconds: Delay between SUCCESS and the automatic reset.
        """
        self._distributor = distributor or LoggingDistributor()
        self.reset_delay_seconds = reset_delay_seconds
        self._state = SubmissionState()
        self._reset_timer: ResetTimer | None = None
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def status(self) -> SubmissionStatus:
        return self._state.status

    @property
    def reset_pending(self) -> bool:
        return self._reset_timer is not None and self._reset_timer.active

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def can_submit(self, content: ContentSource, selection: PlatformSelection) -> bool:
        """Whether submit() would do anything right now."""
        return (
            not self._state.is_submitting
            and content.has_content()
            and selection.is_any_selected()
        )

    async def submit(
        self,
        content: ContentSource,
        selection: PlatformSelection,
    ) -> SubmissionState:
        """Send the current content to the selected destinations.

        A call while a submission is in flight, with a blank body, or with
        nothing selected changes nothing and never reaches the distributor.
        Distributor failures are recorded as the ERROR state, not raised.

        Returns:
            The state after the call.
        """
        if self._state.is_submitting:
            _logger.debug("Submission already in flight, ignoring submit")
            return self._state
        if not self.can_submit(content, selection):
            _logger.debug("Submit preconditions not met, ignoring submit")
            return self._state

        self.cancel_reset()

        target_count = selection.selected_count()
        payload = DistributionPayload(
            content=content.body,
            url=content.source_url if content.source_mode == SourceMode.URL else None,
            platforms=selection.as_dict(),
        )

        self._transition(SubmissionState(SubmissionStatus.SUBMITTING, target_count))
        _logger.info(f"Submitting {len(payload.content)} chars to {target_count} destinations")

        try:
            await self._distributor(payload)
        except asyncio.CancelledError:
            _logger.info("Submission cancelled")
            self._transition(SubmissionState())
            raise
        except Exception as e:
            _logger.warning(f"Submission failed: {e}")
            self._transition(
                SubmissionState(SubmissionStatus.ERROR, target_count, error=str(e))
            )
            return self._state

        self._transition(SubmissionState(SubmissionStatus.SUCCESS, target_count))
        self._reset_timer = ResetTimer(
            self.reset_delay_seconds,
            lambda: self._reset(content),
        )
        self._reset_timer.start()
        return self._state

    def cancel_reset(self) -> bool:
        """Cancel a pending post-success reset. Returns True if one was pending."""
        if self._reset_timer is None:
            return False
        cancelled = self._reset_timer.cancel()
        self._reset_timer = None
        return cancelled

    def on_author_edit(self) -> None:
        """Dismiss a success banner when the author starts editing again.

        The pending reset is cancelled so it cannot wipe the new edits.
        """
        if self._state.status == SubmissionStatus.SUCCESS:
            self.cancel_reset()
            self._transition(SubmissionState())

    def _reset(self, content: ContentSource) -> None:
        self._reset_timer = None
        content.clear()
        self._transition(SubmissionState())
        _logger.debug("Form reset after successful submission")

    def _transition(self, state: SubmissionState) -> None:
        if state.status != self._state.status:
            _logger.debug(f"Submission {self._state.status.value} -> {state.status.value}")
        self._state = state
        for listener in self._listeners:
            listener(state)
