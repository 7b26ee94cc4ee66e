"""Tests for the submission state machine and its timed reset."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from social_hub.composer import ContentSource, ResetTimer, SubmissionController, SubmissionState
from social_hub.constants import SUBMISSION_FAILED_MESSAGE, SourceMode, SubmissionStatus
from social_hub.errors import SubmissionFailedError
from social_hub.platforms import PlatformSelection
from social_hub.services import DistributionPayload


class TestSubmissionState:
    """Tests for SubmissionState messages."""

    def test_idle_has_no_message(self):
        assert SubmissionState().message is None

    def test_success_message_uses_target_count(self):
        state = SubmissionState(SubmissionStatus.SUCCESS, target_count=3)
        assert state.message == (
            "Content successfully submitted for distribution across 3 platforms!"
        )

    def test_success_message_singular(self):
        state = SubmissionState(SubmissionStatus.SUCCESS, target_count=1)
        assert "across 1 platform!" in state.message

    def test_error_message(self):
        state = SubmissionState(SubmissionStatus.ERROR, target_count=2, error="timeout")
        assert state.message == SUBMISSION_FAILED_MESSAGE


class TestResetTimer:
    """Tests for ResetTimer."""

    @pytest.mark.asyncio
    async def test_fires_after_delay(self):
        callback = MagicMock()
        timer = ResetTimer(0.01, callback)
        timer.start()
        assert timer.active

        await asyncio.sleep(0.05)

        callback.assert_called_once_with()
        assert not timer.active

    @pytest.mark.asyncio
    async def test_cancel_prevents_callback(self):
        callback = MagicMock()
        timer = ResetTimer(0.01, callback)
        timer.start()

        assert timer.cancel() is True
        await asyncio.sleep(0.05)

        callback.assert_not_called()
        assert timer.cancel() is False

    def test_start_requires_running_loop(self):
        timer = ResetTimer(0.01, MagicMock())
        with pytest.raises(RuntimeError):
            timer.start()


class TestSubmitPreconditions:
    """Submit is a no-op unless there is content and a destination."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "   ", "\n\t"])
    async def test_blank_body_is_no_op(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
        body: str,
    ):
        content.set_body(body)

        state = await controller.submit(content, selection)

        assert state.status == SubmissionStatus.IDLE
        mock_distributor.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_selection_is_no_op(
        self,
        controller: SubmissionController,
        content: ContentSource,
        catalog,
        mock_distributor: AsyncMock,
    ):
        content.set_body("Real content")
        selection = PlatformSelection(catalog, selected=[])
        listener = MagicMock()
        controller.add_listener(listener)

        state = await controller.submit(content, selection)

        assert state.status == SubmissionStatus.IDLE
        mock_distributor.assert_not_awaited()
        listener.assert_not_called()

    def test_can_submit(self, controller, content, selection, catalog):
        assert not controller.can_submit(content, selection)
        content.set_body("x")
        assert controller.can_submit(content, selection)
        assert not controller.can_submit(content, PlatformSelection(catalog, selected=[]))


class TestSubmitSuccess:
    """Tests for a successful submission."""

    @pytest.mark.asyncio
    async def test_payload_and_success_state(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
    ):
        content.set_body("Test content")

        state = await controller.submit(content, selection)

        mock_distributor.assert_awaited_once()
        payload: DistributionPayload = mock_distributor.await_args.args[0]
        assert payload.content == "Test content"
        assert payload.url is None
        assert payload.platforms == {
            "facebook": True,
            "linkedin": True,
            "twitter": True,
            "instagram": False,
            "blog": False,
        }
        assert state.status == SubmissionStatus.SUCCESS
        assert state.target_count == 3
        assert controller.reset_pending

    @pytest.mark.asyncio
    async def test_reset_clears_content_after_delay(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        reset_delay: float,
    ):
        content.switch_mode(SourceMode.URL)
        content.set_url("https://example.com/article")
        content.set_title("Title")
        content.set_body("Test content")

        await controller.submit(content, selection)
        assert content.body == "Test content"

        await asyncio.sleep(reset_delay * 3)

        assert controller.status == SubmissionStatus.IDLE
        assert controller.state.target_count == 0
        assert content.body == ""
        assert content.title == ""
        assert content.source_url == ""
        assert not controller.reset_pending

    @pytest.mark.asyncio
    async def test_url_sent_in_url_mode(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
    ):
        content.switch_mode(SourceMode.URL)
        content.set_url("https://example.com/article")
        content.set_body("Extracted text")

        await controller.submit(content, selection)

        payload = mock_distributor.await_args.args[0]
        assert payload.url == "https://example.com/article"

    @pytest.mark.asyncio
    async def test_url_omitted_in_manual_mode(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
    ):
        content.set_url("https://example.com/article")
        content.set_body("Typed text")

        await controller.submit(content, selection)

        assert mock_distributor.await_args.args[0].url is None

    @pytest.mark.asyncio
    async def test_target_count_captured_at_submit(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
    ):
        content.set_body("Test content")
        await controller.submit(content, selection)

        selection.toggle("instagram")
        selection.toggle("blog")

        assert controller.state.target_count == 3

    @pytest.mark.asyncio
    async def test_listener_sees_each_transition(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        reset_delay: float,
    ):
        seen: list[SubmissionStatus] = []
        controller.add_listener(lambda state: seen.append(state.status))
        content.set_body("Test content")

        await controller.submit(content, selection)
        await asyncio.sleep(reset_delay * 3)

        assert seen == [
            SubmissionStatus.SUBMITTING,
            SubmissionStatus.SUCCESS,
            SubmissionStatus.IDLE,
        ]


class TestSubmitFailure:
    """Tests for distributor failures."""

    @pytest.mark.asyncio
    async def test_failure_sets_error_and_keeps_content(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
        reset_delay: float,
    ):
        mock_distributor.side_effect = SubmissionFailedError(
            SUBMISSION_FAILED_MESSAGE, detail="503"
        )
        content.set_body("Keep me")

        state = await controller.submit(content, selection)

        assert state.status == SubmissionStatus.ERROR
        assert state.message == SUBMISSION_FAILED_MESSAGE
        assert not controller.reset_pending

        await asyncio.sleep(reset_delay * 3)

        assert controller.status == SubmissionStatus.ERROR
        assert content.body == "Keep me"

    @pytest.mark.asyncio
    async def test_any_exception_is_recorded(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
    ):
        mock_distributor.side_effect = ConnectionError("network down")
        content.set_body("Keep me")

        state = await controller.submit(content, selection)

        assert state.status == SubmissionStatus.ERROR
        assert state.error == "network down"

    @pytest.mark.asyncio
    async def test_retry_after_error(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
    ):
        mock_distributor.side_effect = [RuntimeError("flaky"), None]
        content.set_body("Try again")
        seen: list[SubmissionStatus] = []
        controller.add_listener(lambda state: seen.append(state.status))

        await controller.submit(content, selection)
        state = await controller.submit(content, selection)

        assert state.status == SubmissionStatus.SUCCESS
        assert seen == [
            SubmissionStatus.SUBMITTING,
            SubmissionStatus.ERROR,
            SubmissionStatus.SUBMITTING,
            SubmissionStatus.SUCCESS,
        ]

    @pytest.mark.asyncio
    async def test_error_kept_when_retry_preconditions_fail(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
    ):
        mock_distributor.side_effect = RuntimeError("flaky")
        content.set_body("Try again")
        await controller.submit(content, selection)

        content.set_body("   ")
        state = await controller.submit(content, selection)

        assert state.status == SubmissionStatus.ERROR
        assert mock_distributor.await_count == 1


class TestConcurrency:
    """Re-entrancy and reset cancellation."""

    @pytest.mark.asyncio
    async def test_second_submit_while_in_flight_is_rejected(
        self,
        content: ContentSource,
        selection: PlatformSelection,
        reset_delay: float,
    ):
        release = asyncio.Event()
        calls: list[DistributionPayload] = []

        async def slow_distribute(payload: DistributionPayload) -> None:
            calls.append(payload)
            await release.wait()

        controller = SubmissionController(slow_distribute, reset_delay_seconds=reset_delay)
        content.set_body("Only once")

        first = asyncio.create_task(controller.submit(content, selection))
        await asyncio.sleep(0)
        assert controller.status == SubmissionStatus.SUBMITTING

        state = await controller.submit(content, selection)
        assert state.status == SubmissionStatus.SUBMITTING

        release.set()
        assert (await first).status == SubmissionStatus.SUCCESS
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_new_submit_cancels_pending_reset(
        self,
        content: ContentSource,
        selection: PlatformSelection,
        reset_delay: float,
    ):
        release = asyncio.Event()
        calls = 0

        async def distribute(payload: DistributionPayload) -> None:
            nonlocal calls
            calls += 1
            if calls == 2:
                await release.wait()

        controller = SubmissionController(distribute, reset_delay_seconds=reset_delay)
        content.set_body("First")
        await controller.submit(content, selection)
        assert controller.reset_pending

        second = asyncio.create_task(controller.submit(content, selection))
        await asyncio.sleep(0)
        assert not controller.reset_pending

        # Old reset would have fired by now
        await asyncio.sleep(reset_delay * 3)
        assert controller.status == SubmissionStatus.SUBMITTING
        assert content.body == "First"

        release.set()
        assert (await second).status == SubmissionStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_author_edit_cancels_reset(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        reset_delay: float,
    ):
        content.add_edit_listener(controller.on_author_edit)
        content.set_body("Submitted")
        await controller.submit(content, selection)

        content.set_body("Next draft")

        assert controller.status == SubmissionStatus.IDLE
        assert not controller.reset_pending
        await asyncio.sleep(reset_delay * 3)
        assert content.body == "Next draft"

    @pytest.mark.asyncio
    async def test_author_edit_keeps_error(
        self,
        controller: SubmissionController,
        content: ContentSource,
        selection: PlatformSelection,
        mock_distributor: AsyncMock,
    ):
        mock_distributor.side_effect = RuntimeError("down")
        content.add_edit_listener(controller.on_author_edit)
        content.set_body("Draft")
        await controller.submit(content, selection)

        content.set_body("Draft, fixed")

        assert controller.status == SubmissionStatus.ERROR

    @pytest.mark.asyncio
    async def test_cancelled_submission_returns_to_idle(
        self,
        content: ContentSource,
        selection: PlatformSelection,
    ):
        async def never_finishes(payload: DistributionPayload) -> None:
            await asyncio.Event().wait()

        controller = SubmissionController(never_finishes)
        content.set_body("Navigating away")

        task = asyncio.create_task(controller.submit(content, selection))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert controller.status == SubmissionStatus.IDLE
        assert content.body == "Navigating away"
