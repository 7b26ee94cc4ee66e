"""Distribution collaborator.

The composer hands a DistributionPayload to a DistributionHandler: an async
callable that returns normally on success and raises on failure.
LoggingDistributor is a stand-in that records the payload in the log.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from pydantic import BaseModel, Field

from ..constants import DISTRIBUTION_STANDIN_DELAY_SECONDS, SUBMISSION_FAILED_MESSAGE
from ..errors import SubmissionFailedError

_logger = logging.getLogger("distribution")


class DistributionPayload(BaseModel):
    """What gets sent out on submit.

    platforms always holds every catalog id, selected or not.
    """

    content: str
    url: str | None = None
    platforms: dict[str, bool] = Field(default_factory=dict)

    @property
    def targets(self) -> list[str]:
        """Ids flagged for distribution."""
        return [platform for platform, selected in self.platforms.items() if selected]


# Async callable: payload -> None
DistributionHandler = Callable[[DistributionPayload], Awaitable[None]]


class LoggingDistributor:
    """Stand-in distribution service.

    Accepts every payload after a short delay unless constructed with
    fail=True, in which case it rejects with SubmissionFailedError.
    """

    def __init__(
        self,
        delay_seconds: float = DISTRIBUTION_STANDIN_DELAY_SECONDS,
        fail: bool = False,
    ):
        self.delay_seconds = delay_seconds
        self.fail = fail
        self.delivered: list[DistributionPayload] = []

    async def __call__(self, payload: DistributionPayload) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        if self.fail:
            _logger.warning("Distribution rejected (stand-in configured to fail)")
            raise SubmissionFailedError(
                SUBMISSION_FAILED_MESSAGE, detail="stand-in distributor set to fail"
            )

        self.delivered.append(payload)
        _logger.info(
            f"Distributed {len(payload.content)} chars to "
            f"{', '.join(payload.targets)}"
            + (f" (source: {payload.url})" if payload.url else "")
        )
