"""
Dashboard View State
Holds the latest SubmissionResult; newer submissions always win
"""

import itertools
import logging

from .models import SubmissionResult
from .service import DashboardService

logger = logging.getLogger(__name__)


class DashboardSession:
    """
    Current dashboard state for one event loop.

    Each submission takes a generation number. A submission that finishes
    after a newer one has started is returned to its caller but never
    published.
    """

    def __init__(self, service: DashboardService):
        self.service = service
        self._generations = itertools.count(1)
        self._latest_generation = 0
        self._current = SubmissionResult.empty()

    @property
    def current(self) -> SubmissionResult:
        return self._current

    async def submit(self, raw_ticker: str) -> SubmissionResult:
        generation = next(self._generations)
        self._latest_generation = generation

        result = await self.service.submit(raw_ticker)

        if generation == self._latest_generation:
            self._current = result
        else:
            logger.info(
                f"Discarding stale result for {result.ticker} "
                f"(submission {generation}, latest {self._latest_generation})"
            )

        return result

    def reset(self) -> None:
        self._latest_generation = next(self._generations)
        self._current = SubmissionResult.empty()
