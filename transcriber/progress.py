"""Progress/status reporting for workflow runs."""

import structlog

from shared.services.runtime import maybe_await
from shared.types import ProgressCallback
from transcriber.models import Progress

logger = structlog.get_logger(__name__)

PARTICIPANTS_DONE = 10.0
COMPLETE = 100.0


def video_progress(index: int, total: int) -> float:
    """Percentage reported before transcribing video ``index`` (0-based) of ``total``."""
    if total <= 0:
        raise ValueError("total must be positive")
    return PARTICIPANTS_DONE + (index / total) * (COMPLETE - PARTICIPANTS_DONE)


class ProgressReporter:
    """Translate workflow milestones into a percentage and a label.

    Within one run (between ``start()`` calls) the percentage never decreases.
    """

    def __init__(self, callback: ProgressCallback | None = None) -> None:
        self.callback = callback
        self.current = Progress()

    async def start(self, label: str) -> None:
        """Begin a new run at 0%."""
        self.current = Progress()
        await self.update(0.0, label)

    async def update(self, percentage: float, label: str) -> None:
        percentage = min(max(percentage, 0.0), COMPLETE)
        if percentage < self.current.percentage:
            raise ValueError(
                f"Progress cannot go backwards ({self.current.percentage} -> {percentage})"
            )

        self.current = Progress(percentage=percentage, label=label)
        logger.info("Progress update", percentage=round(percentage, 1), label=label)
        await maybe_await(self.callback, percentage, label)

    async def fail(self, label: str) -> None:
        """Replace the label only; the percentage stays where the run stopped."""
        self.current = Progress(percentage=self.current.percentage, label=label)
        logger.warning("Progress failed", percentage=self.current.percentage, label=label)
        await maybe_await(self.callback, self.current.percentage, label)
