from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class FailureNotifier(Protocol):
    async def notify_failure(self, title: str, message: str) -> None:
        """Show a blocking failure notification to the user."""


class LoggingFailureNotifier(FailureNotifier):
    """Default notifier for headless runs: the alert becomes an error log line."""

    async def notify_failure(self, title: str, message: str) -> None:
        logger.error("%s: %s", title, message)
