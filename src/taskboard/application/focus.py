from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from src.taskboard.infrastructure.navigation.events import (
    NavigationEvents,
    NavigationEventType,
    Unsubscribe,
)

logger = logging.getLogger(__name__)


class FocusRefreshTrigger:
    """Refetches with the view's current query every time the view gains focus."""

    def __init__(
        self,
        events: NavigationEvents,
        refresh: Callable[[str], Awaitable[object]],
        query_provider: Callable[[], str],
    ) -> None:
        self._events = events
        self._refresh = refresh
        self._query_provider = query_provider
        self._unsubscribe: Unsubscribe | None = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    async def attach(self, *, fire_initial: bool = True) -> None:
        """Subscribe to focus events; the initial appearance counts as one."""
        if self._unsubscribe is not None:
            return
        self._unsubscribe = self._events.add_listener(NavigationEventType.FOCUS, self._on_focus)
        if fire_initial:
            await self._on_focus()

    def detach(self) -> None:
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None

    async def _on_focus(self) -> None:
        # A focus dispatch may already hold this listener when the view tears down.
        if self._unsubscribe is None:
            return
        query = self._query_provider()
        logger.debug("View focused, refreshing tasks", extra={"query": query})
        await self._refresh(query)
