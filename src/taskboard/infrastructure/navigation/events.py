from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum

logger = logging.getLogger(__name__)

NavigationListener = Callable[[], Awaitable[None]]
Unsubscribe = Callable[[], None]


class NavigationEventType(str, Enum):
    FOCUS = "focus"
    BLUR = "blur"


class NavigationEvents:
    """Lifecycle events of a hosting view, as emitted by the navigation layer."""

    def __init__(self) -> None:
        self._listeners: dict[NavigationEventType, list[NavigationListener]] = {}

    def add_listener(
        self, event_type: NavigationEventType, listener: NavigationListener
    ) -> Unsubscribe:
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def listener_count(self, event_type: NavigationEventType) -> int:
        return len(self._listeners.get(event_type, []))

    async def emit(self, event_type: NavigationEventType) -> None:
        listeners = list(self._listeners.get(event_type, []))
        if not listeners:
            logger.debug(
                "No listener registered for navigation event",
                extra={"type": event_type},
            )
            return
        for listener in listeners:
            await listener()
