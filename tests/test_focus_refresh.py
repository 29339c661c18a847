import pytest

from src.taskboard.application.focus import FocusRefreshTrigger
from src.taskboard.infrastructure.navigation.events import NavigationEvents, NavigationEventType


class RefreshRecorder:
    def __init__(self) -> None:
        self.queries: list[str] = []

    async def __call__(self, query: str) -> None:
        self.queries.append(query)


@pytest.mark.asyncio
async def test_attach_fires_initial_refresh_with_empty_query() -> None:
    events = NavigationEvents()
    refresh = RefreshRecorder()
    trigger = FocusRefreshTrigger(events, refresh, lambda: "")

    await trigger.attach()

    assert refresh.queries == [""]
    assert trigger.attached
    assert events.listener_count(NavigationEventType.FOCUS) == 1


@pytest.mark.asyncio
async def test_each_focus_uses_most_recent_query() -> None:
    events = NavigationEvents()
    refresh = RefreshRecorder()
    current = {"query": ""}
    trigger = FocusRefreshTrigger(events, refresh, lambda: current["query"])
    await trigger.attach()

    current["query"] = "milk"
    await events.emit(NavigationEventType.BLUR)
    await events.emit(NavigationEventType.FOCUS)
    await events.emit(NavigationEventType.BLUR)
    await events.emit(NavigationEventType.FOCUS)

    assert refresh.queries == ["", "milk", "milk"]


@pytest.mark.asyncio
async def test_detach_stops_further_refreshes() -> None:
    events = NavigationEvents()
    refresh = RefreshRecorder()
    trigger = FocusRefreshTrigger(events, refresh, lambda: "q")
    await trigger.attach(fire_initial=False)

    trigger.detach()
    await events.emit(NavigationEventType.FOCUS)

    assert refresh.queries == []
    assert not trigger.attached
    assert events.listener_count(NavigationEventType.FOCUS) == 0


@pytest.mark.asyncio
async def test_detach_during_dispatch_skips_pending_listener() -> None:
    events = NavigationEvents()
    refresh = RefreshRecorder()
    trigger = FocusRefreshTrigger(events, refresh, lambda: "q")

    async def tear_down_first() -> None:
        trigger.detach()

    events.add_listener(NavigationEventType.FOCUS, tear_down_first)
    await trigger.attach(fire_initial=False)

    await events.emit(NavigationEventType.FOCUS)

    assert refresh.queries == []


@pytest.mark.asyncio
async def test_attach_twice_subscribes_once() -> None:
    events = NavigationEvents()
    refresh = RefreshRecorder()
    trigger = FocusRefreshTrigger(events, refresh, lambda: "")

    await trigger.attach()
    await trigger.attach()
    await events.emit(NavigationEventType.FOCUS)

    assert refresh.queries == ["", ""]
