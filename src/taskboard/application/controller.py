from __future__ import annotations

import inject

from src.taskboard.application.debouncer import DEFAULT_DEBOUNCE_SECONDS, SearchDebouncer
from src.taskboard.application.focus import FocusRefreshTrigger
from src.taskboard.application.store import TaskStore
from src.taskboard.application.toggle import ToggleCompletionOperation
from src.taskboard.domain.models import Task
from src.taskboard.infrastructure.navigation.events import NavigationEvents


class TaskListController:
    """Headless list-screen logic: the surface the rendering layer calls into."""

    def __init__(
        self,
        store: TaskStore | None = None,
        events: NavigationEvents | None = None,
        toggle: ToggleCompletionOperation | None = None,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._store = store or inject.instance(TaskStore)
        self._events = events or inject.instance(NavigationEvents)
        self._toggle = toggle or ToggleCompletionOperation(self._store)
        self._search_query = ""
        self._in_flight = 0
        self._debouncer = SearchDebouncer(self._apply_search, delay=debounce_seconds)
        self._focus = FocusRefreshTrigger(self._events, self._refresh, lambda: self._search_query)

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def debounce_seconds(self) -> float:
        return self._debouncer.delay

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._store.tasks

    async def mount(self) -> None:
        await self._focus.attach()

    def search(self, text: str) -> None:
        self._debouncer.update(text)

    async def toggle(self, task_id: int, is_completed: bool) -> None:
        await self._toggle.execute(task_id, is_completed, self._search_query)

    def teardown(self) -> None:
        self._debouncer.cancel()
        self._focus.detach()

    async def idle(self) -> None:
        await self._debouncer.wait_settled()

    async def _apply_search(self, text: str) -> None:
        self._search_query = text
        await self._refresh(text)

    async def _refresh(self, query: str) -> None:
        self._in_flight += 1
        try:
            await self._store.fetch_tasks(query)
        finally:
            self._in_flight -= 1
