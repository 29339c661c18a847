from __future__ import annotations

import logging
from collections.abc import Callable

import inject

from src.taskboard.application.notifier import FailureNotifier
from src.taskboard.domain.exceptions import TransportError
from src.taskboard.domain.models import Task
from src.taskboard.domain.repositories import TaskRemoteRepository

logger = logging.getLogger(__name__)

TaskListListener = Callable[[tuple[Task, ...]], None]

FETCH_FAILURE_TITLE = "Error"
FETCH_FAILURE_MESSAGE = "Could not reach the server. Is the API running?"


class TaskStore:
    """
    Process-wide holder of the current task list.

    The list is only ever replaced wholesale, from inside ``fetch_tasks``.
    Overlapping fetches are not cancelled: whichever completes last wins,
    unless ``discard_out_of_order`` is set, in which case a completion that
    was issued before the last applied one is dropped.
    """

    def __init__(
        self,
        remote: TaskRemoteRepository | None = None,
        notifier: FailureNotifier | None = None,
        *,
        discard_out_of_order: bool = False,
    ) -> None:
        self._remote = remote or inject.instance(TaskRemoteRepository)
        self._notifier = notifier or inject.instance(FailureNotifier)
        self._discard_out_of_order = discard_out_of_order
        self._tasks: tuple[Task, ...] = ()
        self._listeners: list[TaskListListener] = []
        self._issued = 0
        self._applied = 0

    @property
    def remote(self) -> TaskRemoteRepository:
        return self._remote

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def subscribe(self, listener: TaskListListener) -> Callable[[], None]:
        """Register ``listener`` for list replacements; returns its unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def fetch_tasks(self, query: str = "", *, notify: bool = True) -> list[Task] | None:
        """
        Fetch from the remote API and replace the held list on success.

        Returns the fetched list, or ``None`` when the fetch failed (the held
        list is left untouched) or its completion was discarded as stale.
        Failures go to the notifier unless ``notify`` is false.
        """
        self._issued += 1
        sequence = self._issued
        try:
            tasks = await self._remote.fetch_tasks(query)
        except TransportError as exc:
            logger.error(
                "API connection error",
                extra={"query": query, "status_code": exc.status_code, "error": str(exc)},
            )
            if notify:
                await self._notifier.notify_failure(FETCH_FAILURE_TITLE, FETCH_FAILURE_MESSAGE)
            return None

        if self._discard_out_of_order and sequence < self._applied:
            logger.info(
                "Discarding out-of-order fetch completion",
                extra={"query": query, "sequence": sequence, "applied": self._applied},
            )
            return None

        self._applied = sequence
        self._replace(tasks)
        return tasks

    def _replace(self, tasks: list[Task]) -> None:
        self._tasks = tuple(tasks)
        for listener in list(self._listeners):
            listener(self._tasks)
