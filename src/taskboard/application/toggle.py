from __future__ import annotations

import logging

from src.taskboard.application.store import TaskStore
from src.taskboard.domain.exceptions import TransportError
from src.taskboard.domain.repositories import TaskRemoteRepository

logger = logging.getLogger(__name__)


class ToggleCompletionOperation:
    """
    Sends a completion change, then reconciles the list with a refetch.

    No optimistic edit is made: the row changes once the refetch lands.
    Failures on this path are logged only and never reach the user notifier.
    """

    def __init__(self, store: TaskStore, remote: TaskRemoteRepository | None = None) -> None:
        self._store = store
        self._remote = remote or store.remote

    async def execute(self, task_id: int, is_completed: bool, query: str = "") -> None:
        try:
            await self._remote.patch_completion(task_id, is_completed)
        except TransportError as exc:
            logger.error(
                "Toggle error",
                extra={"task_id": task_id, "is_completed": is_completed, "error": str(exc)},
            )

        tasks = await self._store.fetch_tasks(query, notify=False)
        if tasks is None:
            logger.warning(
                "Reconciling fetch after toggle did not update the list",
                extra={"task_id": task_id, "query": query},
            )
