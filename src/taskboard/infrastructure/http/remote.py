from __future__ import annotations

import logging

from src.taskboard.domain.exceptions import TaskNotFoundError, TransportError
from src.taskboard.domain.models import Task, TaskCreatePayload
from src.taskboard.domain.repositories import TaskRemoteRepository
from src.taskboard.infrastructure.http.client import HttpClient
from src.taskboard.infrastructure.http.serializers import (
    decode_task,
    decode_tasks,
    encode_completion,
    encode_create,
)

logger = logging.getLogger(__name__)


class RemoteTaskClient(TaskRemoteRepository):
    """
    Thin wrapper over the remote task API.
    Every failure surfaces as ``TransportError``; nothing is retried.
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def fetch_tasks(self, query: str = "") -> list[Task]:
        """
        Fetch the task list, adding a ``search`` parameter when ``query`` is non-empty.
        Order is whatever the server returns.
        """
        params = {"search": query} if query else None
        response = await self._http.request("GET", self._http.url_for(), params=params)
        tasks = decode_tasks(response.content)
        logger.debug("Fetched tasks", extra={"query": query, "count": len(tasks)})
        return tasks

    async def patch_completion(self, task_id: int, is_completed: bool) -> None:
        await self._http.request(
            "PATCH",
            self._http.url_for(task_id),
            json=encode_completion(is_completed),
        )

    async def get_task(self, task_id: int) -> Task:
        try:
            response = await self._http.request("GET", self._http.url_for(task_id))
        except TransportError as exc:
            if exc.status_code == 404:
                raise TaskNotFoundError(task_id) from exc
            raise
        return decode_task(response.content)

    async def create_task(self, payload: TaskCreatePayload) -> Task:
        response = await self._http.request(
            "POST", self._http.url_for(), json=encode_create(payload)
        )
        return decode_task(response.content)

    async def close(self) -> None:
        await self._http.close()
