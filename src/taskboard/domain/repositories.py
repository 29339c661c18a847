from __future__ import annotations

from typing import Protocol

from src.taskboard.domain.models import Task, TaskCreatePayload


class TaskRemoteRepository(Protocol):
    """Contract for the remote task API consumed by the store and operations."""

    async def fetch_tasks(self, query: str = "") -> list[Task]:
        """Return the server's task list, filtered by ``query`` when non-empty."""

    async def patch_completion(self, task_id: int, is_completed: bool) -> None:
        """Set the completion flag of the task identified by ``task_id``."""

    async def get_task(self, task_id: int) -> Task:
        """Return a single task."""

    async def create_task(self, payload: TaskCreatePayload) -> Task:
        """Create a task server-side and return it."""
