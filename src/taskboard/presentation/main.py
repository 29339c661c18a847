from __future__ import annotations

import asyncio
import sys
from collections.abc import Iterable

import inject

from src.setup.app_config import configure_di
from src.setup.client_config import get_client_settings
from src.setup.logging_config import configure_logging
from src.taskboard.application.store import TaskStore
from src.taskboard.domain.models import Task
from src.taskboard.infrastructure.http import RemoteTaskClient

EMPTY_LIST_MESSAGE = "No tasks yet. Add a new one!"


def render_rows(tasks: Iterable[Task]) -> list[str]:
    rows = [
        f"[{'x' if task.is_completed else ' '}] {task.id:>4}  {task.title}" for task in tasks
    ]
    return rows or [EMPTY_LIST_MESSAGE]


async def run(query: str = "") -> int:
    store = inject.instance(TaskStore)
    try:
        tasks = await store.fetch_tasks(query)
    finally:
        await inject.instance(RemoteTaskClient).close()
    if tasks is None:
        return 1
    for row in render_rows(tasks):
        print(row)
    return 0


def main() -> None:
    settings = get_client_settings()
    configure_logging(settings.LOG_LEVEL)
    configure_di(settings)
    query = " ".join(sys.argv[1:])
    sys.exit(asyncio.run(run(query)))


if __name__ == "__main__":
    main()
