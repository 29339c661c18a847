from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.taskboard.domain.exceptions import TransportError
from src.taskboard.domain.models import CompletionPatch, Task, TaskCreatePayload

_TASK_LIST = TypeAdapter(list[Task])


def encode_completion(is_completed: bool) -> dict[str, Any]:
    return CompletionPatch(is_completed=is_completed).model_dump(by_alias=True)


def encode_create(payload: TaskCreatePayload) -> dict[str, Any]:
    return payload.model_dump()


def decode_tasks(body: bytes) -> list[Task]:
    try:
        return _TASK_LIST.validate_json(body)
    except ValidationError as exc:
        raise TransportError("Invalid task list body") from exc


def decode_task(body: bytes) -> Task:
    try:
        return Task.model_validate_json(body)
    except ValidationError as exc:
        raise TransportError("Invalid task body") from exc
