from src.taskboard.domain.models.payloads import CompletionPatch, TaskCreatePayload
from src.taskboard.domain.models.task import Task

__all__ = [
    "Task",
    "TaskCreatePayload",
    "CompletionPatch",
]
