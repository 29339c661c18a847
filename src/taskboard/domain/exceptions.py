class TransportError(Exception):
    """Raised when the remote task API cannot be reached or answers badly.

    Covers unreachable networks, non-2xx responses and malformed bodies.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TaskNotFoundError(TransportError):
    """Raised when a task identifier does not exist on the server."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id '{task_id}' was not found.", status_code=404)
        self.task_id = task_id
