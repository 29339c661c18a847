from src.taskboard.infrastructure.http.client import HttpClient
from src.taskboard.infrastructure.http.remote import RemoteTaskClient

__all__ = [
    "HttpClient",
    "RemoteTaskClient",
]
