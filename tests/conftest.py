from __future__ import annotations

import httpx
import inject
import pytest

from src.taskboard.infrastructure.http import HttpClient, RemoteTaskClient
from tests.fakes import BASE_URL, FakeTaskServer, StubNotifier, StubRemote, task_record


@pytest.fixture
def fake_server() -> FakeTaskServer:
    return FakeTaskServer(
        [
            task_record(1, "Buy milk"),
            task_record(2, "Walk the dog"),
        ]
    )


@pytest.fixture
def remote_client(fake_server: FakeTaskServer) -> RemoteTaskClient:
    """Remote client talking to the fake server in-process."""
    http = HttpClient(BASE_URL, transport=httpx.ASGITransport(app=fake_server.app))
    return RemoteTaskClient(http)


@pytest.fixture
def notifier() -> StubNotifier:
    return StubNotifier()


@pytest.fixture
def stub_remote() -> StubRemote:
    return StubRemote()


@pytest.fixture
def clean_injector():
    """Start and finish with an unconfigured injector."""
    inject.clear()
    yield
    inject.clear()
