import asyncio

import pytest

from src.taskboard.application.store import TaskStore
from src.taskboard.application.toggle import ToggleCompletionOperation
from src.taskboard.domain.exceptions import TransportError
from tests.fakes import make_task


@pytest.mark.asyncio
async def test_toggle_patches_then_refetches_with_query(stub_remote, notifier) -> None:
    stub_remote.results["milk"] = [make_task(1, "Buy milk")]
    store = TaskStore(stub_remote, notifier)
    await store.fetch_tasks("milk")
    stub_remote.calls.clear()

    await ToggleCompletionOperation(store).execute(1, True, "milk")

    assert stub_remote.calls == [("patch", 1, True), ("fetch", "milk")]
    assert store.tasks[0].is_completed is True


@pytest.mark.asyncio
async def test_toggle_refetches_even_when_patch_fails(stub_remote, notifier) -> None:
    stub_remote.results[""] = [make_task(1, "Buy milk")]
    stub_remote.patch_error = TransportError("unreachable")
    store = TaskStore(stub_remote, notifier)

    await ToggleCompletionOperation(store).execute(1, True)

    assert stub_remote.calls == [("patch", 1, True), ("fetch", "")]
    assert store.tasks[0].is_completed is False
    assert notifier.notifications == []


@pytest.mark.asyncio
async def test_toggle_reconcile_failure_is_not_alerted(stub_remote, notifier) -> None:
    stub_remote.results[""] = [make_task(1, "Buy milk")]
    store = TaskStore(stub_remote, notifier)
    await store.fetch_tasks("")
    stub_remote.fetch_error = TransportError("HTTP error! Status: 500", status_code=500)

    await ToggleCompletionOperation(store).execute(1, True)

    assert notifier.notifications == []
    assert store.tasks[0].is_completed is False


@pytest.mark.asyncio
async def test_toggle_makes_no_optimistic_change(stub_remote, notifier) -> None:
    stub_remote.results[""] = [make_task(1, "Buy milk")]
    store = TaskStore(stub_remote, notifier)
    await store.fetch_tasks("")
    stub_remote.gates[""] = asyncio.Event()

    running = asyncio.create_task(ToggleCompletionOperation(store).execute(1, True))
    await asyncio.sleep(0)
    await asyncio.sleep(0)

    assert ("patch", 1, True) in stub_remote.calls
    assert store.tasks[0].is_completed is False

    stub_remote.gates[""].set()
    await running

    assert store.tasks[0].is_completed is True
