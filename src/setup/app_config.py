import inject

from src.setup.client_config import ClientSettings
from src.taskboard.application.controller import TaskListController
from src.taskboard.application.notifier import FailureNotifier, LoggingFailureNotifier
from src.taskboard.application.store import TaskStore
from src.taskboard.domain.repositories import TaskRemoteRepository
from src.taskboard.infrastructure.http import HttpClient, RemoteTaskClient
from src.taskboard.infrastructure.navigation.events import NavigationEvents


def build_remote_client(settings: ClientSettings) -> RemoteTaskClient:
    http = HttpClient(
        settings.API_URL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        max_connections=settings.MAX_CONNECTIONS,
    )
    return RemoteTaskClient(http)


def build_task_list_controller(settings: ClientSettings | None = None) -> TaskListController:
    """Create a list-screen controller bound to the shared store."""
    if settings is None:
        settings = inject.instance(ClientSettings)
    return TaskListController(
        inject.instance(TaskStore),
        inject.instance(NavigationEvents),
        debounce_seconds=settings.SEARCH_DEBOUNCE_MS / 1000,
    )


def configure_di(settings: ClientSettings | None = None) -> inject.Injector:
    """Bind the process-wide collaborators; a second call keeps the first wiring."""
    if inject.is_configured():
        return inject.get_injector()

    if settings is None:
        settings = ClientSettings()

    def _config(binder: inject.Binder) -> None:
        binder.bind(ClientSettings, settings)
        binder.bind_to_constructor(RemoteTaskClient, lambda: build_remote_client(settings))
        binder.bind_to_provider(TaskRemoteRepository, lambda: inject.instance(RemoteTaskClient))
        binder.bind_to_constructor(FailureNotifier, LoggingFailureNotifier)
        binder.bind_to_constructor(NavigationEvents, NavigationEvents)
        binder.bind_to_constructor(
            TaskStore,
            lambda: TaskStore(discard_out_of_order=settings.DISCARD_OUT_OF_ORDER),
        )

    return inject.configure(_config)
