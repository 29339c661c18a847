from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Configuration for the remote task API and the list-screen timing."""
    API_URL: str = "http://localhost:3000/api/tasks"
    SEARCH_DEBOUNCE_MS: int = 500
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    MAX_CONNECTIONS: int = 10
    DISCARD_OUT_OF_ORDER: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_client_settings() -> ClientSettings:
    return ClientSettings()
