from __future__ import annotations

import logging
from typing import Any

import httpx

from src.taskboard.domain.exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        max_connections: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(max_connections=max_connections),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, *parts: object) -> str:
        if not parts:
            return self._base_url
        return "/".join([self._base_url, *(str(part) for part in parts)])

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request and return the response, mapping failures to TransportError."""
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(
                "HTTP request failed",
                extra={"method": method, "url": url, "error": repr(exc)},
            )
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if not response.is_success:
            raise TransportError(
                f"HTTP error! Status: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    async def close(self) -> None:
        await self._client.aclose()
