"""Minimal "GET a path, get status + body" capability used by upstream clients."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class HttpResponse:
    """Transport-neutral response: status code and raw body text."""

    status: int
    body: str | None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status <= 299


@runtime_checkable
class HttpClientAdapter(Protocol):
    """Keeps upstream clients decoupled from any particular HTTP library."""

    async def get(self, path: str) -> HttpResponse: ...


class HttpxClientAdapter:
    """httpx.AsyncClient backed adapter.

    Transport errors (connect failures, httpx.TimeoutException, ...) are not
    caught here; they surface to the interceptor for classification.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=timeout,
        )

    async def get(self, path: str) -> HttpResponse:
        logger.debug("Request: GET %s%s", self._base_url, path)
        response = await self._client.get(path)
        logger.debug("Response: GET %s → %d", path, response.status_code)
        return HttpResponse(status=response.status_code, body=response.text or None)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()
