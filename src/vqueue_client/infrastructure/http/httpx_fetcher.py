from __future__ import annotations

import logging
from typing import Any

import httpx

from vqueue_client.application.exceptions import TransportError
from vqueue_client.application.ports.http import FetchResponse

logger = logging.getLogger(__name__)


class HttpxFetcher:
    """Implements application.ports.http.HttpFetcher over ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> FetchResponse:
        logger.debug("%s %s", method, url)
        try:
            response = await self._client.request(method, url, headers=headers, json=json)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)
        try:
            data = response.json()
        except ValueError:
            data = response.text
        return FetchResponse(status=response.status_code, data=data)

    async def aclose(self) -> None:
        await self._client.aclose()
