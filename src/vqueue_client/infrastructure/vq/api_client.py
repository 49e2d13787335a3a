"""HTTP gateway to the virtual-queue guest service."""
from __future__ import annotations

import logging
from typing import Any, Literal

import pydantic

from vqueue_client.application.dto.wire import GetLinkedGuestsResponse, GetQueuesResponse
from vqueue_client.application.exceptions import MalformedResponseError, RequestError, ServerError
from vqueue_client.application.ports.auth import AccessTokenProvider
from vqueue_client.application.ports.http import FetchResponse, HttpFetcher
from vqueue_client.domain.entities.guest import Guest
from vqueue_client.domain.entities.queue import Queue
from vqueue_client.domain.value_objects.enums import Resort, ResponseStatus
from vqueue_client.infrastructure.vq.origins import API_PATH, VQ_ORIGINS, resort_for_origin

logger = logging.getLogger(__name__)

Resource = Literal["getQueues", "getLinkedGuests", "joinQueue"]


class ApiClient:
    """Implements application.ports.gateway.VirtualQueueGateway."""

    def __init__(
        self,
        fetcher: HttpFetcher,
        token_provider: AccessTokenProvider,
        *,
        resort: Resort = Resort.WDW,
        origin: str | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._token_provider = token_provider
        self._resort = resort
        self._origin = (origin or VQ_ORIGINS[resort]).rstrip("/")

    @property
    def resort(self) -> Resort:
        return resort_for_origin(self._origin) or self._resort

    @property
    def origin(self) -> str:
        return self._origin

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def url(self, resource: Resource) -> str:
        return f"{self._origin}{API_PATH}/{resource}"

    async def get_queues(self) -> list[Queue]:
        data = await self._request("getQueues")
        try:
            response = GetQueuesResponse.model_validate(data)
        except pydantic.ValidationError as exc:
            raise MalformedResponseError(data) from exc
        return [q.to_entity() for q in response.queues]

    async def get_linked_guests(self, queue_id: str) -> list[Guest]:
        data = await self._request("getLinkedGuests", {"queueId": queue_id})
        try:
            response = GetLinkedGuestsResponse.model_validate(data)
        except pydantic.ValidationError as exc:
            raise MalformedResponseError(data) from exc
        if response.response_status != ResponseStatus.OK:
            raise RequestError(data)
        return [g.to_entity() for g in response.guests]

    async def join_queue(self, queue_id: str, guest_ids: list[str]) -> Any:
        return await self._request(
            "joinQueue", {"queueId": queue_id, "guestIds": list(guest_ids)},
        )

    async def _request(self, resource: Resource, payload: dict[str, Any] | None = None) -> Any:
        token = await self._token_provider.get_access_token()
        headers = {"Authorization": f"BEARER {token}"}
        if payload is None:
            response = await self._fetcher.fetch(self.url(resource), headers=headers)
        else:
            headers["Content-Type"] = "application/json"
            response = await self._fetcher.fetch(
                self.url(resource), method="POST", headers=headers, json=payload,
            )
        _raise_for_server_error(resource, response)
        return response.data


def _raise_for_server_error(resource: str, response: FetchResponse) -> None:
    if response.status >= 500:
        logger.error("%s returned %d", resource, response.status)
        raise ServerError(response.status, response.data)
