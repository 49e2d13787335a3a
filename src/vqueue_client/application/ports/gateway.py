from __future__ import annotations

from typing import Any, Protocol

from vqueue_client.domain.entities.guest import Guest
from vqueue_client.domain.entities.queue import Queue


class VirtualQueueGateway(Protocol):
    async def get_queues(self) -> list[Queue]: ...

    async def get_linked_guests(self, queue_id: str) -> list[Guest]:
        """Guests that may join ``queue_id`` together with the primary guest."""
        ...

    async def join_queue(self, queue_id: str, guest_ids: list[str]) -> Any:
        """Submit one join attempt and return the raw response body."""
        ...
