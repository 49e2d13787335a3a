from __future__ import annotations

from typing import Iterable

from vqueue_client.application.exceptions import QueueNotFoundError
from vqueue_client.application.ports.gateway import VirtualQueueGateway
from vqueue_client.domain.entities.guest import Guest
from vqueue_client.domain.entities.queue import Queue


async def get_queue(queue_id: str, gateway: VirtualQueueGateway) -> Queue:
    for queue in await gateway.get_queues():
        if queue.queue_id == queue_id:
            return queue
    raise QueueNotFoundError(queue_id)


async def list_linked_guests(queue_id: str, gateway: VirtualQueueGateway) -> list[Guest]:
    return sort_guests(await gateway.get_linked_guests(queue_id))


def sort_guests(guests: Iterable[Guest]) -> list[Guest]:
    """Primary guest first, then preselected guests, then by full name."""
    return sorted(
        guests,
        key=lambda g: (
            not g.is_primary_guest,
            not g.is_preselected,
            g.full_name.casefold(),
        ),
    )
