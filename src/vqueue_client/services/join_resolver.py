from __future__ import annotations

import logging
from typing import Sequence

from vqueue_client.application.dto.join import (
    JoinAccepted,
    JoinQueueConflicts,
    JoinQueueResult,
)
from vqueue_client.application.exceptions import StalledJoinError
from vqueue_client.application.ports.gateway import VirtualQueueGateway
from vqueue_client.domain.entities.guest import Guest
from vqueue_client.domain.entities.queue import Queue
from vqueue_client.services.join_classifier import classify_join_response

logger = logging.getLogger(__name__)


async def join_queue(
    queue: Queue,
    guests: Sequence[Guest],
    gateway: VirtualQueueGateway,
) -> JoinQueueResult:
    """Join ``queue`` with as much of the party as the service will admit.

    Each rejected attempt drops the guests it names and resubmits the rest.
    Stops on admission, on a closed queue, or once nobody is left. The
    returned conflicts hold every guest rejected along the way, keyed by
    guest id, with the reason from the round that first rejected them.

    Protocol and transport failures propagate; no partial result is returned.
    """
    party = list(guests)
    conflicts: JoinQueueConflicts = {}
    attempt = 0

    while True:
        attempt += 1
        guest_ids = [g.guest_id for g in party]
        logger.debug(
            "Join attempt %d for queue=%s with %d guest(s)",
            attempt, queue.queue_id, len(guest_ids),
        )
        data = await gateway.join_queue(queue.queue_id, guest_ids)
        outcome = classify_join_response(data, queue.queue_id, guest_ids)

        if isinstance(outcome, JoinAccepted):
            logger.info(
                "Joined queue=%s boarding_group=%d after %d attempt(s), %d guest(s) rejected",
                queue.queue_id, outcome.position.boarding_group, attempt, len(conflicts),
            )
            return JoinQueueResult(
                boarding_group=outcome.position.boarding_group,
                conflicts=conflicts,
                closed=False,
            )

        for guest_id, reason in outcome.conflicts.items():
            conflicts.setdefault(guest_id, reason)

        if outcome.closed:
            logger.warning("Queue %s is closed", queue.queue_id)
            return JoinQueueResult(boarding_group=None, conflicts=conflicts, closed=True)

        remaining = [g for g in party if g.guest_id not in conflicts]
        if not remaining:
            logger.info("No guests left to join queue=%s", queue.queue_id)
            return JoinQueueResult(boarding_group=None, conflicts=conflicts, closed=False)
        if len(remaining) == len(party):
            # The party must shrink every round or the loop would never end.
            raise StalledJoinError(data)
        party = remaining
