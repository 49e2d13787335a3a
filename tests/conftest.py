"""Shared test fixtures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from vqueue_client.domain.entities.guest import Guest
from vqueue_client.domain.entities.queue import Queue
from vqueue_client.domain.value_objects.enums import ConflictType


def make_guest(
    guest_id: str,
    *,
    first_name: str = "Guest",
    last_name: str | None = None,
    is_primary_guest: bool = False,
    is_preselected: bool = False,
) -> Guest:
    return Guest(
        guest_id=guest_id,
        first_name=first_name,
        last_name=last_name if last_name is not None else guest_id,
        is_primary_guest=is_primary_guest,
        is_preselected=is_preselected,
    )


def make_queue(queue_id: str = "q-1", *, is_accepting_joins: bool = True) -> Queue:
    return Queue(
        queue_id=queue_id,
        name="Space Adventure",
        is_accepting_joins=is_accepting_joins,
        next_scheduled_open_time=None,
        max_party_size=12,
        how_to_enter_message="Join at 7:00 AM.",
    )


def ok_response(
    queue_id: str,
    guest_ids: list[str],
    boarding_group: int,
    *,
    queued_at: int = 1_600_000_000_000,
) -> dict[str, Any]:
    return {
        "responseStatus": "OK",
        "queues": [],
        "guests": [],
        "positions": [
            {
                "queueId": queue_id,
                "guestIds": list(guest_ids),
                "boardingGroup": boarding_group,
                "queuedAt": queued_at,
            },
        ],
    }


def conflicts_response(
    conflicts: dict[ConflictType, list[str]],
    *,
    closed: bool = False,
) -> dict[str, Any]:
    return {
        "responseStatus": "CLOSED_QUEUE" if closed else "INVALID_GUEST",
        "conflicts": [
            {"conflictType": str(conflict_type), "guestIds": list(ids)}
            for conflict_type, ids in conflicts.items()
        ],
    }


@dataclass
class FakeGateway:
    """In-memory gateway that replays scripted joinQueue responses."""

    queues: list[Queue] = field(default_factory=list)
    linked_guests: dict[str, list[Guest]] = field(default_factory=dict)
    join_responses: list[Any] = field(default_factory=list)
    join_calls: list[tuple[str, list[str]]] = field(default_factory=list)

    async def get_queues(self) -> list[Queue]:
        return list(self.queues)

    async def get_linked_guests(self, queue_id: str) -> list[Guest]:
        return list(self.linked_guests.get(queue_id, []))

    async def join_queue(self, queue_id: str, guest_ids: list[str]) -> Any:
        self.join_calls.append((queue_id, list(guest_ids)))
        if not self.join_responses:
            raise AssertionError("unexpected joinQueue call")
        response = self.join_responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def queue() -> Queue:
    return make_queue()


@pytest.fixture
def party() -> list[Guest]:
    return [make_guest("A"), make_guest("B"), make_guest("C")]
