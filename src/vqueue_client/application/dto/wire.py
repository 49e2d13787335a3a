"""Pydantic models for the virtual-queue service's JSON payloads.

The service speaks camelCase; fields here are snake_case and aliased.
``responseStatus`` is read before any of these models is chosen, so the
models themselves do not carry it.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from vqueue_client.domain.entities.guest import Guest
from vqueue_client.domain.entities.position import Position
from vqueue_client.domain.entities.queue import Queue
from vqueue_client.domain.value_objects.enums import ConflictType


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
    )


class QueuePayload(WireModel):
    queue_id: str
    name: str = ""
    is_accepting_joins: bool = False
    next_scheduled_open_time: str | None = None
    max_party_size: int = 0
    how_to_enter_message: str = ""

    def to_entity(self) -> Queue:
        return Queue(
            queue_id=self.queue_id,
            name=self.name,
            is_accepting_joins=self.is_accepting_joins,
            next_scheduled_open_time=self.next_scheduled_open_time,
            max_party_size=self.max_party_size,
            how_to_enter_message=self.how_to_enter_message,
        )


class GuestPayload(WireModel):
    guest_id: str
    first_name: str = ""
    last_name: str = ""
    avatar_image_url: str | None = None
    is_primary_guest: bool | None = None
    is_preselected: bool | None = None

    def to_entity(self) -> Guest:
        return Guest(
            guest_id=self.guest_id,
            first_name=self.first_name,
            last_name=self.last_name,
            avatar_image_url=self.avatar_image_url,
            is_primary_guest=bool(self.is_primary_guest),
            is_preselected=bool(self.is_preselected),
        )


class PositionPayload(WireModel):
    queue_id: str
    guest_ids: list[str]
    boarding_group: int
    queued_at: int

    def to_entity(self) -> Position:
        return Position(
            queue_id=self.queue_id,
            guest_ids=tuple(self.guest_ids),
            boarding_group=self.boarding_group,
            queued_at=self.queued_at,
        )


class ConflictPayload(WireModel):
    conflict_type: ConflictType
    guest_ids: list[str] = []


class JoinQueueOKResponse(WireModel):
    # Positions are validated one by one when matched; an unrelated malformed
    # entry must not sink the response.
    queues: list[dict[str, Any]] = []
    guests: list[dict[str, Any]] = []
    positions: list[dict[str, Any]]


class JoinQueueConflictsResponse(WireModel):
    conflicts: list[ConflictPayload] = []


class GetQueuesResponse(WireModel):
    queues: list[QueuePayload]


class GetLinkedGuestsResponse(WireModel):
    response_status: str
    guests: list[GuestPayload] = []
