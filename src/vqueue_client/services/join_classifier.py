"""Interpretation of a single joinQueue response.

A response is a tagged union on ``responseStatus``:

* ``OK`` carries ``positions``; the party was admitted if one of them is for
  the requested queue and shares at least one guest id with the submitted
  party. The service may fold other linked guests into the same position, so
  the match does not require equal id sets.
* ``INVALID_GUEST`` / ``CLOSED_QUEUE`` carry ``conflicts``; only ids from the
  submitted party are reported back.

Anything else is a protocol failure and is raised, never returned.
"""
from __future__ import annotations

from typing import Any

import pydantic

from vqueue_client.application.dto.join import (
    JoinAccepted,
    JoinOutcome,
    JoinQueueConflicts,
    JoinRejected,
)
from vqueue_client.application.dto.wire import (
    JoinQueueConflictsResponse,
    JoinQueueOKResponse,
    PositionPayload,
)
from vqueue_client.application.exceptions import (
    MalformedResponseError,
    UnknownResponseStatusError,
    UnmatchedPositionError,
)
from vqueue_client.domain.value_objects.enums import ResponseStatus


def classify_join_response(
    data: Any,
    queue_id: str,
    guest_ids: list[str],
) -> JoinOutcome:
    status = response_status(data)
    if status is ResponseStatus.OK:
        return _accepted(data, queue_id, guest_ids)
    if status is ResponseStatus.INVALID_GUEST:
        return _rejected(data, guest_ids, closed=False)
    if status is ResponseStatus.CLOSED_QUEUE:
        return _rejected(data, guest_ids, closed=True)
    raise UnknownResponseStatusError(data)


def response_status(data: Any) -> ResponseStatus:
    """Read ``responseStatus``, raising if it is missing or unrecognized."""
    raw = data.get("responseStatus") if isinstance(data, dict) else None
    if not isinstance(raw, str):
        raise UnknownResponseStatusError(data)
    try:
        return ResponseStatus(raw)
    except ValueError:
        raise UnknownResponseStatusError(data) from None


def _accepted(data: dict[str, Any], queue_id: str, guest_ids: list[str]) -> JoinAccepted:
    try:
        response = JoinQueueOKResponse.model_validate(data)
    except pydantic.ValidationError as exc:
        raise MalformedResponseError(data) from exc

    malformed_for_queue = False
    for raw in response.positions:
        try:
            position = PositionPayload.model_validate(raw).to_entity()
        except pydantic.ValidationError:
            if raw.get("queueId") == queue_id:
                malformed_for_queue = True
            continue
        if (
            position.queue_id == queue_id
            and position.guest_ids
            and position.includes_any(guest_ids)
        ):
            return JoinAccepted(position=position)
    if malformed_for_queue:
        raise MalformedResponseError(data)
    raise UnmatchedPositionError(data)


def _rejected(data: dict[str, Any], guest_ids: list[str], *, closed: bool) -> JoinRejected:
    try:
        response = JoinQueueConflictsResponse.model_validate(data)
    except pydantic.ValidationError as exc:
        raise MalformedResponseError(data) from exc

    submitted = set(guest_ids)
    conflicts: JoinQueueConflicts = {}
    for conflict in response.conflicts:
        for guest_id in conflict.guest_ids:
            if guest_id in submitted:
                conflicts[guest_id] = conflict.conflict_type
    return JoinRejected(conflicts=conflicts, closed=closed)
