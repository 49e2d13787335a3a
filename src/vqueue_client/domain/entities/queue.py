from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Queue:
    queue_id: str
    name: str
    is_accepting_joins: bool
    next_scheduled_open_time: str | None
    max_party_size: int
    how_to_enter_message: str
