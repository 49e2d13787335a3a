from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A party's place in a queue, as issued by the service on a successful join."""

    queue_id: str
    guest_ids: tuple[str, ...]
    boarding_group: int
    queued_at: int

    def includes_any(self, guest_ids: list[str]) -> bool:
        return any(gid in self.guest_ids for gid in guest_ids)
