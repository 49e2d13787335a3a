from __future__ import annotations

from dataclasses import dataclass, field

from vqueue_client.domain.entities.position import Position
from vqueue_client.domain.value_objects.enums import ConflictType

JoinQueueConflicts = dict[str, ConflictType]


@dataclass(frozen=True, slots=True)
class JoinAccepted:
    """The service admitted the party; ``position`` is the one matched to it."""

    position: Position


@dataclass(frozen=True, slots=True)
class JoinRejected:
    """Per-guest rejections from one attempt, limited to the submitted party."""

    conflicts: JoinQueueConflicts = field(default_factory=dict)
    closed: bool = False


JoinOutcome = JoinAccepted | JoinRejected


@dataclass(frozen=True, slots=True)
class JoinQueueResult:
    boarding_group: int | None
    conflicts: JoinQueueConflicts = field(default_factory=dict)
    closed: bool = False

    @property
    def joined(self) -> bool:
        return self.boarding_group is not None
