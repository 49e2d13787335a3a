from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Guest:
    guest_id: str
    first_name: str
    last_name: str
    avatar_image_url: str | None = None
    is_primary_guest: bool = False
    is_preselected: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
