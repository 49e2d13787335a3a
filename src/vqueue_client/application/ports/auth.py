from __future__ import annotations

from typing import Protocol


class AccessTokenProvider(Protocol):
    async def get_access_token(self) -> str: ...
