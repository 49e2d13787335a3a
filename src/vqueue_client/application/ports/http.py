from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class FetchResponse:
    status: int
    data: Any


class HttpFetcher(Protocol):
    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> FetchResponse: ...

    async def aclose(self) -> None: ...
