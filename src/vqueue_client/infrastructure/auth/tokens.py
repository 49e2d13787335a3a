from __future__ import annotations

import inspect
from typing import Awaitable, Callable


class StaticTokenProvider:
    """Hands out one fixed access token."""

    def __init__(self, token: str) -> None:
        self._token = token

    async def get_access_token(self) -> str:
        return self._token


TokenCallable = Callable[[], str | Awaitable[str]]


class CallableTokenProvider:
    """Adapts a plain or async callable to ``AccessTokenProvider``.

    The callable is invoked on every request; caching or refreshing the
    token is up to the callable.
    """

    def __init__(self, func: TokenCallable) -> None:
        self._func = func

    async def get_access_token(self) -> str:
        token = self._func()
        if inspect.isawaitable(token):
            token = await token
        return token
