"""Wire an ApiClient from settings."""
from __future__ import annotations

import httpx

from vqueue_client.application.ports.auth import AccessTokenProvider
from vqueue_client.config import Settings, settings as default_settings
from vqueue_client.infrastructure.auth.tokens import StaticTokenProvider
from vqueue_client.infrastructure.http.httpx_fetcher import HttpxFetcher
from vqueue_client.infrastructure.vq.api_client import ApiClient


def build_api_client(
    settings: Settings | None = None,
    *,
    token_provider: AccessTokenProvider | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ApiClient:
    """Build a client; without ``token_provider`` the static VQ_ACCESS_TOKEN is used."""
    settings = settings or default_settings
    if token_provider is None:
        token_provider = StaticTokenProvider(settings.VQ_ACCESS_TOKEN)
    client = http_client or httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT)
    return ApiClient(
        HttpxFetcher(client),
        token_provider,
        resort=settings.VQ_RESORT,
        origin=settings.VQ_ORIGIN,
    )
