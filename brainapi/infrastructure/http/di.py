"""DI provider for HTTP infrastructure."""

from collections.abc import AsyncIterator
from typing import NewType

import httpx
from dishka import Provider, Scope, provide

from brainapi.config import Config
from brainapi.domain.dataset.port.hits_fetcher import HitsFetcher
from brainapi.infrastructure.http.hits_fetcher import HttpHitsFetcher

UpstreamHttpClient = NewType("UpstreamHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for the upstream HTTP client and fetcher."""

    @provide(scope=Scope.APP)
    async def get_upstream_http_client(self, config: Config) -> AsyncIterator[UpstreamHttpClient]:
        """Shared client for upstream requests, closed with the container."""
        client = httpx.AsyncClient(timeout=config.upstream.timeout, follow_redirects=True)
        yield UpstreamHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP, provides=HitsFetcher)
    def get_hits_fetcher(self, client: UpstreamHttpClient) -> HttpHitsFetcher:
        return HttpHitsFetcher(client=client)
