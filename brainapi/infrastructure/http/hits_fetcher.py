"""HTTP adapter for HitsFetcher port."""

from collections.abc import Mapping
from typing import Any

import httpx

from brainapi.domain.dataset.port.hits_fetcher import HitsFetcher
from brainapi.domain.shared.error import UpstreamParseError, UpstreamUnavailableError


class HttpHitsFetcher(HitsFetcher):
    """Fetches the upstream search payload using httpx. One request, no retries."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_json(self, url: str, params: Mapping[str, str | int] | None = None) -> Any:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailableError(
                f"Upstream returned {e.response.status_code} for {url}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(f"Request error: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamParseError(f"JSON parse error: {e}") from e
