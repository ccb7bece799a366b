"""Port for fetching the raw search payload from upstream."""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol

from brainapi.domain.shared.port import Port


class HitsFetcher(Port, Protocol):
    """Fetches a JSON document from a URL.

    Implementations raise UpstreamUnavailableError for transport failures and
    error statuses, and UpstreamParseError when the body is not JSON.
    """

    @abstractmethod
    async def fetch_json(self, url: str, params: Mapping[str, str | int] | None = None) -> Any: ...
