"""IngestService - pulls the search payload and projects it into Records."""

import logging

from brainapi.config import UpstreamConfig
from brainapi.domain.dataset.model.record import Record
from brainapi.domain.dataset.port.hits_fetcher import HitsFetcher
from brainapi.domain.dataset.util.projection import records_from_payload
from brainapi.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IngestService(Service):
    fetcher: HitsFetcher
    upstream: UpstreamConfig

    async def load_records(self) -> list[Record]:
        """Fetch the configured search once and return its hits as Records.

        Raises:
            UpstreamUnavailableError: Upstream unreachable or returned an error status.
            UpstreamParseError: Upstream body is not JSON.
        """
        logger.info("Fetching %s params=%s", self.upstream.url, self.upstream.params)
        payload = await self.fetcher.fetch_json(self.upstream.url, self.upstream.params)
        records = records_from_payload(payload)
        logger.info("Ingested %d records", len(records))
        return records
