"""One-shot ingestion without starting the server."""

import asyncio
import sys
from datetime import UTC, datetime

import cyclopts
import httpx

from brainapi.cli.console import get_console
from brainapi.config import Config
from brainapi.domain.dataset.model.record import Dataset, RecordField
from brainapi.domain.dataset.service.ingest import IngestService
from brainapi.domain.dataset.util.aggregate import group_by_field
from brainapi.domain.shared.error import InfrastructureError
from brainapi.infrastructure.http.hits_fetcher import HttpHitsFetcher

app = cyclopts.App(name="fetch", help="Fetch upstream once and print grouped counts")


async def _load(config: Config) -> Dataset:
    async with httpx.AsyncClient(timeout=config.upstream.timeout, follow_redirects=True) as client:
        service = IngestService(fetcher=HttpHitsFetcher(client=client), upstream=config.upstream)
        records = await service.load_records()
    return Dataset(records=tuple(records), loaded_at=datetime.now(UTC))


@app.default
def fetch(field: RecordField = "category") -> None:
    """Fetch the configured search and print row counts per value of FIELD.

    Args:
        field: Record field to group by.
    """
    console = get_console()
    config = Config()  # type: ignore[call-arg]

    try:
        dataset = asyncio.run(_load(config))
    except InfrastructureError as e:
        console.error(e.message, hint=f"Upstream: {config.upstream.url}")
        sys.exit(1)

    console.success(f"Fetched {len(dataset)} records from {config.upstream.url}")
    console.group_counts(field, group_by_field(dataset, field))
